"""
Random graph generation with a fixed out-degree per vertex.

Usage:
    from pathbench.graph.generator import GraphGenerator, generate_graph

    graph = generate_graph(1000, 2, seed=42)

    # Deterministic permutation for tests
    generator = GraphGenerator(permute=lambda pool: pool[::-1])
    graph = generator.generate(50, 3)
"""

from __future__ import annotations

import logging
from collections.abc import Callable

import numpy as np

from pathbench.config import EDGE_GENERATION_FACTOR, MAX_WEIGHT, MIN_WEIGHT
from pathbench.exceptions import GenerationExhausted
from pathbench.graph.model import Graph

logger = logging.getLogger(__name__)

# Takes a 1-D pool and returns a permuted copy of it
Permutation = Callable[[np.ndarray], np.ndarray]


class GraphGenerator:
    """
    Builds random directed graphs where every vertex has exactly the
    requested out-degree, no self-loops and no repeated target.

    A pool of vertices * degree * factor candidate targets is built, with
    every vertex appearing degree * factor times. The target pool and the
    weight pool are shuffled independently, then walked linearly: each
    source vertex accepts candidates until it has enough edges.

    Success is probabilistic; keep degree much smaller than the vertex
    count. Running out of candidates raises GenerationExhausted.
    """

    def __init__(
        self,
        permute: Permutation | None = None,
        seed: int | None = None,
        factor: int = EDGE_GENERATION_FACTOR,
    ) -> None:
        """
        Initialize the generator.

        Args:
            permute: Permutation applied to the target pool and then to the
                weight pool. Defaults to a numpy Generator's permutation.
            seed: Seed for the default numpy Generator (ignored if permute given)
            factor: Oversampling factor for the candidate pool
        """
        if permute is None:
            permute = np.random.default_rng(seed).permutation
        self._permute = permute
        self._factor = factor

    def build_pools(self, vertex_count: int, out_degree: int) -> tuple[np.ndarray, np.ndarray]:
        """
        Build the unshuffled (targets, weights) candidate pools.

        Vertex i occupies slots i*s .. i*s + s - 1 where s = out_degree * factor;
        the weight at slot offset j is MIN_WEIGHT + j % (weight range).
        """
        slots = out_degree * self._factor
        weight_range = MAX_WEIGHT - MIN_WEIGHT + 1

        targets = np.repeat(np.arange(vertex_count, dtype=np.int64), slots)
        weights = np.tile(np.arange(slots, dtype=np.int64) % weight_range + MIN_WEIGHT, vertex_count)
        return targets, weights

    def generate(self, vertex_count: int, out_degree: int) -> Graph:
        """
        Generate a graph.

        Args:
            vertex_count: Number of vertices
            out_degree: Outgoing edges per vertex

        Returns:
            Graph with vertex_count * out_degree edges

        Raises:
            GenerationExhausted: If the pool runs out before every vertex is filled
        """
        graph = Graph(vertex_count)
        if vertex_count == 0 or out_degree == 0:
            return graph

        if out_degree > vertex_count - 1:
            raise GenerationExhausted(
                f"Out-degree {out_degree} impossible without self-loops "
                f"or duplicates in a {vertex_count}-vertex graph"
            )

        targets, weights = self.build_pools(vertex_count, out_degree)
        targets = self._permute(targets).tolist()
        weights = self._permute(weights).tolist()

        current = 0
        added = 0
        used: set[int] = set()

        for target, weight in zip(targets, weights):
            if target != current and target not in used:
                graph.add_edge(current, target, weight)
                used.add(target)
                added += 1

            if added == out_degree:
                current += 1
                added = 0
                used.clear()
                if current == vertex_count:
                    break
        else:
            raise GenerationExhausted(
                f"Candidate pool exhausted at vertex {current} of {vertex_count} "
                f"(out-degree {out_degree}, factor {self._factor})"
            )

        logger.info(
            f"Generated graph with {graph.vertex_count:,} vertices "
            f"and {graph.edge_count:,} edges (out-degree {out_degree})"
        )
        return graph


def generate_graph(
    vertex_count: int,
    out_degree: int,
    seed: int | None = None,
    permute: Permutation | None = None,
) -> Graph:
    """Generate a random graph; see GraphGenerator."""
    return GraphGenerator(permute=permute, seed=seed).generate(vertex_count, out_degree)
