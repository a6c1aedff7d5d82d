"""
Unit tests for GraphGenerator.
"""

import numpy as np
import pytest

from pathbench.config import EDGE_GENERATION_FACTOR
from pathbench.exceptions import GenerationExhausted
from pathbench.graph import GraphGenerator, encode, generate_graph


def reverse(pool: np.ndarray) -> np.ndarray:
    """Deterministic permutation: reverse the pool."""
    return pool[::-1]


class TestGeneratedStructure:
    """Generated graphs must satisfy the degree invariants."""

    @pytest.mark.parametrize(
        "vertex_count,out_degree",
        [(50, 1), (50, 3), (50, 10), (200, 2), (500, 5)],
    )
    def test_exact_out_degree(self, vertex_count, out_degree):
        """Every vertex has exactly out_degree edges."""
        graph = generate_graph(vertex_count, out_degree, seed=vertex_count + out_degree)
        assert graph.vertex_count == vertex_count
        assert graph.edge_count == vertex_count * out_degree
        assert all(len(v.edges) == out_degree for v in graph.vertices)

    def test_no_self_loops(self, seeded_generator):
        graph = seeded_generator.generate(100, 5)
        assert all(u != v for u, v, _ in graph.iter_edges())

    def test_no_duplicate_targets(self, seeded_generator):
        graph = seeded_generator.generate(100, 5)
        for vertex in graph.vertices:
            assert len(set(vertex.neighbors)) == len(vertex.neighbors)

    def test_weights_in_range(self, seeded_generator):
        graph = seeded_generator.generate(100, 4)
        assert all(1 <= w <= 10 for _, _, w in graph.iter_edges())

    def test_structural_invariants(self, seeded_generator):
        graph = seeded_generator.generate(75, 3)
        assert all(graph.validate().values())


class TestDeterminism:
    """Injected randomness makes generation reproducible."""

    def test_same_seed_same_graph(self):
        assert encode(generate_graph(120, 3, seed=9)) == encode(generate_graph(120, 3, seed=9))

    def test_different_seed_different_graph(self):
        assert encode(generate_graph(120, 3, seed=9)) != encode(generate_graph(120, 3, seed=10))

    def test_injected_permutation(self):
        """With a reversed pool, vertex k takes the k-th slot from the end."""
        graph = GraphGenerator(permute=reverse).generate(50, 1)
        # Reversed targets: 49 x4, 48 x4, ...; reversed weights: 4, 3, 2, 1, 4, ...
        assert graph.vertex(0).edges == [(49, 4)]
        assert graph.vertex(1).edges == [(49, 3)]
        assert graph.vertex(5).edges == [(48, 3)]
        assert graph.edge_count == 50

    def test_permutation_called_for_both_pools(self):
        """Targets and weights are permuted separately."""
        calls = []

        def recording(pool):
            calls.append(len(pool))
            return np.random.default_rng(0).permutation(pool)

        GraphGenerator(permute=recording).generate(60, 2)
        assert calls == [60 * 2 * EDGE_GENERATION_FACTOR] * 2


class TestPools:
    """Test candidate pool construction."""

    def test_pool_layout(self):
        targets, weights = GraphGenerator().build_pools(3, 1)
        assert targets.tolist() == [0, 0, 0, 0, 1, 1, 1, 1, 2, 2, 2, 2]
        assert weights.tolist() == [1, 2, 3, 4] * 3

    def test_weights_cycle_through_ten(self):
        _, weights = GraphGenerator().build_pools(2, 3)
        assert weights.tolist()[:12] == [1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 1, 2]


class TestEdgeCases:
    """Test degenerate inputs."""

    def test_zero_degree(self):
        graph = generate_graph(10, 0, seed=1)
        assert graph.vertex_count == 10
        assert graph.edge_count == 0

    def test_zero_vertices(self):
        graph = generate_graph(0, 3, seed=1)
        assert graph.vertex_count == 0

    def test_impossible_degree_raises(self):
        """Out-degree >= vertex count cannot avoid self-loops/duplicates."""
        with pytest.raises(GenerationExhausted):
            generate_graph(5, 5, seed=1)

    def test_exhausted_pool_raises(self):
        """The identity permutation starves the last vertex of candidates."""
        with pytest.raises(GenerationExhausted):
            GraphGenerator(permute=lambda pool: pool.copy()).generate(50, 1)
