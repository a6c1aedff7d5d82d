"""
Directed, weighted graph with Dijkstra and Bellman-Ford shortest-path searches.

Usage:
    from pathbench.graph import Graph

    graph = Graph(4)
    graph.add_edge(0, 1, 5)
    graph.add_edge(0, 2, 2)
    graph.add_edge(2, 1, 2)
    graph.add_edge(1, 3, 1)

    graph.shortest_path_dijkstra(0, 3)      # ([0, 2, 1, 3], 5)
    graph.shortest_path_bellman_ford(0, 3)  # ([0, 2, 1, 3], 5)
"""

from __future__ import annotations

import heapq
import logging
import math
from collections.abc import Iterator

from pathbench.exceptions import NoPathFound
from pathbench.graph.vertex import Vertex

logger = logging.getLogger(__name__)


class Graph:
    """
    Directed graph stored as a list of vertices with index-based adjacency.

    Vertices are created up front and never removed. Edges are only added
    while the graph is being built; both searches are read-only, so a built
    graph can be searched from several threads at once.

    Attributes:
        vertex_count: Number of vertices (indices 0..vertex_count-1)
        edge_count: Number of edges, counting parallel edges separately
        vertices: The vertex list, indexed by vertex index
    """

    def __init__(self, vertex_count: int) -> None:
        if vertex_count < 0:
            raise ValueError(f"Vertex count must be non-negative, got {vertex_count}")
        self._vertices: list[Vertex] = [Vertex(index=i) for i in range(vertex_count)]
        self._edge_count = 0

    # =========================================================================
    # Structure
    # =========================================================================

    @property
    def vertex_count(self) -> int:
        return len(self._vertices)

    @property
    def edge_count(self) -> int:
        return self._edge_count

    @property
    def vertices(self) -> list[Vertex]:
        return self._vertices

    def vertex(self, idx: int) -> Vertex:
        """Get vertex by index."""
        self._check_index(idx)
        return self._vertices[idx]

    def _check_index(self, idx: int) -> None:
        if not 0 <= idx < len(self._vertices):
            raise IndexError(f"Vertex {idx} out of range [0, {len(self._vertices)})")

    def add_edge(self, u: int, v: int, w: int) -> None:
        """
        Add a directed edge u -> v with weight w.

        Parallel edges are kept; both are considered by the searches.

        Raises:
            IndexError: If u or v is not a vertex of this graph
        """
        self._check_index(u)
        self._check_index(v)
        self._vertices[u].edges.append((v, w))
        self._edge_count += 1

    def iter_edges(self) -> Iterator[tuple[int, int, int]]:
        """Yield every edge as (u, v, weight), grouped by source in index order."""
        for vertex in self._vertices:
            for neighbor, weight in vertex.edges:
                yield vertex.index, neighbor, weight

    def path_weight(self, path: list[int]) -> int:
        """
        Total weight of walking along path.

        For each consecutive pair the first matching edge in the source's
        adjacency list is used.

        Raises:
            ValueError: If a consecutive pair is not joined by an edge
        """
        total = 0
        for u, v in zip(path[:-1], path[1:]):
            weight = next((w for neighbor, w in self._vertices[u].edges if neighbor == v), None)
            if weight is None:
                raise ValueError(f"Edge {u}->{v} not present in graph")
            total += weight
        return total

    # =========================================================================
    # Shortest Paths
    # =========================================================================

    def shortest_path_dijkstra(self, start: int, end: int) -> tuple[list[int], int]:
        """
        Find the shortest path from start to end with Dijkstra's algorithm.

        Uses a binary heap with lazy deletion and stops as soon as end is
        popped. Correct for non-negative weights. O((V+E) log V).

        Returns:
            (path, weight) where path runs from start to end inclusive

        Raises:
            NoPathFound: If end is unreachable from start
        """
        self._check_index(start)
        self._check_index(end)

        if start == end:
            return [start], 0

        dist: list[float] = [math.inf] * self.vertex_count
        prev: list[int | None] = [None] * self.vertex_count
        dist[start] = 0
        queue: list[tuple[float, int]] = [(0, start)]

        while queue:
            d, u = heapq.heappop(queue)
            if d > dist[u]:
                continue  # stale entry
            if u == end:
                break

            for v, weight in self._vertices[u].edges:
                candidate = d + weight
                if candidate < dist[v]:
                    dist[v] = candidate
                    prev[v] = u
                    heapq.heappush(queue, (candidate, v))

        if prev[end] is None:
            logger.debug(f"Dijkstra: vertex {end} unreachable from {start}")
            raise NoPathFound(start, end)

        path = []
        length = 0
        at: int | None = end
        while at is not None:
            path.append(at)
            before = prev[at]
            if before is not None:
                length += dist[at] - dist[before]
            at = before
        path.reverse()

        return path, int(length)

    def shortest_path_bellman_ford(self, start: int, end: int) -> tuple[list[int], int]:
        """
        Find the shortest path from start to end with Bellman-Ford relaxation.

        Runs exactly vertex_count - 1 passes over every edge. Negative cycles
        are not detected. O(V*E).

        Returns:
            (path, weight), or ([], 0) if end is unreachable from start.
            The weight is recomputed from the path's edges rather than taken
            from the distance table.
        """
        self._check_index(start)
        self._check_index(end)

        distance: list[float] = [math.inf] * self.vertex_count
        predecessor: list[int | None] = [None] * self.vertex_count
        distance[start] = 0

        for _ in range(self.vertex_count - 1):
            for vertex in self._vertices:
                u = vertex.index
                if distance[u] == math.inf:
                    continue
                for v, weight in vertex.edges:
                    if distance[u] + weight < distance[v]:
                        distance[v] = distance[u] + weight
                        predecessor[v] = u

        path = []
        at: int | None = end
        while at is not None:
            path.append(at)
            at = predecessor[at]
        path.reverse()

        if len(path) == 1 and path[0] != start:
            logger.debug(f"Bellman-Ford: vertex {end} unreachable from {start}")
            return [], 0

        return path, self.path_weight(path)

    # =========================================================================
    # Utility Methods
    # =========================================================================

    def validate(self) -> dict[str, bool]:
        """Run structural invariant checks."""
        return {
            "indices_match_positions": all(
                vertex.index == i for i, vertex in enumerate(self._vertices)
            ),
            "neighbors_in_range": all(
                0 <= v < self.vertex_count for _, v, _ in self.iter_edges()
            ),
            "edge_count_consistent": self._edge_count
            == sum(len(vertex.edges) for vertex in self._vertices),
        }

    def stats(self) -> dict:
        """Get summary statistics about the graph."""
        degrees = [len(vertex.edges) for vertex in self._vertices]
        weights = [w for _, _, w in self.iter_edges()]
        return {
            "vertex_count": self.vertex_count,
            "edge_count": self._edge_count,
            "min_out_degree": min(degrees, default=0),
            "max_out_degree": max(degrees, default=0),
            "min_weight": min(weights, default=0),
            "max_weight": max(weights, default=0),
        }

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(v={self.vertex_count}, e={self._edge_count})"
