"""
Unit tests for Graph structure and Vertex.
"""

import pytest

from pathbench.graph import Graph, Vertex


class TestConstruction:
    """Test graph construction."""

    def test_vertices_created_in_order(self):
        """Vertices should be indexed 0..n-1."""
        graph = Graph(5)
        assert graph.vertex_count == 5
        assert [v.index for v in graph.vertices] == [0, 1, 2, 3, 4]

    def test_new_graph_has_no_edges(self):
        """A fresh graph should have no edges."""
        graph = Graph(3)
        assert graph.edge_count == 0
        assert all(v.edges == [] for v in graph.vertices)

    def test_empty_graph(self):
        """Zero vertices is allowed."""
        graph = Graph(0)
        assert graph.vertex_count == 0
        assert graph.stats()["max_out_degree"] == 0

    def test_negative_count_raises(self):
        """Negative vertex count should raise ValueError."""
        with pytest.raises(ValueError):
            Graph(-1)


class TestAddEdge:
    """Test edge insertion."""

    def test_add_edge_appends(self):
        """Edges should be appended to the source's list in insertion order."""
        graph = Graph(3)
        graph.add_edge(0, 2, 7)
        graph.add_edge(0, 1, 3)
        assert graph.vertex(0).edges == [(2, 7), (1, 3)]
        assert graph.edge_count == 2

    def test_edges_are_directed(self):
        """Adding u -> v should not add v -> u."""
        graph = Graph(2)
        graph.add_edge(0, 1, 1)
        assert graph.vertex(1).edges == []

    def test_parallel_edges_kept(self):
        """Duplicate edges are not merged."""
        graph = Graph(2)
        graph.add_edge(0, 1, 4)
        graph.add_edge(0, 1, 2)
        assert graph.vertex(0).edges == [(1, 4), (1, 2)]
        assert graph.edge_count == 2

    def test_out_of_range_raises(self):
        """Edges to or from missing vertices should raise IndexError."""
        graph = Graph(2)
        with pytest.raises(IndexError):
            graph.add_edge(0, 2, 1)
        with pytest.raises(IndexError):
            graph.add_edge(-1, 0, 1)
        assert graph.edge_count == 0

    def test_edge_count_matches_adjacency(self, sample_graph):
        """edge_count should equal the sum of adjacency list lengths."""
        assert sample_graph.edge_count == sum(len(v.edges) for v in sample_graph.vertices)
        assert all(sample_graph.validate().values())


class TestAccessors:
    """Test read-only accessors."""

    def test_iter_edges(self, sample_graph):
        """iter_edges should yield (u, v, w) grouped by source."""
        assert list(sample_graph.iter_edges()) == [
            (0, 1, 5),
            (0, 2, 2),
            (1, 3, 1),
            (2, 1, 2),
        ]

    def test_vertex_invalid_index(self, sample_graph):
        """vertex() should raise IndexError out of range."""
        with pytest.raises(IndexError):
            sample_graph.vertex(4)

    def test_path_weight(self, sample_graph):
        """path_weight should sum edge weights along the path."""
        assert sample_graph.path_weight([0, 2, 1, 3]) == 5
        assert sample_graph.path_weight([0]) == 0
        assert sample_graph.path_weight([]) == 0

    def test_path_weight_missing_edge(self, sample_graph):
        """path_weight should reject pairs without an edge."""
        with pytest.raises(ValueError):
            sample_graph.path_weight([0, 3])

    def test_stats(self, sample_graph):
        """Stats should describe degrees and weights."""
        stats = sample_graph.stats()
        assert stats["vertex_count"] == 4
        assert stats["edge_count"] == 4
        assert stats["min_out_degree"] == 0
        assert stats["max_out_degree"] == 2
        assert stats["min_weight"] == 1
        assert stats["max_weight"] == 5

    def test_repr(self, sample_graph):
        assert repr(sample_graph) == "Graph(v=4, e=4)"


class TestVertex:
    """Test Vertex helpers."""

    def test_out_degree_and_neighbors(self):
        vertex = Vertex(index=3, edges=[(1, 2), (4, 9), (1, 5)])
        assert vertex.out_degree == 3
        assert vertex.neighbors == [1, 4, 1]

    def test_default_edges_not_shared(self):
        """Each vertex gets its own edge list."""
        a, b = Vertex(0), Vertex(1)
        a.edges.append((1, 1))
        assert b.edges == []
