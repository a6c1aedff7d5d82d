"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest and provides
fixtures available to all test files.
"""

import pytest

from pathbench.graph import Graph, GraphGenerator


@pytest.fixture
def sample_graph() -> Graph:
    """4-vertex graph whose shortest 0 -> 3 path is [0, 2, 1, 3] (weight 5)."""
    graph = Graph(4)
    graph.add_edge(0, 1, 5)
    graph.add_edge(0, 2, 2)
    graph.add_edge(2, 1, 2)
    graph.add_edge(1, 3, 1)
    return graph


@pytest.fixture
def isolated_graph() -> Graph:
    """3-vertex graph where vertex 2 has no incoming or outgoing edges."""
    graph = Graph(3)
    graph.add_edge(0, 1, 3)
    graph.add_edge(1, 0, 4)
    return graph


@pytest.fixture
def seeded_generator() -> GraphGenerator:
    """Generator with a fixed seed for reproducible graphs."""
    return GraphGenerator(seed=1234)

