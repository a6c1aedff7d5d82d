"""
Graph module.

Provides the directed weighted graph and everything built on it:
- Graph / Vertex: index-based adjacency lists
- Dijkstra and Bellman-Ford shortest paths (Graph methods, find_path)
- GraphGenerator: random fixed-out-degree graphs
- Text and msgpack persistence

Usage:
    from pathbench.graph import Graph, find_path, generate_graph, read_graph

    graph = generate_graph(1000, 2, seed=7)
    result = find_path(graph, 0, 1)
"""

from pathbench.graph.codec import (
    decode,
    dump_msgpack,
    encode,
    load_msgpack,
    read_graph,
    write_graph,
)
from pathbench.graph.generator import GraphGenerator, generate_graph
from pathbench.graph.model import Graph
from pathbench.graph.search import Algorithm, PathResult, UnreachablePolicy, find_path
from pathbench.graph.vertex import Vertex

__all__ = [
    "Algorithm",
    "Graph",
    "GraphGenerator",
    "PathResult",
    "UnreachablePolicy",
    "Vertex",
    "decode",
    "dump_msgpack",
    "encode",
    "find_path",
    "generate_graph",
    "load_msgpack",
    "read_graph",
    "write_graph",
]
