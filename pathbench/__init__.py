"""
Shortest-Path Benchmark Suite.

A benchmarking application that compares Dijkstra and Bellman-Ford
shortest-path searches on generated or file-loaded directed graphs.
"""

__version__ = "0.1.0"
