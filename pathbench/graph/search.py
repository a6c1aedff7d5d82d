"""
Unified shortest-path entry point.

The two Graph methods keep their own unreachable-target behavior
(Dijkstra raises NoPathFound, Bellman-Ford returns an empty path).
find_path() wraps both behind a single PathResult and lets the caller
pick which of the two behaviors applies to either algorithm.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

from pathbench.exceptions import NoPathFound

if TYPE_CHECKING:
    from pathbench.graph.model import Graph

logger = logging.getLogger(__name__)


class Algorithm(Enum):
    """Shortest-path algorithms supported by Graph."""

    DIJKSTRA = "Dijkstra"
    BELLMAN_FORD = "Bellman-Ford"

    def __str__(self) -> str:
        return self.value


class UnreachablePolicy(Enum):
    """What find_path() does when the end vertex cannot be reached."""

    RAISE = "raise"  # raise NoPathFound
    EMPTY = "empty"  # return a PathResult with an empty path


@dataclass(frozen=True)
class PathResult:
    """
    Outcome of a shortest-path search.

    Attributes:
        start: Start vertex index
        end: End vertex index
        algorithm: Algorithm that produced the result
        path: Vertex indices from start to end, empty if unreachable
        weight: Sum of edge weights along path (0 if unreachable)
    """

    start: int
    end: int
    algorithm: Algorithm
    path: list[int] = field(default_factory=list)
    weight: int = 0

    @property
    def found(self) -> bool:
        """Whether a path was found."""
        return bool(self.path)

    @property
    def hops(self) -> int:
        """Number of edges on the path (0 if not found)."""
        return max(len(self.path) - 1, 0)

    @classmethod
    def not_reachable(cls, start: int, end: int, algorithm: Algorithm) -> PathResult:
        return cls(start=start, end=end, algorithm=algorithm)


def find_path(
    graph: Graph,
    start: int,
    end: int,
    algorithm: Algorithm = Algorithm.DIJKSTRA,
    on_unreachable: UnreachablePolicy = UnreachablePolicy.EMPTY,
) -> PathResult:
    """
    Run a shortest-path search and wrap the outcome in a PathResult.

    Args:
        graph: Graph to search (not modified)
        start: Start vertex index
        end: End vertex index
        algorithm: Which search to run
        on_unreachable: RAISE to raise NoPathFound, EMPTY to return an empty result

    Returns:
        PathResult for the search

    Raises:
        NoPathFound: If end is unreachable and on_unreachable is RAISE
    """
    try:
        if algorithm is Algorithm.DIJKSTRA:
            path, weight = graph.shortest_path_dijkstra(start, end)
        else:
            path, weight = graph.shortest_path_bellman_ford(start, end)
            if not path:
                raise NoPathFound(start, end)
    except NoPathFound:
        if on_unreachable is UnreachablePolicy.RAISE:
            raise
        logger.warning(f"{algorithm}: no path found from {start} to {end}")
        return PathResult.not_reachable(start, end, algorithm)

    return PathResult(start=start, end=end, algorithm=algorithm, path=path, weight=weight)
