"""
Vertex dataclass: an index plus its outgoing adjacency list.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Vertex:
    """
    A graph node and its outgoing edges.

    Attributes:
        index: Position of the vertex in its graph's vertex list
        edges: Outgoing edges as (neighbor_index, weight) pairs, in insertion order
    """

    index: int
    edges: list[tuple[int, int]] = field(default_factory=list)

    @property
    def out_degree(self) -> int:
        """Number of outgoing edges."""
        return len(self.edges)

    @property
    def neighbors(self) -> list[int]:
        """Neighbor indices in insertion order (may repeat for parallel edges)."""
        return [neighbor for neighbor, _ in self.edges]
