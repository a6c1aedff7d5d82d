"""
Graph persistence: line-based text format and msgpack snapshots.

Text format:
    <vertex_count>
    <index> <edge_count> [<neighbor> <weight>]*edge_count     (one line per vertex)

Usage:
    from pathbench.graph.codec import decode, encode, read_graph, write_graph

    text = encode(graph)
    same = decode(text)

    write_graph(graph, "out.txt")
    graph = read_graph("data/1k.txt")
"""

from __future__ import annotations

import logging
from pathlib import Path

import msgpack

from pathbench.exceptions import MalformedInput
from pathbench.graph.model import Graph

logger = logging.getLogger(__name__)


# =============================================================================
# Text Format
# =============================================================================

def encode(graph: Graph) -> str:
    """Encode a graph as text (count line, then one line per vertex)."""
    lines = [str(graph.vertex_count)]
    for vertex in graph.vertices:
        fields = [str(vertex.index), str(len(vertex.edges))]
        for neighbor, weight in vertex.edges:
            fields.append(str(neighbor))
            fields.append(str(weight))
        lines.append(" ".join(fields))
    return "\n".join(lines) + "\n"


def decode(text: str) -> Graph:
    """
    Decode a graph from text.

    Blank lines are skipped and tokens beyond a line's declared edges are
    ignored.

    Raises:
        MalformedInput: If the count line is missing, a token is not an
            integer, a line has too few fields, or an index is out of range
    """
    lines = text.splitlines()
    if not lines or not lines[0].split():
        raise MalformedInput("Missing vertex count line")

    try:
        vertex_count = int(lines[0].split()[0])
        graph = Graph(vertex_count)
    except ValueError as e:
        raise MalformedInput(f"Invalid vertex count line {lines[0]!r}: {e}") from e

    for line_number, line in enumerate(lines[1:], start=2):
        tokens = line.split()
        if not tokens:
            continue
        try:
            vertex_index, edge_count = int(tokens[0]), int(tokens[1])
            if not 0 <= vertex_index < vertex_count:
                raise IndexError(f"Vertex {vertex_index} out of range [0, {vertex_count})")
            for i in range(edge_count):
                neighbor = int(tokens[2 + 2 * i])
                weight = int(tokens[3 + 2 * i])
                graph.add_edge(vertex_index, neighbor, weight)
        except (ValueError, IndexError) as e:
            raise MalformedInput(f"Line {line_number}: {e}") from e

    return graph


def write_graph(graph: Graph, path: str | Path) -> Path:
    """Write a graph to a text file. Returns the path written."""
    path = Path(path)
    with open(path, "w", encoding="utf-8") as f:
        f.write(encode(graph))
    logger.info(f"Exported {graph!r} to {path}")
    return path


def read_graph(path: str | Path) -> Graph:
    """
    Read a graph from a text file.

    Raises:
        MalformedInput: If the file cannot be opened or parsed
    """
    path = Path(path)
    logger.info(f"Loading graph from {path}...")
    try:
        with open(path, encoding="utf-8") as f:
            text = f.read()
    except OSError as e:
        raise MalformedInput(f"Failed to open file '{path}'") from e
    except UnicodeDecodeError as e:
        raise MalformedInput(f"Failed to decode file '{path}': {e}") from e

    graph = decode(text)
    logger.info(f"Loaded {graph!r}")
    return graph


# =============================================================================
# Msgpack Snapshots
# =============================================================================

def dump_msgpack(graph: Graph, path: str | Path) -> Path:
    """Write a graph as a msgpack snapshot. Returns the path written."""
    path = Path(path)
    payload = {
        "vertex_count": graph.vertex_count,
        "edges": [[list(edge) for edge in vertex.edges] for vertex in graph.vertices],
    }
    with open(path, "wb") as f:
        msgpack.dump(payload, f)
    logger.info(f"Saved msgpack snapshot of {graph!r} to {path}")
    return path


def load_msgpack(path: str | Path) -> Graph:
    """
    Load a graph from a msgpack snapshot.

    Raises:
        MalformedInput: If the file cannot be opened or has the wrong shape
    """
    path = Path(path)
    try:
        with open(path, "rb") as f:
            payload = msgpack.load(f)
    except OSError as e:
        raise MalformedInput(f"Failed to open file '{path}'") from e
    except ValueError as e:  # msgpack's unpack errors subclass ValueError
        raise MalformedInput(f"Invalid msgpack data in '{path}': {e}") from e

    try:
        graph = Graph(payload["vertex_count"])
        for u, edges in enumerate(payload["edges"]):
            for v, w in edges:
                graph.add_edge(u, v, w)
    except (KeyError, TypeError, ValueError, IndexError) as e:
        raise MalformedInput(f"Unexpected snapshot layout in '{path}': {e}") from e

    logger.info(f"Loaded {graph!r} from msgpack snapshot")
    return graph
