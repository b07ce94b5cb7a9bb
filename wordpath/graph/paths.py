"""Turning a predecessor tree into an explicit path."""

from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

from ..domain.errors import GraphError, InvalidVertexError
from .word_graph import WordGraph


def _check(index: int, count: int) -> None:
    if not 0 <= index < count:
        raise InvalidVertexError(
            f"Vertex index {index} out of range for tree of {count} vertices",
            index=index,
            vertex_count=count,
        )


def reconstruct(
    predecessors: Sequence[Optional[int]], source: int, destination: int
) -> Optional[List[int]]:
    """Walk back from ``destination`` to ``source``.

    Returns the vertex indices from source to destination (inclusive), or
    None when the destination was not reached.
    """
    count = len(predecessors)
    _check(source, count)
    _check(destination, count)

    if destination == source:
        return [source]
    if predecessors[destination] is None:
        return None

    path = [destination]
    current = destination
    # a simple path visits each vertex at most once
    for _ in range(count):
        current = predecessors[current]
        if current is None:
            break
        path.append(current)
        if current == source:
            path.reverse()
            return path

    raise GraphError(
        f"Predecessor chain from {destination} does not lead back to {source}"
    )


def path_between(
    graph: WordGraph,
    predecessors: Sequence[Optional[int]],
    source: int,
    destination: int,
) -> Optional[Tuple[str, ...]]:
    """Like ``reconstruct`` but returns the words along the path."""
    indices = reconstruct(predecessors, source, destination)
    if indices is None:
        return None
    return tuple(graph.word(index) for index in indices)
