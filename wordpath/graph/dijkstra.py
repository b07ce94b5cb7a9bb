"""Single-source shortest paths over a word graph using Dijkstra.

Every vertex starts in the queue at distance INFINITY except the source
at 0. The closest vertex is finalized on each iteration and its edges are
relaxed; lowered distances are pushed toward the front of the queue with
``decrease_key``. Once the closest queued vertex is at INFINITY the rest
of the graph is unreachable and the search stops.
"""

from __future__ import annotations

from typing import List, Optional

from ..domain.models import INFINITY, Distance, ShortestPathTree
from .priority_queue import IndexedPriorityQueue
from .word_graph import WordGraph


def shortest_path(
    graph: WordGraph,
    source: int,
    max_step_distance: Optional[int] = None,
) -> ShortestPathTree:
    """Compute the shortest-path tree of ``graph`` rooted at ``source``.

    Parameters
    ----------
    graph:
        A graph whose edges have been built. It is only read.
    source:
        Index of the source vertex.
    max_step_distance:
        When given, edges joining words more than this many substitutions
        apart are ignored, on top of the graph's own bound.

    Returns
    -------
    ShortestPathTree
        Distances and predecessors for every vertex of the graph.

    Raises
    ------
    InvalidVertexError
        If ``source`` is not a vertex of ``graph``.
    """
    graph.check_index(source)

    count = graph.vertex_count
    distances: List[Distance] = [INFINITY] * count
    predecessors: List[Optional[int]] = [None] * count
    distances[source] = 0

    weight_limit = None
    if max_step_distance is not None:
        weight_limit = max_step_distance * max_step_distance

    queue = IndexedPriorityQueue(count, distances.__getitem__)
    for v in range(count):
        queue.insert(v)

    while not queue.is_empty():
        u = queue.extract_min()
        base = distances[u]
        if base == INFINITY:
            break

        for edge in graph.adjacency(u):
            if weight_limit is not None and edge.weight > weight_limit:
                continue
            v = edge.target
            candidate = base + edge.weight
            if candidate < distances[v]:
                distances[v] = candidate
                predecessors[v] = u
                queue.decrease_key(v)

    return ShortestPathTree(
        source=source,
        distances=tuple(distances),
        predecessors=tuple(predecessors),
    )
