"""Weighted word graphs and the shortest-path engine built on them.

This subpackage holds the per-length word graph, the indexed priority
queue used by Dijkstra, the search itself and path reconstruction.
"""

from .dijkstra import shortest_path
from .paths import path_between, reconstruct
from .priority_queue import IndexedPriorityQueue
from .word_graph import WordGraph, build_graph, find_vertex

__all__ = [
    "WordGraph",
    "IndexedPriorityQueue",
    "build_graph",
    "find_vertex",
    "shortest_path",
    "reconstruct",
    "path_between",
]
