"""Weighted undirected graph of same-length words.

A graph is an array of vertices. Each vertex holds one word and the list
of edges leaving it; an edge names its end vertex by index and carries
the cost of the step. The graph is filled in two phases: every word is
inserted first, then ``build_edges`` connects all pairs within the
configured distance. After that the graph is read-only and can be shared
between concurrent searches.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Iterable, List, Optional, Sequence

from ..domain.errors import CapacityError, GraphError, GraphFullError, InvalidVertexError
from ..domain.models import Edge

DistanceFn = Callable[[str, str], int]

logger = logging.getLogger(__name__)


@dataclass
class Vertex:
    word: str
    edges: List[Edge] = field(default_factory=list)


class WordGraph:
    """Fixed-capacity graph of words sharing one length.

    Attributes:
        size: Number of vertices the graph was allocated for
        max_distance: Largest substitution count connected by an edge
        max_weight: Weight cutoff, ``max_distance ** 2`` once edges exist
    """

    def __init__(self, capacity: int, max_distance: int) -> None:
        if capacity <= 0:
            raise CapacityError(
                f"Graph capacity must be positive, got {capacity}",
                capacity=capacity,
            )
        if max_distance < 0:
            raise CapacityError(
                f"Maximum distance must be non-negative, got {max_distance}",
                capacity=capacity,
            )

        self.size = capacity
        self.max_distance = max_distance
        self.max_weight = max_distance
        self._vertices: List[Vertex] = []
        self._edge_count = 0
        self._edges_built = False

    def __len__(self) -> int:
        return len(self._vertices)

    def __repr__(self) -> str:
        return (
            f"WordGraph(size={self.size}, free={self.free}, "
            f"max_distance={self.max_distance}, edges={self._edge_count})"
        )

    @property
    def free(self) -> int:
        """Index the next inserted word will get."""
        return len(self._vertices)

    @property
    def vertex_count(self) -> int:
        return len(self._vertices)

    @property
    def edge_count(self) -> int:
        """Number of undirected edges."""
        return self._edge_count

    @property
    def is_full(self) -> bool:
        return self.free == self.size

    @property
    def edges_built(self) -> bool:
        return self._edges_built

    def insert(self, word: str) -> int:
        """Append a vertex holding ``word`` and return its index.

        Raises:
            GraphFullError: If the graph already holds ``size`` vertices.
            GraphError: If the edges were already built.
        """
        if self._edges_built:
            raise GraphError("Cannot insert into a graph whose edges are built")
        if self.is_full:
            raise GraphFullError(
                f"Graph is full ({self.size} vertices), cannot insert {word!r}",
                capacity=self.size,
            )

        index = self.free
        self._vertices.append(Vertex(word))
        return index

    def build_edges(self, distance_fn: DistanceFn) -> None:
        """Connect every pair of words within ``max_distance``.

        Each pair is measured once; an edge of weight ``distance ** 2`` is
        added to both adjacency lists. Quadratic in the vertex count.

        Raises:
            GraphError: If the edges were already built.
        """
        if self._edges_built:
            raise GraphError("Edges have already been built for this graph")

        vertices = self._vertices
        for i in range(len(vertices)):
            word_i = vertices[i].word
            for j in range(i):
                distance = distance_fn(word_i, vertices[j].word)
                if distance <= self.max_distance:
                    self._add_edge(i, j, distance * distance)

        self.max_weight = self.max_distance * self.max_distance
        self._edges_built = True

        logger.info(
            "Graph edges built",
            extra={
                "vertices": len(vertices),
                "edges": self._edge_count,
                "max_distance": self.max_distance,
            },
        )

    def _add_edge(self, i: int, j: int, weight: int) -> None:
        self._vertices[i].edges.append(Edge(target=j, weight=weight))
        self._vertices[j].edges.append(Edge(target=i, weight=weight))
        self._edge_count += 1

    def find_vertex(self, word: str) -> Optional[int]:
        """Return the index of the first vertex holding ``word``, or None."""
        for index, vertex in enumerate(self._vertices):
            if vertex.word == word:
                return index
        return None

    def check_index(self, index: int) -> None:
        if not 0 <= index < len(self._vertices):
            raise InvalidVertexError(
                f"Vertex index {index} out of range for graph of "
                f"{len(self._vertices)} vertices",
                index=index,
                vertex_count=len(self._vertices),
            )

    def word(self, index: int) -> str:
        self.check_index(index)
        return self._vertices[index].word

    def adjacency(self, index: int) -> Sequence[Edge]:
        self.check_index(index)
        return self._vertices[index].edges

    def words(self) -> List[str]:
        return [vertex.word for vertex in self._vertices]


def build_graph(
    words: Iterable[str], max_distance: int, distance_fn: DistanceFn
) -> WordGraph:
    """Build a ready-to-search graph from same-length ``words``.

    Words keep their input order as vertex indices.
    """
    words = list(words)
    graph = WordGraph(len(words), max_distance)
    for word in words:
        graph.insert(word)
    graph.build_edges(distance_fn)
    return graph


def find_vertex(graph: WordGraph, word: str) -> Optional[int]:
    return graph.find_vertex(word)
