"""Immutable domain models for the word path solver.

All models are frozen dataclasses with slots. They carry no behaviour
beyond simple derived properties.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, Tuple, Union

# Sentinel distance for vertices not (yet) reached from the source.
INFINITY = math.inf

Distance = Union[int, float]


@dataclass(frozen=True, slots=True)
class Edge:
    """One directed half of an undirected weighted edge."""

    target: int
    weight: int


@dataclass(frozen=True, slots=True)
class Query:
    """A request for the cheapest path between two words.

    ``max_distance`` is the largest number of substitutions allowed in a
    single step for this query.
    """

    source: str
    destination: str
    max_distance: int

    def __post_init__(self) -> None:
        if self.max_distance < 0:
            raise ValueError(
                f"max_distance must be non-negative, got {self.max_distance}"
            )

    @property
    def length(self) -> int:
        """Word length group this query is answered in."""
        return len(self.source)

    @property
    def same_length(self) -> bool:
        return len(self.source) == len(self.destination)


@dataclass(frozen=True, slots=True)
class ShortestPathTree:
    """Output of one single-source shortest-path run.

    Attributes:
        source: Index of the source vertex
        distances: Best cost from the source per vertex, INFINITY if unreached
        predecessors: Previous vertex on the best path, None for the source
            and for unreached vertices
    """

    source: int
    distances: Tuple[Distance, ...]
    predecessors: Tuple[Optional[int], ...]

    def __len__(self) -> int:
        return len(self.distances)

    def reached(self, index: int) -> bool:
        return self.distances[index] != INFINITY


@dataclass(frozen=True, slots=True)
class PathResult:
    """Answer to a single query.

    Attributes:
        query: The query being answered
        path: Words from source to destination (inclusive), empty if none
        cost: Total cost of the path, None if no path exists
    """

    query: Query
    path: Tuple[str, ...] = ()
    cost: Optional[int] = None

    @property
    def found(self) -> bool:
        return self.cost is not None

    @property
    def steps(self) -> int:
        """Number of transformations along the path."""
        return max(len(self.path) - 1, 0)
