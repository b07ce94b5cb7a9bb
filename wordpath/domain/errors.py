"""Typed domain errors for the word path solver.

Contract violations (bad capacity, full graph, out-of-range vertex) and
unreadable input are raised as exceptions deriving from WordPathError.
Expected outcomes such as an unknown word or an unreachable destination
are never raised: they travel as plain result values.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class WordPathError(Exception):
    """Base error for the word path solver.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class GraphError(WordPathError):
    """A word graph was used against its construction contract."""


@dataclass
class CapacityError(GraphError):
    """Invalid capacity or distance bound requested for a new graph.

    Attributes:
        capacity: The requested vertex capacity
    """

    capacity: int = 0


@dataclass
class GraphFullError(GraphError):
    """Insertion attempted into a graph that already holds `capacity` words.

    Attributes:
        capacity: Declared capacity of the graph
    """

    capacity: int = 0


@dataclass
class InvalidVertexError(GraphError):
    """Vertex index outside of ``0..vertex_count - 1``.

    Attributes:
        index: The offending index
        vertex_count: Number of vertices in the graph
    """

    index: int = -1
    vertex_count: int = 0


@dataclass
class InputFormatError(WordPathError):
    """Dictionary or query input could not be read or parsed.

    Attributes:
        file_path: Path of the input file if relevant
        line_number: 1-based line where the problem was detected
    """

    file_path: Optional[str] = None
    line_number: Optional[int] = None


@dataclass
class ConfigurationError(WordPathError):
    """Invalid or missing configuration.

    Attributes:
        setting_name: Name of the problematic setting
    """

    setting_name: str = ""
