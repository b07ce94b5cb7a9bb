"""Domain layer - Core models and errors.

Immutable models and typed errors shared by the graph engine, the
adapters and the orchestration service. No external dependencies.
"""

from .errors import (
    CapacityError,
    ConfigurationError,
    GraphError,
    GraphFullError,
    InputFormatError,
    InvalidVertexError,
    WordPathError,
)
from .models import INFINITY, Edge, PathResult, Query, ShortestPathTree

__all__ = [
    # Models
    "INFINITY",
    "Edge",
    "Query",
    "ShortestPathTree",
    "PathResult",
    # Errors
    "WordPathError",
    "GraphError",
    "CapacityError",
    "GraphFullError",
    "InvalidVertexError",
    "InputFormatError",
    "ConfigurationError",
]
