"""Ports layer - Abstract interfaces (Protocols) for the application.

Ports define the contracts between the solving service and the adapters
that read dictionaries and queries, compute paths and write answers.
"""

from .dictionary import DictionaryRepositoryPort
from .graph import PathSolverPort
from .queries import PathWriterPort, QuerySourcePort

__all__ = [
    "DictionaryRepositoryPort",
    "QuerySourcePort",
    "PathWriterPort",
    "PathSolverPort",
]
