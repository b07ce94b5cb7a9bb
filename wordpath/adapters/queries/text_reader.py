"""Text query reader adapter.

A query file is a stream of whitespace separated triples::

    source destination max_distance

Line breaks carry no meaning; they only help locate errors.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, Iterator, List, Tuple

from ...config import get_config
from ...domain.errors import InputFormatError
from ...domain.models import Query


def max_distance_by_length(queries: Iterable[Query]) -> Dict[int, int]:
    """Largest bound requested per source word length."""
    bounds: Dict[int, int] = {}
    for query in queries:
        if bounds.get(query.length, -1) < query.max_distance:
            bounds[query.length] = query.max_distance
    return bounds


@dataclass
class TextQueryReader:
    """Query source backed by a text file.

    This adapter implements QuerySourcePort.

    Attributes:
        path: Query file
        encoding: Text encoding of the file
    """

    path: Path
    encoding: str = field(default_factory=lambda: get_config().io.encoding)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.path = Path(self.path)
        self._logger = logging.getLogger(__name__)

    def read(self) -> List[Query]:
        """Parse every query in the file.

        Raises:
            InputFormatError: If the file cannot be read, ends with an
                incomplete query, or holds an invalid bound.
        """
        queries: List[Query] = []
        pending: List[Tuple[int, str]] = []

        for line_number, token in self._iter_tokens():
            pending.append((line_number, token))
            if len(pending) == 3:
                queries.append(self._parse(pending))
                pending = []

        if pending:
            raise InputFormatError(
                f"Incomplete query at end of {self.path}: "
                f"{' '.join(token for _, token in pending)!r}",
                file_path=str(self.path),
                line_number=pending[0][0],
            )

        self._logger.info("Queries read", extra={"queries": len(queries)})
        return queries

    def _parse(self, triple: List[Tuple[int, str]]) -> Query:
        (line_number, source), (_, destination), (bound_line, raw_bound) = triple
        try:
            bound = int(raw_bound)
        except ValueError as e:
            raise InputFormatError(
                f"Invalid distance bound {raw_bound!r}",
                file_path=str(self.path),
                line_number=bound_line,
                cause=e,
            ) from e
        if bound < 0:
            raise InputFormatError(
                f"Distance bound must be non-negative, got {bound}",
                file_path=str(self.path),
                line_number=bound_line,
            )
        return Query(source=source, destination=destination, max_distance=bound)

    def _iter_tokens(self) -> Iterator[Tuple[int, str]]:
        try:
            with self.path.open(encoding=self.encoding) as f:
                for line_number, line in enumerate(f, start=1):
                    for token in line.split():
                        yield line_number, token
        except (OSError, UnicodeDecodeError) as e:
            raise InputFormatError(
                f"Failed to read queries {self.path}",
                file_path=str(self.path),
                cause=e,
            ) from e
