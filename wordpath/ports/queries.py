"""Query and output ports - Where queries come from and answers go."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, List, Protocol

if TYPE_CHECKING:
    from ..domain.models import PathResult, Query


class QuerySourcePort(Protocol):
    """Port for reading path queries.

    Implementation: adapters/queries/text_reader.py
    """

    def read(self) -> List[Query]:
        """Read every query, in input order."""
        ...


class PathWriterPort(Protocol):
    """Port for reporting query answers.

    Implementation: adapters/output/text_writer.py
    """

    def write(self, results: Iterable[PathResult]) -> None:
        """Write the answers, one block per query, in order."""
        ...
