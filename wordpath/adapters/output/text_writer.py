"""Text path writer adapter.

Each answer is written as a block: a header ``<source> <cost>`` followed
by the words of the path after the source, one per line. When no path
exists the header carries ``-1`` and the destination follows alone.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List

from ...config import get_config
from ...domain.models import PathResult

NO_PATH_COST = -1


def format_result(result: PathResult) -> str:
    """Render one answer as its text block (newline terminated)."""
    query = result.query
    if not result.found:
        return f"{query.source} {NO_PATH_COST}\n{query.destination}\n"

    lines: List[str] = [f"{result.path[0]} {result.cost}"]
    lines.extend(result.path[1:] or result.path[-1:])
    return "\n".join(lines) + "\n"


@dataclass
class TextPathWriter:
    """Answer sink writing text blocks to a file.

    This adapter implements PathWriterPort.
    """

    path: Path
    encoding: str = field(default_factory=lambda: get_config().io.encoding)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.path = Path(self.path)
        self._logger = logging.getLogger(__name__)

    def write(self, results: Iterable[PathResult]) -> None:
        count = 0
        with self.path.open("w", encoding=self.encoding) as f:
            for result in results:
                f.write(format_result(result))
                count += 1
        self._logger.info(
            "Answers written",
            extra={"output_path": str(self.path), "answers": count},
        )
