"""Text dictionary repository adapter.

Reads a plain-text dictionary whose words are separated by any
whitespace. The file is scanned twice, like a two-pass loader: a first
pass counts words per length so graphs can be sized exactly, a second
pass collects the words of the lengths actually queried.
"""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path
from typing import Collection, Dict, Iterator, List, Optional, Tuple

from ...config import GraphConfig, get_config
from ...domain.errors import InputFormatError


@dataclass
class TextDictionaryRepository:
    """Dictionary repository backed by a whitespace separated text file.

    This adapter implements DictionaryRepositoryPort.

    Attributes:
        path: Dictionary file
        config: Graph configuration (word length limit)
        encoding: Text encoding of the file
    """

    path: Path
    config: GraphConfig = field(default_factory=lambda: get_config().graph)
    encoding: str = field(default_factory=lambda: get_config().io.encoding)
    _logger: logging.Logger = field(init=False, repr=False)

    _counts: Optional[Dict[int, int]] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        self.path = Path(self.path)
        self._logger = logging.getLogger(__name__)

    def count_by_length(self) -> Dict[int, int]:
        """Count words per length (first pass, cached).

        Raises:
            InputFormatError: If the file cannot be read.
        """
        if self._counts is not None:
            return self._counts

        counts = Counter(len(word) for _, word in self._iter_words(warn=True))
        self._counts = dict(counts)
        self._logger.info(
            "Dictionary scanned",
            extra={"words": sum(counts.values()), "lengths": len(counts)},
        )
        return self._counts

    def load_groups(self, lengths: Collection[int]) -> Dict[int, List[str]]:
        """Collect words of the requested lengths, in file order.

        Raises:
            InputFormatError: If the file cannot be read.
        """
        wanted = set(lengths)
        groups: Dict[int, List[str]] = {}
        for _, word in self._iter_words():
            size = len(word)
            if size in wanted:
                groups.setdefault(size, []).append(word)

        self._logger.debug(
            "Dictionary groups loaded",
            extra={"groups": {size: len(words) for size, words in groups.items()}},
        )
        return groups

    def _iter_words(self, warn: bool = False) -> Iterator[Tuple[int, str]]:
        """Yield ``(line_number, word)`` for every usable word.

        Overlong words are reported only when ``warn`` is set, so each one
        is logged once across both passes.
        """
        limit = self.config.max_word_length
        try:
            with self.path.open(encoding=self.encoding) as f:
                for line_number, line in enumerate(f, start=1):
                    for word in line.split():
                        if len(word) > limit:
                            if warn:
                                self._logger.warning(
                                    "Skipping overlong dictionary word",
                                    extra={
                                        "line_number": line_number,
                                        "length": len(word),
                                        "limit": limit,
                                    },
                                )
                            continue
                        yield line_number, word
        except (OSError, UnicodeDecodeError) as e:
            raise InputFormatError(
                f"Failed to read dictionary {self.path}",
                file_path=str(self.path),
                cause=e,
            ) from e

    def clear_cache(self) -> None:
        """Forget the cached word counts."""
        self._counts = None
