"""Dictionary port - Abstraction over the word source.

The solver needs the dictionary twice: once to learn how many words of
each length exist (graph capacities), once to get the words themselves
in their original order (vertex indices).
"""

from __future__ import annotations

from typing import Collection, Dict, List, Protocol


class DictionaryRepositoryPort(Protocol):
    """Port for loading dictionary words.

    Implementation: adapters/dictionary/text_repository.py
    """

    def count_by_length(self) -> Dict[int, int]:
        """Count dictionary words per word length.

        Returns:
            Mapping of word length to number of words of that length.
        """
        ...

    def load_groups(self, lengths: Collection[int]) -> Dict[int, List[str]]:
        """Load the words of the requested lengths.

        Args:
            lengths: Word lengths to keep; others are skipped.

        Returns:
            Mapping of length to words in dictionary order. Lengths with
            no words are absent.
        """
        ...
