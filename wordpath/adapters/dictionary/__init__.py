"""Dictionary adapters - Implementations of DictionaryRepositoryPort."""

from .text_repository import TextDictionaryRepository

__all__ = ["TextDictionaryRepository"]
