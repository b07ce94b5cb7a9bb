"""Query adapters - Implementations of QuerySourcePort."""

from .text_reader import TextQueryReader, max_distance_by_length

__all__ = ["TextQueryReader", "max_distance_by_length"]
