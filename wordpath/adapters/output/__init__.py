"""Output adapters - Implementations of PathWriterPort."""

from .text_writer import NO_PATH_COST, TextPathWriter, format_result

__all__ = ["TextPathWriter", "format_result", "NO_PATH_COST"]
