"""Services layer - Orchestration of the ports and the graph engine."""

from .word_path_service import WordPathService

__all__ = ["WordPathService"]
