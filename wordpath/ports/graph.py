"""Graph port - Abstraction for answering a query on a word graph."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Protocol

if TYPE_CHECKING:
    from ..domain.models import PathResult, Query
    from ..graph.word_graph import WordGraph


class PathSolverPort(Protocol):
    """Port for path computation.

    Implementation: adapters/graph/dijkstra_solver.py

    The solver never raises for an unknown word or an unreachable
    destination; both come back as a PathResult without a path.
    """

    def solve(self, graph: Optional[WordGraph], query: Query) -> PathResult:
        """Find the cheapest path answering ``query``.

        Args:
            graph: Graph for the query's word length, None if none exists.
            query: The query to answer.

        Returns:
            PathResult with the path and its cost, or an empty result.
        """
        ...
