"""Dijkstra path solver adapter.

Answers one query on the graph of its word length: both words are
resolved to vertices, a full shortest-path tree is grown from the source
and the destination's branch is read back as a path. Every failure to
find a path comes back as an empty PathResult.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from ...domain.models import PathResult, Query
from ...graph.dijkstra import shortest_path
from ...graph.paths import path_between
from ...graph.word_graph import WordGraph


@dataclass
class DijkstraPathSolver:
    """Path solver using Dijkstra's shortest path algorithm.

    This adapter implements PathSolverPort.

    Attributes:
        enforce_query_bound: Also limit each step to the query's own bound
    """

    enforce_query_bound: bool = False
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def solve(self, graph: Optional[WordGraph], query: Query) -> PathResult:
        """Find the cheapest path between the query's words.

        Args:
            graph: Graph for the query's word length, or None.
            query: The query to answer.

        Returns:
            PathResult with path and cost, or an empty result when a word
            is unknown or the destination is unreachable.

        Raises:
            InvalidVertexError: If the graph hands back an inconsistent index.
        """
        self._logger.debug(
            "Solving query",
            extra={"source": query.source, "destination": query.destination},
        )

        if graph is None or not query.same_length:
            return self._not_found(query, "no graph for these words")

        source = graph.find_vertex(query.source)
        if source is None:
            return self._not_found(query, "source not in dictionary")
        destination = graph.find_vertex(query.destination)
        if destination is None:
            return self._not_found(query, "destination not in dictionary")

        step_limit = query.max_distance if self.enforce_query_bound else None
        tree = shortest_path(graph, source, max_step_distance=step_limit)
        if not tree.reached(destination):
            return self._not_found(query, "destination unreachable")

        path = path_between(graph, tree.predecessors, source, destination)
        assert path is not None

        cost = int(tree.distances[destination])
        self._logger.debug(
            "Path found",
            extra={
                "source": query.source,
                "destination": query.destination,
                "steps": len(path) - 1,
                "cost": cost,
            },
        )
        return PathResult(query=query, path=path, cost=cost)

    def _not_found(self, query: Query, reason: str) -> PathResult:
        self._logger.debug(
            "No path",
            extra={
                "source": query.source,
                "destination": query.destination,
                "reason": reason,
            },
        )
        return PathResult(query=query)
