"""Word path service - Main orchestrator.

Wires the dictionary, the graph engine and the path solver together:

1. Per-length distance bounds are derived from the queries
2. One word graph is built per queried length
3. Every query is answered against the graph of its length
4. Answers are handed to the writer in query order
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Optional, Sequence

from ..adapters.queries.text_reader import max_distance_by_length
from ..config import AppConfig, get_config
from ..distance import get_distance_metric
from ..domain.errors import CapacityError, ConfigurationError, GraphError
from ..domain.models import PathResult, Query
from ..graph.word_graph import WordGraph
from ..ports.dictionary import DictionaryRepositoryPort
from ..ports.graph import PathSolverPort
from ..ports.queries import PathWriterPort, QuerySourcePort


@dataclass
class WordPathService:
    """Main service for answering word path queries.

    Graphs are built once per run and then only read, so queries can be
    answered from several threads at once (``solver.workers``).

    Attributes:
        dictionary: Source of dictionary words
        solver: Answers one query on one graph
        config: Application configuration
    """

    dictionary: DictionaryRepositoryPort
    solver: PathSolverPort
    config: AppConfig = field(default_factory=get_config)

    graphs: Dict[int, WordGraph] = field(default_factory=dict, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def plan(self, queries: Sequence[Query]) -> Dict[int, int]:
        """Distance bound each word length's graph must be built with."""
        return max_distance_by_length(queries)

    def build_graphs(self, bounds: Mapping[int, int]) -> Dict[int, WordGraph]:
        """Build one graph per requested length.

        Lengths without dictionary words are skipped; their queries will
        report no path.

        Raises:
            ConfigurationError: If the configured distance metric is unknown or
                rejects a pair of dictionary words.
            InputFormatError: If the dictionary cannot be read.
            GraphFullError: If the dictionary changed between its two passes.
        """
        metric = get_distance_metric(self.config.graph.distance_metric)
        counts = self.dictionary.count_by_length()
        groups = self.dictionary.load_groups(bounds.keys())

        graphs: Dict[int, WordGraph] = {}
        for length, bound in sorted(bounds.items()):
            words = groups.get(length, [])
            try:
                graph = WordGraph(counts.get(length, 0), bound)
            except CapacityError as e:
                self._logger.warning(
                    "Skipping word length without usable graph",
                    extra={"length": length, "error": str(e)},
                )
                continue

            for word in words:
                graph.insert(word)
            try:
                graph.build_edges(metric)
            except ValueError as e:
                raise ConfigurationError(
                    f"Distance metric {self.config.graph.distance_metric!r} "
                    f"rejected words of length {length}",
                    setting_name="distance_metric",
                    cause=e,
                ) from e
            graphs[length] = graph

            self._logger.info(
                "Graph ready",
                extra={
                    "length": length,
                    "vertices": graph.vertex_count,
                    "edges": graph.edge_count,
                    "max_distance": bound,
                },
            )

        self.graphs = graphs
        return graphs

    def solve(self, queries: Sequence[Query]) -> List[PathResult]:
        """Answer every query in order against the built graphs."""
        workers = self.config.solver.workers
        if workers > 1 and len(queries) > 1:
            with ThreadPoolExecutor(max_workers=workers) as executor:
                return list(executor.map(self._solve_one, queries))
        return [self._solve_one(query) for query in queries]

    def _solve_one(self, query: Query) -> PathResult:
        graph: Optional[WordGraph] = self.graphs.get(query.length)
        try:
            return self.solver.solve(graph, query)
        except GraphError as e:
            self._logger.warning(
                "Query aborted",
                extra={
                    "source": query.source,
                    "destination": query.destination,
                    "error": str(e),
                },
            )
            return PathResult(query=query)

    def run(self, query_source: QuerySourcePort, writer: PathWriterPort) -> List[PathResult]:
        """Read queries, build graphs, answer and write.

        Returns:
            The answers, in query order.
        """
        queries = query_source.read()
        self.build_graphs(self.plan(queries))
        results = self.solve(queries)
        writer.write(results)

        found = sum(1 for result in results if result.found)
        self._logger.info(
            "Queries answered",
            extra={"queries": len(results), "found": found},
        )
        return results
