"""Command line entry point.

    wordpath words.dic words.pal            # answers go to words.path
    wordpath words.dic words.pal -o out.txt --workers 4
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from pydantic import ValidationError

from .config import AppConfig, GraphConfig, ObservabilityConfig, SolverConfig, get_config
from .container import Container
from .distance import DISTANCE_METRICS
from .domain.errors import WordPathError
from .ports.queries import PathWriterPort, QuerySourcePort
from .services import WordPathService

logger = logging.getLogger("wordpath")

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wordpath",
        description="Find the cheapest substitution path between pairs of words.",
    )
    parser.add_argument("dictionary", type=Path, help="Dictionary file (whitespace separated words)")
    parser.add_argument("queries", type=Path, help="Query file of 'source destination max_distance' triples")
    parser.add_argument(
        "-o", "--output", type=Path, default=None,
        help="Answer file (default: queries file with the configured output suffix)",
    )
    parser.add_argument("--workers", type=_positive_int, default=None, help="Threads used to answer queries")
    parser.add_argument(
        "--enforce-query-bound", action="store_true",
        help="Limit every step of a query to that query's own distance bound",
    )
    parser.add_argument("--metric", choices=sorted(DISTANCE_METRICS), default=None, help="Distance metric between words")
    parser.add_argument(
        "--log-level", type=str.upper, choices=LOG_LEVELS, default=None,
        help="Logging level (default from WP_LOG_LEVEL)",
    )
    return parser


def apply_overrides(config: AppConfig, args: argparse.Namespace) -> AppConfig:
    """Return ``config`` with the command line options layered on top."""
    solver = SolverConfig(
        workers=args.workers or config.solver.workers,
        enforce_query_bound=args.enforce_query_bound or config.solver.enforce_query_bound,
    )
    graph = GraphConfig(
        distance_metric=args.metric or config.graph.distance_metric,
        max_word_length=config.graph.max_word_length,
    )
    observability = ObservabilityConfig(
        level=args.log_level or config.observability.level,
        format=config.observability.format,
    )
    return config.model_copy(
        update={"solver": solver, "graph": graph, "observability": observability}
    )


def configure_logging(config: ObservabilityConfig) -> None:
    logging.basicConfig(level=config.level, format=config.format)


def default_output_path(queries: Path, suffix: str) -> Path:
    return queries.with_suffix(suffix)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        config = apply_overrides(get_config(), args)
    except ValidationError as e:
        print(f"error: invalid configuration: {e}", file=sys.stderr)
        return 1
    configure_logging(config.observability)

    output = args.output or default_output_path(args.queries, config.io.output_suffix)
    container = Container.create_default(args.dictionary, args.queries, output, config=config)

    try:
        service: WordPathService = container.resolve(WordPathService)
        results = service.run(
            container.resolve(QuerySourcePort), container.resolve(PathWriterPort)
        )
    except WordPathError as e:
        logger.error("Run failed: %s", e)
        print(f"error: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        logger.error("Cannot write answers: %s", e)
        print(f"error: cannot write {output}: {e}", file=sys.stderr)
        return 1

    found = sum(1 for result in results if result.found)
    logger.info("Wrote %d answers (%d with a path) to %s", len(results), found, output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
