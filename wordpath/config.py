"""Centralized configuration using Pydantic Settings.

Every tunable of the solver lives here. Values can be overridden via
environment variables:
- WP_GRAPH_DISTANCE_METRIC=hamming_casefold
- WP_SOLVER_WORKERS=4
- WP_SOLVER_ENFORCE_QUERY_BOUND=true
- WP_LOG_LEVEL=DEBUG
- etc.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class GraphConfig(BaseSettings):
    """Graph construction settings.

    Environment variables prefixed with WP_GRAPH_.
    """

    model_config = SettingsConfigDict(env_prefix="WP_GRAPH_")

    distance_metric: str = "hamming"
    max_word_length: int = Field(default=100, ge=1)


class SolverConfig(BaseSettings):
    """Query solving settings.

    Environment variables prefixed with WP_SOLVER_.
    """

    model_config = SettingsConfigDict(env_prefix="WP_SOLVER_")

    # Limit every step of a query to that query's own bound, not only the
    # per-length bound the graph was built with.
    enforce_query_bound: bool = False
    workers: int = Field(default=1, ge=1)


class IOConfig(BaseSettings):
    """Input and output file settings.

    Environment variables prefixed with WP_IO_.
    """

    model_config = SettingsConfigDict(env_prefix="WP_IO_")

    encoding: str = "utf-8"
    output_suffix: str = ".path"


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with WP_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="WP_LOG_")

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

        config = get_config()
        print(config.solver.workers)
        print(config.graph.distance_metric)

    Environment variables prefixed with WP_.
    """

    model_config = SettingsConfigDict(env_prefix="WP_")

    graph: GraphConfig = Field(default_factory=GraphConfig)
    solver: SolverConfig = Field(default_factory=SolverConfig)
    io: IOConfig = Field(default_factory=IOConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the singleton application configuration.

    Configuration is loaded once and cached. Call reset_config() first to
    pick up changed environment variables (e.g., in tests).
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the configuration cache."""
    get_config.cache_clear()
