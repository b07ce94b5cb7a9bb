import pytest
from pydantic import ValidationError

from wordpath.config import AppConfig, ObservabilityConfig, SolverConfig, get_config, reset_config


@pytest.fixture(autouse=True)
def clean_cache():
    reset_config()
    yield
    reset_config()


def test_defaults(monkeypatch):
    monkeypatch.delenv("WP_SOLVER_WORKERS", raising=False)
    monkeypatch.delenv("WP_GRAPH_DISTANCE_METRIC", raising=False)

    config = AppConfig()

    assert config.graph.distance_metric == "hamming"
    assert config.graph.max_word_length == 100
    assert config.solver.workers == 1
    assert config.solver.enforce_query_bound is False
    assert config.io.output_suffix == ".path"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("WP_SOLVER_WORKERS", "4")
    monkeypatch.setenv("WP_SOLVER_ENFORCE_QUERY_BOUND", "true")
    monkeypatch.setenv("WP_GRAPH_DISTANCE_METRIC", "hamming_casefold")

    config = get_config()

    assert config.solver.workers == 4
    assert config.solver.enforce_query_bound is True
    assert config.graph.distance_metric == "hamming_casefold"


def test_get_config_is_cached():
    assert get_config() is get_config()


def test_workers_must_be_positive():
    with pytest.raises(ValidationError):
        SolverConfig(workers=0)


def test_log_level_must_be_known(monkeypatch):
    monkeypatch.setenv("WP_LOG_LEVEL", "VERBOSE")

    with pytest.raises(ValidationError):
        ObservabilityConfig()
