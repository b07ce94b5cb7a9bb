"""Tests for WordPathService orchestration."""

from dataclasses import dataclass, field
from typing import Dict, List

import pytest

from wordpath.adapters.graph import DijkstraPathSolver
from wordpath.config import AppConfig, GraphConfig, SolverConfig
from wordpath.distance import DISTANCE_METRICS
from wordpath.domain.errors import ConfigurationError, GraphFullError, InvalidVertexError
from wordpath.domain.models import PathResult, Query
from wordpath.services import WordPathService


@dataclass
class FakeDictionary:
    words: List[str]
    counts_override: Dict[int, int] = field(default_factory=dict)

    def count_by_length(self):
        counts: Dict[int, int] = {}
        for word in self.words:
            counts[len(word)] = counts.get(len(word), 0) + 1
        counts.update(self.counts_override)
        return counts

    def load_groups(self, lengths):
        groups: Dict[int, List[str]] = {}
        for word in self.words:
            if len(word) in lengths:
                groups.setdefault(len(word), []).append(word)
        return groups


@dataclass
class FakeQueries:
    queries: List[Query]

    def read(self):
        return list(self.queries)


@dataclass
class CollectingWriter:
    written: List[PathResult] = field(default_factory=list)

    def write(self, results):
        self.written.extend(results)


class ExplodingSolver:
    def solve(self, graph, query):
        if query.source == "bad":
            raise InvalidVertexError("broken index", index=99, vertex_count=1)
        return PathResult(query=query, path=(query.source,), cost=0)


WORDS = ["cat", "cot", "cog", "dog", "cold", "cord", "card", "ward", "warm", "a", "b"]


def make_service(words=WORDS, workers=1, metric="hamming", solver=None):
    config = AppConfig(
        graph=GraphConfig(distance_metric=metric),
        solver=SolverConfig(workers=workers),
    )
    return WordPathService(
        dictionary=FakeDictionary(words),
        solver=solver or DijkstraPathSolver(),
        config=config,
    )


def test_builds_only_queried_lengths():
    service = make_service()

    graphs = service.build_graphs({3: 1, 4: 2})

    assert sorted(graphs) == [3, 4]
    assert graphs[3].max_distance == 1
    assert graphs[4].max_distance == 2
    assert graphs[3].words() == ["cat", "cot", "cog", "dog"]


def test_plan_takes_largest_bound_per_length():
    service = make_service()

    bounds = service.plan([Query("cat", "dog", 1), Query("cot", "dog", 2), Query("a", "b", 0)])

    assert bounds == {3: 2, 1: 0}


def test_length_without_words_is_skipped():
    service = make_service()

    graphs = service.build_graphs({3: 1, 7: 1})

    assert sorted(graphs) == [3]
    result = service.solve([Query("kittens", "mittens", 1)])[0]
    assert not result.found


def test_dictionary_growing_between_passes_is_fatal():
    service = make_service()
    service.dictionary = FakeDictionary(WORDS, counts_override={3: 2})

    with pytest.raises(GraphFullError):
        service.build_graphs({3: 1})


def test_unknown_metric_is_fatal():
    service = make_service(metric="nope")

    with pytest.raises(ConfigurationError):
        service.build_graphs({3: 1})


def test_run_answers_in_order():
    service = make_service()
    queries = [
        Query("cat", "dog", 1),
        Query("cold", "warm", 1),
        Query("cat", "dog", 0),
        Query("cat", "cats", 1),
        Query("a", "b", 1),
    ]
    writer = CollectingWriter()

    results = service.run(FakeQueries(queries), writer)

    assert writer.written == results
    assert [r.query for r in results] == queries
    assert results[0].path == ("cat", "cot", "cog", "dog")
    assert results[1].path == ("cold", "cord", "card", "ward", "warm")
    assert results[1].cost == 4
    # the length-3 graph is built with bound 1, shared by both cat queries
    assert results[2].found
    assert not results[3].found
    assert results[4].cost == 1


def test_threaded_solving_matches_sequential():
    queries = [Query(a, b, 1) for a in WORDS[:4] for b in WORDS[:4]]

    sequential = make_service()
    sequential.build_graphs(sequential.plan(queries))
    threaded = make_service(workers=4)
    threaded.build_graphs(threaded.plan(queries))

    assert threaded.solve(queries) == sequential.solve(queries)


def test_contract_violation_aborts_only_that_query():
    service = make_service(solver=ExplodingSolver())
    service.build_graphs({3: 1})

    results = service.solve([Query("bad", "cat", 1), Query("cat", "cot", 1)])

    assert not results[0].found
    assert results[1].found


def test_metric_rejecting_words_is_a_configuration_error(monkeypatch):
    def strict_metric(a, b):
        raise ValueError("cannot compare")

    monkeypatch.setitem(DISTANCE_METRICS, "strict", strict_metric)
    service = make_service(metric="strict")

    with pytest.raises(ConfigurationError) as info:
        service.build_graphs({3: 1})
    assert isinstance(info.value.cause, ValueError)
