import pytest

from wordpath.distance import hamming_distance
from wordpath.domain.errors import GraphError, InvalidVertexError
from wordpath.graph.paths import path_between, reconstruct
from wordpath.graph.word_graph import build_graph


def test_reconstruct_walks_back_to_source():
    predecessors = [None, 0, 1, 2, None]

    assert reconstruct(predecessors, 0, 3) == [0, 1, 2, 3]
    assert reconstruct(predecessors, 0, 1) == [0, 1]


def test_trivial_path():
    assert reconstruct([None, None], 1, 1) == [1]


def test_unreached_destination():
    assert reconstruct([None, 0, None], 0, 2) is None


def test_out_of_range_indices():
    with pytest.raises(InvalidVertexError):
        reconstruct([None, 0], 0, 2)
    with pytest.raises(InvalidVertexError):
        reconstruct([None, 0], -1, 1)


def test_broken_chain_is_reported():
    # 2 -> 1 -> 2 never reaches 0
    with pytest.raises(GraphError):
        reconstruct([None, 2, 1], 0, 2)


def test_chain_from_another_tree_is_reported():
    # 2's chain ends at 1, which is a root but not the requested source
    with pytest.raises(GraphError):
        reconstruct([None, None, 1], 0, 2)


def test_path_between_maps_to_words():
    graph = build_graph(["cat", "cot", "cog"], 1, hamming_distance)

    assert path_between(graph, [None, 0, 1], 0, 2) == ("cat", "cot", "cog")
    assert path_between(graph, [None, None, None], 2, 2) == ("cog",)
    assert path_between(graph, [None, 0, None], 0, 2) is None
