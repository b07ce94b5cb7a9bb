import math

import pytest

from wordpath.graph.priority_queue import IndexedPriorityQueue


def make_queue(keys):
    queue = IndexedPriorityQueue(len(keys), keys.__getitem__)
    for index in range(len(keys)):
        queue.insert(index)
    return queue


def drain(queue):
    order = []
    while not queue.is_empty():
        order.append(queue.extract_min())
    return order


def test_extracts_in_key_order():
    keys = [5, 3, 9, 1, 7]
    queue = make_queue(keys)

    assert len(queue) == 5
    assert drain(queue) == [3, 1, 0, 4, 2]


def test_empty_queue_returns_none():
    queue = IndexedPriorityQueue(3, lambda i: i)

    assert queue.is_empty()
    assert queue.extract_min() is None
    assert queue.peek() is None


def test_decrease_key_moves_index_forward():
    keys = [10, 20, 30, 40]
    queue = make_queue(keys)

    keys[3] = 1
    queue.decrease_key(3)

    assert queue.peek() == 3
    assert drain(queue) == [3, 0, 1, 2]


def test_infinite_keys_come_last():
    keys = [math.inf, 4, math.inf, 0]
    queue = make_queue(keys)

    order = drain(queue)
    assert order[:2] == [3, 1]
    assert set(order[2:]) == {0, 2}


def test_decrease_from_infinite():
    keys = [math.inf] * 6
    queue = make_queue(keys)

    keys[4] = 2
    queue.decrease_key(4)
    keys[1] = 1
    queue.decrease_key(1)

    assert queue.extract_min() == 1
    assert queue.extract_min() == 4


def test_membership_tracks_extraction():
    keys = [2, 1]
    queue = make_queue(keys)

    assert 1 in queue
    assert queue.extract_min() == 1
    assert 1 not in queue
    assert 0 in queue
    assert "0" not in queue


def test_duplicate_insert_rejected():
    queue = IndexedPriorityQueue(2, lambda i: i)
    queue.insert(0)

    with pytest.raises(ValueError):
        queue.insert(0)


def test_insert_out_of_range_rejected():
    queue = IndexedPriorityQueue(2, lambda i: i)

    with pytest.raises(IndexError):
        queue.insert(2)


def test_decrease_key_on_absent_index():
    queue = IndexedPriorityQueue(2, lambda i: i)
    queue.insert(0)

    with pytest.raises(KeyError):
        queue.decrease_key(1)


def test_many_updates_keep_heap_order():
    keys = [(i * 37) % 101 for i in range(60)]
    queue = make_queue(keys)
    for index in range(0, 60, 3):
        keys[index] -= 50
        queue.decrease_key(index)

    order = drain(queue)
    assert sorted(order) == list(range(60))
    assert [keys[i] for i in order] == sorted(keys)
