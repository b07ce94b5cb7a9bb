"""Indexed binary min-heap with decrease-key.

The heap stores vertex indices only. Their ordering value is looked up
through a key function owned by the caller (typically reading the
distance list of a running search), so lowering a distance only needs a
``decrease_key`` call to restore the heap, never a copy of the value.
A position map from index to heap slot keeps that call logarithmic.
"""

from __future__ import annotations

from typing import Callable, List, Optional, Union

Key = Callable[[int], Union[int, float]]

_ABSENT = -1


class IndexedPriorityQueue:
    """Min-priority queue over the integer universe ``0..capacity - 1``."""

    def __init__(self, capacity: int, key: Key) -> None:
        if capacity < 0:
            raise ValueError(f"Capacity must be non-negative, got {capacity}")
        self.capacity = capacity
        self._key = key
        self._heap: List[int] = []
        self._position: List[int] = [_ABSENT] * capacity

    def __len__(self) -> int:
        return len(self._heap)

    def __contains__(self, index: object) -> bool:
        return (
            isinstance(index, int)
            and 0 <= index < self.capacity
            and self._position[index] != _ABSENT
        )

    def is_empty(self) -> bool:
        return not self._heap

    def insert(self, index: int) -> None:
        """Add ``index`` at the place its current key dictates."""
        if not 0 <= index < self.capacity:
            raise IndexError(f"Index {index} outside queue range 0..{self.capacity - 1}")
        if self._position[index] != _ABSENT:
            raise ValueError(f"Index {index} is already queued")

        self._heap.append(index)
        slot = len(self._heap) - 1
        self._position[index] = slot
        self._sift_up(slot)

    def decrease_key(self, index: int) -> None:
        """Restore heap order after the key of ``index`` was lowered."""
        if index not in self:
            raise KeyError(index)
        self._sift_up(self._position[index])

    def extract_min(self) -> Optional[int]:
        """Remove and return the index with the smallest key, None if empty."""
        heap = self._heap
        if not heap:
            return None

        top = heap[0]
        last = heap.pop()
        self._position[top] = _ABSENT
        if heap:
            heap[0] = last
            self._position[last] = 0
            self._sift_down(0)
        return top

    def peek(self) -> Optional[int]:
        return self._heap[0] if self._heap else None

    def _less(self, a: int, b: int) -> bool:
        return self._key(self._heap[a]) < self._key(self._heap[b])

    def _swap(self, a: int, b: int) -> None:
        heap = self._heap
        heap[a], heap[b] = heap[b], heap[a]
        self._position[heap[a]] = a
        self._position[heap[b]] = b

    def _sift_up(self, slot: int) -> None:
        while slot > 0:
            parent = (slot - 1) // 2
            if not self._less(slot, parent):
                break
            self._swap(slot, parent)
            slot = parent

    def _sift_down(self, slot: int) -> None:
        size = len(self._heap)
        while True:
            child = 2 * slot + 1
            if child >= size:
                break
            # pick the smaller child
            if child + 1 < size and self._less(child + 1, child):
                child += 1
            if not self._less(child, slot):
                break
            self._swap(slot, child)
            slot = child
