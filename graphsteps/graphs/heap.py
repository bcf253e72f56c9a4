"""
Indexed binary min-heap with decrease-key.

Keys are node indices in 0..capacity-1. Alongside the heap array the queue
keeps a position array mapping each key to its current heap slot (-1 when
the key is absent), so decrease_key can locate a key in O(1) and sift it
up in O(log n) instead of re-inserting it.

Ties are broken by insertion order: every key carries the sequence number
of its insert call, and entries compare as (priority, sequence).

References:
    - Sedgewick, Wayne. "Algorithms", 4th ed. Section 2.4 (IndexMinPQ).
"""

from typing import List, Tuple

from graphsteps.diagnostics.debug_mode import is_debug_enabled
from graphsteps.errors import (
    DuplicateKeyError,
    EmptyQueueError,
    HeapError,
    PriorityIncreaseError,
    UnknownKeyError,
)


class IndexedMinHeap:
    """
    Min-priority queue over integer keys supporting decrease_key.

    Complexity:
        - insert: O(log n)
        - extract_min: O(log n)
        - decrease_key: O(log n)
        - is_empty, __contains__, priority: O(1)

    Example:
        >>> pq = IndexedMinHeap(3)
        >>> pq.insert(0, 5.0)
        >>> pq.insert(1, 2.0)
        >>> pq.decrease_key(0, 1.0)
        >>> pq.extract_min()
        (0, 1.0)
    """

    def __init__(self, capacity: int):
        """
        Create an empty heap for keys 0..capacity-1.

        Args:
            capacity: Number of distinct keys the heap can hold.
        """
        if capacity < 0:
            raise ValueError(f"capacity must be >= 0, got {capacity}.")
        self._heap: List[int] = []
        self._position: List[int] = [-1] * capacity
        self._priority: List[float] = [0.0] * capacity
        self._sequence: List[int] = [0] * capacity
        self._inserted = 0

    def __len__(self) -> int:
        return len(self._heap)

    def __contains__(self, key: object) -> bool:
        return (
            isinstance(key, int)
            and 0 <= key < len(self._position)
            and self._position[key] != -1
        )

    def is_empty(self) -> bool:
        return not self._heap

    def priority(self, key: int) -> float:
        """Current priority of a key still in the heap."""
        self._require(key)
        return self._priority[key]

    def insert(self, key: int, priority: float) -> None:
        """
        Add a key that is not yet present.

        Raises:
            DuplicateKeyError: If key is already in the heap.
            UnknownKeyError: If key is outside 0..capacity-1.
        """
        if not 0 <= key < len(self._position):
            raise UnknownKeyError(
                f"Key {key} outside heap capacity {len(self._position)}"
            )
        if self._position[key] != -1:
            raise DuplicateKeyError(f"Key {key} already in heap")

        self._priority[key] = priority
        self._sequence[key] = self._inserted
        self._inserted += 1

        self._heap.append(key)
        self._position[key] = len(self._heap) - 1
        self._sift_up(len(self._heap) - 1)
        self._validate()

    def extract_min(self) -> Tuple[int, float]:
        """
        Remove and return the (key, priority) entry with the lowest priority.

        Raises:
            EmptyQueueError: If the heap is empty.
        """
        if not self._heap:
            raise EmptyQueueError("extract_min on empty heap")

        top = self._heap[0]
        last = self._heap.pop()
        if self._heap:
            self._heap[0] = last
            self._position[last] = 0
            self._sift_down(0)
        self._position[top] = -1
        self._validate()
        return top, self._priority[top]

    def decrease_key(self, key: int, new_priority: float) -> None:
        """
        Lower the priority of a key already in the heap.

        Raises:
            UnknownKeyError: If key is not in the heap.
            PriorityIncreaseError: If new_priority is not strictly lower
                than the current priority.
        """
        self._require(key)
        current = self._priority[key]
        if not new_priority < current:
            raise PriorityIncreaseError(
                f"decrease_key({key}) to {new_priority} does not lower "
                f"current priority {current}"
            )
        self._priority[key] = new_priority
        self._sift_up(self._position[key])
        self._validate()

    def _require(self, key: int) -> None:
        if key not in self:
            raise UnknownKeyError(f"Key {key} not in heap")

    def _less(self, a: int, b: int) -> bool:
        return (self._priority[a], self._sequence[a]) < (self._priority[b], self._sequence[b])

    def _swap(self, i: int, j: int) -> None:
        heap = self._heap
        heap[i], heap[j] = heap[j], heap[i]
        self._position[heap[i]] = i
        self._position[heap[j]] = j

    def _sift_up(self, i: int) -> None:
        while i > 0:
            parent = (i - 1) // 2
            if not self._less(self._heap[i], self._heap[parent]):
                break
            self._swap(i, parent)
            i = parent

    def _sift_down(self, i: int) -> None:
        n = len(self._heap)
        while True:
            smallest = i
            for child in (2 * i + 1, 2 * i + 2):
                if child < n and self._less(self._heap[child], self._heap[smallest]):
                    smallest = child
            if smallest == i:
                return
            self._swap(i, smallest)
            i = smallest

    def _validate(self) -> None:
        """Check heap order and position bookkeeping (debug mode only)."""
        if not is_debug_enabled():
            return
        for slot, key in enumerate(self._heap):
            if self._position[key] != slot:
                raise HeapError(f"Position of key {key} is {self._position[key]}, expected {slot}")
            if slot > 0 and self._less(key, self._heap[(slot - 1) // 2]):
                raise HeapError(f"Heap order violated at slot {slot}")
        present = sum(1 for pos in self._position if pos != -1)
        if present != len(self._heap):
            raise HeapError(f"{present} keys marked present, heap holds {len(self._heap)}")
