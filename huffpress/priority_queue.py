"""Binary heap ordered by a caller-supplied "ranks higher" predicate."""

from __future__ import annotations

from collections.abc import Callable
from typing import Generic, TypeVar

T = TypeVar("T")


class PriorityQueue(Generic[T]):
    """Max-heap in which ``higher(a, b)`` decides whether ``a`` outranks ``b``.

    The element that outranks all others sits at the top. Ties are resolved
    purely by the heap's sift order, so equal elements come out in a
    deterministic, insertion-dependent order.
    """

    def __init__(self, higher: Callable[[T, T], bool]) -> None:
        self._higher = higher
        self._heap: list[T] = []

    def __len__(self) -> int:
        return len(self._heap)

    def push(self, item: T) -> None:
        """Add ``item`` and restore the heap order."""
        self._heap.append(item)
        self._move_up(len(self._heap) - 1)

    def top(self) -> T:
        """Return the highest-ranked element without removing it."""
        if not self._heap:
            raise IndexError("top of an empty priority queue")
        return self._heap[0]

    def pop(self) -> T:
        """Remove and return the highest-ranked element."""
        heap = self._heap
        if not heap:
            raise IndexError("pop from an empty priority queue")
        heap[0], heap[-1] = heap[-1], heap[0]
        item = heap.pop()
        self._move_down(0)
        return item

    def _move_up(self, pos: int) -> None:
        heap = self._heap
        while pos > 0:
            parent = (pos - 1) // 2
            if not self._higher(heap[pos], heap[parent]):
                break
            heap[pos], heap[parent] = heap[parent], heap[pos]
            pos = parent

    def _move_down(self, pos: int) -> None:
        heap = self._heap
        size = len(heap)
        while 2 * pos + 1 < size:
            child = 2 * pos + 1
            if child + 1 < size and self._higher(heap[child + 1], heap[child]):
                child += 1
            if self._higher(heap[pos], heap[child]):
                return
            heap[pos], heap[child] = heap[child], heap[pos]
            pos = child