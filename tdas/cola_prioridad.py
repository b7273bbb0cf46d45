"""A binary max-heap priority queue driven by a comparison function."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Generic, TypeVar

from tdas.errors import EmptyQueueError

T = TypeVar("T")

Comparator = Callable[[T, T], int]


def _sift_up(items: list[T], pos: int, cmp: Comparator) -> None:
    while pos > 0:
        parent = (pos - 1) // 2
        if cmp(items[pos], items[parent]) <= 0:
            return
        items[pos], items[parent] = items[parent], items[pos]
        pos = parent


def _sift_down(items: list[T], pos: int, count: int, cmp: Comparator) -> None:
    while True:
        largest = pos
        for child in (2 * pos + 1, 2 * pos + 2):
            if child < count and cmp(items[child], items[largest]) > 0:
                largest = child
        if largest == pos:
            return
        items[pos], items[largest] = items[largest], items[pos]
        pos = largest


def _heapify(items: list[T], cmp: Comparator) -> None:
    count = len(items)
    for pos in range(count // 2 - 1, -1, -1):
        _sift_down(items, pos, count, cmp)


class Heap(Generic[T]):
    """A priority queue that serves the item ranked highest by ``cmp``.

    ``cmp(a, b)`` returns a positive number when ``a`` has higher priority
    than ``b``, a negative number when lower and zero when equal.
    """

    def __init__(self, cmp: Comparator) -> None:
        self._cmp = cmp
        self._items: list[T] = []

    def is_empty(self) -> bool:
        """Return True when the queue holds no items."""
        return not self._items

    def enqueue(self, item: T) -> None:
        """Add an item to the queue."""
        self._items.append(item)
        _sift_up(self._items, len(self._items) - 1, self._cmp)

    def peek_max(self) -> T:
        """Return the highest-priority item without removing it."""
        if not self._items:
            raise EmptyQueueError()
        return self._items[0]

    def dequeue(self) -> T:
        """Remove and return the highest-priority item."""
        if not self._items:
            raise EmptyQueueError()
        top = self._items[0]
        last = self._items.pop()
        if self._items:
            self._items[0] = last
            _sift_down(self._items, 0, len(self._items), self._cmp)
        return top

    def __len__(self) -> int:
        return len(self._items)


def heap_from_list(items: Iterable[T], cmp: Comparator) -> Heap[T]:
    """Build a heap holding a copy of the given items."""
    heap: Heap[T] = Heap(cmp)
    heap._items = list(items)
    _heapify(heap._items, cmp)
    return heap


def heap_sort(items: list[T], cmp: Comparator) -> None:
    """Sort a list in place, in ascending order according to ``cmp``."""
    _heapify(items, cmp)
    for end in range(len(items) - 1, 0, -1):
        items[0], items[end] = items[end], items[0]
        _sift_down(items, 0, end, cmp)