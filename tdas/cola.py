"""A first-in, first-out queue built on linked nodes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

from tdas.errors import EmptyQueueError

T = TypeVar("T")


@dataclass
class _Node(Generic[T]):
    value: T
    next: Optional[_Node[T]] = None


class Queue(Generic[T]):
    """A queue of items served in arrival order."""

    def __init__(self) -> None:
        self._head: Optional[_Node[T]] = None
        self._tail: Optional[_Node[T]] = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        """Return True when no items are queued."""
        return self._head is None

    def enqueue(self, item: T) -> None:
        """Add an item at the end of the queue."""
        node = _Node(item)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def _front(self) -> _Node[T]:
        if self._head is None:
            raise EmptyQueueError()
        return self._head

    def peek(self) -> T:
        """Return the first item without removing it."""
        return self._front().value

    def dequeue(self) -> T:
        """Remove and return the first item."""
        node = self._front()
        self._head = node.next
        if self._head is None:
            self._tail = None
        self._size -= 1
        return node.value