"""A singly linked list with an editing iterator."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Generic, Optional, TypeVar

from tdas.errors import EmptyListError, IteratorExhaustedError

T = TypeVar("T")


class _Node(Generic[T]):
    __slots__ = ("value", "next")

    def __init__(self, value: T, next_node: Optional[_Node[T]] = None) -> None:
        self.value = value
        self.next = next_node


class LinkedList(Generic[T]):
    """A singly linked list with access to both ends."""

    def __init__(self) -> None:
        self._first: Optional[_Node[T]] = None
        self._last: Optional[_Node[T]] = None
        self._length = 0

    def is_empty(self) -> bool:
        """Return True when the list holds no items."""
        return self._length == 0

    def insert_first(self, item: T) -> None:
        """Insert an item at the front."""
        node = _Node(item, self._first)
        if self.is_empty():
            self._last = node
        self._first = node
        self._length += 1

    def insert_last(self, item: T) -> None:
        """Insert an item at the back."""
        node = _Node(item)
        if self._last is None:
            self._first = node
        else:
            self._last.next = node
        self._last = node
        self._length += 1

    def remove_first(self) -> T:
        """Remove and return the first item."""
        if self._first is None:
            raise EmptyListError()
        node = self._first
        self._first = node.next
        self._length -= 1
        if self._first is None:
            self._last = None
        return node.value

    def peek_first(self) -> T:
        """Return the first item without removing it."""
        if self._first is None:
            raise EmptyListError()
        return self._first.value

    def peek_last(self) -> T:
        """Return the last item without removing it."""
        if self._last is None:
            raise EmptyListError()
        return self._last.value

    def __len__(self) -> int:
        return self._length

    def __iter__(self) -> Iterator[T]:
        node = self._first
        while node is not None:
            yield node.value
            node = node.next

    def iterate(self, visit: Callable[[T], bool]) -> None:
        """Call visit on each item in order until it returns False."""
        for item in self:
            if not visit(item):
                break

    def iterator(self) -> ListIterator[T]:
        """Return an iterator positioned at the first item."""
        return ListIterator(self)


class ListIterator(Generic[T]):
    """An external iterator that can insert and remove at its position."""

    def __init__(self, owner: LinkedList[T]) -> None:
        self._list = owner
        self._current: Optional[_Node[T]] = owner._first
        self._previous: Optional[_Node[T]] = None

    def has_next(self) -> bool:
        """Return True while the iterator points at an item."""
        return self._current is not None

    def current(self) -> T:
        """Return the item at the current position."""
        if self._current is None:
            raise IteratorExhaustedError()
        return self._current.value

    def advance(self) -> None:
        """Move to the next item."""
        if self._current is None:
            raise IteratorExhaustedError()
        self._previous = self._current
        self._current = self._current.next

    def insert(self, item: T) -> None:
        """Insert an item before the current position; it becomes current."""
        node = _Node(item, self._current)
        if self._previous is None:
            self._list._first = node
        else:
            self._previous.next = node
        self._current = node
        if node.next is None:
            self._list._last = node
        self._list._length += 1

    def remove(self) -> T:
        """Remove and return the current item; the next one becomes current."""
        node = self._current
        if node is None:
            raise IteratorExhaustedError()
        self._list._length -= 1
        if self._previous is None:
            self._list._first = node.next
        else:
            self._previous.next = node.next
        if node.next is None:
            self._list._last = self._previous
        self._current = node.next
        return node.value