"""A last-in, first-out stack."""

from __future__ import annotations

from typing import Generic, TypeVar

from tdas.errors import EmptyStackError

T = TypeVar("T")


class Stack(Generic[T]):
    """A dynamic stack of items."""

    def __init__(self) -> None:
        self._items: list[T] = []

    def __len__(self) -> int:
        return len(self._items)

    def is_empty(self) -> bool:
        """Return True when no items are stacked."""
        return len(self) == 0

    def push(self, item: T) -> None:
        """Put an item on top of the stack."""
        self._items.append(item)

    def peek(self) -> T:
        """Return the top item without removing it."""
        try:
            return self._items[-1]
        except IndexError:
            raise EmptyStackError() from None

    def pop(self) -> T:
        """Remove and return the top item."""
        try:
            return self._items.pop()
        except IndexError:
            raise EmptyStackError() from None