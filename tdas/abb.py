"""An ordered dictionary backed by a binary search tree."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Generic, Optional, TypeVar

from tdas.errors import IteratorExhaustedError, KeyNotFoundError

K = TypeVar("K")
V = TypeVar("V")

Comparator = Callable[[K, K], int]


class _Node(Generic[K, V]):
    __slots__ = ("key", "value", "left", "right")

    def __init__(self, key: K, value: V) -> None:
        self.key = key
        self.value = value
        self.left: Optional[_Node[K, V]] = None
        self.right: Optional[_Node[K, V]] = None


class BinarySearchTree(Generic[K, V]):
    """A key/value dictionary kept in key order by a comparison function.

    ``cmp(a, b)`` returns a negative number when ``a`` sorts before ``b``,
    a positive number when after, and zero when the keys are equal.
    """

    def __init__(self, cmp: Comparator) -> None:
        self._cmp = cmp
        self._root: Optional[_Node[K, V]] = None
        self._count = 0

    def put(self, key: K, value: V) -> None:
        """Store a value under a key, replacing any previous value."""
        parent, node = self._find(key)
        if node is not None:
            node.value = value
            return
        new_node = _Node(key, value)
        if parent is None:
            self._root = new_node
        elif self._cmp(key, parent.key) > 0:
            parent.right = new_node
        else:
            parent.left = new_node
        self._count += 1

    def contains(self, key: K) -> bool:
        """Return True when the key is stored."""
        return self._find(key)[1] is not None

    def get(self, key: K) -> V:
        """Return the value stored under a key."""
        node = self._find(key)[1]
        if node is None:
            raise KeyNotFoundError()
        return node.value

    def delete(self, key: K) -> V:
        """Remove a key and return the value it held."""
        parent, node = self._find(key)
        if node is None:
            raise KeyNotFoundError()
        value = node.value
        if node.left is not None and node.right is not None:
            successor_parent = node
            successor = node.right
            while successor.left is not None:
                successor_parent = successor
                successor = successor.left
            node.key, node.value = successor.key, successor.value
            if successor_parent is node:
                node.right = successor.right
            else:
                successor_parent.left = successor.right
        else:
            child = node.left if node.left is not None else node.right
            if parent is None:
                self._root = child
            elif parent.left is node:
                parent.left = child
            else:
                parent.right = child
        self._count -= 1
        return value

    def __len__(self) -> int:
        return self._count

    def __contains__(self, key: object) -> bool:
        return self.contains(key)  # type: ignore[arg-type]

    def __iter__(self) -> Iterator[tuple[K, V]]:
        """Yield (key, value) pairs in ascending key order."""
        return self._walk(None, None)

    def iterate(self, visit: Callable[[K, V], bool]) -> None:
        """Call visit on each pair in key order until it returns False."""
        self.iterate_range(None, None, visit)

    def iterate_range(
        self,
        start: Optional[K],
        end: Optional[K],
        visit: Callable[[K, V], bool],
    ) -> None:
        """Call visit on pairs with start <= key <= end until it returns False.

        A bound of None leaves that side of the range open.
        """
        for key, value in self._walk(start, end):
            if not visit(key, value):
                break

    def iterator(self) -> TreeIterator[K, V]:
        """Return an external iterator over all pairs in key order."""
        return TreeIterator(self, None, None)

    def iterator_range(self, start: Optional[K], end: Optional[K]) -> TreeIterator[K, V]:
        """Return an external iterator over pairs with start <= key <= end."""
        return TreeIterator(self, start, end)

    def _find(self, key: K) -> tuple[Optional[_Node[K, V]], Optional[_Node[K, V]]]:
        parent: Optional[_Node[K, V]] = None
        node = self._root
        while node is not None:
            order = self._cmp(key, node.key)
            if order == 0:
                return parent, node
            parent = node
            node = node.right if order > 0 else node.left
        return parent, None

    def _in_range(self, key: K, start: Optional[K], end: Optional[K]) -> bool:
        return (start is None or self._cmp(key, start) >= 0) and (
            end is None or self._cmp(key, end) <= 0
        )

    def _push_leftmost(
        self,
        stack: list[_Node[K, V]],
        node: Optional[_Node[K, V]],
        start: Optional[K],
        end: Optional[K],
    ) -> None:
        while node is not None:
            if self._in_range(node.key, start, end):
                stack.append(node)
                node = node.left
            elif start is not None and self._cmp(node.key, start) < 0:
                node = node.right
            else:
                node = node.left

    def _walk(self, start: Optional[K], end: Optional[K]) -> Iterator[tuple[K, V]]:
        stack: list[_Node[K, V]] = []
        self._push_leftmost(stack, self._root, start, end)
        while stack:
            node = stack.pop()
            yield node.key, node.value
            self._push_leftmost(stack, node.right, start, end)


class TreeIterator(Generic[K, V]):
    """An external in-order iterator over a BinarySearchTree."""

    def __init__(
        self,
        tree: BinarySearchTree[K, V],
        start: Optional[K],
        end: Optional[K],
    ) -> None:
        self._tree = tree
        self._start = start
        self._end = end
        self._stack: list[_Node[K, V]] = []
        tree._push_leftmost(self._stack, tree._root, start, end)

    def has_next(self) -> bool:
        """Return True while the iterator points at a pair."""
        return bool(self._stack)

    def current(self) -> tuple[K, V]:
        """Return the (key, value) pair at the current position."""
        if not self._stack:
            raise IteratorExhaustedError()
        node = self._stack[-1]
        return node.key, node.value

    def advance(self) -> None:
        """Move to the next pair in key order."""
        if not self._stack:
            raise IteratorExhaustedError()
        node = self._stack.pop()
        self._tree._push_leftmost(self._stack, node.right, self._start, self._end)