"""A dictionary backed by a closed-addressing hash table."""

from __future__ import annotations

import enum
import struct
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Any, Generic, Optional, TypeVar

from tdas.errors import IteratorExhaustedError, KeyNotFoundError

K = TypeVar("K")
V = TypeVar("V")

_INITIAL_SIZE = 10
_RESIZE_FACTOR = 2
_SHRINK_LOAD = 0.2
_GROW_LOAD = 0.7

_MASK64 = (1 << 64) - 1
_PRIME1 = 11400714785074694791
_PRIME2 = 14029467366897019727
_PRIME3 = 1609587929392839161
_PRIME4 = 9650029242287828579
_PRIME5 = 2870177450012600261


def _rotl(value: int, bits: int) -> int:
    return ((value << bits) | (value >> (64 - bits))) & _MASK64


def hash_bytes(data: bytes) -> int:
    """Return a 63-bit xxhash64-style digest of ``data``."""
    length = len(data)
    h = 0
    i = 0
    while i <= length - 32:
        v1, v2, v3, v4 = struct.unpack_from("<4Q", data, i)
        h = (h + v1 * _PRIME2) & _MASK64
        h = (_rotl(h, 31) * _PRIME1 + h * _PRIME4 + v2 * _PRIME2) & _MASK64
        h = (_rotl(h, 27) * _PRIME1 + h * _PRIME4 + v3 * _PRIME2) & _MASK64
        h = (_rotl(h, 33) * _PRIME1 + h * _PRIME4 + v4 * _PRIME2) & _MASK64
        i += 32

    if i <= length - 16:
        v1, v2 = struct.unpack_from("<2Q", data, i)
        h = (h + v1 * _PRIME2) & _MASK64
        h = (_rotl(h, 31) * _PRIME1 + v2 * _PRIME2) & _MASK64
        i += 16

    if i <= length - 8:
        (v,) = struct.unpack_from("<Q", data, i)
        h ^= (_rotl((v * _PRIME2) & _MASK64, 37) * _PRIME1) & _MASK64
        h = (((h * _PRIME1 + _PRIME4) & _MASK64) * _PRIME2) & _MASK64
        i += 8

    if i <= length - 4:
        (v32,) = struct.unpack_from("<I", data, i)
        h ^= (v32 * _PRIME1) & _MASK64
        h = (h * _PRIME2 + _PRIME3) & _MASK64
        i += 4

    for byte in data[i:]:
        h ^= (byte * _PRIME5) & _MASK64
        h = (h * _PRIME2 + _PRIME1) & _MASK64

    h ^= length
    h ^= h >> 33
    h = (h * _PRIME2) & _MASK64
    h ^= h >> 29
    h = (h * _PRIME3) & _MASK64
    h ^= h >> 32
    return h & ((1 << 63) - 1)


class _State(enum.Enum):
    EMPTY = enum.auto()
    OCCUPIED = enum.auto()
    DELETED = enum.auto()


@dataclass
class _Cell:
    key: Any = None
    value: Any = None
    state: _State = _State.EMPTY


def _new_table(size: int) -> list[_Cell]:
    return [_Cell() for _ in range(size)]


class HashDictionary(Generic[K, V]):
    """A key/value dictionary using open addressing with linear probing."""

    def __init__(self) -> None:
        self._size = _INITIAL_SIZE
        self._count = 0
        self._deleted = 0
        self._table: list[_Cell] = _new_table(_INITIAL_SIZE)

    def put(self, key: K, value: V) -> None:
        """Store a value under a key, replacing any previous value."""
        if (self._count + self._deleted + 1) / self._size >= _GROW_LOAD:
            self._resize(self._size * _RESIZE_FACTOR)
        pos, found = self._find(key)
        cell = self._table[pos]
        cell.key, cell.value = key, value
        if not found:
            cell.state = _State.OCCUPIED
            self._count += 1

    def contains(self, key: K) -> bool:
        """Return True when the key is stored."""
        return self._find(key)[1]

    def get(self, key: K) -> V:
        """Return the value stored under a key."""
        pos, found = self._find(key)
        if not found:
            raise KeyNotFoundError()
        return self._table[pos].value

    def delete(self, key: K) -> V:
        """Remove a key and return the value it held."""
        new_size = self._size // _RESIZE_FACTOR
        if (self._count - 1) / self._size <= _SHRINK_LOAD and new_size > 0:
            self._resize(new_size)
        pos, found = self._find(key)
        if not found:
            raise KeyNotFoundError()
        cell = self._table[pos]
        cell.state = _State.DELETED
        self._deleted += 1
        self._count -= 1
        return cell.value

    def __len__(self) -> int:
        return self._count

    def __contains__(self, key: object) -> bool:
        return self.contains(key)  # type: ignore[arg-type]

    def __iter__(self) -> Iterator[tuple[K, V]]:
        """Yield (key, value) pairs in table order."""
        for cell in self._table:
            if cell.state is _State.OCCUPIED:
                yield cell.key, cell.value

    def iterate(self, visit: Callable[[K, V], bool]) -> None:
        """Call visit on each pair until it returns False."""
        for key, value in self:
            if not visit(key, value):
                break

    def iterator(self) -> HashIterator[K, V]:
        """Return an external iterator over the stored pairs."""
        return HashIterator(self)

    def _find(self, key: K) -> tuple[int, bool]:
        pos = hash_bytes(str(key).encode()) % self._size
        while True:
            cell = self._table[pos]
            if cell.state is _State.EMPTY:
                return pos, False
            if cell.state is _State.OCCUPIED and cell.key == key:
                return pos, True
            pos = (pos + 1) % self._size

    def _resize(self, new_size: int) -> None:
        old_table = self._table
        self._table = _new_table(new_size)
        self._size = new_size
        self._count = 0
        self._deleted = 0
        for cell in old_table:
            if cell.state is _State.OCCUPIED:
                self.put(cell.key, cell.value)


class HashIterator(Generic[K, V]):
    """An external iterator over a HashDictionary."""

    def __init__(self, owner: HashDictionary[K, V]) -> None:
        self._owner = owner
        self._pos = self._next_occupied(0)

    def _next_occupied(self, start: int) -> int:
        table = self._owner._table
        pos = start
        while pos < len(table) and table[pos].state is not _State.OCCUPIED:
            pos += 1
        return pos

    def has_next(self) -> bool:
        """Return True while the iterator points at a pair."""
        return self._pos != self._owner._size

    def current(self) -> tuple[K, V]:
        """Return the (key, value) pair at the current position."""
        if not self.has_next():
            raise IteratorExhaustedError()
        cell = self._owner._table[self._pos]
        return cell.key, cell.value

    def advance(self) -> None:
        """Move to the next stored pair."""
        if not self.has_next():
            raise IteratorExhaustedError()
        self._pos = self._next_occupied(self._pos + 1)


__all__: Optional[list[str]] = None
del __all__