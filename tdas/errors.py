"""Exceptions raised by the abstract data types."""

from __future__ import annotations


class _DefaultMessage(Exception):
    """Mixin that gives an exception a default message and a plain str()."""

    default_message = ""

    def __init__(self, message: str | None = None) -> None:
        self.message = self.default_message if message is None else message
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


class EmptyStackError(_DefaultMessage, IndexError):
    """Raised when reading from or popping an empty stack."""

    default_message = "La pila esta vacia"


class EmptyQueueError(_DefaultMessage, IndexError):
    """Raised when reading from or dequeuing an empty queue."""

    default_message = "La cola esta vacia"


class EmptyListError(_DefaultMessage, IndexError):
    """Raised when reading from or removing from an empty list."""

    default_message = "La lista esta vacia"


class KeyNotFoundError(_DefaultMessage, KeyError):
    """Raised when a key is not present in a dictionary."""

    default_message = "La clave no pertenece al diccionario"


class IteratorExhaustedError(_DefaultMessage, LookupError):
    """Raised when an external iterator is used after it has finished."""

    default_message = "El iterador termino de iterar"