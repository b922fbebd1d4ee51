"""A generic LIFO stack backed by a Python list."""

from __future__ import annotations

from typing import Generic, TypeVar

T = TypeVar("T")


class EmptyStackError(IndexError):
    """Raised when reading from an empty stack."""

    def __init__(self, message: str = "pila vacía") -> None:
        super().__init__(message)


class Stack(Generic[T]):
    """Last-in, first-out collection."""

    def __init__(self) -> None:
        self._items: list[T] = []

    def push(self, item: T) -> None:
        """Place ``item`` on top of the stack."""
        self._items.append(item)

    def pop(self) -> T:
        """Remove and return the top item."""
        if not self._items:
            raise EmptyStackError()
        return self._items.pop()

    def top(self) -> T:
        """Return the top item without removing it."""
        if not self._items:
            raise EmptyStackError()
        return self._items[-1]

    def is_empty(self) -> bool:
        """Return True when the stack holds no items."""
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"Stack({self._items!r})"