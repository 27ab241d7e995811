"""A lock-protected list container and a linear search helper."""

from __future__ import annotations

import threading
from collections.abc import Callable, Iterable, Iterator, Sequence
from typing import Any, Generic, TypeVar

T = TypeVar("T")


def search(items: Iterable[Any], key: Any) -> int:
    """Return the index of the first element equal to ``key``, or -1."""
    for position, item in enumerate(items):
        if item == key:
            return position
    return -1


class Array(Generic[T]):
    """A list that may be shared between threads; every operation holds a lock."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._items: list[T] = list(items)
        self._lock = threading.RLock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self.list())

    def __repr__(self) -> str:
        return f"Array({self.list()!r})"

    def append(self, value: T) -> None:
        """Add ``value`` at the end."""
        with self._lock:
            self._items.append(value)

    def list(self) -> list[T]:
        """Return a snapshot of the elements."""
        with self._lock:
            return list(self._items)

    def insert(self, index: int, value: T) -> None:
        """Insert ``value`` before position ``index`` (0..len inclusive)."""
        with self._lock:
            if index < 0 or index > len(self._items):
                raise IndexError(f"invalid Insert index {index}")
            self._items.insert(index, value)

    def delete(self, index: int) -> T:
        """Remove and return the element at ``index``."""
        with self._lock:
            if index < 0 or index >= len(self._items):
                raise IndexError(f"invalid Delete index {index}")
            return self._items.pop(index)

    def set(self, index: int, value: T) -> bool:
        """Replace the element at ``index``; return False if the index is out of range."""
        with self._lock:
            if index < 0 or index >= len(self._items):
                return False
            self._items[index] = value
            return True

    def get(self, index: int) -> T:
        """Return the element at ``index``."""
        with self._lock:
            if index < 0 or index >= len(self._items):
                raise IndexError(f"invalid Get index {index}")
            return self._items[index]

    def search(self, value: T) -> int:
        """Return the index of the first element equal to ``value``, or -1."""
        with self._lock:
            return search(self._items, value)

    def clear(self) -> None:
        """Remove every element."""
        with self._lock:
            self._items = []

    def lock_func(self, f: Callable[[Sequence[T]], Any]) -> Array[T]:
        """Call ``f`` with the underlying list while holding the lock."""
        with self._lock:
            f(self._items)
        return self