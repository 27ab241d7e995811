"""A lock-protected dictionary container."""

from __future__ import annotations

import threading
from collections.abc import Callable, Hashable, Iterable
from typing import Any, Generic, TypeVar

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class SafeMap(Generic[K, V]):
    """A dictionary that may be shared between threads."""

    def __init__(self, items: Iterable[tuple[K, V]] | dict[K, V] = ()) -> None:
        self._data: dict[K, V] = dict(items)
        self._lock = threading.RLock()

    def __len__(self) -> int:
        return self.count()

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._data

    def __repr__(self) -> str:
        with self._lock:
            return f"SafeMap({self._data!r})"

    def set(self, key: K, value: V) -> None:
        """Store ``value`` under ``key``."""
        with self._lock:
            self._data[key] = value

    def get(self, key: K, default: V | None = None) -> V | None:
        """Return the value for ``key``, or ``default`` if it is absent."""
        with self._lock:
            return self._data.get(key, default)

    def get_or_set(self, key: K, value: V) -> V:
        """Return the stored value, storing ``value`` first if the key is absent."""
        with self._lock:
            return self._data.setdefault(key, value)

    def count(self) -> int:
        """Return the number of entries."""
        with self._lock:
            return len(self._data)

    def delete(self, key: K) -> bool:
        """Remove ``key`` if present; return True once it is gone."""
        with self._lock:
            self._data.pop(key, None)
            return key not in self._data

    def lock_func(self, f: Callable[[dict[K, V]], Any]) -> SafeMap[K, V]:
        """Call ``f`` with the underlying dict while holding the lock."""
        with self._lock:
            f(self._data)
        return self