"""Small LRU cache for resolved timezone rules."""

from __future__ import annotations

from collections import OrderedDict
from collections.abc import Callable
from threading import Lock
from typing import Generic, TypeVar

K = TypeVar("K")
V = TypeVar("V")


class LRUCache(Generic[K, V]):
    """A minimal thread-safe LRU cache."""

    def __init__(self, capacity: int = 64) -> None:
        """Initialize cache with positive capacity."""
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self._items: OrderedDict[K, V] = OrderedDict()
        self._lock = Lock()

    def __len__(self) -> int:
        return len(self._items)

    def get(self, key: K, factory: Callable[[], V]) -> V:
        """Get cached value or create/store via `factory`.

        Exceptions raised by `factory` propagate and nothing is stored.
        """
        with self._lock:
            if key in self._items:
                self._items.move_to_end(key)
                return self._items[key]

        value = factory()
        with self._lock:
            self._items[key] = value
            self._items.move_to_end(key)
            if len(self._items) > self.capacity:
                self._items.popitem(last=False)
        return value
