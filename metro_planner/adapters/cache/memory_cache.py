"""In-memory cache holding the built network graph between queries."""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from typing import Callable, Dict, Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass
class InMemoryCache(Generic[T]):
    """Lock-guarded key/value store; entries live until invalidated.

    Example:
        cache = InMemoryCache[NetworkGraph](name="graph")
        graph = cache.get_or_compute("network-graph", build)
    """

    name: str = "cache"

    _entries: Dict[str, T] = field(default_factory=dict, repr=False)
    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(f"{__name__}.{self.name}")

    def get(self, key: str) -> Optional[T]:
        with self._lock:
            return self._entries.get(key)

    def set(self, key: str, value: T) -> None:
        with self._lock:
            self._entries[key] = value

    def get_or_compute(self, key: str, compute_fn: Callable[[], T]) -> T:
        with self._lock:
            if key in self._entries:
                return self._entries[key]
            self._logger.debug("Building cached value", extra={"key": key})
            value = compute_fn()
            self._entries[key] = value
            return value

    def invalidate(self, key: str) -> bool:
        with self._lock:
            found = self._entries.pop(key, None) is not None
        if found:
            self._logger.debug("Cache entry invalidated", extra={"key": key})
        return found

    def clear(self) -> int:
        with self._lock:
            count = len(self._entries)
            self._entries.clear()
        self._logger.info("Cache cleared", extra={"entries_cleared": count})
        return count
