"""Cache port - Injectable caching abstraction.

The route planner caches the built network graph between queries. The
cache is read-only once filled and is invalidated whenever the network
data is reloaded.
"""

from __future__ import annotations

from typing import Callable, Optional, Protocol, TypeVar

T = TypeVar("T")


class CachePort(Protocol[T]):
    """Port for caching.

    Implementations:
    - adapters/cache/memory_cache.py (InMemoryCache) - Production
    - adapters/cache/null_cache.py (NullCache) - Testing, or caching disabled
    """

    def get(self, key: str) -> Optional[T]:
        """Return the cached value, or None if missing."""
        ...

    def set(self, key: str, value: T) -> None:
        """Store a value under ``key``."""
        ...

    def get_or_compute(self, key: str, compute_fn: Callable[[], T]) -> T:
        """Return the cached value, computing and storing it on a miss.

        Args:
            key: The cache key.
            compute_fn: Function to compute the value if not cached.

        Returns:
            The cached or computed value.
        """
        ...

    def invalidate(self, key: str) -> bool:
        """Drop one entry; return True if it existed."""
        ...

    def clear(self) -> int:
        """Drop every entry and return how many there were."""
        ...
