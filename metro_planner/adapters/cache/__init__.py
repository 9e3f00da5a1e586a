"""Cache adapters - Implementations of the CachePort.

- InMemoryCache: lock-guarded store for the built graph
- NullCache: no-op cache (always misses)
"""

from .memory_cache import InMemoryCache
from .null_cache import NullCache

__all__ = ["InMemoryCache", "NullCache"]
