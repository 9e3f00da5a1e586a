"""Tests for the cache adapters."""

from metro_planner.adapters.cache import InMemoryCache, NullCache


class TestInMemoryCache:
    """Test suite for InMemoryCache."""

    def test_get_or_compute_computes_once(self):
        cache = InMemoryCache(name="test")
        calls = []

        def compute():
            calls.append(1)
            return "graph"

        assert cache.get_or_compute("key", compute) == "graph"
        assert cache.get_or_compute("key", compute) == "graph"
        assert len(calls) == 1
        assert cache.get("key") == "graph"

    def test_invalidate_forces_recompute(self):
        cache = InMemoryCache()
        cache.set("key", 1)

        assert cache.invalidate("key") is True
        assert cache.invalidate("key") is False
        assert cache.get("key") is None
        assert cache.get_or_compute("key", lambda: 2) == 2

    def test_clear_reports_dropped_entries(self):
        cache = InMemoryCache()
        cache.set("a", 1)
        cache.set("b", 2)

        assert cache.clear() == 2
        assert cache.get("a") is None
        assert cache.clear() == 0


class TestNullCache:
    def test_always_recomputes(self):
        cache = NullCache()
        calls = []

        cache.get_or_compute("key", lambda: calls.append(1))
        cache.get_or_compute("key", lambda: calls.append(1))

        assert len(calls) == 2
        assert cache.get("key") is None
        assert cache.invalidate("key") is False
        assert cache.clear() == 0
