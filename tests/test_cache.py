"""Tests for cache module."""

import pytest
from hypothesis import given, strategies as st

from pagecraft.core.cache import LRUCache


@pytest.mark.unit
def test_lru_basic():
    """Test basic cache operations."""
    cache = LRUCache[str](max_size=3)

    cache.set("tailwind:aa", "<html>a")
    cache.set("inline-styles:aa", "<html>b")

    assert cache.get("tailwind:aa") == "<html>a"
    assert cache.get("inline-styles:aa") == "<html>b"
    assert len(cache) == 2


@pytest.mark.unit
def test_lru_eviction():
    """Test LRU eviction on size limit."""
    cache = LRUCache[str](max_size=2)

    cache.set("a", "value_a")
    cache.set("b", "value_b")
    cache.set("c", "value_c")  # Should evict "a"

    assert cache.get("a") is None
    assert "b" in cache
    assert cache.stats.evictions == 1


@pytest.mark.unit
def test_lru_order():
    """Most recently used entry survives eviction."""
    cache = LRUCache[str](max_size=2)

    cache.set("a", "value_a")
    cache.set("b", "value_b")
    _ = cache.get("a")
    cache.set("c", "value_c")

    assert cache.get("a") == "value_a"
    assert cache.get("b") is None


@pytest.mark.unit
def test_stats():
    cache = LRUCache[str](max_size=2)
    cache.set("a", "x")
    cache.get("a")
    cache.get("missing")

    stats = cache.stats
    assert stats.hits == 1
    assert stats.misses == 1
    assert stats.hit_rate == 0.5
    assert stats.to_dict()["size"] == 1


@pytest.mark.unit
def test_clear():
    cache = LRUCache[str]()
    cache.set("a", "x")
    cache.clear()
    assert len(cache) == 0
    assert cache.stats.size == 0


@pytest.mark.unit
def test_invalid_size():
    with pytest.raises(ValueError):
        LRUCache(max_size=0)


@pytest.mark.property
@given(st.lists(st.text(max_size=5), max_size=50), st.integers(min_value=1, max_value=10))
def test_size_never_exceeds_max(keys, max_size):
    cache = LRUCache[str](max_size=max_size)
    for key in keys:
        cache.set(key, key)
    assert len(cache) <= max_size
