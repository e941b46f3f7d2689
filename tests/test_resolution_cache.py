"""Tests for resolution_cache module."""

import pytest

from videolinks.resolution_cache import ResolutionCache


class FakeClock:
    """Manually advanced clock."""

    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def cache(clock):
    return ResolutionCache(ttl_seconds=60, clock=clock)


def test_get_before_and_after_expiry(cache, clock):
    cache.set("a", 1)
    assert cache.get("a") == 1
    clock.advance(59)
    assert cache.get("a") == 1
    clock.advance(1)
    assert cache.get("a") is None
    assert len(cache) == 0


def test_get_or_resolve_calls_once(cache, clock):
    calls = []

    def resolve():
        calls.append(1)
        return "value"

    assert cache.get_or_resolve("k", resolve) == ("value", False)
    assert cache.get_or_resolve("k", resolve) == ("value", True)
    assert len(calls) == 1

    clock.advance(61)
    assert cache.get_or_resolve("k", resolve) == ("value", False)
    assert len(calls) == 2


def test_invalidate_one_and_all(cache):
    cache.set("a", 1)
    cache.set("b", 2)
    assert cache.invalidate("a") == 1
    assert cache.invalidate("a") == 0
    assert cache.get("b") == 2
    assert cache.invalidate() == 1
    assert len(cache) == 0


def test_purge_expired(cache, clock):
    cache.set("old", 1)
    clock.advance(30)
    cache.set("new", 2)
    clock.advance(31)
    assert cache.purge_expired() == 1
    assert cache.get("new") == 2


def test_instances_are_independent(clock):
    first = ResolutionCache(ttl_seconds=10, clock=clock)
    second = ResolutionCache(ttl_seconds=10, clock=clock)
    first.set("k", 1)
    assert second.get("k") is None


def test_rejects_non_positive_ttl():
    with pytest.raises(ValueError):
        ResolutionCache(ttl_seconds=0)


def test_unread_expired_keys_do_not_accumulate(clock):
    cache = ResolutionCache(ttl_seconds=1, clock=clock)
    for i in range(1000):
        clock.advance(10)
        cache.get_or_resolve(f"link-{i}", lambda: "value")
    assert len(cache) <= 1


def test_sweep_keeps_live_entries(cache, clock):
    cache.set("old", 1)
    clock.advance(40)
    cache.set("recent", 2)
    clock.advance(30)
    cache.set("newest", 3)
    assert len(cache) == 2
    assert cache.get("recent") == 2
    assert cache.get("newest") == 3


def test_max_entries_evicts_oldest(clock):
    cache = ResolutionCache(ttl_seconds=60, clock=clock, max_entries=2)
    cache.set("a", 1)
    cache.set("b", 2)
    cache.set("a", 10)
    cache.set("c", 3)
    assert len(cache) == 2
    assert cache.get("b") is None
    assert cache.get("a") == 10
    assert cache.get("c") == 3


def test_rejects_non_positive_max_entries():
    with pytest.raises(ValueError):
        ResolutionCache(ttl_seconds=10, max_entries=0)
