"""Tests for MemoryCacheStore (TTL expiry driven by an injected clock)."""

from viewcache.infrastructure.cache.memory_cache import MemoryCacheStore


class FakeClock:
    def __init__(self) -> None:
        self.now = 1000.0

    def __call__(self) -> float:
        return self.now


def test_set_get_exists() -> None:
    store = MemoryCacheStore()
    assert not store.exists("k")
    assert store.get("k") is None
    store.set("k", "v", 60)
    assert store.exists("k")
    assert store.get("k") == "v"


def test_entry_expires_after_ttl() -> None:
    clock = FakeClock()
    store = MemoryCacheStore(clock=clock)
    store.set("k", "v", 10)
    clock.now += 9.5
    assert store.get("k") == "v"
    clock.now += 0.5
    assert not store.exists("k")
    assert store.get("k") is None
    assert len(store) == 0


def test_zero_ttl_stores_nothing() -> None:
    """ttl <= 0 means never cache: no entry, not a permanent one."""
    clock = FakeClock()
    store = MemoryCacheStore(clock=clock)
    store.set("k", "v", 0)
    store.set("n", "v", -5)
    assert not store.exists("k")
    assert not store.exists("n")
    clock.now += 10**9
    assert store.get("k") is None
    assert len(store) == 0


def test_set_overwrites_last_write_wins() -> None:
    store = MemoryCacheStore()
    store.set("k", "first", 60)
    store.set("k", "second", 60)
    assert store.get("k") == "second"


def test_delete_and_clear() -> None:
    store = MemoryCacheStore()
    store.set("a", "1", 60)
    store.set("b", "2", 60)
    store.delete("a")
    store.delete("missing")
    assert store.get("a") is None
    store.clear()
    assert len(store) == 0
