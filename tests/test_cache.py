"""
Tests for the cache backends and the read-through cache.
"""

import json
from datetime import datetime, timedelta, timezone

import pytest
from redis.exceptions import ConnectionError as RedisConnectionError

from telemedicine_client.adapters.cache import InMemoryCacheBackend, RedisCacheBackend
from telemedicine_client.adapters.cache import memory_cache
from telemedicine_client.application.cache.read_through_cache import ReadThroughCache
from telemedicine_client.core.exceptions import CacheError


class FakeRedis:
    """Minimal redis client double recording expirations."""

    def __init__(self):
        self.data = {}
        self.expirations = {}
        self.fail = False

    def _check(self):
        if self.fail:
            raise RedisConnectionError("down")

    def get(self, key):
        self._check()
        return self.data.get(key)

    def set(self, key, value, ex=None):
        self._check()
        self.data[key] = value
        self.expirations[key] = ex

    def delete(self, key):
        self._check()
        self.data.pop(key, None)


class Clock:
    def __init__(self, now=1000.0):
        self.now = now

    def __call__(self):
        return self.now


@pytest.fixture
def clock(monkeypatch):
    clock = Clock()
    monkeypatch.setattr(memory_cache.time, "monotonic", clock)
    return clock


# -----------------------------------------------------------------------------
# In-memory backend
# -----------------------------------------------------------------------------


def test_memory_backend_expires_entries(clock):
    backend = InMemoryCacheBackend()
    backend.put("k", [1, 2], ttl_seconds=10)

    clock.now += 9
    assert backend.get("k") == [1, 2]

    clock.now += 1
    assert backend.get("k") is None
    assert len(backend) == 0


def test_memory_backend_without_ttl_keeps_entries(clock):
    backend = InMemoryCacheBackend()
    backend.put("k", "v")

    clock.now += 10**6
    assert backend.get("k") == "v"


def test_memory_backend_returns_copies():
    backend = InMemoryCacheBackend()
    value = {"items": [1]}
    backend.put("k", value)

    value["items"].append(2)
    backend.get("k")["items"].append(3)

    assert backend.get("k") == {"items": [1]}


def test_memory_backend_forget_and_clear():
    backend = InMemoryCacheBackend()
    backend.put("a", 1)
    backend.put("b", 2)

    backend.forget("a")
    assert backend.get("a") is None

    backend.clear()
    assert len(backend) == 0


# -----------------------------------------------------------------------------
# Redis backend
# -----------------------------------------------------------------------------


def test_redis_backend_stores_json_under_prefix():
    client = FakeRedis()
    backend = RedisCacheBackend(prefix="tm:", client=client)

    backend.put("k", {"a": [1, 2]}, ttl_seconds=30)

    assert json.loads(client.data["tm:k"]) == {"a": [1, 2]}
    assert client.expirations["tm:k"] == 30
    assert backend.get("k") == {"a": [1, 2]}


def test_redis_backend_without_ttl_sets_no_expiry():
    client = FakeRedis()
    backend = RedisCacheBackend(client=client)

    backend.put("k", 1)

    assert client.expirations["telemedicine:k"] is None


def test_redis_backend_decodes_bytes_and_drops_garbage():
    client = FakeRedis()
    backend = RedisCacheBackend(prefix="", client=client)
    client.data["ok"] = b'{"x": 1}'
    client.data["bad"] = "not json"

    assert backend.get("ok") == {"x": 1}
    assert backend.get("bad") is None
    assert "bad" not in client.data


def test_redis_backend_wraps_client_errors():
    client = FakeRedis()
    client.fail = True
    backend = RedisCacheBackend(client=client)

    with pytest.raises(CacheError):
        backend.get("k")
    with pytest.raises(CacheError):
        backend.put("k", 1)
    with pytest.raises(CacheError):
        backend.forget("k")


# -----------------------------------------------------------------------------
# Read-through cache
# -----------------------------------------------------------------------------


class CountingProducer:
    def __init__(self, value):
        self.value = value
        self.calls = 0

    def __call__(self):
        self.calls += 1
        return self.value


def test_fingerprint_ignores_key_order():
    first = ReadThroughCache.fingerprint("ns", {"a": 1, "b": "x"})
    second = ReadThroughCache.fingerprint("ns", {"b": "x", "a": 1})

    assert first == second
    assert first.startswith("ns:")
    assert first != ReadThroughCache.fingerprint("ns", {"a": 1, "b": "X"})
    assert first != ReadThroughCache.fingerprint("other", {"a": 1, "b": "x"})


def test_second_call_is_served_from_cache():
    cache = ReadThroughCache(InMemoryCacheBackend(), default_ttl_seconds=60)
    producer = CountingProducer([{"id": 1}])

    assert cache.fetch_or_compute("k", producer) == [{"id": 1}]
    assert cache.fetch_or_compute("k", producer) == [{"id": 1}]
    assert producer.calls == 1


def test_without_cache_always_calls_producer():
    backend = InMemoryCacheBackend()
    cache = ReadThroughCache(backend).without_cache()
    producer = CountingProducer("v")

    cache.fetch_or_compute("k", producer)
    cache.fetch_or_compute("k", producer)

    assert producer.calls == 2
    assert len(backend) == 0


def test_disabled_without_backend():
    cache = ReadThroughCache(None)
    producer = CountingProducer("v")

    assert not cache.enabled
    assert cache.cache_until(datetime.now(timezone.utc) + timedelta(hours=1)) is cache
    assert not cache.enabled

    cache.fetch_or_compute("k", producer)
    assert producer.calls == 1


def test_cache_until_enables_and_sets_ttl():
    client = FakeRedis()
    cache = ReadThroughCache(RedisCacheBackend(prefix="", client=client), enabled=False)

    cache.cache_until(datetime.now(timezone.utc) + timedelta(minutes=10))
    cache.fetch_or_compute("k", CountingProducer(1))

    assert cache.enabled
    assert 0 < client.expirations["k"] <= 600


def test_cache_until_in_the_past_stores_nothing():
    backend = InMemoryCacheBackend()
    cache = ReadThroughCache(backend)
    cache.cache_until(datetime.now(timezone.utc) - timedelta(minutes=1))

    assert cache.fetch_or_compute("k", CountingProducer(1)) == 1
    assert len(backend) == 0


def test_zero_default_ttl_means_no_expiry():
    client = FakeRedis()
    cache = ReadThroughCache(RedisCacheBackend(prefix="", client=client), default_ttl_seconds=0)

    cache.fetch_or_compute("k", CountingProducer(1))

    assert client.expirations["k"] is None
