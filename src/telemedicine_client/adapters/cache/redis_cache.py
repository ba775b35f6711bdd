"""
Redis cache backend.

Values are stored as JSON strings; expiry uses the native key TTL.
"""

import json
import logging
from typing import Any, Optional

import redis
from redis.exceptions import RedisError

from ...application.ports.cache.cache_backend import CacheBackend
from ...core.exceptions import CacheError

logger = logging.getLogger(__name__)


class RedisCacheBackend(CacheBackend):
    """Redis-backed cache storing JSON values under a key prefix."""

    def __init__(
        self,
        url: str = "redis://localhost:6379/0",
        prefix: str = "telemedicine:",
        client: Optional["redis.Redis"] = None,
    ) -> None:
        self.client = client or redis.Redis.from_url(url, decode_responses=True)
        self.prefix = prefix

    def _key(self, key: str) -> str:
        return f"{self.prefix}{key}"

    def get(self, key: str) -> Optional[Any]:
        rk = self._key(key)
        try:
            data = self.client.get(rk)
        except RedisError as e:
            raise CacheError(f"Failed to read cache key {rk}: {e}") from e

        if data is None:
            return None
        if isinstance(data, bytes):
            data = data.decode("utf-8")

        try:
            return json.loads(data)
        except json.JSONDecodeError:
            logger.warning(f"Discarding undecodable cache entry {rk}")
            self.forget(key)
            return None

    def put(self, key: str, value: Any, ttl_seconds: Optional[int] = None) -> None:
        rk = self._key(key)
        try:
            self.client.set(rk, json.dumps(value), ex=ttl_seconds or None)
        except RedisError as e:
            raise CacheError(f"Failed to write cache key {rk}: {e}") from e

    def forget(self, key: str) -> None:
        rk = self._key(key)
        try:
            self.client.delete(rk)
        except RedisError as e:
            raise CacheError(f"Failed to delete cache key {rk}: {e}") from e
