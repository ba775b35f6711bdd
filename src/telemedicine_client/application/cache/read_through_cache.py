"""
Read-through cache for provider list/search calls.

Two racing calls with the same fingerprint may both miss and both run the
producer; the last write wins. Only idempotent calls are routed through
here, so that is acceptable.
"""

import logging
import math
from datetime import datetime, timezone
from typing import Any, Callable, Mapping, Optional, TypeVar

from ...core.utils.hashing import stable_hash
from ..ports.cache.cache_backend import CacheBackend

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ReadThroughCache:
    """Fetch-or-compute wrapper around a CacheBackend."""

    def __init__(
        self,
        backend: Optional[CacheBackend],
        default_ttl_seconds: Optional[int] = None,
        enabled: bool = True,
    ) -> None:
        self._backend = backend
        self._default_ttl_seconds = default_ttl_seconds
        self._expires_at: Optional[datetime] = None
        self._enabled = enabled and backend is not None

    @property
    def enabled(self) -> bool:
        return self._enabled

    @staticmethod
    def fingerprint(namespace: str, arguments: Mapping[str, Any]) -> str:
        """Stable key for ``namespace`` and its effective arguments."""
        return f"{namespace}:{stable_hash(arguments)}"

    def cache_until(self, moment: datetime) -> "ReadThroughCache":
        """Enable caching with entries expiring at ``moment``."""
        if self._backend is None:
            logger.warning("cache_until ignored: no cache backend configured")
            return self
        self._enabled = True
        self._expires_at = moment
        return self

    def without_cache(self) -> "ReadThroughCache":
        self._enabled = False
        return self

    def fetch_or_compute(self, key: str, producer: Callable[[], T]) -> T:
        """Cached value for ``key``, or the producer's result stored under it."""
        if not self._enabled:
            return producer()

        cached = self._backend.get(key)
        if cached is not None:
            logger.debug(f"Cache hit for {key}")
            return cached

        logger.debug(f"Cache miss for {key}")
        value = producer()

        ttl = self._ttl_seconds()
        if ttl is None or ttl > 0:
            self._backend.put(key, value, ttl)
        return value

    def _ttl_seconds(self) -> Optional[int]:
        if self._expires_at is None:
            return self._default_ttl_seconds or None

        expires_at = self._expires_at
        if expires_at.tzinfo is None:
            expires_at = expires_at.replace(tzinfo=timezone.utc)
        remaining = (expires_at - datetime.now(timezone.utc)).total_seconds()
        return max(0, math.ceil(remaining))
