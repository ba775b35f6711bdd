"""
In-process cache backend with per-entry expiry.
"""

import copy
import time
from typing import Any, Dict, Optional, Tuple

from ...application.ports.cache.cache_backend import CacheBackend


class InMemoryCacheBackend(CacheBackend):
    """Process-local cache; values are deep-copied in and out."""

    def __init__(self) -> None:
        self._store: Dict[str, Tuple[Any, Optional[float]]] = {}

    def get(self, key: str) -> Optional[Any]:
        rec = self._store.get(key)
        if rec is None:
            return None
        value, expires_at = rec
        if expires_at is not None and expires_at <= time.monotonic():
            # expired
            self._store.pop(key, None)
            return None
        return copy.deepcopy(value)

    def put(self, key: str, value: Any, ttl_seconds: Optional[int] = None) -> None:
        expires_at = time.monotonic() + ttl_seconds if ttl_seconds else None
        self._store[key] = (copy.deepcopy(value), expires_at)

    def forget(self, key: str) -> None:
        self._store.pop(key, None)

    def clear(self) -> None:
        self._store.clear()

    def __len__(self) -> int:
        return len(self._store)
