"""
Cache backend interface used by the read-through cache.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional


class CacheBackend(ABC):
    """Abstract key/value store with per-entry expiry."""

    @abstractmethod
    def get(self, key: str) -> Optional[Any]:
        """
        Fetch a stored value.

        Returns:
            The stored value, or None when the key is missing or expired
        """
        pass

    @abstractmethod
    def put(self, key: str, value: Any, ttl_seconds: Optional[int] = None) -> None:
        """
        Store a value.

        Args:
            key: Cache key
            value: JSON-serializable value
            ttl_seconds: Seconds until expiry; None keeps the entry indefinitely
        """
        pass

    @abstractmethod
    def forget(self, key: str) -> None:
        """Remove a key if present."""
        pass
