from .memory_cache import InMemoryCacheBackend
from .redis_cache import RedisCacheBackend

__all__ = ["InMemoryCacheBackend", "RedisCacheBackend"]
