from .cache_backend import CacheBackend

__all__ = ["CacheBackend"]
