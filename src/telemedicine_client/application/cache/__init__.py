from .read_through_cache import ReadThroughCache

__all__ = ["ReadThroughCache"]
