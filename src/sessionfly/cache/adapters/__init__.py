"""Cache adapters — concrete cache implementations."""

from sessionfly.cache.adapters.file import FileCache
from sessionfly.cache.adapters.memory import InMemoryCache
from sessionfly.cache.adapters.redis import RedisCacheAdapter

__all__ = ["FileCache", "InMemoryCache", "RedisCacheAdapter"]
