"""SessionFly Cache — storage adapters behind the cache-backed session handlers."""

from sessionfly.cache.adapters.file import FileCache
from sessionfly.cache.adapters.memory import InMemoryCache
from sessionfly.cache.adapters.redis import RedisCacheAdapter
from sessionfly.cache.filesystem import Filesystem
from sessionfly.cache.ports.outbound import CacheAdapter

__all__ = [
    "CacheAdapter",
    "FileCache",
    "Filesystem",
    "InMemoryCache",
    "RedisCacheAdapter",
]
