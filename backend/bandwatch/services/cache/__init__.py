"""
Cache module for BandWatch.

Redis-backed JSON store with in-memory fallback.
"""

from bandwatch.services.cache.redis_client import (
    KeyValueStore,
    get_store,
    init_redis,
    close_redis,
)

__all__ = [
    "KeyValueStore",
    "get_store",
    "init_redis",
    "close_redis",
]
