"""
Redis key-value store.

Holds small JSON documents (the recent-search list).
Falls back to process memory when Redis is unreachable.
"""

import json
import logging
from typing import Any, Dict, Optional

import redis.asyncio as redis

from bandwatch.core.config import settings

logger = logging.getLogger(__name__)

# Global Redis connection pool
_redis_pool: Optional[redis.Redis] = None


async def init_redis() -> Optional[redis.Redis]:
    """
    Initialize Redis connection pool.
    Called on application startup.
    """
    global _redis_pool

    if _redis_pool is not None:
        return _redis_pool

    try:
        _redis_pool = redis.from_url(
            settings.redis_url,
            encoding="utf-8",
            decode_responses=True,
        )
        await _redis_pool.ping()
        logger.info(f"Redis connected: {settings.redis_url}")
        return _redis_pool
    except Exception as e:
        logger.warning(f"Redis connection failed: {e}. Using in-memory fallback.")
        _redis_pool = None
        return None


async def close_redis() -> None:
    """Close Redis connection pool."""
    global _redis_pool
    if _redis_pool:
        await _redis_pool.close()
        _redis_pool = None
        logger.info("Redis connection closed")


def get_redis() -> Optional[redis.Redis]:
    """Get the Redis connection pool."""
    return _redis_pool


class KeyValueStore:
    """
    JSON document store over Redis.

    Every write also lands in the in-memory map, so reads keep working if
    Redis drops out mid-session.
    """

    def __init__(self, redis_client: Optional[redis.Redis] = None):
        self._redis = redis_client
        self._memory: Dict[str, str] = {}

    @property
    def redis(self) -> Optional[redis.Redis]:
        return self._redis or _redis_pool

    async def get_json(self, key: str) -> Optional[Any]:
        """Read and decode a JSON value. None when absent."""
        value = None

        if self.redis:
            try:
                value = await self.redis.get(key)
            except Exception as e:
                logger.debug(f"Redis get failed for {key}: {e}")
                value = self._memory.get(key)
        else:
            value = self._memory.get(key)

        if value is None:
            return None
        try:
            return json.loads(value)
        except ValueError:
            logger.warning(f"Discarding corrupt value for {key}")
            return None

    async def set_json(self, key: str, data: Any, ttl: Optional[int] = None) -> None:
        """Encode and store a JSON value."""
        value = json.dumps(data)
        self._memory[key] = value

        if self.redis:
            try:
                await self.redis.set(key, value, ex=ttl)
            except Exception as e:
                logger.debug(f"Redis set failed for {key}: {e}")

    async def delete(self, key: str) -> None:
        self._memory.pop(key, None)

        if self.redis:
            try:
                await self.redis.delete(key)
            except Exception as e:
                logger.debug(f"Redis delete failed for {key}: {e}")


# Singleton instance
_store: Optional[KeyValueStore] = None


def get_store() -> KeyValueStore:
    """Get the key-value store singleton."""
    global _store
    if _store is None:
        _store = KeyValueStore()
    return _store
