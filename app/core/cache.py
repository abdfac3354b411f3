"""
Redis cache layer.

Provides:
- RedisClient: process-wide lazily created Redis connection
- get_cache_key: deterministic key builder
- CacheStore: get/set/delete wrapper that never raises

The cache is strictly an optimization. Every failure is logged and reported
as a miss (get) or as a False/0 result (set, delete, clear_pattern).
"""

from typing import Any, Optional

import redis

from app.core.config import settings
from app.core.logging import get_logger

logger = get_logger(__name__)


class RedisClient:
    """
    Holder for the shared Redis client.

    The connection is created on first use and reused afterwards.
    """

    _client: Optional[redis.Redis] = None

    @classmethod
    def get_client(cls) -> redis.Redis:
        """Return the shared Redis client, creating it if needed."""
        if cls._client is None:
            logger.info(
                f"Creating Redis client for {settings.REDIS_HOST}:{settings.REDIS_PORT}"
                f"/{settings.REDIS_DB}"
            )
            cls._client = redis.Redis(
                host=settings.REDIS_HOST,
                port=settings.REDIS_PORT,
                db=settings.REDIS_DB,
                password=settings.REDIS_PASSWORD,
                socket_timeout=settings.REDIS_SOCKET_TIMEOUT,
                socket_connect_timeout=settings.REDIS_SOCKET_TIMEOUT,
            )
        return cls._client

    @classmethod
    def ping(cls) -> bool:
        """Check whether Redis answers."""
        try:
            return bool(cls.get_client().ping())
        except redis.RedisError as e:
            logger.warning(f"Redis ping failed: {e}")
            return False

    @classmethod
    def close(cls) -> None:
        """Close the shared client, if one was created."""
        if cls._client is not None:
            cls._client.close()
            cls._client = None


def get_cache_key(namespace: str, **params: Any) -> str:
    """
    Build a cache key from a namespace and ordered parameters.

    get_cache_key("employees") -> "employees"
    get_cache_key("employees", page=1, size=10) -> "employees:page:1:size:10"
    """
    parts = [namespace]
    for name, value in params.items():
        parts.append(f"{name}:{value}")
    return ":".join(parts)


class CacheStore:
    """
    Key/value cache with TTL on top of a Redis-compatible client.

    Args:
        client: Object exposing get, set(ex=), delete and scan_iter like redis.Redis
    """

    def __init__(self, client: Any):
        self.client = client

    def get(self, key: str) -> Optional[bytes]:
        """Return the stored bytes, or None on a miss or any cache error."""
        try:
            value = self.client.get(key)
        except Exception as e:
            logger.warning(f"Cache get failed for key {key}: {e}")
            return None

        if value is None:
            logger.debug(f"Cache miss for key {key}")
            return None

        logger.debug(f"Cache hit for key {key}")
        if isinstance(value, str):
            return value.encode("utf-8")
        return value

    def set(self, key: str, value: bytes, ttl: int) -> bool:
        """Store value under key for ttl seconds. Returns False on failure."""
        try:
            self.client.set(key, value, ex=ttl)
            return True
        except Exception as e:
            logger.warning(f"Error storing key {key} in cache: {e}")
            return False

    def delete(self, *keys: str) -> bool:
        """Delete one or more keys. Returns False on failure."""
        if not keys:
            return True
        try:
            self.client.delete(*keys)
            return True
        except Exception as e:
            logger.warning(f"Error invalidating cache keys {list(keys)}: {e}")
            return False

    def clear_pattern(self, pattern: str) -> int:
        """Delete every key matching a glob pattern. Returns the number deleted."""
        try:
            keys = list(self.client.scan_iter(match=pattern))
            if keys:
                self.client.delete(*keys)
            return len(keys)
        except Exception as e:
            logger.warning(f"Error clearing cache pattern {pattern}: {e}")
            return 0
