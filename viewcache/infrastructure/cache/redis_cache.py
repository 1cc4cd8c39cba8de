"""Redis-backed cache store for rendered HTML.

Provides synchronous Redis access with TTL support (SETEX). Unlike a
best-effort cache, every failure is raised as CacheStoreUnavailableException:
the render cache has no safe fallback content, so the caller decides.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TypeVar

import redis

from viewcache.core.config import Settings, get_settings
from viewcache.domain.exceptions import CacheStoreUnavailableException

logger = logging.getLogger(__name__)

T = TypeVar("T")


class RedisCacheStore:
    """Redis cache store with TTL support.

    Uses viewcache.core.config for connection settings. Call connect() at
    startup and disconnect() at shutdown, or pass a ready client.
    """

    def __init__(
        self,
        redis_client: redis.Redis | None = None,
        settings: Settings | None = None,
    ) -> None:
        """Initialize cache store.

        Args:
            redis_client: Optional Redis client for testing or DI.
            settings: Optional settings; defaults to get_settings().
        """
        self.redis = redis_client
        self.settings = settings or get_settings()

    def connect(self) -> None:
        """Build the Redis client from settings and verify it with PING.

        Raises:
            CacheStoreUnavailableException: If Redis cannot be reached.
        """
        if self.redis is not None:
            return
        client = redis.Redis(
            host=self.settings.redis_host,
            port=self.settings.redis_port,
            db=self.settings.redis_db,
            password=self.settings.redis_password.get_secret_value() if self.settings.redis_password else None,
            decode_responses=True,
            socket_connect_timeout=self.settings.redis_socket_timeout,
            socket_timeout=self.settings.redis_socket_timeout,
            socket_keepalive=True,
        )
        try:
            client.ping()
        except redis.RedisError as e:
            logger.warning(
                "Redis connection failed: %s:%s (%s)",
                self.settings.redis_host,
                self.settings.redis_port,
                e,
            )
            client.close()
            raise CacheStoreUnavailableException("connect", reason=str(e)) from e
        self.redis = client
        logger.info(
            "Redis cache connected: %s:%s",
            self.settings.redis_host,
            self.settings.redis_port,
        )

    def disconnect(self) -> None:
        """Close Redis connection. Call on app shutdown."""
        if self.redis is not None:
            self.redis.close()
            self.redis = None
            logger.info("Redis cache disconnected")

    def is_available(self) -> bool:
        """Return True if a Redis client is configured."""
        return self.redis is not None

    def _call(self, operation: str, key: str, command: Callable[[redis.Redis], T]) -> T:
        """Run command against the client, translating Redis errors."""
        if self.redis is None:
            raise CacheStoreUnavailableException(operation, key, "Redis client not connected")
        try:
            return command(self.redis)
        except redis.RedisError as e:
            logger.exception("Cache %s error for key %s", operation, key)
            raise CacheStoreUnavailableException(operation, key, str(e)) from e

    def exists(self, key: str) -> bool:
        """Return True if key exists in Redis."""
        return bool(self._call("exists", key, lambda r: r.exists(key)))

    def get(self, key: str) -> str | None:
        """Return cached string or None if missing.

        Args:
            key: Cache key (use viewcache.infrastructure.cache.keys builders).

        Returns:
            Cached value or None.
        """
        value = self._call("get", key, lambda r: r.get(key))
        if value is not None:
            logger.debug("Cache HIT: %s", key)
        else:
            logger.debug("Cache MISS: %s", key)
        return value

    def set(self, key: str, value: str, ttl: int) -> None:
        """Store value with TTL in seconds (SETEX); ttl <= 0 stores nothing.

        Args:
            key: Cache key.
            value: Rendered content.
            ttl: Time-to-live in seconds.
        """
        if ttl <= 0:
            logger.debug("Cache SET skipped: %s (TTL: %ss)", key, ttl)
            return
        self._call("set", key, lambda r: r.setex(key, ttl, value))
        logger.debug("Cache SET: %s (TTL: %ss)", key, ttl)

    def delete(self, key: str) -> None:
        """Remove key from cache.

        Args:
            key: Cache key to delete.
        """
        self._call("delete", key, lambda r: r.delete(key))
        logger.debug("Cache DELETE: %s", key)
