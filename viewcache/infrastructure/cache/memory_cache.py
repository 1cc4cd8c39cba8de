"""In-process cache store. Used when Redis is disabled and in tests."""

from __future__ import annotations

import logging
import threading
import time
from collections.abc import Callable

logger = logging.getLogger(__name__)


class MemoryCacheStore:
    """Thread-safe dict store with per-entry expiry.

    Expired entries behave as absent and are dropped on access. A ttl <= 0
    means "never cache": set() stores nothing.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._entries: dict[str, tuple[str, float]] = {}
        self._lock = threading.Lock()

    def _live_value(self, key: str) -> str | None:
        # Caller holds self._lock
        entry = self._entries.get(key)
        if entry is None:
            return None
        value, expires_at = entry
        if expires_at <= self._clock():
            del self._entries[key]
            return None
        return value

    def exists(self, key: str) -> bool:
        with self._lock:
            return self._live_value(key) is not None

    def get(self, key: str) -> str | None:
        with self._lock:
            value = self._live_value(key)
        logger.debug("Cache %s: %s", "HIT" if value is not None else "MISS", key)
        return value

    def set(self, key: str, value: str, ttl: int) -> None:
        if ttl <= 0:
            logger.debug("Cache SET skipped: %s (TTL: %ss)", key, ttl)
            return
        expires_at = self._clock() + ttl
        with self._lock:
            self._entries[key] = (value, expires_at)
        logger.debug("Cache SET: %s (TTL: %ss)", key, ttl)

    def delete(self, key: str) -> None:
        with self._lock:
            self._entries.pop(key, None)

    def clear(self) -> None:
        """Drop every entry."""
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
