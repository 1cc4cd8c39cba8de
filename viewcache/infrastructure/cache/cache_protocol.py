"""Cache store protocol consumed by the render cache (DIP)."""

from typing import Protocol


class CacheStore(Protocol):
    """Protocol for string cache backends (Redis, in-process memory).

    Implementations must be safe for concurrent use from several
    request-handling threads and must raise on I/O failure instead of
    reporting a miss.
    """

    def exists(self, key: str) -> bool:
        """Return True if key holds a live (unexpired) value."""
        ...

    def get(self, key: str) -> str | None:
        """Return cached value or None."""
        ...

    def set(self, key: str, value: str, ttl: int) -> None:
        """Store value with TTL in seconds (ttl <= 0 = do not store)."""
        ...

    def delete(self, key: str) -> None:
        """Remove key from cache."""
        ...
