"""Domain exceptions for viewcache.

Defines exceptions raised by the render cache and its collaborators.
Presentation layer maps them to HTTP responses in exception handlers.
A block producer that is not registered is not an error and has no
exception here: render_block returns None for it.
"""

from typing import Any


class ViewCacheException(Exception):
    """Base exception for all viewcache errors.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. key, block name).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON body used by the HTTP exception handler."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class CacheStoreUnavailableException(ViewCacheException):
    """Raised when the cache store cannot be reached or a store command fails."""

    def __init__(self, operation: str, key: str | None = None, reason: str | None = None) -> None:
        """Initialize with the failed operation and optional key and reason.

        Args:
            operation: Store operation that failed (e.g. 'get', 'set').
            key: Cache key involved, if any.
            reason: Underlying error message.
        """
        details: dict[str, Any] = {"operation": operation}
        if key is not None:
            details["key"] = key
        if reason:
            details["reason"] = reason
        super().__init__(
            f"Cache store unavailable during {operation}",
            "CACHE_STORE_UNAVAILABLE",
            details,
        )


class BlockRegistrationException(ViewCacheException):
    """Raised when a block name is registered twice with different factories."""

    def __init__(self, name: str) -> None:
        """Initialize with the conflicting block name.

        Args:
            name: Registry name already bound to another factory.
        """
        super().__init__(
            f"Block already registered: {name}",
            "BLOCK_REGISTRATION_ERROR",
            {"name": name},
        )
