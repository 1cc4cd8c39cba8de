"""Domain layer: exceptions independent of infrastructure."""

from viewcache.domain.exceptions import (
    BlockRegistrationException,
    CacheStoreUnavailableException,
    ViewCacheException,
)

__all__ = [
    "BlockRegistrationException",
    "CacheStoreUnavailableException",
    "ViewCacheException",
]
