"""Cache: store adapters and render cache key utilities.

RedisCacheStore uses viewcache.core.config; key format is in keys.py (DRY).
"""

from viewcache.infrastructure.cache.cache_protocol import CacheStore
from viewcache.infrastructure.cache.keys import (
    build_key,
    content_kind,
    derive_tags,
    tag_digest,
)
from viewcache.infrastructure.cache.memory_cache import MemoryCacheStore
from viewcache.infrastructure.cache.redis_cache import RedisCacheStore

__all__ = [
    "CacheStore",
    "MemoryCacheStore",
    "RedisCacheStore",
    "build_key",
    "content_kind",
    "derive_tags",
    "tag_digest",
]
