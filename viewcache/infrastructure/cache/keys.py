"""Render cache key builders. Single place for key format (DRY).

Key format: {prefix}:{kind}:{path}:{tag_digest}

kind and path are percent-escaped (RFC 3986, '/' kept) so a ':' inside
them cannot shift segment boundaries; escaping is injective, so distinct
inputs keep distinct keys. Tags may come from request query strings, so
they are never embedded verbatim: the tag list is serialized as compact
JSON and hashed, which keeps tag boundaries unambiguous ("a-b" + "c"
differs from "a" + "b-c").
"""

import hashlib
import json
from collections.abc import Mapping, Sequence
from typing import Any
from urllib.parse import quote

from viewcache.core.constants import CACHE_KEY_SEP, DEFAULT_CACHE_KEY_PREFIX


def _validate_key_component(value: str, name: str) -> None:
    """Raise ValueError if value is empty.

    Args:
        value: String component used in a cache key.
        name: Name of the component (for error message).

    Raises:
        ValueError: If value is empty.
    """
    if not value:
        raise ValueError(f"Cache key component {name!r} must not be empty")


def _escape_key_component(value: str) -> str:
    """Percent-escape value; ':' becomes '%3A' and '%' becomes '%25'."""
    return quote(value, safe="/")


def tag_digest(tags: Sequence[str]) -> str:
    """Return the SHA-256 hex digest of the ordered tag list."""
    payload = json.dumps([str(t) for t in tags], separators=(",", ":"), ensure_ascii=False)
    return hashlib.sha256(payload.encode("utf-8")).hexdigest()


def build_key(
    kind: str,
    path: str,
    tags: Sequence[str] = (),
    prefix: str = DEFAULT_CACHE_KEY_PREFIX,
) -> str:
    """Cache key for rendered content of a kind at a path, narrowed by tags.

    Pure and deterministic. Tag order is significant; sort upstream to
    canonicalize.

    Args:
        kind: Content kind, optionally device-suffixed (e.g. 'block-mobile').
        path: Content path (e.g. 'index/index').
        tags: Ordered tag list.
        prefix: Key namespace (validated by Settings to be free of CACHE_KEY_SEP).

    Returns:
        Key like 'view:page:index:<64 hex chars>'.

    Raises:
        ValueError: If kind, path or prefix is empty, or prefix contains CACHE_KEY_SEP.
    """
    for value, name in ((prefix, "prefix"), (kind, "kind"), (path, "path")):
        _validate_key_component(value, name)
    if CACHE_KEY_SEP in prefix:
        raise ValueError(
            f"Cache key component 'prefix' must not contain separator {CACHE_KEY_SEP!r}"
        )
    return CACHE_KEY_SEP.join(
        (prefix, _escape_key_component(kind), _escape_key_component(path), tag_digest(tags))
    )


def derive_tags(query: Any) -> list[str]:
    """Convert a query mapping into '<key>-<value>' tags in iteration order.

    Returns [] for None or any non-mapping input.
    """
    if not isinstance(query, Mapping):
        return []
    return [f"{key}-{value}" for key, value in query.items()]


def content_kind(base: str, device: str | None, use_device: bool) -> str:
    """Return base kind, suffixed with '-<device>' when device partitioning is on."""
    if use_device and device:
        return f"{base}-{device}"
    return base
