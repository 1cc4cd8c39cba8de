"""DTOs for render cache operations (no dependency on web framework types).

Each options struct enumerates every recognized field with its default.
cache_time None means "use the configured default expiration"; 0 bypasses
the cache entirely.
"""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any


def _check_cache_time(cache_time: int | None) -> None:
    if cache_time is not None and cache_time < 0:
        raise ValueError(f"cache_time must be >= 0, got: {cache_time}")


@dataclass(frozen=True)
class RenderContext:
    """Per-request values that used to be ambient: device variant and user data."""

    device: str | None = None
    user_data: Mapping[str, Any] = field(default_factory=dict)


EMPTY_CONTEXT = RenderContext()


@dataclass(frozen=True)
class BlockContext:
    """Argument bundle passed to Block.get_data."""

    user_data: Mapping[str, Any] = field(default_factory=dict)
    query: Mapping[str, Any] = field(default_factory=dict)
    locals: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class PageOptions:
    """Input for render_page and get_html."""

    path: str
    data: Mapping[str, Any] = field(default_factory=dict)
    tags: Sequence[str] = ()
    cache_time: int | None = None

    def __post_init__(self) -> None:
        _check_cache_time(self.cache_time)


@dataclass(frozen=True)
class BlockOptions:
    """Input for render_block. class_name overrides the name derived from path."""

    path: str
    class_name: str | None = None
    tags: Sequence[str] = ()
    query: Mapping[str, Any] | None = None
    cache_time: int | None = None
    locals: Mapping[str, Any] | None = None

    def __post_init__(self) -> None:
        _check_cache_time(self.cache_time)


@dataclass(frozen=True)
class BlockDataOptions:
    """Input for render_block_with_data: data is supplied by the caller."""

    path: str
    data: Mapping[str, Any] = field(default_factory=dict)
    tags: Sequence[str] = ()
    query: Mapping[str, Any] | None = None
    cache_time: int | None = None
    locals: Mapping[str, Any] | None = None

    def __post_init__(self) -> None:
        _check_cache_time(self.cache_time)
