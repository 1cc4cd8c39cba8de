"""DTOs for render cache operations."""

from viewcache.application.dtos.render import (
    EMPTY_CONTEXT,
    BlockContext,
    BlockDataOptions,
    BlockOptions,
    PageOptions,
    RenderContext,
)

__all__ = [
    "EMPTY_CONTEXT",
    "BlockContext",
    "BlockDataOptions",
    "BlockOptions",
    "PageOptions",
    "RenderContext",
]
