"""HTTP layer: dependencies and page routes."""

from viewcache.api.pages import router

__all__ = ["router"]
