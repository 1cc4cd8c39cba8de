"""Application services."""

from viewcache.application.services.render_cache import RenderCache

__all__ = ["RenderCache"]
