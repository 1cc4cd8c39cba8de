"""FastAPI dependencies for the render cache (composition root)."""

from fastapi import Request

from viewcache.application.dtos.render import RenderContext
from viewcache.application.services.render_cache import RenderCache
from viewcache.shared.utils.device import detect_device


def get_render_cache(request: Request) -> RenderCache:
    """Render cache built by the lifespan."""
    render_cache = getattr(request.app.state, "render_cache", None)
    if render_cache is None:
        raise RuntimeError("Render cache not initialized. Run the app lifespan first.")
    return render_cache


def get_render_context(request: Request) -> RenderContext:
    """Per-request render context: device from User-Agent, user data from request.state.

    Authentication middleware may set request.state.user_data; it defaults to {}.
    """
    return RenderContext(
        device=detect_device(request.headers.get("user-agent")),
        user_data=getattr(request.state, "user_data", None) or {},
    )
