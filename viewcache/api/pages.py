"""Page routes rendered through the render cache."""

from typing import Annotated

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse

from viewcache.api.dependencies import get_render_cache, get_render_context
from viewcache.application.dtos.render import BlockOptions, PageOptions, RenderContext
from viewcache.application.services.render_cache import RenderCache
from viewcache.core.config import get_settings

router = APIRouter()


@router.get("/", response_class=HTMLResponse)
def index(
    render_cache: Annotated[RenderCache, Depends(get_render_cache)],
    context: Annotated[RenderContext, Depends(get_render_context)],
) -> HTMLResponse:
    """Landing page: nav block plus the index page template."""
    settings = get_settings()
    nav = render_cache.render_block(BlockOptions(path="layout/nav"), context) or ""
    html = render_cache.get_html(
        PageOptions(
            path="index",
            data={"app_name": settings.app_name, "app_version": settings.app_version, "nav": nav},
        ),
        context,
    )
    return HTMLResponse(content=html)


@router.get("/health")
def health() -> dict[str, str]:
    """Liveness check."""
    return {"status": "ok"}
