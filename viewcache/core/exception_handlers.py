"""Centralized exception handlers for the FastAPI app.

Register with register_exception_handlers(app). Maps viewcache and
framework exceptions to HTTP responses.
"""

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from jinja2 import TemplateNotFound
from starlette.exceptions import HTTPException as StarletteHTTPException

from viewcache.core.config import get_settings
from viewcache.domain.exceptions import ViewCacheException

logger = logging.getLogger(__name__)

# Map domain error_code to HTTP status when applicable
_ERROR_CODE_STATUS: dict[str, int] = {
    "CACHE_STORE_UNAVAILABLE": 503,
    "BLOCK_REGISTRATION_ERROR": 500,
}


def _viewcache_exception_handler(request: Request, exc: ViewCacheException) -> JSONResponse:
    """Return JSON from ViewCacheException.to_dict() with appropriate status code."""
    status = _ERROR_CODE_STATUS.get(exc.error_code, 500)
    logger.error("%s on %s: %s", exc.error_code, request.url.path, exc.message)
    return JSONResponse(status_code=status, content=exc.to_dict())


def _template_not_found_handler(request: Request, exc: TemplateNotFound) -> JSONResponse:
    """Return 404 when the requested page or block template does not exist."""
    return JSONResponse(
        status_code=404,
        content={"error": "TEMPLATE_NOT_FOUND", "message": f"Template not found: {exc.name}"},
    )


def _http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Return JSON for Starlette HTTP exceptions (status + detail)."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": "HTTP_ERROR", "message": exc.detail},
    )


def _generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Return 500; include detail only when debug is True."""
    logger.exception("Unhandled exception: %s", exc)
    detail: Any = str(exc) if get_settings().debug else "Internal server error"
    return JSONResponse(
        status_code=500,
        content={"error": "INTERNAL_ERROR", "message": detail},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the FastAPI app."""
    app.add_exception_handler(ViewCacheException, _viewcache_exception_handler)
    app.add_exception_handler(TemplateNotFound, _template_not_found_handler)
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(Exception, _generic_exception_handler)
