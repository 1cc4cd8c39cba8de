"""FastAPI application entry point.

Wiring only: logging, lifespan, exception handlers, routers.
Settings are loaded inside create_app() so that tests can set env (and
clear the get_settings cache) before calling create_app().
"""

from fastapi import FastAPI

from viewcache.api import router
from viewcache.core.config import get_settings
from viewcache.core.exception_handlers import register_exception_handlers
from viewcache.core.lifespan import create_lifespan
from viewcache.shared.logging import setup_logging


def create_app() -> FastAPI:
    """Build and return the FastAPI application."""
    settings = get_settings()
    setup_logging()
    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        debug=settings.debug,
        lifespan=create_lifespan,
    )
    register_exception_handlers(app)
    app.include_router(router)
    return app


app = create_app()
