"""Application lifespan: startup and shutdown.

Builds the cache store, template renderer, block registry and render
cache once per process and publishes them on app.state.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from starlette.concurrency import run_in_threadpool

from viewcache.application.services.render_cache import RenderCache
from viewcache.core.config import get_settings
from viewcache.infrastructure.cache import CacheStore, MemoryCacheStore, RedisCacheStore
from viewcache.infrastructure.rendering import JinjaContentRenderer
from viewcache.pages.blocks import build_block_registry

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit run shutdown.

    Redis is used when REDIS_ENABLED is set; a failed connection aborts
    startup rather than serving without the configured store.
    """
    settings = get_settings()

    # ---- Startup ----
    store: CacheStore
    if settings.redis_enabled:
        redis_store = RedisCacheStore(settings=settings)
        # connect() pings synchronously; keep it off the event loop
        await run_in_threadpool(redis_store.connect)
        store = redis_store
    else:
        store = MemoryCacheStore()
        logger.info("Redis disabled; using in-process render cache")

    renderer = JinjaContentRenderer(
        templates_dir=settings.templates_dir,
        extension=settings.template_extension,
    )
    app.state.cache_store = store
    app.state.render_cache = RenderCache(
        store=store,
        renderer=renderer,
        registry=build_block_registry(),
        settings=settings,
    )

    yield

    # ---- Shutdown ----
    if isinstance(store, RedisCacheStore):
        await run_in_threadpool(store.disconnect)
    app.state.render_cache = None
    app.state.cache_store = None
