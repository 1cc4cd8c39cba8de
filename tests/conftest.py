"""Pytest configuration and fixtures for viewcache.

Unit tests use an in-memory store that records every call and a renderer
that counts invocations. HTTP tests run viewcache.main:create_app() with its
lifespan, Redis disabled.
"""

import os
from collections.abc import Mapping
from typing import Any

import pytest
from httpx import ASGITransport, AsyncClient

os.environ.setdefault("REDIS_ENABLED", "false")

from viewcache.application.blocks import BlockRegistry  # noqa: E402
from viewcache.application.services.render_cache import RenderCache  # noqa: E402
from viewcache.core.config import Settings, get_settings  # noqa: E402
from viewcache.infrastructure.cache.memory_cache import MemoryCacheStore  # noqa: E402


class RecordingStore(MemoryCacheStore):
    """MemoryCacheStore that records (operation, key[, ttl]) for each call."""

    def __init__(self) -> None:
        super().__init__()
        self.calls: list[tuple[Any, ...]] = []

    def exists(self, key: str) -> bool:
        self.calls.append(("exists", key))
        return super().exists(key)

    def get(self, key: str) -> str | None:
        self.calls.append(("get", key))
        return super().get(key)

    def set(self, key: str, value: str, ttl: int) -> None:
        self.calls.append(("set", key, ttl))
        super().set(key, value, ttl)

    def writes(self) -> list[tuple[Any, ...]]:
        return [c for c in self.calls if c[0] == "set"]


class CountingRenderer:
    """Renders '<template_id>|k=v,...' (sorted keys) and counts calls."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, dict[str, Any]]] = []

    def render(self, template_id: str, data: Mapping[str, Any]) -> str:
        self.calls.append((template_id, dict(data)))
        body = ",".join(f"{k}={data[k]}" for k in sorted(data))
        return f"{template_id}|{body}"


@pytest.fixture
def settings() -> Settings:
    """Settings with a 300s default expiration and device partitioning off."""
    return Settings(
        cache_expiration_time=300,
        cache_use_device=False,
        cache_sort_tags=False,
        block_templates_path="blocks",
        redis_enabled=False,
    )


@pytest.fixture
def device_settings(settings: Settings) -> Settings:
    """Settings with device partitioning on."""
    return settings.model_copy(update={"cache_use_device": True})


@pytest.fixture
def store() -> RecordingStore:
    return RecordingStore()


@pytest.fixture
def renderer() -> CountingRenderer:
    return CountingRenderer()


@pytest.fixture
def registry() -> BlockRegistry:
    return BlockRegistry()


@pytest.fixture
def render_cache(
    store: RecordingStore,
    renderer: CountingRenderer,
    registry: BlockRegistry,
    settings: Settings,
) -> RenderCache:
    return RenderCache(store=store, renderer=renderer, registry=registry, settings=settings)


@pytest.fixture
async def client() -> AsyncClient:
    """Async HTTP client against the FastAPI app (ASGI), lifespan included."""
    get_settings.cache_clear()
    from viewcache.main import create_app

    app = create_app()
    async with app.router.lifespan_context(app):
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            yield ac
    get_settings.cache_clear()
