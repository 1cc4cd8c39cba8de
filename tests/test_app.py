"""Smoke tests for app wiring: lifespan, landing page and health."""

from httpx import AsyncClient


async def test_health_returns_ok(client: AsyncClient) -> None:
    """GET /health returns 200 and status ok."""
    response = await client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


async def test_root_returns_html_with_nav_block(client: AsyncClient) -> None:
    """GET / renders the index page with the nav block unescaped."""
    response = await client.get("/")
    assert response.status_code == 200
    assert "text/html" in response.headers.get("content-type", "")
    assert '<nav class="nav">' in response.text
    assert 'href="/health"' in response.text


async def test_root_served_from_cache_on_repeat(client: AsyncClient) -> None:
    """Second GET / returns the identical cached document."""
    first = await client.get("/")
    second = await client.get("/")
    assert first.text == second.text
