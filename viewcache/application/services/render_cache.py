"""Render cache: render pages and blocks, memoize HTML under derived keys.

For a content identity (kind, path, tags, device variant) the service either
serves a string already in the cache store or renders it and stores the
result with a TTL. cache_time 0 bypasses the store completely: no reads,
no writes.

Concurrent misses on one key are not coordinated; both requests render and
the last write wins. Store failures and producer failures propagate.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from viewcache.application.blocks import BlockRegistry, block_class_name
from viewcache.application.dtos.render import (
    EMPTY_CONTEXT,
    BlockContext,
    BlockDataOptions,
    BlockOptions,
    PageOptions,
    RenderContext,
)
from viewcache.core.config import Settings, get_settings
from viewcache.core.constants import KIND_BLOCK, KIND_PAGE, PAGES_TEMPLATE_ROOT
from viewcache.infrastructure.cache.cache_protocol import CacheStore
from viewcache.infrastructure.cache.keys import build_key, content_kind, derive_tags
from viewcache.infrastructure.rendering.renderer_protocol import ContentProducer

logger = logging.getLogger(__name__)


class RenderCache:
    """Facade over cache store, template renderer and block registry.

    Holds no per-request state; one instance is shared by all requests.
    """

    def __init__(
        self,
        store: CacheStore,
        renderer: ContentProducer,
        registry: BlockRegistry | None = None,
        settings: Settings | None = None,
    ) -> None:
        """Initialize render cache.

        Args:
            store: Cache store for rendered strings.
            renderer: Template renderer.
            registry: Block producers for render_block; empty when omitted.
            settings: Optional settings; defaults to get_settings().
        """
        self.store = store
        self.renderer = renderer
        self.registry = registry if registry is not None else BlockRegistry()
        self.settings = settings or get_settings()

    # ---- Key and option helpers ----

    def _cache_time(self, cache_time: int | None) -> int:
        if cache_time is None:
            return self.settings.cache_expiration_time
        return cache_time

    def _kind(self, base: str, context: RenderContext) -> str:
        return content_kind(base, context.device, self.settings.cache_use_device)

    def _tags(self, tags: Sequence[str]) -> list[str]:
        if self.settings.cache_sort_tags:
            return sorted(tags)
        return list(tags)

    def cache_key(self, kind: str, path: str, tags: Sequence[str] = ()) -> str:
        """Return the store key for kind, path and tags."""
        return build_key(kind, path, self._tags(tags), prefix=self.settings.cache_key_prefix)

    def _block_template_id(self, path: str) -> str:
        return f"{self.settings.block_templates_path}/{path}"

    # ---- Primitives ----

    def render_content(self, template_id: str, data: Mapping[str, Any]) -> str:
        """Render template_id with data. Never cached."""
        return self.renderer.render(template_id, data)

    def fetch_or_render(
        self,
        cache_key: str,
        template_id: str,
        data: Mapping[str, Any],
        cache_time: int | None = None,
    ) -> str:
        """Return the cached string for cache_key, rendering and storing it on a miss.

        Args:
            cache_key: Store key (see cache_key()).
            template_id: Template to render on a miss.
            data: Template data.
            cache_time: TTL for the write; None uses the configured default,
                0 renders without reading or writing the store.

        Returns:
            The cached value, or the freshly rendered one after exactly one write.
        """
        ttl = self._cache_time(cache_time)
        if ttl == 0:
            return self.render_content(template_id, data)

        if self.store.exists(cache_key):
            cached = self.store.get(cache_key)
            # Entry may expire between exists and get
            if cached is not None:
                return cached
        output = self.render_content(template_id, data)
        self.store.set(cache_key, output, ttl)
        return output

    def get_cached_content(self, kind: str, path: str, tags: Sequence[str] = ()) -> str | None:
        """Cache-only read: return the stored string or None. Never renders."""
        cache_key = self.cache_key(kind, path, tags)
        if self.store.exists(cache_key):
            return self.store.get(cache_key)
        return None

    # ---- Pages ----

    def render_page(self, options: PageOptions, context: RenderContext = EMPTY_CONTEXT) -> str:
        """Render the page template 'pages/<path>', cached under the page kind."""
        cache_time = self._cache_time(options.cache_time)
        kind = self._kind(KIND_PAGE, context)
        template_id = f"{PAGES_TEMPLATE_ROOT}/{options.path}"

        if cache_time == 0:
            return self.render_content(template_id, options.data)

        cache_key = self.cache_key(kind, options.path, options.tags)
        return self.fetch_or_render(cache_key, template_id, options.data, cache_time)

    def get_html(self, options: PageOptions, context: RenderContext = EMPTY_CONTEXT) -> str:
        """Return page HTML from cache, falling back to render_page on a miss."""
        cache_time = self._cache_time(options.cache_time)
        if cache_time > 0:
            kind = self._kind(KIND_PAGE, context)
            html = self.get_cached_content(kind, options.path, options.tags)
            if html is not None:
                return html
        return self.render_page(options, context)

    # ---- Blocks ----

    def _render_block_template(
        self,
        kind: str,
        path: str,
        tags: Sequence[str],
        data: Mapping[str, Any],
        cache_time: int,
    ) -> str:
        template_id = self._block_template_id(path)
        if cache_time == 0:
            return self.render_content(template_id, data)
        cache_key = self.cache_key(kind, path, tags)
        return self.fetch_or_render(cache_key, template_id, data, cache_time)

    def render_block(
        self, options: BlockOptions, context: RenderContext = EMPTY_CONTEXT
    ) -> str | None:
        """Render a block whose data comes from a registered Block producer.

        Returns None, without rendering or writing to the store, when no
        producer is registered under options.class_name or the name derived
        from options.path.
        """
        cache_time = self._cache_time(options.cache_time)
        tags = [*options.tags, *derive_tags(options.query)]
        kind = self._kind(KIND_BLOCK, context)

        if cache_time > 0:
            content = self.get_cached_content(kind, options.path, tags)
            if content is not None:
                return content

        name = options.class_name or block_class_name(options.path)
        factory = self.registry.resolve(name)
        if factory is None:
            logger.debug("Block producer not found: %s (path=%s)", name, options.path)
            return None

        block_context = BlockContext(
            user_data=context.user_data,
            query=options.query if options.query is not None else {},
            locals=options.locals if options.locals is not None else {},
        )
        data = dict(factory().get_data(block_context))
        if options.locals is not None:
            data.update(options.locals)

        return self._render_block_template(kind, options.path, tags, data, cache_time)

    def render_block_with_data(
        self, options: BlockDataOptions, context: RenderContext = EMPTY_CONTEXT
    ) -> str:
        """Render a block from caller-supplied data (no producer lookup)."""
        cache_time = self._cache_time(options.cache_time)
        tags = [*options.tags, *derive_tags(options.query)]
        kind = self._kind(KIND_BLOCK, context)

        if cache_time > 0:
            content = self.get_cached_content(kind, options.path, tags)
            if content is not None:
                return content

        data = dict(options.data)
        if options.locals is not None:
            data.update(options.locals)

        return self._render_block_template(kind, options.path, tags, data, cache_time)

    def render_static_block(self, path: str, data: Mapping[str, Any] | None = None) -> str:
        """Render a block from data, cached under the plain block kind with no tags.

        Ignores device partitioning. Uses the configured default expiration;
        a default of 0 renders without touching the store.
        """
        data = data if data is not None else {}
        cache_time = self.settings.cache_expiration_time
        if cache_time == 0:
            return self.render_content(self._block_template_id(path), data)

        content = self.get_cached_content(KIND_BLOCK, path)
        if content is not None:
            return content

        cache_key = self.cache_key(KIND_BLOCK, path)
        return self.fetch_or_render(cache_key, self._block_template_id(path), data, cache_time)

    render_component = render_block
    render_static_component = render_static_block
