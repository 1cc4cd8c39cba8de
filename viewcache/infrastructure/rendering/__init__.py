"""Rendering: template engine adapter behind the ContentProducer protocol."""

from viewcache.infrastructure.rendering.jinja_renderer import JinjaContentRenderer
from viewcache.infrastructure.rendering.renderer_protocol import ContentProducer

__all__ = ["ContentProducer", "JinjaContentRenderer"]
