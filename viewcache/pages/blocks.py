"""Block producers for the bundled templates, registered at startup."""

from typing import Any

from viewcache.application.blocks import Block, BlockRegistry
from viewcache.application.dtos.render import BlockContext

_NAV_LINKS: tuple[tuple[str, str], ...] = (
    ("Home", "/"),
    ("Health", "/health"),
)


class LayoutNavBlock(Block):
    """Site navigation: block path 'layout/nav'."""

    def get_data(self, context: BlockContext) -> dict[str, Any]:
        active = context.locals.get("active", "/")
        return {
            "links": [
                {"title": title, "href": href, "active": href == active}
                for title, href in _NAV_LINKS
            ],
        }


def build_block_registry() -> BlockRegistry:
    """Return a registry holding every bundled block."""
    registry = BlockRegistry()
    registry.block(LayoutNavBlock)
    return registry
