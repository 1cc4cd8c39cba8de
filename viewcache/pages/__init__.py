"""Pages: block producers for the bundled templates."""

from viewcache.pages.blocks import build_block_registry

__all__ = ["build_block_registry"]
