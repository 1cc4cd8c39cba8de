"""Block producers and the registry that resolves them by name.

A block is a named data producer for a block template. Blocks are registered
at startup under their class name (e.g. IndexIndexBlock); render_block
resolves the name from an explicit class_name or from the block path.
"""

from __future__ import annotations

import logging
import re
from abc import ABC, abstractmethod
from collections.abc import Callable, Iterator
from typing import Any

from viewcache.application.dtos.render import BlockContext
from viewcache.core.constants import BLOCK_CLASS_SUFFIX
from viewcache.domain.exceptions import BlockRegistrationException

logger = logging.getLogger(__name__)

BlockFactory = Callable[[], "Block"]

_PATH_PARTS = re.compile(r"[/_\-]+")


class Block(ABC):
    """Data producer for a block template."""

    @abstractmethod
    def get_data(self, context: BlockContext) -> dict[str, Any]:
        """Return the template data for this block.

        Args:
            context: User data, request query and caller locals.
        """


def block_class_name(path: str) -> str:
    """Derive the registry name for a block path.

    'index/index' -> 'IndexIndexBlock', 'news/latest_items' -> 'NewsLatestItemsBlock'.
    """
    parts = (p for p in _PATH_PARTS.split(path) if p)
    return "".join(p[:1].upper() + p[1:] for p in parts) + BLOCK_CLASS_SUFFIX


class BlockRegistry:
    """Registry of block factories by name.

    Lookup of an unknown name returns None; that is a normal outcome, not
    an error.
    """

    def __init__(self) -> None:
        self._factories: dict[str, BlockFactory] = {}

    def register(self, name: str, factory: BlockFactory) -> None:
        """Register factory under name.

        Raises:
            BlockRegistrationException: If name is bound to another factory.
        """
        existing = self._factories.get(name)
        if existing is not None and existing is not factory:
            raise BlockRegistrationException(name)
        self._factories[name] = factory
        logger.debug("Registered block: %s", name)

    def block(self, cls: type[Block]) -> type[Block]:
        """Class decorator: register cls under its class name."""
        self.register(cls.__name__, cls)
        return cls

    def resolve(self, name: str) -> BlockFactory | None:
        """Return the factory registered under name, or None."""
        return self._factories.get(name)

    def names(self) -> list[str]:
        """Return registered block names."""
        return list(self._factories)

    def __contains__(self, name: object) -> bool:
        return name in self._factories

    def __iter__(self) -> Iterator[str]:
        return iter(self._factories)

    def __len__(self) -> int:
        return len(self._factories)
