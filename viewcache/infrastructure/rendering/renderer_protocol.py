"""Content producer protocol consumed by the render cache (DIP)."""

from collections.abc import Mapping
from typing import Any, Protocol


class ContentProducer(Protocol):
    """Protocol for template engines: template id + data -> rendered string."""

    def render(self, template_id: str, data: Mapping[str, Any]) -> str:
        """Render template_id with data. Must not have side effects."""
        ...
