"""Jinja2 content renderer: template id (e.g. 'pages/index') + data -> HTML."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from jinja2 import BaseLoader, Environment, FileSystemLoader, select_autoescape


class JinjaContentRenderer:
    """Renders templates by id through a Jinja2 Environment.

    Template ids carry no extension; `extension` is appended on lookup so
    'blocks/index/index' resolves to 'blocks/index/index.html'. Compiled
    templates are cached by the Environment. Missing templates raise
    jinja2.TemplateNotFound.
    """

    def __init__(
        self,
        templates_dir: str | None = None,
        loader: BaseLoader | None = None,
        extension: str = ".html",
        autoescape: bool = True,
    ) -> None:
        """Initialize with a templates directory or an explicit loader.

        Args:
            templates_dir: Root directory for FileSystemLoader.
            loader: Jinja2 loader (takes precedence over templates_dir).
            extension: Suffix appended to template ids.
            autoescape: Escape HTML/XML templates when True.
        """
        if loader is None:
            if templates_dir is None:
                raise ValueError("templates_dir or loader is required")
            loader = FileSystemLoader(templates_dir)
        self._extension = extension
        self._env = Environment(
            loader=loader,
            autoescape=select_autoescape(
                enabled_extensions=("html", "htm", "xml"),
                default_for_string=autoescape,
                default=autoescape,
            )
            if autoescape
            else False,
        )

    def template_name(self, template_id: str) -> str:
        """Return the loader name for a template id."""
        return f"{template_id}{self._extension}"

    def render(self, template_id: str, data: Mapping[str, Any]) -> str:
        """Render template_id with data as the template context."""
        template = self._env.get_template(self.template_name(template_id))
        return template.render(dict(data))
