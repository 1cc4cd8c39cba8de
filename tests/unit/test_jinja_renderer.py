"""Tests for JinjaContentRenderer (template id resolution and escaping)."""

from pathlib import Path

import pytest
from jinja2 import DictLoader, TemplateNotFound

from viewcache.infrastructure.rendering.jinja_renderer import JinjaContentRenderer


def test_renders_from_directory(tmp_path: Path) -> None:
    (tmp_path / "pages").mkdir()
    (tmp_path / "pages" / "home.html").write_text("Hello {{ name }}", encoding="utf-8")
    renderer = JinjaContentRenderer(templates_dir=str(tmp_path))
    assert renderer.render("pages/home", {"name": "World"}) == "Hello World"


def test_autoescapes_html() -> None:
    renderer = JinjaContentRenderer(loader=DictLoader({"blocks/x.html": "{{ v }}"}))
    assert renderer.render("blocks/x", {"v": "<b>"}) == "&lt;b&gt;"


def test_autoescape_disabled() -> None:
    renderer = JinjaContentRenderer(
        loader=DictLoader({"blocks/x.html": "{{ v }}"}), autoescape=False
    )
    assert renderer.render("blocks/x", {"v": "<b>"}) == "<b>"


def test_custom_extension() -> None:
    renderer = JinjaContentRenderer(loader=DictLoader({"pages/a.j2": "ok"}), extension=".j2")
    assert renderer.template_name("pages/a") == "pages/a.j2"
    assert renderer.render("pages/a", {}) == "ok"


def test_missing_template_raises() -> None:
    renderer = JinjaContentRenderer(loader=DictLoader({}))
    with pytest.raises(TemplateNotFound):
        renderer.render("pages/missing", {})


def test_requires_dir_or_loader() -> None:
    with pytest.raises(ValueError):
        JinjaContentRenderer()
