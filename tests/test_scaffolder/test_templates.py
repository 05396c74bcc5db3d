"""Tests for the Jinja2 template renderer (skategen.scaffolder.templates)."""

from __future__ import annotations

from pathlib import Path

import pytest

from skategen.errors import ConfigurationError
from skategen.scaffolder.templates import TemplateRenderer

pytestmark = pytest.mark.unit


@pytest.fixture
def custom_renderer(tmp_path: Path) -> TemplateRenderer:
    template_dir = tmp_path / "templates"
    (template_dir / "nested").mkdir(parents=True)
    (template_dir / "hello.txt.j2").write_text(
        "Hello {{ name }}!\n", encoding="utf-8"
    )
    (template_dir / "nested" / "raw.txt").write_text("{{ untouched }}\n", encoding="utf-8")
    return TemplateRenderer(template_dir)


class TestRender:
    def test_render(self, custom_renderer: TemplateRenderer):
        assert custom_renderer.render("hello.txt.j2", {"name": "x-foo"}) == (
            "Hello x-foo!\n"
        )

    def test_missing_template_is_configuration_error(self, custom_renderer: TemplateRenderer):
        with pytest.raises(ConfigurationError) as exc_info:
            custom_renderer.render("missing.j2", {})
        assert exc_info.value.template == "missing.j2"

    def test_undefined_variable_fails_loudly(self, custom_renderer: TemplateRenderer):
        with pytest.raises(Exception):
            custom_renderer.render("hello.txt.j2", {})


class TestFileOutput:
    async def test_render_to_file_creates_parents(
        self, custom_renderer: TemplateRenderer, tmp_path: Path
    ):
        out = tmp_path / "out" / "deep" / "hello.txt"
        path = await custom_renderer.render_to_file("hello.txt.j2", out, {"name": "a-b"})

        assert path == out
        assert out.read_text(encoding="utf-8") == "Hello a-b!\n"

    async def test_copy_to_file_is_verbatim(
        self, custom_renderer: TemplateRenderer, tmp_path: Path
    ):
        out = tmp_path / "out" / "raw.txt"
        await custom_renderer.copy_to_file("nested/raw.txt", out)
        assert out.read_text(encoding="utf-8") == "{{ untouched }}\n"

    async def test_copy_missing_file_is_configuration_error(
        self, custom_renderer: TemplateRenderer, tmp_path: Path
    ):
        with pytest.raises(ConfigurationError):
            await custom_renderer.copy_to_file("nope.txt", tmp_path / "nope.txt")
        assert not (tmp_path / "nope.txt").exists()


class TestBundledTemplates:
    @pytest.mark.parametrize(
        "template_path",
        [
            "index.js.j2",
            "component/component.js.j2",
            "component/styles.scss.j2",
            "component/test.js.j2",
            "app/package.json",
            "app/gitignore",
            "app/src/util/style.js",
            "app/README.md.j2",
            "app/webpack/development.js.j2",
            "app/webpack/production.js.j2",
            "app/demo/index.html.j2",
        ],
    )
    def test_bundled_template_present(self, renderer: TemplateRenderer, template_path: str):
        assert renderer.resolve(template_path).is_file()

    def test_resolve_missing(self, renderer: TemplateRenderer):
        with pytest.raises(ConfigurationError):
            renderer.resolve("nope.j2")
