"""Jinja2 template rendering for project scaffolding.

Provides the TemplateRenderer class which loads Jinja2 templates from the
``skategen/templates/`` directory and renders them with project or component
context data.  Files that must be copied untouched (``.gitignore``, style
helpers) go through :meth:`TemplateRenderer.copy_to_file` instead.
"""

from __future__ import annotations

import asyncio
import shutil
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined, TemplateNotFound

from skategen.errors import ConfigurationError
from skategen.utils import write_file


# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

_DEFAULT_TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates"


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders Jinja2 templates for scaffolding.

    Template paths are relative to the template root (e.g.
    ``"component/component.js.j2"``).  A missing template is a defect in the
    tool, so it surfaces as a ``ConfigurationError``.
    """

    def __init__(self, template_dir: str | Path | None = None) -> None:
        if template_dir is None:
            template_dir = _DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=False,
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
            undefined=StrictUndefined,
        )

    # -- Single template rendering -----------------------------------------

    def render(self, template_path: str, context: dict[str, Any]) -> str:
        """Render a single template with the provided context.

        Raises:
            ConfigurationError: If the template does not exist.
        """
        try:
            template = self.env.get_template(template_path)
        except TemplateNotFound as exc:
            raise ConfigurationError(
                f"Template not found: {self.template_dir / template_path}",
                template=template_path,
            ) from exc
        return template.render(**context)

    # -- File-based rendering (async) --------------------------------------

    async def render_to_file(
        self,
        template_path: str,
        output_path: str | Path,
        context: dict[str, Any],
    ) -> Path:
        """Render a template and write the result to *output_path*.

        Parent directories are created automatically.
        """
        content = self.render(template_path, context)
        out = Path(output_path)
        await asyncio.to_thread(write_file, out, content)
        return out

    async def copy_to_file(self, template_path: str, output_path: str | Path) -> Path:
        """Copy a template file verbatim, without rendering it."""
        source = self.resolve(template_path)
        out = Path(output_path)
        await asyncio.to_thread(_copy_file, source, out)
        return out

    # -- Utility -----------------------------------------------------------

    def resolve(self, template_path: str) -> Path:
        """Return the absolute path of a template file.

        Raises:
            ConfigurationError: If the file does not exist.
        """
        source = self.template_dir / template_path
        if not source.is_file():
            raise ConfigurationError(f"Template not found: {source}", template=template_path)
        return source


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _copy_file(source: Path, target: Path) -> None:
    target.parent.mkdir(parents=True, exist_ok=True)
    shutil.copyfile(source, target)
