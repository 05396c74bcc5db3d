"""Whole-project scaffolding orchestrator.

Takes the collected ``ProjectAnswers`` and writes a SkateJS project: the
manifest, README, webpack configuration, demo page, the shared ``src/``
helpers and index file, and finally the initial component.  Dependency
installation is handled separately by ``DependencyInstaller``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from skategen.config import Config
from skategen.models import ProjectAnswers
from skategen.utils import display_path, load_json, print_status, save_json

from .aggregator import AggregatorUpdater
from .component import ComponentGenerator, ComponentResult
from .manifest import build_manifest, sort_manifest
from .templates import TemplateRenderer

MANIFEST_TEMPLATE = "app/package.json"


@dataclass
class ProjectResult:
    """Everything written for a new project."""

    root: Path
    written: list[Path] = field(default_factory=list)
    component: ComponentResult | None = None


class ProjectGenerator:
    """Generates the skeleton of a SkateJS project.

    Writes, in order:
    - ``package.json`` merged from the template and the answers
    - ``README.md``, webpack configuration and the demo page (rendered)
    - ``.gitignore`` and ``src/util/style.js`` (copied verbatim)
    - ``src/index.js`` with no components, unless one already exists
    - the initial component, registered in ``src/index.js``
    """

    # Template name -> output path, rendered with the project context
    _RENDERED_FILES: dict[str, str] = {
        "app/README.md.j2": "README.md",
        "app/webpack/development.js.j2": "webpack/development.js",
        "app/webpack/production.js.j2": "webpack/production.js",
        "app/demo/index.html.j2": "demo/index.html",
    }

    # Template name -> output path, copied as-is
    _COPIED_FILES: dict[str, str] = {
        "app/gitignore": ".gitignore",
        "app/src/util/style.js": "src/util/style.js",
    }

    def __init__(self, config: Config, renderer: TemplateRenderer | None = None) -> None:
        self.config = config
        self.renderer = renderer or TemplateRenderer()
        self.aggregator = AggregatorUpdater(config, self.renderer)
        self.component_gen = ComponentGenerator(config, self.renderer)

    # -- Public API --------------------------------------------------------

    async def generate(self, answers: ProjectAnswers) -> ProjectResult:
        """Generate the project described by *answers* into the destination."""
        root = self.config.destination
        result = ProjectResult(root=root)
        context = self._build_context(answers)

        result.written.append(await self.write_manifest(answers))

        for template_name, output_name in self._RENDERED_FILES.items():
            path = await self.renderer.render_to_file(template_name, root / output_name, context)
            self._report("create", path)
            result.written.append(path)

        for template_name, output_name in self._COPIED_FILES.items():
            path = await self.renderer.copy_to_file(template_name, root / output_name)
            self._report("create", path)
            result.written.append(path)

        if await self.aggregator.create_empty():
            self._report("create", self.aggregator.path)
            result.written.append(self.aggregator.path)

        result.component = await self.component_gen.generate(answers.component_name)
        return result

    async def write_manifest(self, answers: ProjectAnswers) -> Path:
        """Write ``package.json`` for *answers* and return its path."""
        template = load_json(self.renderer.resolve(MANIFEST_TEMPLATE))
        manifest = sort_manifest(build_manifest(template, answers))
        path = await save_json(manifest, self.config.manifest_path)
        self._report("create", path)
        return path

    # -- Context building --------------------------------------------------

    def _build_context(self, answers: ProjectAnswers) -> dict[str, Any]:
        """Build the Jinja2 template context from the answers."""
        return {
            **answers.template_context(),
            "index_path": f"{self.config.source_root}/{self.config.index_file}",
        }

    def _report(self, action: str, path: Path) -> None:
        print_status(action, display_path(path, self.config.destination))


def detect_appname(destination: Path) -> str:
    """Name of the project being generated into *destination*.

    Uses the ``name`` from an existing ``package.json`` when there is one,
    otherwise the directory name.
    """
    manifest = destination / "package.json"
    if manifest.is_file():
        name = load_json(manifest).get("name")
        if isinstance(name, str) and name:
            return name
    return destination.resolve().name
