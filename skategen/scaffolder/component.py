"""Per-component file generation.

Renders ``component.js``, ``styles.scss`` and the component's test file,
then registers the component in the project's index file.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from skategen.config import Config
from skategen.models import Component
from skategen.utils import display_path, print_status

from .aggregator import AggregatorUpdater, UpdateOutcome
from .templates import TemplateRenderer


@dataclass
class ComponentResult:
    """Files written for one component and what happened to the index."""

    component: Component
    written: list[Path] = field(default_factory=list)
    index_outcome: UpdateOutcome = UpdateOutcome.UNCHANGED


class ComponentGenerator:
    """Generates the sources of a single custom element."""

    # Template name -> output file name inside the component directory
    _SOURCE_FILES: dict[str, str] = {
        "component/component.js.j2": "component.js",
        "component/styles.scss.j2": "styles.scss",
    }
    _TEST_TEMPLATE = "component/test.js.j2"

    def __init__(self, config: Config, renderer: TemplateRenderer | None = None) -> None:
        self.config = config
        self.renderer = renderer or TemplateRenderer()
        self.aggregator = AggregatorUpdater(config, self.renderer)

    async def generate(self, name: str | None) -> ComponentResult:
        """Generate component *name* and register it in the index file.

        Raises:
            NameValidationError: If *name* is missing, has no hyphen, or its
                class name is already taken in the index.  Nothing is written.
        """
        component = Component.from_name(name)
        await self.aggregator.plan(component)

        result = ComponentResult(component=component)
        context = self._build_context(component)

        target_dir = self.config.component_dir(component.name)
        for template_name, output_name in self._SOURCE_FILES.items():
            path = await self.renderer.render_to_file(
                template_name, target_dir / output_name, context
            )
            self._report("create", path)
            result.written.append(path)

        test_path = await self.renderer.render_to_file(
            self._TEST_TEMPLATE, self.config.component_test_path(component.name), context
        )
        self._report("create", test_path)
        result.written.append(test_path)

        result.index_outcome = await self.aggregator.register(component)
        self._report(_INDEX_STATUS[result.index_outcome], self.aggregator.path)
        return result

    # -- Context building --------------------------------------------------

    def _build_context(self, component: Component) -> dict[str, Any]:
        """Build the Jinja2 template context for *component*."""
        component_dir = self.config.component_dir(component.name)
        test_dir = self.config.component_test_path(component.name).parent
        style_util = self.config.destination / self.config.source_root / "util" / "style.js"

        return {
            **component.template_context(),
            "style_util_path": _relative_import(style_util, component_dir),
            "component_module": _relative_import(component_dir / "component.js", test_dir),
        }

    def _report(self, action: str, path: Path) -> None:
        print_status(action, display_path(path, self.config.destination))


_INDEX_STATUS: dict[UpdateOutcome, str] = {
    UpdateOutcome.CREATED: "create",
    UpdateOutcome.UPDATED: "update",
    UpdateOutcome.UNCHANGED: "identical",
}


def _relative_import(target: Path, from_dir: Path) -> str:
    """ES module specifier for *target* as seen from *from_dir*."""
    relative = Path(os.path.relpath(target, from_dir)).as_posix()
    if not relative.startswith("."):
        relative = f"./{relative}"
    return relative
