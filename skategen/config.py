"""skategen configuration.

Typed settings for the generators.  All settings use Pydantic v2 models so
they are validated at construction time and can be serialised to/from JSON
or read from environment variables without boiler-plate.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, Field

DEFAULT_RUNTIME_DEPENDENCIES: list[str] = [
    "skatejs",
]

DEFAULT_DEV_DEPENDENCIES: list[str] = [
    "babel-core",
    "babel-loader",
    "babel-plugin-transform-react-jsx",
    "babel-preset-es2015",
    "esdoc",
    "eslint",
    "node-sass",
    "raw-loader",
    "sass-loader",
    "webpack",
    "webpack-bundle-size-analyzer",
    "webpack-dev-server",
    "webpack-merge",
]


class Config(BaseModel):
    """Global skategen configuration.

    Holds the layout of a generated project and the dependency lists handed
    to the package manager.  Instances are created once by the CLI entry
    point and passed to every generator.
    """

    destination: Path = Field(default=Path("."), description="Project root being generated into")
    source_root: str = Field(default="src")
    components_dir: str = Field(default="src/components")
    component_tests_dir: str = Field(default="test/components")
    index_file: str = Field(default="index.js")
    default_prefix: str = Field(
        default="x", min_length=1, description="Prefix for the default component name"
    )

    package_manager: Literal["yarn", "npm"] = Field(default="yarn")
    install_timeout: int = Field(default=600, ge=10, description="Install timeout in seconds")
    runtime_dependencies: list[str] = Field(
        default_factory=lambda: list(DEFAULT_RUNTIME_DEPENDENCIES)
    )
    dev_dependencies: list[str] = Field(
        default_factory=lambda: list(DEFAULT_DEV_DEPENDENCIES)
    )

    # ------------------------------------------------------------------
    # Derived paths (read-only properties)
    # ------------------------------------------------------------------

    @property
    def index_path(self) -> Path:
        """Path to the aggregating ``index.js`` file."""
        return self.destination / self.source_root / self.index_file

    @property
    def manifest_path(self) -> Path:
        """Path to the project's ``package.json``."""
        return self.destination / "package.json"

    def component_dir(self, name: str) -> Path:
        """Directory holding the sources of component *name*."""
        return self.destination / self.components_dir / name

    def component_test_path(self, name: str) -> Path:
        """Path of the generated test file for component *name*."""
        return self.destination / self.component_tests_dir / f"{name}-test.js"

    def component_import_path(self, name: str) -> str:
        """Import specifier of component *name*, relative to the index file."""
        relative = Path(self.components_dir).relative_to(self.source_root)
        return f"./{relative.as_posix()}/{name}/component.js"

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path | None = None) -> Path:
        """Persist the configuration to a JSON file.

        Args:
            path: Destination file. Defaults to ``<destination>/.skategen.json``.

        Returns:
            The path where the file was written.
        """
        target = path or (self.destination / ".skategen.json")
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return target

    @classmethod
    def load(cls, path: Path) -> "Config":
        """Load a previously-saved configuration from JSON."""
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)

    @classmethod
    def from_env(cls, **overrides: Any) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            SKATEGEN_DESTINATION, SKATEGEN_PACKAGE_MANAGER,
            SKATEGEN_INSTALL_TIMEOUT, SKATEGEN_DEFAULT_PREFIX,
            SKATEGEN_RUNTIME_DEPENDENCIES, SKATEGEN_DEV_DEPENDENCIES.

        Dependency variables are comma-separated package names.  Keyword
        arguments take precedence over the environment.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("SKATEGEN_DESTINATION"):
            kwargs["destination"] = Path(os.environ["SKATEGEN_DESTINATION"])
        if os.environ.get("SKATEGEN_PACKAGE_MANAGER"):
            kwargs["package_manager"] = os.environ["SKATEGEN_PACKAGE_MANAGER"]
        if os.environ.get("SKATEGEN_INSTALL_TIMEOUT"):
            kwargs["install_timeout"] = os.environ["SKATEGEN_INSTALL_TIMEOUT"]
        if os.environ.get("SKATEGEN_DEFAULT_PREFIX"):
            kwargs["default_prefix"] = os.environ["SKATEGEN_DEFAULT_PREFIX"]
        if os.environ.get("SKATEGEN_RUNTIME_DEPENDENCIES"):
            kwargs["runtime_dependencies"] = _split_list(
                os.environ["SKATEGEN_RUNTIME_DEPENDENCIES"]
            )
        if os.environ.get("SKATEGEN_DEV_DEPENDENCIES"):
            kwargs["dev_dependencies"] = _split_list(os.environ["SKATEGEN_DEV_DEPENDENCIES"])

        kwargs.update(overrides)
        return cls(**kwargs)


def _split_list(raw: str) -> list[str]:
    return [item.strip() for item in raw.split(",") if item.strip()]
