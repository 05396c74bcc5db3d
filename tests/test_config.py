"""Unit tests for Config (skategen.config).

Tests cover:
- Defaults and dependency lists
- Derived paths
- save/load round trip
- from_env, including overrides and validation
"""

from __future__ import annotations

import os
from pathlib import Path
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from skategen.config import DEFAULT_DEV_DEPENDENCIES, DEFAULT_RUNTIME_DEPENDENCIES, Config

pytestmark = pytest.mark.unit


class TestDefaults:
    def test_layout(self):
        config = Config()
        assert config.destination == Path(".")
        assert config.source_root == "src"
        assert config.components_dir == "src/components"
        assert config.component_tests_dir == "test/components"
        assert config.index_file == "index.js"
        assert config.default_prefix == "x"

    def test_dependencies(self):
        config = Config()
        assert config.package_manager == "yarn"
        assert config.runtime_dependencies == ["skatejs"]
        assert "webpack" in config.dev_dependencies
        assert len(config.dev_dependencies) == 13

    def test_dependency_lists_are_copies(self):
        config = Config()
        config.runtime_dependencies.append("lit")
        assert DEFAULT_RUNTIME_DEPENDENCIES == ["skatejs"]
        assert Config().runtime_dependencies == ["skatejs"]
        assert Config().dev_dependencies == DEFAULT_DEV_DEPENDENCIES

    def test_invalid_package_manager(self):
        with pytest.raises(ValidationError):
            Config(package_manager="pnpm")


class TestDerivedPaths:
    def test_paths(self, tmp_path: Path):
        config = Config(destination=tmp_path)
        assert config.index_path == tmp_path / "src" / "index.js"
        assert config.manifest_path == tmp_path / "package.json"
        assert config.component_dir("x-foo") == tmp_path / "src" / "components" / "x-foo"
        assert config.component_test_path("x-foo") == (
            tmp_path / "test" / "components" / "x-foo-test.js"
        )

    def test_import_path(self):
        assert Config().component_import_path("x-foo") == "./components/x-foo/component.js"

    def test_import_path_with_custom_layout(self):
        config = Config(source_root="lib", components_dir="lib/elements")
        assert config.component_import_path("x-foo") == "./elements/x-foo/component.js"


class TestSaveLoad:
    def test_round_trip(self, tmp_path: Path):
        config = Config(destination=tmp_path, package_manager="npm", dev_dependencies=["eslint"])
        path = config.save()

        assert path == tmp_path / ".skategen.json"
        loaded = Config.load(path)
        assert loaded == config

    def test_explicit_path(self, tmp_path: Path):
        target = tmp_path / "nested" / "cfg.json"
        assert Config().save(target) == target
        assert target.exists()


class TestFromEnv:
    def test_no_env(self):
        with patch.dict(os.environ, {}, clear=True):
            assert Config.from_env() == Config()

    def test_reads_variables(self):
        env = {
            "SKATEGEN_DESTINATION": "/tmp/proj",
            "SKATEGEN_PACKAGE_MANAGER": "npm",
            "SKATEGEN_INSTALL_TIMEOUT": "30",
            "SKATEGEN_DEFAULT_PREFIX": "acme",
            "SKATEGEN_RUNTIME_DEPENDENCIES": "skatejs, preact",
            "SKATEGEN_DEV_DEPENDENCIES": "eslint,,webpack",
        }
        with patch.dict(os.environ, env, clear=True):
            config = Config.from_env()

        assert config.destination == Path("/tmp/proj")
        assert config.package_manager == "npm"
        assert config.install_timeout == 30
        assert config.default_prefix == "acme"
        assert config.runtime_dependencies == ["skatejs", "preact"]
        assert config.dev_dependencies == ["eslint", "webpack"]

    def test_overrides_win(self, tmp_path: Path):
        with patch.dict(os.environ, {"SKATEGEN_DESTINATION": "/elsewhere"}, clear=True):
            config = Config.from_env(destination=tmp_path)
        assert config.destination == tmp_path

    def test_invalid_value(self):
        with patch.dict(os.environ, {"SKATEGEN_PACKAGE_MANAGER": "bower"}, clear=True):
            with pytest.raises(ValidationError):
                Config.from_env()

    def test_non_numeric_timeout_is_validation_error(self):
        with patch.dict(os.environ, {"SKATEGEN_INSTALL_TIMEOUT": "soon"}, clear=True):
            with pytest.raises(ValidationError):
                Config.from_env()
