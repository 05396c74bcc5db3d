"""Tests for dependency installation (skategen.installer)."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import AsyncMock, patch

import pytest

from skategen.config import Config
from skategen.errors import ExternalToolError
from skategen.installer import DependencyInstaller

pytestmark = pytest.mark.unit


class TestBuildCommands:
    def test_yarn(self, config: Config):
        commands = DependencyInstaller(config).build_commands(["skatejs"], ["eslint", "webpack"])
        assert commands == [
            ["yarn", "add", "skatejs"],
            ["yarn", "add", "--dev", "eslint", "webpack"],
        ]

    def test_npm(self, project_dir: Path):
        config = Config(destination=project_dir, package_manager="npm")
        commands = DependencyInstaller(config).build_commands(["skatejs"], ["eslint"])
        assert commands == [
            ["npm", "install", "--save", "skatejs"],
            ["npm", "install", "--save-dev", "eslint"],
        ]

    def test_empty_lists_are_skipped(self, config: Config):
        installer = DependencyInstaller(config)
        assert installer.build_commands([], ["eslint"]) == [["yarn", "add", "--dev", "eslint"]]
        assert installer.build_commands([], []) == []


class TestInstall:
    async def test_uses_configured_lists(self, config: Config, mock_run_command: AsyncMock):
        await DependencyInstaller(config).install()

        assert mock_run_command.await_count == 2
        runtime_call, dev_call = mock_run_command.await_args_list
        assert runtime_call.args[0] == ["yarn", "add", "skatejs"]
        assert dev_call.args[0] == ["yarn", "add", "--dev", *config.dev_dependencies]
        assert runtime_call.kwargs["cwd"] == config.destination
        assert runtime_call.kwargs["timeout"] == config.install_timeout

    async def test_explicit_lists(self, config: Config, mock_run_command: AsyncMock):
        await DependencyInstaller(config).install(runtime=["a"], dev=[])
        mock_run_command.assert_awaited_once()
        assert mock_run_command.await_args.args[0] == ["yarn", "add", "a"]

    async def test_failure_raises_and_stops(self, config: Config):
        failing = AsyncMock(return_value=(1, "", "network down"))
        with patch("skategen.installer.run_command", new=failing):
            with pytest.raises(ExternalToolError) as exc_info:
                await DependencyInstaller(config).install()

        error = exc_info.value
        assert error.returncode == 1
        assert error.stderr == "network down"
        assert error.command == "yarn add skatejs"
        assert failing.await_count == 1

    async def test_missing_package_manager(self, config: Config):
        missing = AsyncMock(side_effect=FileNotFoundError("yarn"))
        with patch("skategen.installer.run_command", new=missing):
            with pytest.raises(ExternalToolError, match="yarn is not installed"):
                await DependencyInstaller(config).install()
