"""Shared pytest fixtures for the skategen test suite.

Provides reusable fixtures for:
- Temporary project directories and matching ``Config`` objects
- A shared ``TemplateRenderer`` over the bundled templates
- Scripted prompt answers standing in for ``rich.prompt.Prompt``
- A mocked package-manager subprocess
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable, Optional
from unittest.mock import AsyncMock, patch

import pytest

from skategen.config import Config
from skategen.scaffolder.templates import TemplateRenderer


# ---------------------------------------------------------------------------
# Paths & configuration
# ---------------------------------------------------------------------------

@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    """Empty project directory whose name has no hyphen."""
    directory = tmp_path / "widgets"
    directory.mkdir()
    return directory


@pytest.fixture
def config(project_dir: Path) -> Config:
    """Default configuration generating into ``project_dir``."""
    return Config(destination=project_dir)


@pytest.fixture
def renderer() -> TemplateRenderer:
    """Renderer over the templates shipped with the package."""
    return TemplateRenderer()


# ---------------------------------------------------------------------------
# Prompts
# ---------------------------------------------------------------------------

@pytest.fixture
def scripted_ask() -> Callable[..., Any]:
    """Build an ``Ask`` callable from a ``{message: answer}`` mapping.

    Questions without a scripted answer return their default, the way a
    user pressing Enter would.  Every question asked is recorded on
    ``ask.asked`` as a ``(message, default)`` tuple.
    """

    def _factory(answers: dict[str, Optional[str]] | None = None):
        answers = answers or {}
        asked: list[tuple[str, Optional[str]]] = []

        def ask(message: str, default: Optional[str] = None) -> Optional[str]:
            asked.append((message, default))
            if message in answers:
                return answers[message]
            return default

        ask.asked = asked  # type: ignore[attr-defined]
        return ask

    return _factory


# ---------------------------------------------------------------------------
# Package manager
# ---------------------------------------------------------------------------

@pytest.fixture
def mock_run_command():
    """Patch the installer's ``run_command`` to succeed without spawning anything."""
    with patch(
        "skategen.installer.run_command",
        new=AsyncMock(return_value=(0, "", "")),
    ) as mocked:
        yield mocked
