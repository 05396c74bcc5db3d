"""Exception hierarchy for skategen.

Every failure the generators can raise derives from ``SkategenError`` so the
CLI can report it uniformly and exit with a non-zero status.  Nothing is
retried and nothing already written to disk is rolled back.
"""

from __future__ import annotations


class SkategenError(Exception):
    """Base class for all skategen failures."""


class NameValidationError(SkategenError):
    """Raised when a component name is missing or malformed.

    Raised before any file is written.
    """

    def __init__(self, message: str, name: str | None = None) -> None:
        self.name = name
        super().__init__(message)


class ConfigurationError(SkategenError):
    """Raised when a bundled template cannot be resolved.

    This signals a defect in skategen itself rather than bad user input.
    """

    def __init__(self, message: str, template: str = "") -> None:
        self.template = template
        super().__init__(message)


class ExternalToolError(SkategenError):
    """Raised when the package manager exits with a non-zero status."""

    def __init__(
        self,
        message: str,
        command: str = "",
        returncode: int | None = None,
        stderr: str = "",
    ) -> None:
        self.command = command
        self.returncode = returncode
        self.stderr = stderr
        super().__init__(message)
