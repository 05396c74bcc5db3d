"""Dependency installation through the project's package manager.

Installs the runtime and development dependency lists of a freshly generated
project with ``yarn add`` (or ``npm install``).  No versions are pinned here;
the package manager records whatever it resolves.
"""

from __future__ import annotations

from pathlib import Path

from skategen.config import Config
from skategen.errors import ExternalToolError
from skategen.utils import print_status, run_command

_ADD_COMMANDS: dict[str, tuple[list[str], list[str]]] = {
    # package manager -> (runtime command, dev command)
    "yarn": (["yarn", "add"], ["yarn", "add", "--dev"]),
    "npm": (["npm", "install", "--save"], ["npm", "install", "--save-dev"]),
}


class DependencyInstaller:
    """Runs the package manager inside the generated project."""

    def __init__(self, config: Config) -> None:
        self.config = config

    @property
    def cwd(self) -> Path:
        return self.config.destination

    def build_commands(
        self, runtime: list[str], dev: list[str]
    ) -> list[list[str]]:
        """Return the commands needed to install both lists, skipping empty ones."""
        runtime_cmd, dev_cmd = _ADD_COMMANDS[self.config.package_manager]
        commands: list[list[str]] = []
        if runtime:
            commands.append([*runtime_cmd, *runtime])
        if dev:
            commands.append([*dev_cmd, *dev])
        return commands

    async def install(
        self,
        runtime: list[str] | None = None,
        dev: list[str] | None = None,
    ) -> None:
        """Install *runtime* and *dev* dependencies, runtime first.

        Defaults to the lists from the configuration.

        Raises:
            ExternalToolError: If the package manager is missing or fails.
                Files already written stay on disk.
        """
        if runtime is None:
            runtime = self.config.runtime_dependencies
        if dev is None:
            dev = self.config.dev_dependencies

        for cmd in self.build_commands(runtime, dev):
            cmd_str = " ".join(cmd)
            print_status("install", cmd_str)
            try:
                returncode, _stdout, stderr = await run_command(
                    cmd, cwd=self.cwd, timeout=self.config.install_timeout
                )
            except FileNotFoundError as exc:
                raise ExternalToolError(
                    f"{cmd[0]} is not installed or not on PATH",
                    command=cmd_str,
                ) from exc

            if returncode != 0:
                raise ExternalToolError(
                    f"`{cmd_str}` failed with exit code {returncode}",
                    command=cmd_str,
                    returncode=returncode,
                    stderr=stderr,
                )
