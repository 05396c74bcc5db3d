"""Command-line entry point.

Usage::

    skategen app                   # new project in the current directory
    skategen app --cwd ./my-app --skip-install
    skategen component x-foo       # add a component to an existing project
    skategen component             # prompts for the component name
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path

from pydantic import ValidationError

from skategen import __version__
from skategen.config import Config
from skategen.errors import ExternalToolError, SkategenError
from skategen.installer import DependencyInstaller
from skategen.prompts import Ask, collect_component_name, collect_project_answers, rich_ask
from skategen.scaffolder import ComponentGenerator, ComponentResult, ProjectGenerator, ProjectResult
from skategen.scaffolder.project import detect_appname
from skategen.utils import (
    console,
    ensure_dir,
    print_error,
    print_success,
    print_summary_table,
    print_warning,
    print_welcome,
)


# ---------------------------------------------------------------------------
# Generators
# ---------------------------------------------------------------------------


async def run_app(
    config: Config,
    ask: Ask = rich_ask,
    skip_install: bool = False,
) -> ProjectResult:
    """Prompt for project answers, write the project and install dependencies."""
    ensure_dir(config.destination)
    appname = detect_appname(config.destination)
    answers = collect_project_answers(appname, ask, prefix=config.default_prefix)

    result = await ProjectGenerator(config).generate(answers)

    if skip_install:
        print_warning("Skipping dependency installation (--skip-install).")
    else:
        await DependencyInstaller(config).install()

    print_summary_table(
        {
            "Component": answers.component_name,
            "Description": answers.description or "-",
            "Author": answers.author_name or "-",
            "Files written": str(len(result.written) + len(result.component.written)),
        },
        title="Project created",
    )
    return result


async def run_component(
    config: Config,
    name: str | None,
    ask: Ask = rich_ask,
) -> ComponentResult:
    """Collect a component name and generate that component."""
    component_name = collect_component_name(name, ask)
    return await ComponentGenerator(config).generate(component_name)


# ---------------------------------------------------------------------------
# CLI
# ---------------------------------------------------------------------------


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="skategen",
        description="skategen -- SkateJS project and component generator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  skategen app\n"
            "  skategen app --cwd ./my-app --skip-install\n"
            "  skategen component x-foo\n"
        ),
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--cwd",
        default=None,
        help="Project directory to generate into (default: current directory)",
    )
    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Only print errors",
    )

    subparsers = parser.add_subparsers(dest="generator", required=True)

    app = subparsers.add_parser("app", help="Create a new SkateJS project")
    app.add_argument(
        "--skip-install",
        action="store_true",
        help="Do not install dependencies after writing the project",
    )

    component = subparsers.add_parser("component", help="Add a component to a project")
    component.add_argument(
        "name",
        nargs="?",
        default=None,
        help="Custom element name, must contain a hyphen (prompted if omitted)",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``skategen`` and ``python -m skategen``."""
    args = build_parser().parse_args(argv)

    overrides = {"destination": Path(args.cwd)} if args.cwd else {}
    try:
        config = Config.from_env(**overrides)
    except ValidationError as exc:
        print_error(f"Invalid configuration: {exc}")
        sys.exit(2)
    console.quiet = args.quiet

    try:
        if args.generator == "app":
            if not args.quiet:
                print_welcome("app")
            asyncio.run(run_app(config, skip_install=args.skip_install))
            print_success("Project generated successfully!")
        else:
            result = asyncio.run(run_component(config, args.name))
            print_success(f"Component <{result.component.name}> generated.")
    except ExternalToolError as exc:
        print_error(str(exc))
        if exc.stderr:
            print_error(exc.stderr)
        sys.exit(1)
    except SkategenError as exc:
        print_error(str(exc))
        sys.exit(1)


if __name__ == "__main__":
    main()
