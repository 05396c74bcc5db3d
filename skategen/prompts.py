"""Interactive collection of component names and project answers.

Prompting goes through an ``Ask`` callable so tests (and non-interactive
callers) can substitute scripted answers for ``rich.prompt.Prompt``.
Nothing here touches the filesystem.
"""

from __future__ import annotations

from typing import Callable, Optional

from rich.prompt import Prompt

from skategen.models import SEPARATOR, ProjectAnswers, validate_component_name
from skategen.utils import slugify

Ask = Callable[[str, Optional[str]], Optional[str]]

COMPONENT_NAME_MESSAGE = "What should we call the component?"
MAIN_COMPONENT_MESSAGE = "What should we call the main component?"
DESCRIPTION_MESSAGE = "How would you describe this project?"
AUTHOR_NAME_MESSAGE = "What should we call you?"
AUTHOR_EMAIL_MESSAGE = "What is your email address?"


def rich_ask(message: str, default: Optional[str] = None) -> Optional[str]:
    """Ask a question on the terminal using ``rich.prompt.Prompt``."""
    if default is None:
        return Prompt.ask(message, default="", show_default=False)
    return Prompt.ask(message, default=default)


def default_component_name(appname: str, prefix: str = "x") -> str:
    """Default name for the main component of a new project.

    The project name is used as-is when it already contains a hyphen,
    otherwise it is prefixed with ``<prefix>-``.
    """
    appname = slugify(appname)
    if SEPARATOR in appname:
        return appname
    return f"{prefix}{SEPARATOR}{appname}"


def collect_component_name(argument: Optional[str], ask: Ask = rich_ask) -> str:
    """Return a validated component name.

    Uses *argument* when given, otherwise prompts for one.

    Raises:
        NameValidationError: If no name is supplied or it lacks a hyphen.
    """
    name = argument
    if not name:
        name = ask(COMPONENT_NAME_MESSAGE, None)
    if name is not None:
        name = name.strip()
    return validate_component_name(name)


def collect_project_answers(
    appname: str,
    ask: Ask = rich_ask,
    prefix: str = "x",
) -> ProjectAnswers:
    """Run the ``app`` prompts and return the collected answers.

    The main component name is asked first because the default description
    is derived from it.
    """
    default_name = default_component_name(appname, prefix)
    component_name = ask(MAIN_COMPONENT_MESSAGE, default_name) or default_name
    component_name = validate_component_name(component_name.strip())

    description = ask(DESCRIPTION_MESSAGE, f"`{component_name}` custom element")
    author_name = ask(AUTHOR_NAME_MESSAGE, None)
    author_email = ask(AUTHOR_EMAIL_MESSAGE, None)

    return ProjectAnswers(
        component_name=component_name,
        description=description,
        author_name=author_name,
        author_email=author_email,
    )
