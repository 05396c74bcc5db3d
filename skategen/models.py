"""Pydantic v2 models shared by the prompts and the generators.

``Component`` describes a single generated custom element and every name
derived from it.  ``ProjectAnswers`` is the immutable record collected by
the project prompts and threaded through project generation.
"""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from skategen.errors import NameValidationError
from skategen.utils import to_pascal

SEPARATOR = "-"


def validate_component_name(name: str | None) -> str:
    """Return *name* if it is a usable custom element name.

    Raises:
        NameValidationError: If the name is missing or has no hyphen.
    """
    if not name:
        raise NameValidationError("A component name must be provided")
    if SEPARATOR not in name:
        raise NameValidationError(
            f"The component name must include a hyphen, was '{name}'", name=name
        )
    return name


# ---------------------------------------------------------------------------
# Component
# ---------------------------------------------------------------------------


class Component(BaseModel):
    """A single generated custom element."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Custom element tag, e.g. 'x-foo'")

    @classmethod
    def from_name(cls, name: str | None) -> "Component":
        """Validate *name* and build a ``Component`` from it."""
        return cls(name=validate_component_name(name))

    @property
    def symbol_name(self) -> str:
        """Class name used in source code (``x-foo`` -> ``XFoo``)."""
        return to_pascal(self.name)

    @property
    def label(self) -> str:
        """Human-readable label, used for the test ``describe`` block."""
        return f"{self.name} component"

    def template_context(self) -> dict[str, Any]:
        return {
            "component_name": self.name,
            "component_class": self.symbol_name,
            "component_label": self.label,
        }


# ---------------------------------------------------------------------------
# Project answers
# ---------------------------------------------------------------------------


class ProjectAnswers(BaseModel):
    """Values collected by the ``app`` prompts.

    Optional fields are ``None`` when the user gave no answer; blank strings
    are normalised to ``None`` so they are omitted rather than written empty.
    """

    model_config = ConfigDict(frozen=True)

    component_name: str
    description: Optional[str] = None
    author_name: Optional[str] = None
    author_email: Optional[str] = None

    @field_validator("component_name")
    @classmethod
    def _check_component_name(cls, value: str) -> str:
        # NameValidationError is not a ValueError, so pydantic lets it propagate.
        return validate_component_name(value)

    @field_validator("description", "author_name", "author_email", mode="before")
    @classmethod
    def _blank_to_none(cls, value: Any) -> Any:
        if isinstance(value, str):
            value = value.strip()
            return value or None
        return value

    @property
    def component(self) -> Component:
        return Component(name=self.component_name)

    def template_context(self) -> dict[str, Any]:
        return {
            "initial_component_name": self.component_name,
            "project_description": self.description,
            "author_name": self.author_name,
            "author_email": self.author_email,
            **self.component.template_context(),
        }
