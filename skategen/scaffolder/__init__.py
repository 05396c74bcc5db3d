"""skategen scaffolder -- writes SkateJS projects and components.

Quick usage::

    from pathlib import Path

    from skategen.config import Config
    from skategen.scaffolder import ComponentGenerator

    generator = ComponentGenerator(Config(destination=Path("my-project")))
    result = await generator.generate("x-foo")
"""

from skategen.scaffolder.aggregator import AggregatorIndex, AggregatorUpdater, UpdateOutcome
from skategen.scaffolder.component import ComponentGenerator, ComponentResult
from skategen.scaffolder.project import ProjectGenerator, ProjectResult
from skategen.scaffolder.templates import TemplateRenderer

__all__ = [
    "AggregatorIndex",
    "AggregatorUpdater",
    "ComponentGenerator",
    "ComponentResult",
    "ProjectGenerator",
    "ProjectResult",
    "TemplateRenderer",
    "UpdateOutcome",
]
