"""skategen -- scaffolding for SkateJS custom-element projects."""

__version__ = "0.1.0"
