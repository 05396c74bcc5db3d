"""Registration of generated components in the project's ``src/index.js``.

The index file imports every component and defines each one inside a
``registerComponents()`` block::

    import * as skate from "skatejs";
    import XFoo from "./components/x-foo/component.js";

    const { define } = skate;

    export function registerComponents() {
      define(XFoo);
    }

The file is parsed into an :class:`AggregatorIndex` (the original lines plus
the component imports and ``define()`` calls found in them).  Registering a
component that is already imported is a no-op; otherwise one import and one
registration are inserted after the existing ones, leaving every other line
as it was.  A missing index is rendered from ``index.js.j2``.
"""

from __future__ import annotations

import asyncio
import re
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from skategen.config import Config
from skategen.errors import NameValidationError
from skategen.models import Component
from skategen.utils import write_file

from .templates import TemplateRenderer

INDEX_TEMPLATE = "index.js.j2"
DEFAULT_INDENT = "  "

_IDENT = r"[A-Za-z_$][\w$]*"

COMPONENT_IMPORT_RE = re.compile(
    rf"""^\s*import\s+(?P<symbol>{_IDENT})\s+from\s+(?P<quote>["'])(?P<path>[^"']+)(?P=quote)\s*;?\s*$"""
)
IMPORT_START_RE = re.compile(r"^\s*import\b")
IMPORT_FROM_RE = re.compile(r"""\bfrom\s+["'][^"']+["']|^\s*import\s+["']""")
REGISTRATION_RE = re.compile(rf"^(?P<indent>\s*)define\(\s*(?P<symbol>{_IDENT})\s*\)\s*;?\s*$")
BLOCK_OPEN_RE = re.compile(r"^\s*(?:export\s+)?function\s+registerComponents\s*\(\s*\)\s*\{\s*$")


class UpdateOutcome(str, Enum):
    """What registering a component did to the index file."""
    CREATED = "created"
    UPDATED = "updated"
    UNCHANGED = "unchanged"


@dataclass(frozen=True)
class IndexEntry:
    """One component as seen by the index file."""

    symbol: str
    import_path: str

    @property
    def import_line(self) -> str:
        return f'import {self.symbol} from "{self.import_path}";'

    def registration_line(self, indent: str = DEFAULT_INDENT) -> str:
        return f"{indent}define({self.symbol});"


# ---------------------------------------------------------------------------
# Parsed index
# ---------------------------------------------------------------------------


@dataclass
class AggregatorIndex:
    """Line-preserving view of an index file."""

    lines: list[str] = field(default_factory=list)
    trailing_newline: bool = True
    newline: str = "\n"

    @classmethod
    def parse(cls, text: str) -> "AggregatorIndex":
        newline = "\r\n" if "\r\n" in text else "\n"
        lines = text.split(newline) if text else []
        trailing = text.endswith(newline) or not text
        if trailing and lines:
            lines.pop()
        return cls(lines=lines, trailing_newline=trailing, newline=newline)

    def render(self) -> str:
        text = self.newline.join(self.lines)
        if self.trailing_newline and self.lines:
            text += self.newline
        return text

    # -- Queries -------------------------------------------------------------

    @property
    def entries(self) -> list[IndexEntry]:
        """Default imports in file order."""
        found: list[IndexEntry] = []
        for line in self.lines:
            match = COMPONENT_IMPORT_RE.match(line)
            if match:
                found.append(IndexEntry(match.group("symbol"), match.group("path")))
        return found

    @property
    def registrations(self) -> list[str]:
        """Symbols passed to ``define()`` in file order."""
        return [
            match.group("symbol")
            for match in map(REGISTRATION_RE.match, self.lines)
            if match
        ]

    def contains(self, entry: IndexEntry) -> bool:
        return entry in set(self.entries)

    def check_symbol(self, entry: IndexEntry) -> None:
        """Reject *entry* if its symbol is already imported from another path.

        Raises:
            NameValidationError: On a symbol collision.
        """
        for existing in self.entries:
            if existing.symbol == entry.symbol and existing.import_path != entry.import_path:
                raise NameValidationError(
                    f"'{entry.symbol}' is already imported from '{existing.import_path}', "
                    f"cannot also import it from '{entry.import_path}'",
                    name=entry.symbol,
                )

    # -- Mutation ------------------------------------------------------------

    def add(self, entry: IndexEntry) -> bool:
        """Insert the import and registration for *entry*.

        Returns ``False`` (and changes nothing) when *entry* is already
        imported.  An existing ``define()`` call for the symbol is kept and
        not repeated.
        """
        if self.contains(entry):
            return False
        self.check_symbol(entry)

        self.lines.insert(self._import_insert_at(), entry.import_line)
        if entry.symbol in self.registrations:
            return True

        position, indent = self._registration_insert_at()
        self.lines.insert(position, entry.registration_line(indent))
        return True

    def _import_insert_at(self) -> int:
        last_end = -1
        i = 0
        while i < len(self.lines):
            if IMPORT_START_RE.match(self.lines[i]):
                i = self._import_end(i)
                last_end = i
            i += 1
        return last_end + 1

    def _import_end(self, start: int) -> int:
        # Multi-line imports end on the line carrying the module specifier.
        for i in range(start, len(self.lines)):
            if IMPORT_FROM_RE.search(self.lines[i]):
                return i
        return start

    def _registration_insert_at(self) -> tuple[int, str]:
        last = None
        for i, line in enumerate(self.lines):
            match = REGISTRATION_RE.match(line)
            if match:
                last = (i + 1, match.group("indent"))
        if last is not None:
            return last

        for i, line in enumerate(self.lines):
            if BLOCK_OPEN_RE.match(line):
                # The block ends where brace depth returns to zero, not at
                # the close of a nested statement.
                depth = line.count("{") - line.count("}")
                for j in range(i + 1, len(self.lines)):
                    depth += self.lines[j].count("{") - self.lines[j].count("}")
                    if depth <= 0:
                        return j, DEFAULT_INDENT
                break

        return len(self.lines), ""


# ---------------------------------------------------------------------------
# Updater
# ---------------------------------------------------------------------------


class AggregatorUpdater:
    """Keeps ``<source_root>/index.js`` in sync with generated components."""

    def __init__(self, config: Config, renderer: TemplateRenderer) -> None:
        self.config = config
        self.renderer = renderer

    @property
    def path(self) -> Path:
        return self.config.index_path

    def entry_for(self, component: Component) -> IndexEntry:
        return IndexEntry(
            symbol=component.symbol_name,
            import_path=self.config.component_import_path(component.name),
        )

    async def read(self) -> AggregatorIndex | None:
        """Parse the current index file, or return ``None`` if it is absent."""
        if not self.path.exists():
            return None
        raw = await asyncio.to_thread(self.path.read_bytes)
        text = raw.decode("utf-8")
        return AggregatorIndex.parse(text)

    async def plan(self, component: Component) -> UpdateOutcome:
        """Return what :meth:`register` would do, without writing anything.

        Raises:
            NameValidationError: If the component's symbol is already taken.
        """
        index = await self.read()
        if index is None:
            return UpdateOutcome.CREATED
        entry = self.entry_for(component)
        if index.contains(entry):
            return UpdateOutcome.UNCHANGED
        index.check_symbol(entry)
        return UpdateOutcome.UPDATED

    async def register(self, component: Component) -> UpdateOutcome:
        """Ensure *component* is imported and defined exactly once."""
        entry = self.entry_for(component)
        index = await self.read()
        if index is None:
            await self.renderer.render_to_file(
                INDEX_TEMPLATE, self.path, {"components": [entry]}
            )
            return UpdateOutcome.CREATED

        if not index.add(entry):
            return UpdateOutcome.UNCHANGED

        await asyncio.to_thread(write_file, self.path, index.render())
        return UpdateOutcome.UPDATED

    async def create_empty(self) -> bool:
        """Render an index with no components, unless one already exists."""
        if self.path.exists():
            return False
        await self.renderer.render_to_file(INDEX_TEMPLATE, self.path, {"components": []})
        return True
