"""Demo list items.

``TextContainer`` is a titled entry whose detail lines become navigable
children when expanded. ``SourceItem`` lists a source file with its top-level
definitions as children, highlighted with Pygments. ``ColorBlock`` is a
fixed-size swatch written against the older ``size``/``highlight`` contract.

Every item draws itself with ``draw(width, height, theme)`` into exactly
``height`` rows of ``width`` columns.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, replace
from functools import lru_cache
from pathlib import Path

from pygments import highlight as pygments_highlight
from pygments.formatters import Terminal256Formatter
from pygments.lexers import TextLexer, get_lexer_for_filename
from pygments.styles import get_style_by_name
from pygments.util import ClassNotFound

from ..ansi import pad_ansi_line
from ..prerender import PreRenderContext, ScrollAxis
from ..ui_theme import UITheme

DEFINITION_RE = re.compile(r"^(?:async\s+def|def|class)\s+\w+")
COLOR_BLOCK_SIZE = 15
COLOR_BLOCK_ROWS = 3
FALLBACK_STYLE = "monokai"


def _fill(lines: list[str], width: int, height: int, style: str, reset: str) -> list[str]:
    rows = [f"{style}{pad_ansi_line(line, width)}{reset}" for line in lines[:height]]
    blank = f"{style}{' ' * width}{reset}"
    rows.extend(blank for _ in range(height - len(rows)))
    return rows


@dataclass(frozen=True)
class TextContainer:
    """Titled entry with detail lines shown as children when expanded."""

    title: str
    content: tuple[str, ...] = ()
    selected: bool = False
    expanded: bool = False
    selected_child: int | None = None

    @property
    def children(self) -> tuple[str, ...]:
        return self.content

    def pre_render(self, context: PreRenderContext) -> tuple[TextContainer, int]:
        prepared = replace(
            self,
            selected=context.is_selected,
            expanded=context.is_expanded,
            selected_child=context.selected_child,
        )
        if context.scroll_axis is ScrollAxis.HORIZONTAL:
            widths = [len(self.title)]
            if prepared.expanded:
                widths.extend(len(line) for line in self.content)
            return prepared, max(widths) + 6
        # Title row plus a spacer row, and one row per child when expanded.
        height = 2 + (len(self.content) if prepared.expanded else 0)
        return prepared, height

    def focus_row(self) -> int:
        """Row of the selected child; the title occupies row 0."""
        if self.expanded and self.selected_child is not None:
            return self.selected_child + 1
        return 0

    def draw(self, width: int, height: int, theme: UITheme) -> list[str]:
        marker = ("▾ " if self.expanded else "▸ ") if self.content else "  "
        title_style = theme.selection if self.selected and self.selected_child is None else theme.item_title
        lines = [f"{theme.expand_marker}{marker}{theme.reset}{title_style}{self.title}{theme.reset}"]
        if self.expanded:
            for idx, line in enumerate(self.content):
                style = theme.child_selection if self.selected_child == idx else theme.item_content
                lines.append(f"    {style}{line}{theme.reset}")
        return _fill(lines, width, height, theme.root, theme.reset)


def normalize_style(style: str) -> str:
    """Return ``style`` when Pygments knows it, else the fallback style."""
    try:
        get_style_by_name(style)
    except ClassNotFound:
        return FALLBACK_STYLE
    return style


@lru_cache(maxsize=1024)
def highlight_source_line(text: str, filename: str, style: str) -> str:
    """Return ``text`` highlighted for ``filename`` with Pygments ``style``."""
    try:
        lexer = get_lexer_for_filename(filename, stripnl=False)
    except ClassNotFound:
        lexer = TextLexer(stripnl=False)
    return pygments_highlight(text, lexer, Terminal256Formatter(style=style)).rstrip("\n")


def read_text(path: Path) -> str:
    for encoding in ("utf-8", "utf-8-sig", "latin-1"):
        try:
            return path.read_text(encoding=encoding)
        except UnicodeDecodeError:
            continue
    return path.read_bytes().decode("utf-8", errors="replace")


@dataclass(frozen=True)
class Definition:
    line: int
    text: str


def top_level_definitions(source: str) -> tuple[Definition, ...]:
    """Return unindented ``def``/``class`` lines with 1-based line numbers."""
    found: list[Definition] = []
    for line_no, line in enumerate(source.splitlines(), start=1):
        if DEFINITION_RE.match(line):
            found.append(Definition(line_no, line.rstrip()))
    return tuple(found)


@dataclass(frozen=True)
class SourceItem:
    """Source file entry whose children are its top-level definitions."""

    path: Path
    definitions: tuple[Definition, ...] = ()
    style: str | None = None
    selected: bool = False
    expanded: bool = False
    selected_child: int | None = None

    @classmethod
    def from_path(cls, path: Path, style: str | None = None) -> SourceItem:
        return cls(path=path, definitions=top_level_definitions(read_text(path)), style=style)

    def child_count(self) -> int:
        return len(self.definitions)

    def pre_render(self, context: PreRenderContext) -> tuple[SourceItem, int]:
        prepared = replace(
            self,
            selected=context.is_selected,
            expanded=context.is_expanded,
            selected_child=context.selected_child,
        )
        if context.scroll_axis is ScrollAxis.HORIZONTAL:
            return prepared, max(len(self.path.name) + 4, context.cross_axis_size // 2)
        return prepared, 1 + (len(self.definitions) if prepared.expanded else 0)

    def focus_row(self) -> int:
        if self.expanded and self.selected_child is not None:
            return self.selected_child + 1
        return 0

    def _definition_text(self, definition: Definition) -> str:
        if self.style is None:
            return definition.text
        return highlight_source_line(definition.text, self.path.name, self.style)

    def draw(self, width: int, height: int, theme: UITheme) -> list[str]:
        marker = ("▾ " if self.expanded else "▸ ") if self.definitions else "  "
        title_style = theme.selection if self.selected and self.selected_child is None else theme.item_title
        count = f" ({len(self.definitions)})" if self.definitions else ""
        lines = [f"{theme.expand_marker}{marker}{theme.reset}{title_style}{self.path.name}{count}{theme.reset}"]
        if self.expanded:
            for idx, definition in enumerate(self.definitions):
                gutter = f"{definition.line:>5} "
                if self.selected_child == idx:
                    lines.append(f"  {theme.child_selection}{gutter}{definition.text}{theme.reset}")
                else:
                    lines.append(f"  {theme.status}{gutter}{theme.reset}{self._definition_text(definition)}{theme.reset}")
        return _fill(lines, width, height, "", theme.reset)


@dataclass(frozen=True)
class ColorBlock:
    """Solid swatch sized by the legacy ``size``/``highlight`` contract."""

    label: str
    background: str
    highlighted: bool = False

    def size(self, scroll_axis: ScrollAxis) -> int:
        if scroll_axis is ScrollAxis.HORIZONTAL:
            return COLOR_BLOCK_SIZE
        return COLOR_BLOCK_ROWS

    def highlight(self) -> ColorBlock:
        return replace(self, highlighted=True)

    def draw(self, width: int, height: int, theme: UITheme) -> list[str]:
        edge = theme.selection if self.highlighted else theme.border
        body = f"{self.background}{' ' * max(0, width - 2)}{theme.reset}"
        rows: list[str] = []
        for row in range(height):
            if row == height // 2:
                label = pad_ansi_line(self.label.center(max(0, width - 2)), max(0, width - 2))
                rows.append(f"{edge}│{theme.reset}{self.background}{label}{theme.reset}{edge}│{theme.reset}")
            else:
                rows.append(f"{edge}│{theme.reset}{body}{edge}│{theme.reset}")
        return rows
