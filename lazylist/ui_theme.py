"""UI theme definitions and selection helpers.

Themes are ANSI palettes for list chrome and item states. Syntax highlighting
of source items is a separate Pygments style setting.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by renderers."""

    name: str
    reset: str
    root: str
    item_title: str
    item_content: str
    selection: str
    child_selection: str
    expand_marker: str
    status: str
    status_key: str
    border: str


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    root="\033[48;5;235m",
    item_title="\033[1;38;5;252m",
    item_content="\033[38;5;250m",
    selection="\033[48;5;54;38;5;255m",
    child_selection="\033[7m",
    expand_marker="\033[38;5;44m",
    status="\033[2;38;5;250m",
    status_key="\033[38;5;229m",
    border="\033[38;5;240m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reset="\033[0m",
    root="\033[48;5;17m",
    item_title="\033[1;38;5;153m",
    item_content="\033[38;5;117m",
    selection="\033[48;5;24;38;5;231m",
    child_selection="\033[7m",
    expand_marker="\033[38;5;39m",
    status="\033[2;38;5;110m",
    status_key="\033[38;5;153m",
    border="\033[38;5;31m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="",
    root="",
    item_title="",
    item_content="",
    selection="",
    child_selection="",
    expand_marker="",
    status="",
    status_key="",
    border="",
)

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    """Names accepted by ``--theme``; the plain palette is reached via ``--no-color``."""
    return tuple(sorted(_THEMES))


def normalize_theme_name(name: str | None) -> str:
    """Map ``name`` onto a known theme, defaulting for blank or unknown names."""
    candidate = (name or "").strip().lower()
    return candidate if candidate in _THEMES else DEFAULT_THEME.name


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    return PLAIN_THEME if no_color else _THEMES[normalize_theme_name(name)]


__all__ = [
    "UITheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
]
