"""Interactive list session and one-shot frame rendering."""

from __future__ import annotations

import logging
import shutil
from collections.abc import Callable

from ..input import read_key
from ..state import ListState
from ..terminal import TerminalController
from ..ui_theme import UITheme
from ..view import ListView
from .keys import QUIT_KEYS, list_navigation_keymap
from .render import render_frame

logger = logging.getLogger(__name__)

IDLE_POLL_MS = 250


def _terminal_size() -> tuple[int, int]:
    size = shutil.get_terminal_size((80, 24))
    return max(1, size.columns), max(1, size.lines)


def render_once(view: ListView, state: ListState, theme: UITheme, width: int, height: int) -> str:
    """Render a single frame as newline-joined text for non-interactive output."""
    rows = render_frame(view, state, theme, width, height)
    return "".join(f"{row}{theme.reset}\n" for row in rows)


def run_list_session(
    view: ListView,
    state: ListState,
    theme: UITheme,
    *,
    stdin_fd: int,
    stdout_fd: int,
    terminal_size: Callable[[], tuple[int, int]] = _terminal_size,
) -> None:
    """Drive ``state`` from the keyboard until a quit key arrives.

    Redraws after every bound key and whenever the terminal size changes.
    """
    terminal = TerminalController(stdin_fd, stdout_fd)
    keymap = list_navigation_keymap(view, state)
    view.sync(state)
    with terminal.raw_mode():
        dirty = True
        last_size: tuple[int, int] | None = None
        while True:
            size = terminal_size()
            if dirty or size != last_size:
                width, height = size
                terminal.write_frame(render_frame(view, state, theme, width, height))
                last_size = size
                dirty = False

            key = read_key(stdin_fd, timeout_ms=IDLE_POLL_MS)
            if not key:
                continue
            if key in QUIT_KEYS:
                logger.debug("quit on %s with selection %s", key, state.selected)
                return
            dirty = keymap.handle(key)
