"""Key bindings that drive ``ListState`` from decoded key tokens."""

from __future__ import annotations

import logging
from collections.abc import Callable

from ..state import ListState
from ..view import ListView

logger = logging.getLogger(__name__)

QUIT_KEYS = frozenset({"q", "Q", "CTRL_C", "CTRL_D"})


class KeyMap:
    """Token-to-action table; later bindings replace earlier ones."""

    def __init__(self) -> None:
        self._actions: dict[str, Callable[[], None]] = {}

    def bind(self, keys: tuple[str, ...], action: Callable[[], None]) -> KeyMap:
        for key in keys:
            self._actions[key] = action
        return self

    def bound_keys(self) -> tuple[str, ...]:
        return tuple(self._actions)

    def handle(self, key: str) -> bool:
        """Run the action bound to ``key``; return whether one was bound."""
        action = self._actions.get(key)
        if action is None:
            return False
        action()
        return True


def list_navigation_keymap(view: ListView, state: ListState) -> KeyMap:
    """Bind navigation keys for ``view``; counts are synced before every action."""

    def synced(action: Callable[[], None]) -> Callable[[], None]:
        def run() -> None:
            view.sync(state)
            action()

        return run

    def select_first() -> None:
        if len(view):
            state.select(0)

    def select_last() -> None:
        if len(view):
            state.select(len(view) - 1)

    def toggle_wrap() -> None:
        view.infinite_scrolling = not view.infinite_scrolling
        state.set_infinite_scrolling(view.infinite_scrolling)
        logger.debug("infinite scrolling %s", "on" if view.infinite_scrolling else "off")

    keymap = KeyMap()
    keymap.bind(("UP", "k"), synced(state.previous))
    keymap.bind(("DOWN", "j", "TAB"), synced(state.next))
    keymap.bind(("RIGHT", "l", "ENTER"), synced(state.expand_selected))
    keymap.bind(("LEFT", "h"), synced(state.collapse_selected))
    keymap.bind(("E",), synced(state.expand_all))
    keymap.bind(("C",), synced(state.collapse_all))
    keymap.bind(("HOME", "g"), synced(select_first))
    keymap.bind(("END", "G"), synced(select_last))
    keymap.bind(("w",), toggle_wrap)
    keymap.bind(("ESC",), lambda: state.select(None))
    return keymap
