"""Frame rendering for demo lists.

Runs the pre-render pass, places the viewport, and composes ANSI screen rows
for vertical and horizontal lists plus a one-row status bar.
"""

from __future__ import annotations

from ..ansi import pad_ansi_line, slice_ansi_line
from ..prerender import ScrollAxis
from ..state import ListState
from ..ui_theme import UITheme
from ..view import ListView
from .viewport import fit_viewport

STATUS_KEYS = (
    ("↑↓", "move"),
    ("→", "expand"),
    ("←", "collapse"),
    ("E/C", "all"),
    ("w", "wrap"),
    ("q", "quit"),
)


def describe_selection(state: ListState) -> str:
    selected = state.selected
    if selected is None:
        return "none"
    if selected.child is None:
        return f"item {selected.main}"
    return f"item {selected.main} / child {selected.child}"


def format_status(state: ListState, theme: UITheme, width: int) -> str:
    """Return the status row: selection, wrap policy, then key hints."""
    wrap = "on" if state.infinite_scrolling else "off"
    hints = "  ".join(f"{theme.status_key}{key}{theme.reset}{theme.status} {label}" for key, label in STATUS_KEYS)
    text = f"{theme.status}[{describe_selection(state)}] wrap:{wrap}  {hints}{theme.reset}"
    return pad_ansi_line(text, width)


def _vertical_rows(prepared, view_state, theme: UITheme, width: int, height: int) -> list[str]:
    rows: list[str] = []
    for position, (item, size) in enumerate(prepared[view_state.offset :]):
        drawn = item.draw(width, size, theme)
        if position == 0:
            drawn = drawn[view_state.first_truncated :]
        rows.extend(drawn)
        if len(rows) >= height:
            break
    return rows[:height]


def _horizontal_rows(prepared, view_state, theme: UITheme, width: int, height: int) -> list[str]:
    rows = [""] * height
    used = 0
    for position, (item, size) in enumerate(prepared[view_state.offset :]):
        skip = view_state.first_truncated if position == 0 else 0
        visible = min(size - skip, width - used)
        if visible <= 0:
            break
        drawn = item.draw(size, height, theme)
        for row_idx in range(height):
            rows[row_idx] += slice_ansi_line(drawn[row_idx], skip, visible) + theme.reset
        used += visible
        if used >= width:
            break
    return rows


def _focus_row(prepared, selected: int | None, horizontal: bool) -> int:
    if horizontal or selected is None or not prepared:
        return 0
    item, _size = prepared[min(selected, len(prepared) - 1)]
    focus_row = getattr(item, "focus_row", None)
    return int(focus_row()) if callable(focus_row) else 0


def render_frame(view: ListView, state: ListState, theme: UITheme, width: int, height: int) -> list[str]:
    """Compose ``height`` screen rows for ``view`` and update its viewport state."""
    if width <= 0 or height <= 0:
        return []
    list_rows = max(0, height - 1)
    horizontal = view.scroll_axis is ScrollAxis.HORIZONTAL
    cross_axis_size = max(1, list_rows if horizontal else width)
    prepared = view.pre_render(state, cross_axis_size, start=0) if len(view) else []
    sizes = [size for _item, size in prepared]
    available = width if horizontal else list_rows
    focus = _focus_row(prepared, state.selected_index, horizontal)
    state.view_state = fit_viewport(sizes, state.selected_index, available, state.view_state, focus)

    if horizontal:
        rows = _horizontal_rows(prepared, state.view_state, theme, width, list_rows)
    else:
        rows = _vertical_rows(prepared, state.view_state, theme, width, list_rows)
    rows = [pad_ansi_line(row, width) for row in rows]
    rows.extend(" " * width for _ in range(list_rows - len(rows)))
    if height > list_rows:
        rows.append(format_status(state, theme, width))
    return rows
