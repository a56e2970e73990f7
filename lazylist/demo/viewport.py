"""Viewport placement for pre-rendered list items.

Given every item's main-axis size, pick the first visible item and how much of
it is scrolled away so the selected item stays on screen. Scrolling is lazy:
the previous viewport is kept whenever the selection is still fully visible.
When the selected item alone is larger than the screen, the viewport follows
its focused row (the selected child) instead of pinning the item's top.
"""

from __future__ import annotations

from collections.abc import Sequence

from ..state import ViewState


def _scroll_forward(sizes: Sequence[int], offset: int, selected: int, available: int) -> tuple[int, int]:
    """Advance until the selected item ends at the far edge."""
    total = sum(sizes[offset : selected + 1])
    while total > available and offset < selected:
        if total - sizes[offset] >= available:
            total -= sizes[offset]
            offset += 1
            continue
        return offset, total - available
    return offset, 0


def fit_viewport(
    sizes: Sequence[int],
    selected: int | None,
    available: int,
    previous: ViewState,
    focus: int = 0,
) -> ViewState:
    """Return the viewport that keeps item ``selected`` visible in ``available`` cells.

    ``focus`` is the row (or column) within the selected item that must stay
    on screen, such as the row of its selected child.
    """
    if not sizes or selected is None or available <= 0:
        return ViewState()
    selected = min(max(0, selected), len(sizes) - 1)
    focus = min(max(0, focus), max(0, sizes[selected] - 1))
    offset = min(previous.offset, len(sizes) - 1)
    truncated = previous.first_truncated if offset == previous.offset else 0
    truncated = min(truncated, max(0, sizes[offset] - 1))

    if selected < offset:
        offset, truncated = selected, 0
    elif selected > offset and sum(sizes[offset : selected + 1]) - truncated > available:
        offset, truncated = _scroll_forward(sizes, offset, selected, available)

    if offset == selected:
        truncated = min(truncated, focus)
        if focus >= truncated + available:
            truncated = focus - available + 1
    return ViewState(offset=offset, first_truncated=truncated)
