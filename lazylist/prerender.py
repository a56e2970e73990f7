"""Pre-render contract between list widgets and their items.

Before drawing, a list asks every visible item how much main-axis space it
needs. Items answer through ``pre_render(context) -> (item, size)``: the item
may hand back a restyled or expanded copy of itself together with its size in
rows (vertical lists) or columns (horizontal lists).

Older items implement the smaller ``ListableWidget`` contract instead
(``size`` plus ``highlight``); ``pre_render_item`` adapts both.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Protocol, TypeVar, runtime_checkable

ItemT = TypeVar("ItemT")


class ScrollAxis(Enum):
    """Axis a list scrolls along."""

    VERTICAL = "vertical"
    HORIZONTAL = "horizontal"

    @classmethod
    def parse(cls, value: str | None, default: ScrollAxis | None = None) -> ScrollAxis:
        """Resolve a config/CLI string to an axis, falling back to ``default``."""
        fallback = default or cls.VERTICAL
        if not value:
            return fallback
        candidate = str(value).strip().lower()
        for axis in cls:
            if axis.value == candidate:
                return axis
        return fallback


@dataclass(frozen=True)
class PreRenderContext:
    """Per-item layout context handed to ``pre_render``.

    ``cross_axis_size`` is the width of a vertical list (height of a horizontal
    one). ``index`` is the item's position among main items. ``is_expanded``
    and ``selected_child`` let an item lay out its children without access to
    the list state.
    """

    is_selected: bool
    cross_axis_size: int
    scroll_axis: ScrollAxis = ScrollAxis.VERTICAL
    index: int = 0
    is_expanded: bool = False
    selected_child: int | None = None


@runtime_checkable
class PreRender(Protocol):
    def pre_render(self, context: PreRenderContext) -> tuple[PreRender, int]:
        ...


@runtime_checkable
class ListableWidget(Protocol):
    def size(self, scroll_axis: ScrollAxis) -> int:
        ...

    def highlight(self) -> ListableWidget:
        ...


def pre_render_item(item: ItemT, context: PreRenderContext) -> tuple[ItemT, int]:
    """Return ``item`` prepared for drawing and its main-axis size.

    Raises ``TypeError`` for objects implementing neither item contract.
    """
    if isinstance(item, PreRender):
        prepared, size = item.pre_render(context)
        return prepared, max(0, int(size))
    if isinstance(item, ListableWidget):
        prepared = item.highlight() if context.is_selected else item
        return prepared, max(0, int(prepared.size(context.scroll_axis)))
    raise TypeError(f"{type(item).__name__} implements neither pre_render nor size/highlight")
