"""List widget glue between item collections and ``ListState``.

``ListView`` owns the items and list-level options. It keeps the state's
child-count table in step with the items and runs the pre-render pass that
yields each visible item's size for viewport layout.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Generic, TypeVar

from .prerender import PreRenderContext, ScrollAxis, pre_render_item
from .state import ListState

logger = logging.getLogger(__name__)

ItemT = TypeVar("ItemT")


def item_child_count(item: object) -> int:
    """Return how many navigable children ``item`` exposes.

    Items report children through a ``child_count()`` method or a ``children``
    sequence; anything else is a leaf.
    """
    counter = getattr(item, "child_count", None)
    if callable(counter):
        return max(0, int(counter()))
    children = getattr(item, "children", None)
    if children is None:
        return 0
    return len(children)


class ListView(Generic[ItemT]):
    """Scrollable list of items sharing one scroll axis and wrap policy."""

    def __init__(
        self,
        items: Sequence[ItemT],
        *,
        scroll_axis: ScrollAxis = ScrollAxis.VERTICAL,
        infinite_scrolling: bool = True,
    ) -> None:
        self.items: list[ItemT] = list(items)
        self.scroll_axis = scroll_axis
        self.infinite_scrolling = infinite_scrolling

    def __len__(self) -> int:
        return len(self.items)

    def child_counts(self) -> list[int]:
        return [item_child_count(item) for item in self.items]

    def set_items(self, items: Sequence[ItemT], state: ListState) -> None:
        """Replace the items and resync ``state`` in one step."""
        self.items = list(items)
        self.sync(state)

    def sync(self, state: ListState) -> None:
        """Push current child counts and the wrap policy into ``state``."""
        state.set_num_elements(self.child_counts())
        state.set_infinite_scrolling(self.infinite_scrolling)
        selected = state.selected_index
        if selected is not None and selected >= len(self.items):
            logger.debug("selection %s is past the end of %d items", selected, len(self.items))

    def context_for(self, state: ListState, index: int, cross_axis_size: int) -> PreRenderContext:
        return PreRenderContext(
            is_selected=state.is_selected(index),
            cross_axis_size=cross_axis_size,
            scroll_axis=self.scroll_axis,
            index=index,
            is_expanded=state.is_expanded(index),
            selected_child=state.get_selected_child(index),
        )

    def pre_render(self, state: ListState, cross_axis_size: int, start: int | None = None) -> list[tuple[ItemT, int]]:
        """Prepare items from ``start`` (default: the viewport offset) onward.

        Returns ``(item, main_axis_size)`` pairs in list order. The stored items
        are not modified; callers draw the returned copies.
        """
        if cross_axis_size <= 0:
            raise ValueError(f"cross_axis_size must be >= 1, got {cross_axis_size}")
        self.sync(state)
        first = state.view_state.offset if start is None else start
        first = max(0, min(first, len(self.items)))
        prepared: list[tuple[ItemT, int]] = []
        for index in range(first, len(self.items)):
            context = self.context_for(state, index, cross_axis_size)
            prepared.append(pre_render_item(self.items[index], context))
        return prepared
