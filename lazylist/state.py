"""Selection and expansion state for hierarchical list widgets.

``ListState`` tracks one selected entry (a main item, optionally narrowed to one
of its children), which main items are expanded, and how many children each
main item has. It knows nothing about item content: the owning widget pushes
child counts in through ``set_num_elements`` whenever the list changes.

Out-of-range selections are tolerated. Navigation treats an unknown main index
as a childless item and a stale child index as the last child, so the state
converges again on the next ``next``/``previous`` call.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Selection:
    """Selected main item and, when narrowed, the selected child within it."""

    main: int
    child: int | None = None

    @property
    def is_child(self) -> bool:
        return self.child is not None

    def parent(self) -> Selection:
        """Return the selection of the owning main item."""
        if self.child is None:
            return self
        return Selection(self.main)


@dataclass
class ViewState:
    """Viewport bookkeeping persisted between frames.

    ``offset`` is the index of the first main item drawn; ``first_truncated``
    counts leading rows/columns of that item scrolled out of view.
    """

    offset: int = 0
    first_truncated: int = 0


def _coerce_selection(value: Selection | tuple[int, int | None] | None) -> Selection | None:
    if value is None:
        return None
    selection = value if isinstance(value, Selection) else Selection(*value)
    if selection.main < 0 or (selection.child is not None and selection.child < 0):
        raise ValueError(f"selection indices must be >= 0, got {selection}")
    return selection


class ListState:
    """Navigation state machine for a list of main items with optional children."""

    def __init__(self, *, infinite_scrolling: bool = True) -> None:
        self.selected: Selection | None = None
        self.view_state = ViewState()
        self._num_elements: list[int] = []
        self._expanded: list[int] = []
        self._infinite_scrolling = bool(infinite_scrolling)

    def __repr__(self) -> str:
        return (
            f"ListState(selected={self.selected!r}, expanded={self._expanded!r}, "
            f"num_elements={self._num_elements!r}, infinite_scrolling={self._infinite_scrolling!r})"
        )

    @property
    def infinite_scrolling(self) -> bool:
        return self._infinite_scrolling

    def set_infinite_scrolling(self, infinite_scrolling: bool) -> None:
        self._infinite_scrolling = bool(infinite_scrolling)

    @property
    def num_elements(self) -> tuple[int, ...]:
        """Child count of each main item, as of the last sync."""
        return tuple(self._num_elements)

    @property
    def expanded(self) -> tuple[int, ...]:
        """Expanded main indices in the order they were expanded."""
        return tuple(self._expanded)

    @property
    def selected_index(self) -> int | None:
        """Main index of the current selection, ignoring any child."""
        if self.selected is None:
            return None
        return self.selected.main

    def reset_view(self) -> None:
        self.view_state = ViewState()

    def select(self, index: int | None) -> None:
        """Select main item ``index``, or clear the selection and viewport with ``None``."""
        if index is None:
            self.selected = None
            self.reset_view()
            return
        if index < 0:
            raise ValueError(f"index must be >= 0, got {index}")
        self.selected = Selection(index)

    def select_child(self, selection: Selection | tuple[int, int | None] | None) -> None:
        """Set the full selection, child component included.

        Clearing the selection also resets the viewport to the top.
        """
        selection = _coerce_selection(selection)
        self.selected = selection
        if selection is None:
            self.reset_view()

    def collapse_all(self) -> None:
        self._expanded.clear()
        if self.selected is not None:
            self.selected = self.selected.parent()

    def collapse_selected(self) -> None:
        if self.selected is None:
            return
        main = self.selected.main
        self._expanded = [idx for idx in self._expanded if idx != main]
        self.selected = self.selected.parent()

    def expand_all(self) -> None:
        self._expanded = list(range(len(self._num_elements)))

    def expand_selected(self) -> None:
        if self.selected is None:
            return
        if not self.is_expanded(self.selected.main):
            self._expanded.append(self.selected.main)

    def get_selected_child(self, index: int) -> int | None:
        """Return the selected child of main item ``index``, if it holds the selection."""
        if self.selected is None or self.selected.main != index:
            return None
        return self.selected.child

    def is_selected(self, index: int) -> bool:
        return self.selected is not None and self.selected.main == index

    def is_expanded(self, index: int) -> bool:
        return index in self._expanded

    def _child_count(self, index: int) -> int | None:
        if 0 <= index < len(self._num_elements):
            return self._num_elements[index]
        return None

    def _next_main(self, index: int) -> Selection:
        if index >= len(self._num_elements) - 1:
            if self._infinite_scrolling:
                return Selection(0)
            return Selection(index)
        return Selection(index + 1)

    def _previous_main(self, index: int) -> Selection:
        if index == 0 and not self._infinite_scrolling:
            return Selection(index)
        prev_index = len(self._num_elements) - 1 if index == 0 else index - 1
        if not self.is_expanded(prev_index):
            return Selection(prev_index)
        # Backward traversal enters an expanded item at its last child.
        child_count = self._child_count(prev_index)
        if not child_count:
            return Selection(prev_index)
        return Selection(prev_index, child_count - 1)

    def next(self) -> None:
        """Select the entry after the current one.

        Expanded items are walked child by child before moving on to the next
        main item. Past the last main item the selection wraps to the first
        when infinite scrolling is on, and stays put otherwise.
        """
        if not self._num_elements:
            return

        current = self.selected
        if current is None:
            target = Selection(0)
        else:
            child_count = self._child_count(current.main)
            if child_count is None or not self.is_expanded(current.main):
                target = self._next_main(current.main)
            elif current.child is None:
                target = Selection(current.main, 0)
            elif current.child >= max(child_count - 1, 0):
                target = self._next_main(current.main)
            else:
                target = Selection(current.main, current.child + 1)

        logger.debug("next: %s -> %s", current, target)
        self.select_child(target)

    def previous(self) -> None:
        """Select the entry before the current one.

        Mirrors ``next``: a child steps back toward its parent, and moving onto
        an expanded main item from below lands on that item's last child.
        """
        if not self._num_elements:
            return

        current = self.selected
        if current is None:
            target = Selection(0)
        elif self._child_count(current.main) is None or current.child is None:
            target = self._previous_main(current.main)
        elif current.child == 0:
            target = current.parent()
        else:
            target = Selection(current.main, current.child - 1)

        logger.debug("previous: %s -> %s", current, target)
        self.select_child(target)

    def set_num_elements(self, num_elements: Iterable[int]) -> None:
        """Replace the per-item child counts and prune stale expansions.

        The current selection is left alone even if it now points past the end
        of the list; callers that shrink the list should reselect explicitly.
        """
        counts = list(num_elements)
        for count in counts:
            if count < 0:
                raise ValueError(f"child counts must be >= 0, got {count}")
        pruned = [idx for idx in self._expanded if idx < len(counts)]
        if len(pruned) != len(self._expanded):
            logger.debug("pruned expanded indices %s", sorted(set(self._expanded) - set(pruned)))
        self._expanded = pruned
        self._num_elements = counts
