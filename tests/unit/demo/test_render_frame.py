"""Tests for demo frame composition.

Uses the plain theme so rows can be compared as text. Covers vertical and
horizontal layouts, viewport write-back, and the status row.
"""

from __future__ import annotations

import unittest

from lazylist.ansi import display_width
from lazylist.demo.items import TextContainer
from lazylist.demo.render import describe_selection, format_status, render_frame
from lazylist.demo.samples import color_block_items, weekly_plan_items
from lazylist.prerender import ScrollAxis
from lazylist.state import ListState, Selection, ViewState
from lazylist.ui_theme import DEFAULT_THEME, PLAIN_THEME
from lazylist.view import ListView


def _weekly_view() -> tuple[ListView, ListState]:
    view = ListView(weekly_plan_items())
    state = ListState()
    view.sync(state)
    return view, state


class VerticalFrameTests(unittest.TestCase):
    def test_frame_has_requested_shape(self) -> None:
        view, state = _weekly_view()

        rows = render_frame(view, state, PLAIN_THEME, 20, 5)

        self.assertEqual(len(rows), 5)
        for row in rows:
            self.assertEqual(display_width(row), 20)

    def test_collapsed_items_take_two_rows_each(self) -> None:
        view, state = _weekly_view()

        rows = render_frame(view, state, PLAIN_THEME, 20, 5)

        self.assertEqual(rows[0], "▸ Monday".ljust(20))
        self.assertEqual(rows[1], " " * 20)
        self.assertEqual(rows[2], "▸ Tuesday".ljust(20))
        self.assertTrue(rows[4].startswith("[none] wrap:on"))

    def test_expanded_selection_scrolls_viewport(self) -> None:
        view, state = _weekly_view()
        state.select(1)
        state.expand_selected()
        state.next()
        state.next()

        rows = render_frame(view, state, PLAIN_THEME, 30, 5)

        self.assertEqual(state.selected, Selection(1, 1))
        self.assertEqual(state.view_state, ViewState(1, 0))
        self.assertEqual(rows[0], "▾ Tuesday".ljust(30))
        self.assertEqual(rows[2], "    2. Reply to emails".ljust(30))

    def test_selected_child_of_tall_item_stays_on_screen(self) -> None:
        view = ListView([TextContainer("A", ("a1",)), TextContainer("B", tuple(f"b{i}" for i in range(6)))])
        state = ListState()
        view.sync(state)
        state.select(1)
        state.expand_selected()
        for _ in range(6):
            state.next()

        rows = render_frame(view, state, PLAIN_THEME, 20, 5)

        self.assertEqual(state.selected, Selection(1, 5))
        self.assertEqual(state.view_state, ViewState(1, 3))
        self.assertEqual(rows[3], "    b5".ljust(20))
        self.assertTrue(rows[4].startswith("[item 1 / child 5]"))

    def test_cleared_selection_renders_from_top(self) -> None:
        view, state = _weekly_view()
        state.select(6)
        render_frame(view, state, PLAIN_THEME, 20, 5)
        self.assertGreater(state.view_state.offset, 0)

        state.select(None)
        rows = render_frame(view, state, PLAIN_THEME, 20, 5)

        self.assertEqual(state.view_state, ViewState())
        self.assertEqual(rows[0], "▸ Monday".ljust(20))

    def test_empty_list_renders_blank_rows_and_status(self) -> None:
        view = ListView([])
        state = ListState()
        rows = render_frame(view, state, PLAIN_THEME, 10, 3)
        self.assertEqual(rows[:2], [" " * 10, " " * 10])
        self.assertEqual(len(rows), 3)

    def test_degenerate_sizes(self) -> None:
        view, state = _weekly_view()
        self.assertEqual(render_frame(view, state, PLAIN_THEME, 0, 5), [])
        self.assertEqual(len(render_frame(view, state, PLAIN_THEME, 10, 1)), 1)

    def test_colored_theme_keeps_row_width(self) -> None:
        view, state = _weekly_view()
        state.select(0)
        rows = render_frame(view, state, DEFAULT_THEME, 24, 6)
        self.assertIn(DEFAULT_THEME.selection, rows[0])
        for row in rows:
            self.assertEqual(display_width(row), 24)


class HorizontalFrameTests(unittest.TestCase):
    def test_selection_past_edge_truncates_first_column_block(self) -> None:
        view = ListView(color_block_items(no_color=True), scroll_axis=ScrollAxis.HORIZONTAL)
        state = ListState()
        view.sync(state)
        state.select(2)

        rows = render_frame(view, state, PLAIN_THEME, 40, 4)

        self.assertEqual(state.view_state, ViewState(0, 5))
        self.assertEqual(len(rows), 4)
        self.assertTrue(rows[1].startswith(" red     │"))
        self.assertIn("blue", rows[1])
        self.assertIn("yellow", rows[1])
        for row in rows:
            self.assertEqual(display_width(row), 40)


class StatusTests(unittest.TestCase):
    def test_describe_selection(self) -> None:
        state = ListState()
        self.assertEqual(describe_selection(state), "none")
        state.select(3)
        self.assertEqual(describe_selection(state), "item 3")
        state.select_child((3, 1))
        self.assertEqual(describe_selection(state), "item 3 / child 1")

    def test_status_reports_wrap_policy(self) -> None:
        state = ListState(infinite_scrolling=False)
        status = format_status(state, PLAIN_THEME, 80)
        self.assertTrue(status.startswith("[none] wrap:off"))
        self.assertIn("q quit", status)
        self.assertEqual(display_width(status), 80)


if __name__ == "__main__":
    unittest.main()
