"""Tests for demo list items and their pre-render sizing."""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path

from lazylist.demo.items import (
    FALLBACK_STYLE,
    ColorBlock,
    Definition,
    SourceItem,
    TextContainer,
    highlight_source_line,
    normalize_style,
    top_level_definitions,
)
from lazylist.prerender import PreRenderContext, ScrollAxis, pre_render_item
from lazylist.ui_theme import PLAIN_THEME
from lazylist.view import item_child_count

SAMPLE_SOURCE = """import os


class Loader:
    def load(self):
        return os.getcwd()


def main():
    pass


async def serve():
    pass
"""


def _context(**overrides) -> PreRenderContext:
    values = {"is_selected": False, "cross_axis_size": 40}
    values.update(overrides)
    return PreRenderContext(**values)


class TextContainerTests(unittest.TestCase):
    def test_children_are_content_lines(self) -> None:
        item = TextContainer("Monday", ("a", "b", "c"))
        self.assertEqual(item_child_count(item), 3)

    def test_collapsed_size_is_title_plus_spacer(self) -> None:
        prepared, size = TextContainer("Monday", ("a", "b")).pre_render(_context())
        self.assertEqual(size, 2)
        self.assertFalse(prepared.expanded)

    def test_expanded_size_includes_children(self) -> None:
        prepared, size = TextContainer("Monday", ("a", "b")).pre_render(
            _context(is_selected=True, is_expanded=True, selected_child=1)
        )
        self.assertEqual(size, 4)
        self.assertTrue(prepared.selected)
        self.assertEqual(prepared.selected_child, 1)

    def test_horizontal_size_tracks_widest_visible_line(self) -> None:
        item = TextContainer("Mon", ("a much longer line",))
        _prepared, collapsed = item.pre_render(_context(scroll_axis=ScrollAxis.HORIZONTAL))
        _prepared, expanded = item.pre_render(_context(scroll_axis=ScrollAxis.HORIZONTAL, is_expanded=True))
        self.assertEqual(collapsed, len("Mon") + 6)
        self.assertEqual(expanded, len("a much longer line") + 6)

    def test_draw_fills_requested_rows(self) -> None:
        prepared, size = TextContainer("Monday", ("a", "b")).pre_render(_context(is_expanded=True))
        rows = prepared.draw(12, size, PLAIN_THEME)
        self.assertEqual(rows, ["▾ Monday    ", "    a       ", "    b       ", " " * 12])

    def test_leaf_has_no_marker(self) -> None:
        rows = TextContainer("Saturday").draw(10, 1, PLAIN_THEME)
        self.assertEqual(rows, ["  Saturday"])


class SourceItemTests(unittest.TestCase):
    def test_top_level_definitions_skip_nested(self) -> None:
        self.assertEqual(
            top_level_definitions(SAMPLE_SOURCE),
            (
                Definition(4, "class Loader:"),
                Definition(9, "def main():"),
                Definition(13, "async def serve():"),
            ),
        )

    def test_from_path_reads_definitions(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "sample.py"
            path.write_text(SAMPLE_SOURCE, encoding="utf-8")

            item = SourceItem.from_path(path)

        self.assertEqual(item.child_count(), 3)
        self.assertEqual(item_child_count(item), 3)

    def test_sizes_follow_expansion(self) -> None:
        item = SourceItem(Path("x.py"), (Definition(1, "def a():"), Definition(3, "def b():")))
        _prepared, collapsed = item.pre_render(_context())
        _prepared, expanded = item.pre_render(_context(is_expanded=True))
        self.assertEqual((collapsed, expanded), (1, 3))

    def test_plain_draw_lists_line_numbers(self) -> None:
        item = SourceItem(Path("x.py"), (Definition(7, "def a():"),))
        prepared, size = pre_render_item(item, _context(is_selected=True, is_expanded=True, selected_child=0))
        rows = prepared.draw(20, size, PLAIN_THEME)
        self.assertEqual(rows[0], "▾ x.py (1)".ljust(20))
        self.assertEqual(rows[1], "      7 def a():".ljust(20))

    def test_focus_row_tracks_selected_definition(self) -> None:
        item = SourceItem(Path("x.py"), (Definition(1, "def a():"), Definition(3, "def b():")))
        collapsed, _size = item.pre_render(_context(is_selected=True, selected_child=1))
        expanded, _size = item.pre_render(_context(is_selected=True, is_expanded=True, selected_child=1))
        self.assertEqual((collapsed.focus_row(), expanded.focus_row()), (0, 2))

    def test_highlighting_adds_escape_sequences(self) -> None:
        highlighted = highlight_source_line("def main():", "x.py", "monokai")
        self.assertIn("\x1b[", highlighted)
        self.assertNotIn("\n", highlighted)

    def test_unknown_extension_still_highlights_as_text(self) -> None:
        self.assertIn("hello", highlight_source_line("hello", "notes.unknownext", "monokai"))

    def test_normalize_style(self) -> None:
        self.assertEqual(normalize_style("default"), "default")
        self.assertEqual(normalize_style("no-such-style"), FALLBACK_STYLE)


class ColorBlockTests(unittest.TestCase):
    def test_legacy_contract(self) -> None:
        block = ColorBlock("red", "")
        self.assertEqual(block.size(ScrollAxis.HORIZONTAL), 15)
        self.assertEqual(block.size(ScrollAxis.VERTICAL), 3)
        self.assertTrue(block.highlight().highlighted)
        self.assertFalse(block.highlighted)

    def test_pre_render_item_highlights_selected_block(self) -> None:
        prepared, size = pre_render_item(
            ColorBlock("red", ""),
            _context(is_selected=True, scroll_axis=ScrollAxis.HORIZONTAL),
        )
        self.assertTrue(prepared.highlighted)
        self.assertEqual(size, 15)

    def test_draw_places_label_on_middle_row(self) -> None:
        rows = ColorBlock("red", "").draw(7, 3, PLAIN_THEME)
        self.assertEqual(rows, ["│     │", "│ red │", "│     │"])


if __name__ == "__main__":
    unittest.main()
