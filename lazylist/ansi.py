"""ANSI-aware text measurement for list rows.

Clipping and padding here ignore escape sequences when counting columns, so
styled rows line up on the character grid.
"""

from __future__ import annotations

import re
import unicodedata
from collections.abc import Iterator

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;?]*[ -/]*[@-~]")
TAB_STOP = 8


def char_display_width(ch: str, col: int) -> int:
    """Return terminal column width for one character at visual column ``col``.

    Tabs expand to the next 8-column stop, combining marks consume no columns,
    and East Asian wide/fullwidth characters consume two.
    """
    if ch == "\t":
        return TAB_STOP - (col % TAB_STOP)
    if unicodedata.combining(ch):
        return 0
    if unicodedata.east_asian_width(ch) in {"W", "F"}:
        return 2
    return 1


def strip_ansi(text: str) -> str:
    return ANSI_ESCAPE_RE.sub("", text)


def display_width(text: str) -> int:
    """Return the number of terminal columns ``text`` occupies."""
    col = 0
    for ch in strip_ansi(text):
        col += char_display_width(ch, col)
    return col


def _cells(text: str) -> Iterator[tuple[str, int, int]]:
    """Yield ``(chunk, column, width)`` for each escape or visible character.

    Escapes have width 0. Tabs come back already expanded to spaces.
    """
    col = 0
    pos = 0
    for match in ANSI_ESCAPE_RE.finditer(text):
        for ch in text[pos : match.start()]:
            width = char_display_width(ch, col)
            yield (" " * width if ch == "\t" else ch), col, width
            col += width
        yield match.group(0), col, 0
        pos = match.end()
    for ch in text[pos:]:
        width = char_display_width(ch, col)
        yield (" " * width if ch == "\t" else ch), col, width
        col += width


def _is_escape(chunk: str) -> bool:
    return chunk.startswith("\x1b")


def clip_ansi_line(text: str, max_cols: int) -> str:
    """Trim a styled line to at most ``max_cols`` display columns.

    Every escape sequence is kept, including those after the cut, so trailing
    resets still apply. A wide character that would straddle the edge is
    dropped together with everything visible after it.
    """
    if max_cols <= 0 or not text:
        return ""
    out: list[str] = []
    full = False
    for chunk, col, width in _cells(text):
        if _is_escape(chunk):
            out.append(chunk)
        elif not full and col + width <= max_cols:
            out.append(chunk)
        else:
            full = True
    return "".join(out)


def slice_ansi_line(text: str, start_cols: int, max_cols: int) -> str:
    """Return columns ``[start_cols, start_cols + max_cols)`` of a styled line.

    The most recent SGR sequence before the cut is re-emitted so the visible
    part keeps its styling. Other escape sequences are dropped.
    """
    if max_cols <= 0 or not text:
        return ""
    start_cols = max(0, start_cols)
    end_cols = start_cols + max_cols

    out: list[str] = []
    last_sgr = ""
    styled = False
    for chunk, col, width in _cells(text):
        if _is_escape(chunk):
            if not chunk.endswith("m"):
                continue
            last_sgr = chunk
            if col >= start_cols:
                out.append(chunk)
                styled = True
            continue
        if col + width <= start_cols:
            continue
        if col + width > end_cols:
            break
        if not styled and last_sgr:
            out.append(last_sgr)
            styled = True
        out.append(chunk)
    return "".join(out)


def pad_ansi_line(text: str, width: int) -> str:
    """Clip or right-pad ``text`` to exactly ``width`` display columns."""
    clipped = clip_ansi_line(text, width)
    return clipped + " " * max(0, width - display_width(clipped))
