"""Terminal demo built on ``ListState``: items, viewport, rendering, key loop."""

from .app import render_once, run_list_session
from .items import ColorBlock, SourceItem, TextContainer

__all__ = [
    "ColorBlock",
    "SourceItem",
    "TextContainer",
    "render_once",
    "run_list_session",
]
