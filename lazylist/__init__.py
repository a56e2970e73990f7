"""Public package surface for lazylist.

Exports the selection state machine, the pre-render item contract and the
``ListView`` glue, plus ``main`` for programmatic CLI invocation.
"""

from __future__ import annotations

from .prerender import ListableWidget, PreRender, PreRenderContext, ScrollAxis, pre_render_item
from .state import ListState, Selection, ViewState
from .view import ListView, item_child_count


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)


__all__ = [
    "ListState",
    "ListView",
    "ListableWidget",
    "PreRender",
    "PreRenderContext",
    "ScrollAxis",
    "Selection",
    "ViewState",
    "item_child_count",
    "main",
    "pre_render_item",
]
