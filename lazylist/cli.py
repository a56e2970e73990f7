"""Command-line front door for lazylist.

Builds a list from source paths (or a built-in sample), resolves settings from
the config file and flags, then runs the interactive session or prints a
single rendered frame.
"""

from __future__ import annotations

import argparse
import logging
import shutil
import sys
from pathlib import Path

from . import config
from .demo.app import render_once, run_list_session
from .demo.items import SourceItem, normalize_style
from .demo.samples import color_block_items, weekly_plan_items
from .prerender import ScrollAxis
from .state import ListState
from .ui_theme import available_theme_names, resolve_theme
from .view import ListView

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _positive_int(value: str) -> int:
    """argparse type for positive integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be >= 1")
    return parsed


def _nonnegative_int(value: str) -> int:
    """argparse type for zero-based indices."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed < 0:
        raise argparse.ArgumentTypeError("value must be >= 0")
    return parsed


def configure_logging(log_file: Path | None, level: str) -> None:
    """Send log records to ``log_file``; without one, logging stays silent."""
    root = logging.getLogger()
    if log_file is None:
        root.addHandler(logging.NullHandler())
        return
    handler = logging.FileHandler(log_file, encoding="utf-8")
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.WARNING))


def collect_source_paths(paths: list[Path]) -> list[Path]:
    """Expand directories into their visible files, keeping argument order."""
    collected: list[Path] = []
    for path in paths:
        if not path.exists():
            raise SystemExit(f"Path not found: {path}")
        if path.is_dir():
            collected.extend(
                sorted(
                    (child for child in path.iterdir() if child.is_file() and not child.name.startswith(".")),
                    key=lambda child: child.name.casefold(),
                )
            )
        else:
            collected.append(path)
    return collected


def build_items(paths: list[Path], axis: ScrollAxis, style: str | None, no_color: bool) -> list:
    if paths:
        return [SourceItem.from_path(path, style=style) for path in collect_source_paths(paths)]
    if axis is ScrollAxis.HORIZONTAL:
        return color_block_items(no_color=no_color)
    return weekly_plan_items()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Browse a collapsible list in the terminal.",
    )
    parser.add_argument(
        "paths",
        nargs="*",
        type=Path,
        help="Source files or directories to list. Defaults to a built-in sample.",
    )
    parser.add_argument("--style", default=None, help="Pygments style name for source items.")
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output even on TTY.")
    parser.add_argument(
        "--wrap",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Wrap around at the ends of the list.",
    )
    parser.add_argument(
        "--axis",
        choices=[axis.value for axis in ScrollAxis],
        default=None,
        help="Scroll axis of the list.",
    )
    parser.add_argument("--select", type=_nonnegative_int, default=None, help="Initially selected item index.")
    parser.add_argument("--expand-all", action="store_true", help="Start with every item expanded.")
    parser.add_argument("--render", action="store_true", help="Print one frame and exit.")
    parser.add_argument("--cols", type=_positive_int, default=None, help="Frame width for --render.")
    parser.add_argument("--rows", type=_positive_int, default=None, help="Frame height for --render.")
    parser.add_argument("--log-file", type=Path, default=None, help="Write debug logs to this file.")
    parser.add_argument("--log-level", default="DEBUG", help="Log level used with --log-file.")
    parser.add_argument("--save-config", action="store_true", help="Persist the effective settings.")
    return parser


def resolve_settings(args: argparse.Namespace) -> config.ListSettings:
    """Overlay command-line flags on persisted settings."""
    stored = config.load_settings()
    return config.ListSettings(
        theme=args.theme or stored.theme,
        style=normalize_style(args.style or stored.style),
        infinite_scrolling=stored.infinite_scrolling if args.wrap is None else args.wrap,
        scroll_axis=ScrollAxis.parse(args.axis, stored.scroll_axis),
    )


def main() -> None:
    """Parse CLI arguments and show the list interactively or as one frame."""
    args = build_parser().parse_args()
    configure_logging(args.log_file, args.log_level)

    settings = resolve_settings(args)
    if args.save_config:
        config.save_settings(settings)

    theme = resolve_theme(settings.theme, no_color=args.no_color)
    style = None if args.no_color else settings.style
    items = build_items(args.paths, settings.scroll_axis, style, args.no_color)
    view = ListView(items, scroll_axis=settings.scroll_axis, infinite_scrolling=settings.infinite_scrolling)

    state = ListState(infinite_scrolling=settings.infinite_scrolling)
    view.sync(state)
    if args.select is not None and items:
        state.select(min(args.select, len(items) - 1))
    if args.expand_all:
        state.expand_all()
    logger.debug("starting with %d items, settings %s", len(items), settings)

    if args.render or not sys.stdin.isatty() or not sys.stdout.isatty():
        term = shutil.get_terminal_size((80, 24))
        width = args.cols if args.cols is not None else max(1, term.columns)
        height = args.rows if args.rows is not None else max(1, term.lines)
        sys.stdout.write(render_once(view, state, theme, width, height))
        return

    run_list_session(view, state, theme, stdin_fd=sys.stdin.fileno(), stdout_fd=sys.stdout.fileno())


if __name__ == "__main__":
    main()
