"""Settings persisted as a JSON object in the user config directory.

Holds the UI theme, Pygments style, wrap-around policy and scroll axis. A
missing or damaged file never stops the list from starting; defaults apply.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_config_dir

from .prerender import ScrollAxis

logger = logging.getLogger(__name__)

APP_NAME = "lazylist"
CONFIG_FILENAME = "config.json"
DEFAULT_CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
CONFIG_PATH = DEFAULT_CONFIG_PATH
DEFAULT_STYLE = "monokai"


@dataclass(frozen=True)
class ListSettings:
    theme: str | None = None
    style: str = DEFAULT_STYLE
    infinite_scrolling: bool = True
    scroll_axis: ScrollAxis = ScrollAxis.VERTICAL


def load_config() -> dict[str, object]:
    """Return the stored config object, or ``{}`` when there is nothing usable."""
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except (OSError, ValueError) as exc:
        logger.warning("Ignoring unreadable config %s: %s", CONFIG_PATH, exc)
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Write ``data`` as indented JSON.

    Filesystem errors are logged and swallowed so an unwritable config never
    takes the list session down.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except OSError as exc:
        logger.warning("Could not write config %s: %s", CONFIG_PATH, exc)


def _load_nonempty_str(data: dict[str, object], key: str) -> str | None:
    value = data.get(key)
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


def load_settings() -> ListSettings:
    """Return persisted settings, replacing invalid values with defaults."""
    data = load_config()
    infinite = data.get("infinite_scrolling")
    return ListSettings(
        theme=_load_nonempty_str(data, "theme"),
        style=_load_nonempty_str(data, "style") or DEFAULT_STYLE,
        infinite_scrolling=infinite if isinstance(infinite, bool) else True,
        scroll_axis=ScrollAxis.parse(_load_nonempty_str(data, "scroll_axis")),
    )


def save_settings(settings: ListSettings) -> None:
    """Merge ``settings`` into the stored config, keeping unrelated keys."""
    config = load_config()
    if settings.theme:
        config["theme"] = settings.theme
    config["style"] = settings.style
    config["infinite_scrolling"] = bool(settings.infinite_scrolling)
    config["scroll_axis"] = settings.scroll_axis.value
    save_config(config)
