"""Built-in sample lists shown when no paths are given."""

from __future__ import annotations

from .items import ColorBlock, TextContainer

WEEKLY_PLAN: tuple[tuple[str, tuple[str, ...]], ...] = (
    (
        "Monday",
        (
            "1. Exercise for 30 minutes",
            "2. Work on the project for 2 hours",
            "3. Read a book for 1 hour",
            "4. Cook dinner",
        ),
    ),
    (
        "Tuesday",
        (
            "1. Attend a team meeting at 10 AM",
            "2. Reply to emails",
            "3. Prepare lunch",
        ),
    ),
    (
        "Wednesday",
        (
            "1. Update work tasks",
            "2. Conduct code review",
            "3. Attend a training",
        ),
    ),
    (
        "Thursday",
        (
            "1. Brainstorm for an upcoming project",
            "2. Document ideas and refine tasks",
        ),
    ),
    (
        "Friday",
        (
            "1. Have a one-on-one with a team lead",
            "2. Attend demo talk",
            "3. Go running for 1 hour",
        ),
    ),
    ("Saturday", ()),
    (
        "Sunday",
        (
            "1. Plan and outline goals for the upcoming week",
            "2. Attend an online workshop",
            "3. Go to dinner with friends",
            "4. Watch a movie",
        ),
    ),
)

COLOR_SWATCHES: tuple[tuple[str, str], ...] = (
    ("red", "\033[41m"),
    ("blue", "\033[44m"),
    ("yellow", "\033[43m"),
    ("magenta", "\033[45m"),
    ("green", "\033[42m"),
    ("cyan", "\033[106m"),
    ("white", "\033[47m"),
    ("gold", "\033[48;2;219;172;52m"),
    ("lime", "\033[102m"),
    ("salmon", "\033[101m"),
    ("sky", "\033[104m"),
)


def weekly_plan_items() -> list[TextContainer]:
    return [TextContainer(title, content) for title, content in WEEKLY_PLAN]


def color_block_items(no_color: bool = False) -> list[ColorBlock]:
    return [ColorBlock(label, "" if no_color else background) for label, background in COLOR_SWATCHES]
