# SPDX-License-Identifier: MIT

# Event palette, shared by events and users
EVENT_COLORS = (
    "blue",
    "green",
    "red",
    "yellow",
    "purple",
    "orange",
    "gray",
    "pink",
    "indigo",
    "teal",
)

DEFAULT_EVENT_COLOR = "blue"

# Rich styles for each palette entry
EVENT_COLOR_STYLES: dict[str, str] = {
    "blue": "bright_blue",
    "green": "green",
    "red": "red",
    "yellow": "yellow",
    "purple": "purple",
    "orange": "dark_orange",
    "gray": "grey62",
    "pink": "deep_pink3",
    "indigo": "slate_blue1",
    "teal": "dark_cyan",
}

TODAY_STYLE = "bold black on bright_cyan"
WEEKEND_STYLE = "bold white on orange4"
WORKING_HOUR_STYLE = "bold"
CLOSED_HOUR_STYLE = "dim"
OUTSIDE_MONTH_STYLE = "dim"


def is_event_color(color: str) -> bool:
    return color in EVENT_COLORS


def event_style(color: str | None) -> str:
    """Return the Rich style for a palette color, falling back to the default."""
    if color is None:
        color = DEFAULT_EVENT_COLOR
    return EVENT_COLOR_STYLES.get(color, EVENT_COLOR_STYLES[DEFAULT_EVENT_COLOR])
