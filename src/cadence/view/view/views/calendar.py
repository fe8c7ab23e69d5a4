# SPDX-License-Identifier: MIT

import math

from rich import box
from rich.columns import Columns
from rich.console import Console
from rich.table import Table
from rich.text import Text

from cadence.color import (
    CLOSED_HOUR_STYLE,
    OUTSIDE_MONTH_STYLE,
    TODAY_STYLE,
    WEEKEND_STYLE,
    WORKING_HOUR_STYLE,
    event_style,
)
from cadence.model.event import Event
from cadence.model.layout import DayLayout, MonthCell, PositionedEvent, YearMonth
from cadence.model.time_window import WorkingHours
from cadence.service.time_window import is_working_hour, sunday_weekday
from cadence.time import datetime_to_display_time_str

WEEKDAY_NAMES = ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]
WEEKDAY_LETTERS = ["S", "M", "T", "W", "T", "F", "S"]


def _truncate(text: str, width: int) -> str:
    if len(text) <= width:
        return text
    return text[: max(width - 3, 0)] + "..."


def _day_number_style(cell: MonthCell) -> str:
    if cell["is_today"]:
        return TODAY_STYLE
    if not cell["current_month"]:
        return OUTSIDE_MONTH_STYLE
    if sunday_weekday(cell["date"]) in (0, 6):
        return WEEKEND_STYLE
    return "bold"


def _event_label(event: Event) -> str:
    label = event["title"]
    if event["assignee"] is not None:
        label += f" ({event['assignee']['name']})"
    return label


def _render_month_table(
    cells: list[MonthCell], cell_width: int = 16, max_events: int = 3
) -> Table:
    """
    Render a 42-cell month grid as a 6x7 table.

    Args:
        cells: Month grid cells, Sunday first
        cell_width: Width of each day cell in characters
        max_events: Events listed per cell before collapsing into "+N more"

    Returns:
        A Table containing the month's calendar grid
    """
    table = Table(box=box.SIMPLE, show_header=True, padding=(0, 1))
    for day_name in WEEKDAY_NAMES:
        table.add_column(day_name, style="bold", width=cell_width)

    week_cells: list[Text] = []
    for cell in cells:
        cell_content = Text()
        cell_content.append(f"{cell['day']:2d}\n", style=_day_number_style(cell))

        # Days spilling over from neighbouring months only show their number
        if cell["current_month"]:
            for event in cell["events"][:max_events]:
                time_str = datetime_to_display_time_str(event["start"])
                style = event_style(event["color"])
                cell_content.append("● ", style=style)
                cell_content.append(f"{time_str} ", style="dim")
                cell_content.append(
                    f"{_truncate(event['title'], cell_width - 8)}\n", style=style
                )
            if len(cell["events"]) > max_events:
                remaining = len(cell["events"]) - max_events
                cell_content.append(f"  +{remaining} more\n", style="dim")

        week_cells.append(cell_content)
        if len(week_cells) == 7:
            table.add_row(*week_cells)
            week_cells = []

    return table


def calendar_month_view(console: Console, cells: list[MonthCell], title: str) -> None:
    console.print(f"\n[bold]{title}[/bold]")
    console.print(_render_month_table(cells))


def _render_mini_month(year_month: YearMonth) -> Table:
    table = Table(
        title=year_month["month"].format("MMMM"),
        box=box.SIMPLE,
        show_header=True,
        padding=(0, 0),
    )
    for letter in WEEKDAY_LETTERS:
        table.add_column(letter, justify="right", width=3)

    row: list[Text] = []
    for cell in year_month["cells"]:
        text = Text(f"{cell['day']:2d}", style=_day_number_style(cell))
        if cell["current_month"] and cell["events"]:
            # Underline days with at least one event
            text.stylize("underline")
        row.append(text)
        if len(row) == 7:
            table.add_row(*row)
            row = []
    return table


def calendar_year_view(console: Console, months: list[YearMonth], title: str) -> None:
    console.print(f"\n[bold]{title}[/bold]\n")
    console.print(Columns([_render_mini_month(month) for month in months]))


def _blocks_by_hour_row(
    layout: DayLayout, hour_rows: list[int], hour_height: float
) -> dict[int, list[PositionedEvent]]:
    """Map each visible hour to the positioned events whose block covers it."""
    by_hour: dict[int, list[PositionedEvent]] = {hour: [] for hour in hour_rows}
    if not hour_rows:
        return by_hour
    for cluster in layout["clusters"]:
        for positioned in cluster:
            top = positioned["layout"]["top"]
            bottom = top + positioned["layout"]["height"]
            first_row = int(top // hour_height)
            last_row = max(math.ceil(bottom / hour_height) - 1, first_row)
            for row in range(first_row, min(last_row + 1, len(hour_rows))):
                by_hour[hour_rows[row]].append(positioned)
    return by_hour


def _render_banners(console: Console, banners: list[Event]) -> None:
    for event in banners:
        line = Text()
        style = event_style(event["color"])
        line.append("■ ", style=style)
        line.append(_event_label(event), style=style)
        start = event["start"].format("MMM D HH:mm")
        end = event["end"].format("MMM D HH:mm")
        line.append(f"  {start} → {end}", style="dim")
        console.print(line)


def calendar_day_view(
    console: Console,
    layout: DayLayout,
    hour_rows: list[int],
    working_hours: WorkingHours,
    hour_height: float,
) -> None:
    """
    Display one day as a vertical hour timeline.

    Banner events are printed above the timeline. Each hour row lists the
    blocks covering it, with their column within the overlap cluster.
    """
    date_str = layout["date"].format("dddd, MMMM D, YYYY")
    console.print(f"\n[bold]{date_str}[/bold]\n")

    if layout["banners"]:
        _render_banners(console, layout["banners"])
        console.print()

    if not hour_rows:
        console.print("[dim]No visible hours configured[/dim]")
        return

    weekday = sunday_weekday(layout["date"])
    by_hour = _blocks_by_hour_row(layout, hour_rows, hour_height)
    now_row = (
        int(layout["now_top"] // hour_height) if layout["now_top"] is not None else None
    )

    for row, hour in enumerate(hour_rows):
        line = Text()
        if now_row == row:
            line.append(f"{hour:02d}:00 ", style=TODAY_STYLE)
        elif is_working_hour(hour, weekday, working_hours):
            line.append(f"{hour:02d}:00 ", style=WORKING_HOUR_STYLE)
        else:
            line.append(f"{hour:02d}:00 ", style=CLOSED_HOUR_STYLE)
        line.append("│ ", style="dim")

        for index, positioned in enumerate(by_hour[hour]):
            event = positioned["event"]
            style = event_style(event["color"])
            if index > 0:
                line.append("  ")
            line.append("■ ", style=style)
            line.append(_event_label(event), style=style)
            if positioned["column_count"] > 1:
                line.append(
                    f" [{positioned['column'] + 1}/{positioned['column_count']}]",
                    style="dim",
                )
        console.print(line)


def calendar_week_view(
    console: Console,
    layouts: list[DayLayout],
    hour_rows: list[int],
    working_hours: WorkingHours,
    hour_height: float,
    title: str,
    day_width: int = 14,
) -> None:
    """Display seven day columns side by side against a shared hour axis."""
    console.print(f"\n[bold]{title}[/bold]")

    table = Table(box=box.SIMPLE, show_header=True, padding=(0, 1))
    table.add_column("", style="dim", width=5)
    for layout in layouts:
        header = f"{WEEKDAY_NAMES[sunday_weekday(layout['date'])]} {layout['date'].day}"
        table.add_column(
            header,
            header_style=TODAY_STYLE if layout["is_today"] else "bold",
            width=day_width,
        )

    if any(layout["banners"] for layout in layouts):
        banner_cells: list[Text | str] = ["all"]
        for layout in layouts:
            cell = Text()
            for event in layout["banners"][:2]:
                cell.append(
                    f"■ {_truncate(event['title'], day_width - 2)}\n",
                    style=event_style(event["color"]),
                )
            if len(layout["banners"]) > 2:
                cell.append(f"+{len(layout['banners']) - 2} more", style="dim")
            banner_cells.append(cell)
        table.add_row(*banner_cells)

    blocks = [_blocks_by_hour_row(layout, hour_rows, hour_height) for layout in layouts]
    for row, hour in enumerate(hour_rows):
        row_cells: list[Text | str] = [f"{hour:02d}:00"]
        for layout, by_hour in zip(layouts, blocks):
            weekday = sunday_weekday(layout["date"])
            cell = Text()
            if layout["now_top"] is not None and int(layout["now_top"] // hour_height) == row:
                cell.append("─ now ─\n", style=TODAY_STYLE)
            for positioned in by_hour[hour]:
                event = positioned["event"]
                cell.append(
                    f"■ {_truncate(event['title'], day_width - 2)}\n",
                    style=event_style(event["color"]),
                )
            if not cell.plain and not is_working_hour(hour, weekday, working_hours):
                cell.append("·", style=CLOSED_HOUR_STYLE)
            row_cells.append(cell)
        table.add_row(*row_cells)

    console.print(table)
