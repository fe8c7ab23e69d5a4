# SPDX-License-Identifier: MIT

"""
Rendering for the agenda view: a chronological list of a month's events,
one dated section per day that has events.
"""

import datetime
from typing import Optional

from rich.console import Console
from rich.text import Text

from cadence.color import TODAY_STYLE, WEEKEND_STYLE, event_style
from cadence.model.event import Event
from cadence.model.layout import AgendaGroup
from cadence.service.time_window import sunday_weekday
from cadence.time import datetime_to_display_time_str, same_day


def render_agenda_day_header(
    console: Console, group: AgendaGroup, today: Optional[datetime.date]
) -> None:
    """
    Render a section header with the same highlighting as the month grid.

    Args:
        console: Rich console to print to
        group: The agenda section being rendered
        today: Current calendar day
    """
    date_str = group["date"].format("YYYY-MM-DD ddd")
    if today is not None and same_day(group["date"], today):
        console.print(f"\n• [{TODAY_STYLE}]{date_str}[/{TODAY_STYLE}]")
    elif sunday_weekday(group["date"]) in (0, 6):
        console.print(f"\n• [{WEEKEND_STYLE}]{date_str}[/{WEEKEND_STYLE}]")
    else:
        console.print(f"\n• [bold]{date_str}[/bold]")


def render_agenda_event(console: Console, event: Event) -> None:
    style = event_style(event["color"])
    line = Text("  ")
    line.append(datetime_to_display_time_str(event["start"]), style="dim")
    line.append("-", style="dim")
    line.append(datetime_to_display_time_str(event["end"]), style="dim")
    line.append(" ■ ", style=style)
    line.append(event["title"], style=style)
    if event["assignee"] is not None:
        line.append(f"  @{event['assignee']['name']}", style="plum1")
    if event["session_type"] is not None:
        line.append(f"  [{event['session_type']}]", style="dim")
    if event["status"] is not None and event["status"] != "scheduled":
        line.append(f"  {event['status']}", style="italic")
    console.print(line)
    if event["description"]:
        console.print(Text(f"      {event['description']}", style="dim"))


def agenda_view(
    console: Console,
    groups: list[AgendaGroup],
    title: str,
    today: Optional[datetime.date] = None,
) -> None:
    console.print(f"\n[bold]{title}[/bold]")
    if not groups:
        console.print("\n[dim]No events this month[/dim]")
        return
    for group in groups:
        render_agenda_day_header(console, group, today)
        for event in group["events"]:
            render_agenda_event(console, event)
