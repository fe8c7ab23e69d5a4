# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.markup import escape

from cadence import configuration
from cadence.model.view import ALL_ASSIGNEES, CalendarView
from cadence.repository.configuration import CONFIGURATION_REPO
from cadence.repository.source import SourceRepository
from cadence.service.intake import Rejection, populate_session
from cadence.session import CalendarSession
from cadence.terminal.parse import parse_date
from cadence.view.view.views.agenda import agenda_view
from cadence.view.view.views.calendar import (
    calendar_day_view,
    calendar_month_view,
    calendar_week_view,
    calendar_year_view,
)
from cadence.view.view.views.header import header
from cadence.view.view.views.user import users_view

DateOption = Annotated[
    Optional[str],
    typer.Option(
        "--date",
        "-d",
        help="valid inputs: YYYY-MM-DD, today, yesterday, tomorrow, or day offset like 1, -1",
    ),
]
AssigneeOption = Annotated[
    str,
    typer.Option("--assignee", "-a", help="Only show events assigned to this user id"),
]
SourceOption = Annotated[
    Optional[Path],
    typer.Option(
        "--source",
        "-s",
        help="Event/user source file (YAML or JSON), defaults to the configured one",
    ),
]
StepOption = Annotated[
    int,
    typer.Option(
        "--step",
        "-n",
        help="Move forward (positive) or back (negative) this many views from the date",
    ),
]


def _report_rejections(console: Console, rejections: list[Rejection]) -> None:
    for rejection in rejections:
        console.print(
            f"[yellow]Skipped {rejection['kind']} #{rejection['index']}: "
            f"{escape(rejection['reason'])}[/yellow]"
        )


def open_session(
    console: Console,
    view: CalendarView,
    date: Optional[str],
    assignee: str,
    source: Optional[Path],
    step: int = 0,
) -> CalendarSession:
    """
    Build a session from the configuration and the event source.

    Exits with status 1 when the configuration or the source cannot be read.
    """
    try:
        config = CONFIGURATION_REPO.get_config()
        session = CalendarSession(
            view=view,
            working_hours=config["working_hours"],
            visible_hours=config["visible_hours"],
            hour_height=config["hour_height"],
            tz=config["timezone"],
        )
    except ValueError as e:
        console.print(f"[red]Error: invalid configuration: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    reference_date = parse_date(date, session.tz)
    if reference_date is not None:
        session.set_reference_date(reference_date)

    source_path = (
        source
        if source is not None
        else configuration.resolve_source_path(config["source_path"])
    )
    if not source_path.is_file():
        console.print(
            f"[red]Error: event source '{escape(str(source_path))}' does not exist[/red]"
        )
        raise typer.Exit(1)

    try:
        rejections = populate_session(session, SourceRepository(source_path))
    except ValueError as e:
        console.print(
            f"[red]Error: cannot read '{escape(str(source_path))}': {escape(str(e))}[/red]"
        )
        raise typer.Exit(1)
    _report_rejections(console, rejections)

    session.set_filter_assignee_id(assignee)
    for _ in range(abs(step)):
        if step > 0:
            session.next()
        else:
            session.previous()
    return session


def _assignee_name(session: CalendarSession) -> str:
    if session.filter_assignee_id == ALL_ASSIGNEES:
        return ALL_ASSIGNEES
    for user in session.users:
        if user["id"] == session.filter_assignee_id:
            return user["name"]
    return session.filter_assignee_id


def month(
    date: DateOption = None,
    assignee: AssigneeOption = ALL_ASSIGNEES,
    source: SourceOption = None,
    step: StepOption = 0,
) -> None:
    """Display the month grid around a date."""
    console = Console()
    session = open_session(console, CalendarView.MONTH, date, assignee, source, step)
    header(console, _assignee_name(session), session.range_label())
    calendar_month_view(
        console, session.month_grid(), session.reference_date.format("MMMM YYYY")
    )


def year(
    date: DateOption = None,
    assignee: AssigneeOption = ALL_ASSIGNEES,
    source: SourceOption = None,
    step: StepOption = 0,
) -> None:
    """Display twelve mini-months for the year of a date."""
    console = Console()
    session = open_session(console, CalendarView.YEAR, date, assignee, source, step)
    header(console, _assignee_name(session), session.range_label())
    calendar_year_view(
        console, session.year_grid(), session.reference_date.format("YYYY")
    )


def week(
    date: DateOption = None,
    assignee: AssigneeOption = ALL_ASSIGNEES,
    source: SourceOption = None,
    step: StepOption = 0,
) -> None:
    """Display the Sunday-to-Saturday week containing a date."""
    console = Console()
    session = open_session(console, CalendarView.WEEK, date, assignee, source, step)
    header(console, _assignee_name(session), session.range_label())
    calendar_week_view(
        console,
        session.week_layout(),
        session.hour_rows(),
        session.working_hours,
        session.hour_height,
        session.range_label(),
    )


def day(
    date: DateOption = None,
    assignee: AssigneeOption = ALL_ASSIGNEES,
    source: SourceOption = None,
    step: StepOption = 0,
) -> None:
    """Display a single day as an hour timeline."""
    console = Console()
    session = open_session(console, CalendarView.DAY, date, assignee, source, step)
    header(console, _assignee_name(session), session.range_label())
    calendar_day_view(
        console,
        session.day_layout(),
        session.hour_rows(),
        session.working_hours,
        session.hour_height,
    )


def agenda(
    date: DateOption = None,
    assignee: AssigneeOption = ALL_ASSIGNEES,
    source: SourceOption = None,
    step: StepOption = 0,
) -> None:
    """List the events of a month, grouped by day."""
    console = Console()
    session = open_session(console, CalendarView.AGENDA, date, assignee, source, step)
    header(console, _assignee_name(session), session.range_label())
    agenda_view(
        console,
        session.agenda(),
        session.reference_date.format("MMMM YYYY"),
        session.today_date(),
    )


def users(source: SourceOption = None) -> None:
    """List the users of the event source with their event counts."""
    console = Console()
    session = open_session(console, CalendarView.MONTH, None, ALL_ASSIGNEES, source)
    event_counts: dict[str, int] = {}
    for event in session.events():
        if event["assignee"] is not None:
            assignee_id = event["assignee"]["id"]
            event_counts[assignee_id] = event_counts.get(assignee_id, 0) + 1
    users_view(console, session.users, event_counts)


def show(
    date: DateOption = None,
    assignee: AssigneeOption = ALL_ASSIGNEES,
    source: SourceOption = None,
    step: StepOption = 0,
) -> None:
    """Display the configured default view."""
    try:
        default_view = CalendarView(CONFIGURATION_REPO.get_config()["default_view"])
    except ValueError as e:
        Console().print(f"[red]Error: invalid configuration: {escape(str(e))}[/red]")
        raise typer.Exit(1)
    commands = {
        CalendarView.DAY: day,
        CalendarView.WEEK: week,
        CalendarView.MONTH: month,
        CalendarView.YEAR: year,
        CalendarView.AGENDA: agenda,
    }
    commands[default_view](date, assignee, source, step)
