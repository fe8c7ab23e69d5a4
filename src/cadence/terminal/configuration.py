# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from cadence.errors import TimeWindowError
from cadence.model.view import CalendarView
from cadence.repository.configuration import CONFIGURATION_REPO
from cadence.service.time_window import is_closed, working_hours_for_weekday
from cadence.terminal.custom_typer import AliasedTyperGroup
from cadence.terminal.parse import parse_hour, parse_weekday
from cadence.view.view.views.calendar import WEEKDAY_NAMES

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("view, v")
def view() -> None:
    """Display current configuration settings."""
    console = Console()
    try:
        config = CONFIGURATION_REPO.get_config()
    except (TimeWindowError, ValueError) as e:
        console.print(f"[red]Error: invalid configuration: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    table = Table()
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="magenta")

    table.add_row("show_header", "✓ Enabled" if config["show_header"] else "✗ Disabled")
    table.add_row("timezone", escape(config["timezone"]))
    table.add_row("default_view", config["default_view"])
    table.add_row("hour_height", str(config["hour_height"]))
    table.add_row(
        "visible_hours",
        f"{config['visible_hours']['from']:02d}-{config['visible_hours']['to']:02d}",
    )
    for weekday, name in enumerate(WEEKDAY_NAMES):
        hour_range = working_hours_for_weekday(config["working_hours"], weekday)
        value = (
            "closed"
            if is_closed(config["working_hours"], weekday)
            else f"{hour_range['from']:02d}-{hour_range['to']:02d}"
        )
        table.add_row(f"working_hours.{name.lower()}", value)
    table.add_row(
        "source_path",
        escape(config["source_path"]) if config["source_path"] else "[dim]default[/dim]",
    )

    console.print(table)


@app.command("set, s")
def set(
    show_header: Annotated[
        Optional[bool],
        typer.Option("--show-header/--hide-header", help="Show the header above views"),
    ] = None,
    timezone: Annotated[
        Optional[str],
        typer.Option("--timezone", "-tz", help="Timezone for calendar days, or 'local'"),
    ] = None,
    default_view: Annotated[
        Optional[CalendarView],
        typer.Option("--default-view", help="View opened by 'cadence show'"),
    ] = None,
    hour_height: Annotated[
        Optional[int],
        typer.Option("--hour-height", help="Pixel height of one hour row in layouts"),
    ] = None,
    source_path: Annotated[
        Optional[str],
        typer.Option("--source-path", help="Default event/user source file"),
    ] = None,
    remove_source_path: Annotated[
        bool,
        typer.Option("--remove-source-path", help="Use the default source location"),
    ] = False,
) -> None:
    """Update configuration settings."""
    console = Console()
    try:
        CONFIGURATION_REPO.update_config(
            show_header=show_header,
            timezone=timezone,
            default_view=default_view.value if default_view is not None else None,
            hour_height=hour_height,
            source_path=source_path,
            remove_source_path=remove_source_path,
        )
    except ValueError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1)
    CONFIGURATION_REPO.flush()
    console.print("[green]Configuration updated[/green]")


@app.command("visible-hours, vh")
def visible_hours(
    hour_from: Annotated[int, typer.Argument(help="First visible hour (0-24)")],
    hour_to: Annotated[int, typer.Argument(help="Last visible hour (0-24)")],
) -> None:
    """Set the hour range shown by the day and week views."""
    console = Console()
    try:
        CONFIGURATION_REPO.set_visible_hours(
            {"from": parse_hour(hour_from), "to": parse_hour(hour_to)}
        )
    except TimeWindowError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1)
    CONFIGURATION_REPO.flush()
    console.print(f"[green]Visible hours set to {hour_from:02d}-{hour_to:02d}[/green]")


@app.command("working-hours, wh")
def working_hours(
    weekday: Annotated[str, typer.Argument(help="Weekday, 0-6 (0 = Sunday) or a name")],
    hour_from: Annotated[
        Optional[int], typer.Argument(help="Opening hour (0-24)")
    ] = None,
    hour_to: Annotated[Optional[int], typer.Argument(help="Closing hour (0-24)")] = None,
    closed: Annotated[
        bool, typer.Option("--closed", help="Mark the weekday as closed")
    ] = False,
) -> None:
    """Set the opening hours of one weekday."""
    console = Console()
    weekday_index = parse_weekday(weekday)
    try:
        if closed:
            CONFIGURATION_REPO.set_working_hours(weekday_index, None)
        elif hour_from is None or hour_to is None:
            console.print("[red]Error: give both hours, or --closed[/red]")
            raise typer.Exit(1)
        else:
            CONFIGURATION_REPO.set_working_hours(
                weekday_index, {"from": parse_hour(hour_from), "to": parse_hour(hour_to)}
            )
    except TimeWindowError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1)
    CONFIGURATION_REPO.flush()
    console.print(f"[green]Working hours updated for {WEEKDAY_NAMES[weekday_index]}[/green]")
