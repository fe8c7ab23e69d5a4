# SPDX-License-Identifier: MIT

from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.padding import Padding

from cadence.view.state import get_show_header


def header(console: Console, assignee: str, sub_header: Optional[str] = None) -> None:
    """Print the application header with the active assignee filter.

    Args:
        console: Rich console to print to
        assignee: Display name of the assignee filter ("all" or a user)
        sub_header: Optional sub-header text to display, usually the date range
    """
    if not get_show_header():
        return

    additional = ""
    if sub_header is not None:
        additional = f"[sandy_brown]{escape(sub_header)}[/sandy_brown]"
    assignee = f"[plum1]assignee: {escape(assignee)}[/plum1]"

    console.print(Padding("[dark_orange]cadence[/dark_orange]", (1, 0, 0, 1)))
    console.print(Padding(additional, (0, 1)))
    console.print(Padding(assignee, (0, 1)))
