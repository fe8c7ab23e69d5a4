# SPDX-License-Identifier: MIT

from rich.console import Console
from rich.table import Table
from rich.text import Text

from cadence.color import event_style
from cadence.model.user import User


def users_view(console: Console, users: list[User], event_counts: dict[str, int]) -> None:
    table = Table(title="users")
    table.add_column("id", style="cyan")
    table.add_column("name")
    table.add_column("role")
    table.add_column("events", justify="right")

    for user in users:
        name_style = event_style(user["color"]) if user["color"] is not None else ""
        table.add_row(
            Text(user["id"]),
            Text(user["name"], style=name_style),
            Text(user["role"] or ""),
            str(event_counts.get(user["id"], 0)),
        )

    console.print(table)
