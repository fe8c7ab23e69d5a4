# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Annotated, Optional

import typer

from cadence import configuration as config_paths
from cadence.initialize import initialize
from cadence.repository.configuration import CONFIGURATION_REPO
from cadence.terminal import configuration, view
from cadence.terminal.custom_typer import OrderedAliasedTyperGroup
from cadence.view import state as view_state

app = typer.Typer(
    cls=OrderedAliasedTyperGroup,
    help="cadence - interview scheduling calendar in the CLI",
    no_args_is_help=True,
)
app.command(name="day, d")(view.day)
app.command(name="week, w")(view.week)
app.command(name="month, m")(view.month)
app.command(name="year, y")(view.year)
app.command(name="agenda, a")(view.agenda)
app.command(name="show, s")(view.show)
app.command(name="users, u")(view.users)
app.add_typer(configuration.app, name="config, c", help="View or change settings")


@app.callback()
def main_callback(
    no_header: Annotated[
        bool,
        typer.Option(
            "--no-header",
            "-nh",
            help="Suppress header output above views",
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log engine diagnostics to stderr"),
    ] = False,
    config: Annotated[
        Optional[Path],
        typer.Option("--config", help="Use this configuration file"),
    ] = None,
) -> None:
    """
    cadence - interview scheduling calendar in the CLI

    Global options that apply to all commands.
    """
    if config is not None:
        config_paths.set_config_path(config)
        CONFIGURATION_REPO.reset()
    initialize(verbose)
    if no_header:
        view_state.set_show_header(False)


def run() -> None:
    app()
