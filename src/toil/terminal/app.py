# SPDX-License-Identifier: MIT

from typing import Annotated

import typer

from toil.log_setup import configure_logging
from toil.terminal import configuration, data, entry, project, report, tag, timer
from toil.terminal.custom_typer import OrderedAliasedTyperGroup
from toil.view.header import show_header

app = typer.Typer(
    cls=OrderedAliasedTyperGroup,
    help="Toil - work and break time tracking in the CLI",
    no_args_is_help=True,
)
app.command(name="start, s")(timer.start)
app.command(name="stop, x")(timer.stop)
app.command(name="status, st")(timer.status)
app.command(name="watch, w")(timer.watch)
app.command(name="report, r")(report.report)
app.add_typer(entry.app, name="entry, e", help="add, modify, delete and list entries")
app.add_typer(project.app, name="project, p", help="manage projects")
app.add_typer(tag.app, name="tag, t", help="manage tags")
app.add_typer(configuration.app, name="config, c", help="view and change settings")
app.command(name="export")(data.export)
app.command(name="import")(data.import_csv)
app.command(name="backup")(data.backup)
app.command(name="restore")(data.restore)


@app.callback()
def main_callback(
    no_header: Annotated[
        bool,
        typer.Option(
            "--no-header",
            "-nh",
            help="Suppress header output in reports",
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Log debug output to stderr",
        ),
    ] = False,
) -> None:
    """
    Toil - work and break time tracking in the CLI

    Global options that apply to all commands.
    """
    if no_header:
        show_header.set(False)
    if verbose:
        configure_logging("DEBUG")


def run() -> None:
    app()
