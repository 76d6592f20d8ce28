# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from toil.repository.snapshot import snapshot_from_yaml, snapshot_to_yaml
from toil.service.csv_exchange import import_entries_csv, write_entries_csv
from toil.service.entry import EntryValidationError
from toil.terminal.lookup import get_store


def export(
    ctx: typer.Context,
    path: Annotated[Path, typer.Argument(help="csv file to write")],
) -> None:
    """
    export entries as csv
    """
    store = get_store(ctx)

    with path.open("w", newline="") as stream:
        count = write_entries_csv(store, stream)

    console = Console()
    console.print(f"exported {count} entries to {path}")


def import_csv(
    ctx: typer.Context,
    path: Annotated[
        Path, typer.Argument(help="csv file to read", exists=True, dir_okay=False)
    ],
    create_projects: Annotated[
        bool,
        typer.Option(
            "--create-projects/--no-create-projects",
            help="create projects for names that do not exist yet",
        ),
    ] = True,
) -> None:
    """
    add the entries of a csv export
    """
    store = get_store(ctx)

    try:
        with path.open(newline="") as stream:
            count = import_entries_csv(store, stream, create_projects)
    except EntryValidationError as e:
        typer.echo(f"Error: {e}")
        raise typer.Exit(1)

    console = Console()
    console.print(f"imported {count} entries from {path}")


def backup(
    ctx: typer.Context,
    path: Annotated[Path, typer.Argument(help="yaml file to write")],
) -> None:
    """
    write all entries, projects and tags to a yaml file
    """
    store = get_store(ctx)
    path.write_text(snapshot_to_yaml(store.snapshot()))

    console = Console()
    console.print(f"backed up {len(store.entries)} entries to {path}")


def restore(
    ctx: typer.Context,
    path: Annotated[
        Path, typer.Argument(help="yaml backup to read", exists=True, dir_okay=False)
    ],
    yes: Annotated[
        bool, typer.Option("--yes", "-y", help="replace without asking")
    ] = False,
) -> None:
    """
    replace all entries, projects and tags with a backup
    """
    store = get_store(ctx)

    try:
        snapshot = snapshot_from_yaml(path.read_text())
    except ValueError as e:
        typer.echo(f"Error: {e}")
        raise typer.Exit(1)

    if not yes:
        typer.confirm(
            f"Replace {len(store.entries)} entries with the "
            f"{len(snapshot['entries'])} entries in {path}?",
            abort=True,
        )

    store.import_data(snapshot)

    console = Console()
    console.print(f"restored {len(store.entries)} entries from {path}")
