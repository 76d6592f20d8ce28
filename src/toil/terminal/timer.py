# SPDX-License-Identifier: MIT

import time
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.live import Live

from toil.repository.snapshot import SNAPSHOT_REPO
from toil.service.entry import (
    EntryValidationError,
    validate_entry_type,
    validate_target_duration,
)
from toil.service.timer import is_target_reached
from toil.session import open_store
from toil.terminal.completion import complete_project, complete_tag
from toil.terminal.lookup import get_store, resolve_project_id_optional, resolve_tag_ids
from toil.view.entry import build_status, single_entry_report, status_report


def start(
    ctx: typer.Context,
    entry_type: Annotated[
        str, typer.Argument(help="work or break", show_default=True)
    ] = "work",
    project: Annotated[
        Optional[str],
        typer.Option(
            "--project",
            "-p",
            help="project name or id",
            autocompletion=complete_project,
        ),
    ] = None,
    tags: Annotated[
        Optional[list[str]],
        typer.Option(
            "--tag",
            "-t",
            help="accepts multiple tag options",
            autocompletion=complete_tag,
        ),
    ] = None,
    target: Annotated[
        Optional[int],
        typer.Option(
            "--target",
            "-tg",
            help="planned length in minutes, defaults to the configured work/break target",
        ),
    ] = None,
    working: Annotated[
        bool,
        typer.Option(
            "--working",
            "-w",
            help="count this break as active time",
        ),
    ] = False,
) -> None:
    """
    start a work or break timer, stopping the running one
    """
    store = get_store(ctx)

    try:
        valid_type = validate_entry_type(entry_type)
        validate_target_duration(target)
    except EntryValidationError as e:
        typer.echo(f"Error: {e}")
        raise typer.Exit(1)

    id = store.start_entry(
        valid_type,
        project_id=resolve_project_id_optional(store, project),
        tag_ids=resolve_tag_ids(store, tags),
        target_duration=target * 60 if target is not None else None,
        is_working_break=working and valid_type == "break",
    )

    new_entry = store.get_entry(id)
    assert new_entry is not None
    single_entry_report(store, new_entry, title=f"started {valid_type}")


def stop(ctx: typer.Context) -> None:
    """
    stop the running timer
    """
    store = get_store(ctx)

    id = store.stop_entry()
    if id is None:
        console = Console()
        console.print("no active entry")
        return

    stopped_entry = store.get_entry(id)
    assert stopped_entry is not None
    single_entry_report(store, stopped_entry, title="stopped")


def status(ctx: typer.Context) -> None:
    """
    show the running timer and today's totals
    """
    store = get_store(ctx)
    status_report(store, store.clock)


def watch(
    ctx: typer.Context,
    interval: Annotated[
        float, typer.Option("--interval", "-i", help="refresh interval in seconds")
    ] = 1.0,
) -> None:
    """
    show a live status view, ringing the bell when a target is reached
    """
    store = get_store(ctx)
    console = Console()
    alerted_ids: set[str] = set()

    try:
        with Live(
            build_status(store, store.clock), console=console, auto_refresh=False
        ) as live:
            while True:
                active_entry = store.get_active_entry()
                if (
                    active_entry is not None
                    and active_entry["id"] not in alerted_ids
                    and is_target_reached(active_entry, store.clock)
                ):
                    alerted_ids.add(active_entry["id"])  # type: ignore[arg-type]
                    console.bell()
                live.update(build_status(store, store.clock), refresh=True)
                time.sleep(interval)
                # Pick up timers started or stopped from another terminal
                SNAPSHOT_REPO.reload()
                store = open_store(store.clock)
    except KeyboardInterrupt:
        # Ctrl-C is the way out of the live view
        raise typer.Exit(0)
