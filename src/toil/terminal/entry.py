# SPDX-License-Identifier: MIT

from typing import Annotated, Any, Optional

import pendulum
import typer

from toil.model.report import PERIODS
from toil.service.aggregate import clipped_seconds, get_report_window
from toil.service.entry import (
    EntryValidationError,
    validate_entry_times,
    validate_entry_type,
    validate_target_duration,
)
from toil.terminal.completion import complete_project, complete_tag
from toil.terminal.custom_typer import AliasedTyperGroup
from toil.terminal.lookup import (
    get_store,
    resolve_entry_id,
    resolve_project_id_optional,
    resolve_tag_ids,
)
from toil.terminal.parse import parse_datetime, parse_id_list
from toil.view.entry import entries_report, single_entry_report

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)

DATETIME_HELP = (
    "valid inputs: YYYY-MM-DD HH:mm, (H)H:mm, now, today, yesterday, "
    "or minute offset like -15m"
)


@app.command("add, a", no_args_is_help=True)
def add(
    ctx: typer.Context,
    start: Annotated[
        pendulum.DateTime,
        typer.Option("--start", "-s", parser=parse_datetime, help=DATETIME_HELP),
    ],
    entry_type: Annotated[str, typer.Argument(help="work or break")] = "work",
    end: Annotated[
        Optional[pendulum.DateTime],
        typer.Option("--end", "-e", parser=parse_datetime, help=DATETIME_HELP),
    ] = None,
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
    notes: Annotated[Optional[str], typer.Option("--notes", "-n")] = None,
    target: Annotated[
        Optional[int], typer.Option("--target", "-tg", help="minutes")
    ] = None,
    working: Annotated[
        bool, typer.Option("--working", "-w", help="count this break as active time")
    ] = False,
) -> None:
    """
    add a past or running entry by hand
    """
    store = get_store(ctx)

    try:
        valid_type = validate_entry_type(entry_type)
        validate_entry_times(start, end)
        validate_target_duration(target)
    except EntryValidationError as e:
        typer.echo(f"Error: {e}")
        raise typer.Exit(1)

    id = store.add_manual_entry(
        {
            "type": valid_type,
            "start": start,
            "end": end,
            "project_id": resolve_project_id_optional(store, project),
            "tag_ids": resolve_tag_ids(store, tags),
            "notes": notes,
            "target_duration": target * 60 if target is not None else None,
            "is_working_break": working and valid_type == "break",
        }
    )

    new_entry = store.get_entry(id)
    assert new_entry is not None
    single_entry_report(store, new_entry, title="added entry")


@app.command("modify, m", no_args_is_help=True)
def modify(
    ctx: typer.Context,
    id: str,
    entry_type: Annotated[
        Optional[str], typer.Option("--type", "-ty", help="work or break")
    ] = None,
    start: Annotated[
        Optional[pendulum.DateTime],
        typer.Option("--start", "-s", parser=parse_datetime, help=DATETIME_HELP),
    ] = None,
    end: Annotated[
        Optional[pendulum.DateTime],
        typer.Option("--end", "-e", parser=parse_datetime, help=DATETIME_HELP),
    ] = None,
    project: Annotated[
        Optional[str],
        typer.Option(
            "--project",
            "-p",
            help="project name or id",
            autocompletion=complete_project,
        ),
    ] = None,
    add_tags: Annotated[
        Optional[list[str]],
        typer.Option(
            "--add-tag",
            "-at",
            help="accepts multiple tag options",
            autocompletion=complete_tag,
        ),
    ] = None,
    remove_tag_list: Annotated[
        Optional[list[str]],
        typer.Option(
            "--remove-tag",
            "-rt",
            help="accepts multiple tag options",
            autocompletion=complete_tag,
        ),
    ] = None,
    notes: Annotated[Optional[str], typer.Option("--notes", "-n")] = None,
    target: Annotated[
        Optional[int], typer.Option("--target", "-tg", help="minutes")
    ] = None,
    working: Annotated[
        Optional[bool],
        typer.Option(
            "--working/--resting",
            help="whether a break counts as active time",
            show_default=False,
        ),
    ] = None,
    remove_project: Annotated[bool, typer.Option("--remove-project", "-rp")] = False,
    remove_tags: Annotated[bool, typer.Option("--remove-tags", "-rts")] = False,
    remove_notes: Annotated[bool, typer.Option("--remove-notes", "-rn")] = False,
    remove_target: Annotated[bool, typer.Option("--remove-target", "-rtg")] = False,
) -> None:
    """
    modify one or more entries
    """
    store = get_store(ctx)

    real_ids = [resolve_entry_id(store, prefix) for prefix in parse_id_list(id)]
    project_id = resolve_project_id_optional(store, project)
    add_tag_ids = resolve_tag_ids(store, add_tags)
    remove_tag_ids = resolve_tag_ids(store, remove_tag_list)

    # Validate every entry before changing any of them
    planned_updates: list[tuple[str, dict[str, Any]]] = []
    for real_id in real_ids:
        entry = store.get_entry(real_id)
        assert entry is not None

        updates: dict[str, Any] = {}
        try:
            if entry_type is not None:
                updates["type"] = validate_entry_type(entry_type)
            validate_target_duration(target)
            validate_entry_times(
                start if start is not None else entry["start"],
                end if end is not None else entry["end"],
            )
        except EntryValidationError as e:
            typer.echo(f"Error: {e}")
            raise typer.Exit(1)

        if start is not None:
            updates["start"] = start
        if end is not None:
            updates["end"] = end
        if project_id is not None:
            updates["project_id"] = project_id
        if remove_project:
            updates["project_id"] = None
        if add_tags is not None or remove_tag_list is not None:
            tag_ids = list(entry["tag_ids"]) + add_tag_ids
            updates["tag_ids"] = [
                tag_id for tag_id in tag_ids if tag_id not in remove_tag_ids
            ]
        if remove_tags:
            updates["tag_ids"] = []
        if notes is not None:
            updates["notes"] = notes
        if remove_notes:
            updates["notes"] = None
        if target is not None:
            updates["target_duration"] = target * 60
        if remove_target:
            updates["target_duration"] = None
        if working is not None:
            updates["is_working_break"] = working

        planned_updates.append((real_id, updates))

    for real_id, updates in planned_updates:
        store.update_entry(real_id, updates)
        modified_entry = store.get_entry(real_id)
        assert modified_entry is not None
        single_entry_report(store, modified_entry, title="modified entry")


@app.command("delete, d", no_args_is_help=True)
def delete(ctx: typer.Context, id: str) -> None:
    """
    delete one or more entries
    """
    store = get_store(ctx)

    real_ids = [resolve_entry_id(store, prefix) for prefix in parse_id_list(id)]
    for real_id in real_ids:
        entry = store.get_entry(real_id)
        store.delete_entry(real_id)
        if entry is not None:
            single_entry_report(store, entry, title="deleted entry")


@app.command("list, l")
def list_entries(
    ctx: typer.Context,
    period: Annotated[
        str,
        typer.Option("--period", "-pe", help=f"one of: {', '.join(PERIODS)}"),
    ] = "day",
) -> None:
    """
    list the entries that overlap a period
    """
    store = get_store(ctx)

    if period not in PERIODS:
        raise typer.BadParameter(f"Period must be one of: {', '.join(PERIODS)}")

    now = store.clock()
    start, end = get_report_window(period, store.clock)  # type: ignore[arg-type]
    entries = [
        entry
        for entry in store.entries
        if clipped_seconds(entry, start, end, now) > 0
        or start <= entry["start"] < end
    ]
    entries_report(store, f"{period} entries", entries, store.clock)
