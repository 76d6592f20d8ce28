# SPDX-License-Identifier: MIT

from rich import box
from rich.console import Console, Group, RenderableType
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from toil.model.entity_id import short_entity_id
from toil.model.time_entry import TimeEntry
from toil.repository.time_store import TimeStore
from toil.service.aggregate import get_activity_totals
from toil.service.timer import elapsed_seconds, remaining_seconds
from toil.time import (
    Clock,
    datetime_to_display_local_datetime_str,
    datetime_to_display_local_datetime_str_optional,
    seconds_to_clock_str,
)
from toil.view.header import header
from toil.view.util import format_entry_type, format_project, format_tags


def entries_report(
    store: TimeStore,
    report_name: str,
    entries: list[TimeEntry],
    clock: Clock,
) -> None:
    header(report_name)

    entries_table = Table(box=box.SIMPLE)
    for column in ["id", "type", "project", "tags", "start", "end", "duration", "notes"]:
        entries_table.add_column(column)

    total_seconds = 0.0
    for entry in sorted(entries, key=lambda e: e["start"]):
        duration = elapsed_seconds(entry, clock)
        total_seconds += duration
        # Running entries are underlined
        style = "underline" if entry["end"] is None else ""
        entries_table.add_row(
            short_entity_id(entry["id"] or ""),
            format_entry_type(entry),
            format_project(entry, store.resolve_project(entry["project_id"])),
            format_tags(store.resolve_tags(entry["tag_ids"])),
            datetime_to_display_local_datetime_str(entry["start"]),
            datetime_to_display_local_datetime_str_optional(entry["end"]) or "",
            seconds_to_clock_str(duration),
            entry["notes"] or "",
            style=style,
        )

    entries_table.add_row(
        "", "", "", "", "", "", seconds_to_clock_str(total_seconds), "", style="bold"
    )

    console = Console()
    console.print(entries_table)


def single_entry_report(
    store: TimeStore,
    entry: TimeEntry,
    title: str = "single entry",
) -> None:
    header(title)

    entry_table = Table(box=box.SIMPLE)
    entry_table.add_column("property")
    entry_table.add_column("value")

    entry_table.add_row("id", entry["id"])
    entry_table.add_row("type", format_entry_type(entry))
    entry_table.add_row(
        "project", format_project(entry, store.resolve_project(entry["project_id"]))
    )
    entry_table.add_row("tags", format_tags(store.resolve_tags(entry["tag_ids"])))
    entry_table.add_row("start", datetime_to_display_local_datetime_str(entry["start"]))
    entry_table.add_row(
        "end", datetime_to_display_local_datetime_str_optional(entry["end"]) or ""
    )
    entry_table.add_row(
        "target",
        seconds_to_clock_str(entry["target_duration"])
        if entry["target_duration"] is not None
        else "",
    )
    entry_table.add_row("notes", entry["notes"] or "")

    console = Console()
    console.print(entry_table)


def build_status(store: TimeStore, clock: Clock) -> RenderableType:
    """The running entry with its countdown, followed by today's totals."""
    active_entry = store.get_active_entry()
    renderables: list[RenderableType] = []

    if active_entry is None:
        renderables.append(Panel(Text("idle", style="bright_black"), title="timer"))
    else:
        remaining = remaining_seconds(active_entry, clock)
        timer_text = Text()
        timer_text.append_text(format_entry_type(active_entry))
        timer_text.append("  ")
        timer_text.append(
            seconds_to_clock_str(elapsed_seconds(active_entry, clock)), style="bold"
        )
        if remaining is not None:
            if remaining > 0:
                timer_text.append(f"  {seconds_to_clock_str(remaining)} left")
            else:
                timer_text.append(
                    f"  {seconds_to_clock_str(-remaining)} over target",
                    style="bold red",
                )
        project = store.resolve_project(active_entry["project_id"])
        if project is not None or active_entry["project_id"]:
            timer_text.append("  ")
            timer_text.append_text(format_project(active_entry, project))
        renderables.append(Panel(timer_text, title="timer"))

    totals = get_activity_totals(store.entries, clock=clock)
    totals_table = Table(box=box.SIMPLE, title="today")
    totals_table.add_column("work")
    totals_table.add_column("break")
    totals_table.add_column("active")
    totals_table.add_column("rest")
    totals_table.add_row(
        seconds_to_clock_str(totals["work_seconds"]),
        seconds_to_clock_str(totals["break_seconds"]),
        seconds_to_clock_str(totals["active_seconds"]),
        seconds_to_clock_str(totals["rest_seconds"]),
    )
    renderables.append(totals_table)

    return Group(*renderables)


def status_report(store: TimeStore, clock: Clock) -> None:
    header("status")
    console = Console()
    console.print(build_status(store, clock))
