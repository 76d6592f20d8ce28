"""Tests for CSV export and import."""

import io

import pendulum
import pytest

from toil.color import IMPORTED_PROJECT_COLOR
from toil.repository.time_store import TimeStore
from toil.service.csv_exchange import (
    CSV_COLUMNS,
    import_entries_csv,
    parse_entries_csv,
    write_entries_csv,
)
from toil.service.entry import EntryValidationError

HEADER = ",".join(CSV_COLUMNS)


def test_export_resolves_names(store, clock):
    project_id = store.add_project("Website")
    focus_id = store.add_tag("focus")
    deep_id = store.add_tag("deep")
    store.start_entry("work", project_id=project_id, tag_ids=[focus_id, deep_id])
    clock.advance(minutes=25)
    store.stop_entry()
    store.start_entry("break")

    stream = io.StringIO()
    count = write_entries_csv(store, stream)

    lines = stream.getvalue().splitlines()
    assert count == 2
    assert lines[0] == HEADER
    assert ",Website,focus;deep," in lines[1]
    # The running entry is exported with an empty end time
    assert lines[2].split(",")[3] == ""


def test_import_links_existing_and_new_projects(store):
    existing_id = store.add_project("Website")
    focus_id = store.add_tag("focus")
    stream = io.StringIO(
        f"{HEADER}\n"
        ",work,2024-06-03T09:00:00+00:00,2024-06-03T10:00:00+00:00,Website,focus;unknown,\n"
        ",break,2024-06-03T10:00:00+00:00,2024-06-03T10:05:00+00:00,,,stretch\n"
        ",work,2024-06-03T10:05:00+00:00,,Docs,,\n"
    )

    assert import_entries_csv(store, stream) == 3

    entries = store.entries
    assert entries[0]["project_id"] == existing_id
    assert entries[0]["tag_ids"] == [focus_id]
    assert entries[1]["type"] == "break"
    assert entries[1]["notes"] == "stretch"
    assert entries[2]["end"] is None

    docs = store.get_project_by_name("Docs")
    assert docs["color"] == IMPORTED_PROJECT_COLOR
    assert entries[2]["project_id"] == docs["id"]


def test_import_without_creating_projects(store):
    stream = io.StringIO(
        f"{HEADER}\n"
        ",work,2024-06-03T09:00:00+00:00,2024-06-03T10:00:00+00:00,Docs,,\n"
    )

    import_entries_csv(store, stream, create_missing_projects=False)

    assert store.projects == []
    assert store.entries[0]["project_id"] is None


def test_rows_without_start_are_skipped():
    stream = io.StringIO(
        f"{HEADER}\n"
        ",work,,2024-06-03T10:00:00+00:00,,,\n"
        ",,2024-06-03T11:00:00+00:00,2024-06-03T12:00:00+00:00,,,\n"
    )

    rows = parse_entries_csv(stream)

    assert len(rows) == 1
    assert rows[0]["line"] == 3
    assert rows[0]["type"] == "work"


def test_bad_row_imports_nothing(store):
    stream = io.StringIO(
        f"{HEADER}\n"
        ",work,2024-06-03T09:00:00+00:00,2024-06-03T10:00:00+00:00,,,\n"
        ",work,not a time,,,,\n"
    )

    with pytest.raises(EntryValidationError, match="Line 3"):
        import_entries_csv(store, stream)

    assert store.entries == []


def test_large_import_saves_once(clock):
    changes = []
    store = TimeStore(clock=clock, on_change=changes.append)
    start = pendulum.datetime(2024, 1, 1, tz="UTC")
    lines = [HEADER]
    for index in range(3000):
        row_start = start.add(minutes=30 * index)
        lines.append(
            f",work,{row_start.isoformat()},{row_start.add(minutes=25).isoformat()},,,"
        )

    count = import_entries_csv(store, io.StringIO("\n".join(lines) + "\n"))

    assert count == 3000
    assert len(store.entries) == 3000
    assert len(changes) == 1
