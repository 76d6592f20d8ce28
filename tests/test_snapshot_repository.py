"""Tests for the YAML snapshot file."""

import pendulum
import pytest

from toil import configuration
from toil.repository.snapshot import SNAPSHOT_REPO, snapshot_from_yaml, snapshot_to_yaml
from toil.repository.time_store import TimeStore


def test_yaml_keeps_entries_projects_and_tags(store, clock):
    project_id = store.add_project("Website")
    tag_id = store.add_tag("focus")
    store.start_entry("work", project_id=project_id, tag_ids=[tag_id])
    clock.advance(minutes=30)
    store.stop_entry()
    store.start_entry("break", is_working_break=True)

    loaded = snapshot_from_yaml(snapshot_to_yaml(store.snapshot()))

    assert loaded == store.snapshot()
    assert loaded["entries"][1]["end"] is None


def test_empty_document_is_empty_snapshot():
    assert snapshot_from_yaml("") == {"entries": [], "projects": [], "tags": []}


def test_unquoted_timestamps_are_accepted():
    loaded = snapshot_from_yaml(
        "entries:\n"
        "- id: e1\n"
        "  type: work\n"
        "  start: 2024-06-03 09:00:00+00:00\n"
        "  end: 2024-06-03 10:00:00+00:00\n"
    )

    entry = loaded["entries"][0]
    assert entry["start"] == pendulum.datetime(2024, 6, 3, 9, tz="UTC")
    assert entry["end"] == pendulum.datetime(2024, 6, 3, 10, tz="UTC")


def test_missing_file_loads_empty(isolated_paths):
    assert SNAPSHOT_REPO.get_snapshot()["entries"] == []
    assert SNAPSHOT_REPO.flush() is False


def test_saved_snapshot_survives_reload(isolated_paths, clock):
    store = TimeStore(
        SNAPSHOT_REPO.get_snapshot(),
        clock=clock,
        on_change=SNAPSHOT_REPO.save_snapshot,
    )
    id = store.start_entry("work")

    assert SNAPSHOT_REPO.flush() is True
    assert configuration.DATA_SNAPSHOT_PATH.is_file()

    SNAPSHOT_REPO.reload()
    reopened = TimeStore(SNAPSHOT_REPO.get_snapshot(), clock=clock)
    assert reopened.get_active_entry()["id"] == id


def test_entry_without_start_is_rejected():
    with pytest.raises(ValueError, match="without a start time"):
        snapshot_from_yaml("entries:\n- id: e1\n  type: work\n")
