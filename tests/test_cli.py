"""Tests for the command line interface."""

import pytest
from typer.testing import CliRunner

from toil.repository.configuration import CONFIGURATION_REPO
from toil.terminal.app import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def isolated(isolated_paths):
    return isolated_paths


def invoke(store, *args):
    # Wide enough that rich does not wrap table cells
    return runner.invoke(app, list(args), obj=store, env={"COLUMNS": "200"})


def test_start_then_stop(store, clock):
    result = invoke(store, "start")
    assert result.exit_code == 0
    assert store.get_active_entry()["type"] == "work"

    clock.advance(minutes=25)
    result = invoke(store, "stop")
    assert result.exit_code == 0
    assert store.get_active_entry() is None
    assert store.entries[0]["end"] == clock.now


def test_aliases_switch_between_work_and_break(store, clock):
    invoke(store, "s")
    clock.advance(minutes=25)
    result = invoke(store, "s", "break", "--working")

    assert result.exit_code == 0
    running = store.get_active_entry()
    assert running["type"] == "break"
    assert running["is_working_break"] is True
    assert len([entry for entry in store.entries if entry["end"] is None]) == 1


def test_stop_without_running_timer(store):
    result = invoke(store, "x")

    assert result.exit_code == 0
    assert "no active entry" in result.output
    assert store.entries == []


def test_start_rejects_unknown_type(store):
    result = invoke(store, "start", "lunch")

    assert result.exit_code == 1
    assert "Unknown entry type" in result.output
    assert store.entries == []


def test_start_with_project_and_target(store):
    invoke(store, "project", "add", "Website")
    result = invoke(store, "start", "-p", "Website", "-tg", "50")

    assert result.exit_code == 0
    running = store.get_active_entry()
    assert running["project_id"] == store.get_project_by_name("Website")["id"]
    assert running["target_duration"] == 3000


def test_start_with_unknown_project_fails(store):
    result = invoke(store, "start", "-p", "Nowhere")

    assert result.exit_code == 2
    assert store.entries == []


def test_entry_add_rejects_end_before_start(store):
    result = invoke(
        store,
        "entry",
        "add",
        "--start",
        "2024-06-03 10:00",
        "--end",
        "2024-06-03 09:00",
    )

    assert result.exit_code == 1
    assert "End time cannot be before start time." in result.output
    assert store.entries == []


def test_entry_add_and_modify_by_prefix(store):
    result = invoke(
        store,
        "e",
        "a",
        "--start",
        "2024-06-03 09:00",
        "--end",
        "2024-06-03 10:00",
        "--notes",
        "planning",
    )
    assert result.exit_code == 0
    id = store.entries[0]["id"]

    result = invoke(store, "e", "m", id[:8], "--type", "break", "--remove-notes")

    assert result.exit_code == 0
    entry = store.get_entry(id)
    assert entry["type"] == "break"
    assert entry["notes"] is None


def test_entry_delete(store):
    id = store.start_entry("work")

    result = invoke(store, "entry", "delete", id[:8])

    assert result.exit_code == 0
    assert store.entries == []


def test_report_lists_totals(store, clock):
    project_id = store.add_project("Website")
    store.start_entry("work", project_id=project_id)
    clock.advance(hours=1)
    store.stop_entry()

    result = invoke(store, "report", "day")

    assert result.exit_code == 0
    assert "Website" in result.output
    assert "1.00h" in result.output


def test_report_rejects_unknown_period(store):
    result = invoke(store, "r", "year")

    assert result.exit_code == 2


def test_deleted_project_shows_as_unknown(store, clock):
    invoke(store, "project", "add", "Website")
    invoke(store, "start", "-p", "Website")
    clock.advance(hours=1)
    invoke(store, "stop")

    result = invoke(store, "project", "delete", "Website")
    assert result.exit_code == 0

    result = invoke(store, "report", "day")
    assert result.exit_code == 0
    assert "Unknown" in result.output


def test_backup_and_restore(store, clock, tmp_path):
    store.start_entry("work")
    clock.advance(minutes=10)
    store.stop_entry()
    backup_path = tmp_path / "backup.yaml"

    result = invoke(store, "backup", str(backup_path))
    assert result.exit_code == 0

    saved = store.entries
    store.delete_entry(saved[0]["id"])
    result = invoke(store, "restore", str(backup_path), "--yes")

    assert result.exit_code == 0
    assert store.entries == saved


def test_export_then_import(store, clock, tmp_path):
    store.start_entry("work")
    clock.advance(minutes=10)
    store.stop_entry()
    csv_path = tmp_path / "entries.csv"

    assert invoke(store, "export", str(csv_path)).exit_code == 0
    result = invoke(store, "import", str(csv_path))

    assert result.exit_code == 0
    assert len(store.entries) == 2
    assert store.entries[0]["start"] == store.entries[1]["start"]


def test_status_shows_running_timer_and_day_totals(store, clock):
    invoke(store, "start")
    clock.advance(hours=1)
    invoke(store, "start", "break")
    clock.advance(minutes=20)
    invoke(store, "start", "break", "--working")
    clock.advance(minutes=10)

    result = invoke(store, "status")

    assert result.exit_code == 0
    assert "working break" in result.output
    assert "00:05:00 over target" in result.output
    # work, break, active and rest for today
    for total in ["01:00:00", "00:30:00", "01:10:00", "00:20:00"]:
        assert total in result.output


def test_status_when_idle(store):
    result = invoke(store, "st")

    assert result.exit_code == 0
    assert "idle" in result.output


def test_entry_list_shows_entries_of_the_period(store, clock):
    first_id = store.start_entry("work")
    clock.advance(minutes=25)
    second_id = store.start_entry("break")
    clock.advance(minutes=5)

    result = invoke(store, "entry", "list", "--period", "day")

    assert result.exit_code == 0
    assert "day entries" in result.output
    assert first_id[:8] in result.output
    assert second_id[:8] in result.output


def test_entry_list_rejects_unknown_period(store):
    result = invoke(store, "e", "l", "--period", "year")

    assert result.exit_code == 2


def test_tag_commands(store):
    result = invoke(store, "tag", "add", "focus")
    assert result.exit_code == 0
    assert "#focus" in result.output

    result = invoke(store, "tag", "add", "#focus")
    assert result.exit_code == 1
    assert "already exists" in result.output

    invoke(store, "t", "a", "deep")
    result = invoke(store, "tag", "modify", "deep", "--name", "focus")
    assert result.exit_code == 1
    assert store.get_tag_by_name("deep") is not None

    result = invoke(store, "tag", "modify", "deep", "--name", "#deep-work")
    assert result.exit_code == 0
    assert store.get_tag_by_name("deep-work") is not None

    result = invoke(store, "tag", "delete", "focus")
    assert result.exit_code == 0
    assert store.get_tag_by_name("focus") is None

    result = invoke(store, "tag", "list")
    assert result.exit_code == 0
    assert "#deep-work" in result.output
    assert "#focus" not in result.output


def test_project_rename_to_existing_name_fails(store):
    invoke(store, "project", "add", "Website")
    invoke(store, "project", "add", "Docs")

    result = invoke(store, "project", "modify", "Docs", "--name", "Website")

    assert result.exit_code == 1
    assert "already exists" in result.output
    assert sorted(project["name"] for project in store.projects) == ["Docs", "Website"]


def test_project_rename_and_archive(store):
    invoke(store, "project", "add", "Docs")

    result = invoke(store, "p", "m", "Docs", "--name", "Documentation", "--archive")

    assert result.exit_code == 0
    project = store.get_project_by_name("Documentation")
    assert project["is_archived"] is True


def test_config_set_and_view(store):
    result = invoke(
        store, "config", "set", "--work-target", "50", "--log-level", "info"
    )

    assert result.exit_code == 0
    config = CONFIGURATION_REPO.get_config()
    assert config["work_target_minutes"] == 50
    assert config["log_level"] == "INFO"

    result = invoke(store, "c", "v")
    assert result.exit_code == 0
    assert "work_target_minutes" in result.output
    assert "INFO" in result.output


def test_config_set_rejects_unknown_log_level(store):
    result = invoke(store, "config", "set", "--log-level", "loud")

    assert result.exit_code == 2
    assert CONFIGURATION_REPO.get_config()["log_level"] == "WARNING"


def test_restore_rejects_entry_without_start(store, tmp_path):
    id = store.start_entry("work")
    backup_path = tmp_path / "broken.yaml"
    backup_path.write_text("entries:\n- id: e1\n  type: work\n")

    result = invoke(store, "restore", str(backup_path), "--yes")

    assert result.exit_code == 1
    assert "Error: snapshot entry without a start time" in result.output
    assert [entry["id"] for entry in store.entries] == [id]
