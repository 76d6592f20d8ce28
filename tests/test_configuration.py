"""Tests for settings loading and saving."""

from toil import configuration
from toil.repository.configuration import CONFIGURATION_REPO
from toil.session import open_store


def test_missing_file_gives_defaults(isolated_paths):
    config = CONFIGURATION_REPO.get_config()

    assert config == configuration.get_default_configuration()
    assert config["unassigned_threshold_seconds"] == 60


def test_old_file_is_filled_with_new_settings(isolated_paths):
    configuration.APP_CONFIG_PATH.parent.mkdir(parents=True)
    configuration.APP_CONFIG_PATH.write_text("show_header: false\n")

    config = CONFIGURATION_REPO.get_config()

    assert config["show_header"] is False
    assert config["work_target_minutes"] == 25
    assert config["log_level"] == "WARNING"


def test_update_is_written_on_flush(isolated_paths):
    CONFIGURATION_REPO.update_config(work_target_minutes=50, log_level="debug")
    CONFIGURATION_REPO.flush()

    CONFIGURATION_REPO._config = None
    config = CONFIGURATION_REPO.get_config()
    assert config["work_target_minutes"] == 50
    assert config["log_level"] == "DEBUG"


def test_store_uses_configured_targets(isolated_paths, clock):
    CONFIGURATION_REPO.update_config(work_target_minutes=45, break_target_minutes=15)

    store = open_store(clock)
    work_id = store.start_entry("work")
    break_id = store.start_entry("break")

    assert store.get_entry(work_id)["target_duration"] == 45 * 60
    assert store.get_entry(break_id)["target_duration"] == 15 * 60
