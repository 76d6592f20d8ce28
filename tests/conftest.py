"""Pytest configuration and shared fixtures."""

import pendulum
import pytest

from toil import configuration
from toil.repository.configuration import CONFIGURATION_REPO
from toil.repository.snapshot import SNAPSHOT_REPO
from toil.repository.time_store import TimeStore


class FakeClock:
    """A clock that only moves when told to."""

    def __init__(self, now: pendulum.DateTime) -> None:
        self.now = now

    def __call__(self) -> pendulum.DateTime:
        return self.now

    def advance(self, **kwargs: int) -> pendulum.DateTime:
        self.now = self.now.add(**kwargs)
        return self.now


@pytest.fixture
def clock():
    return FakeClock(pendulum.datetime(2024, 6, 3, 9, 0, tz="UTC"))


@pytest.fixture
def store(clock):
    return TimeStore(clock=clock)


@pytest.fixture
def isolated_paths(tmp_path, monkeypatch):
    """Point config and data files at a temporary directory."""
    config_path = tmp_path / "config"
    data_path = tmp_path / "data"
    monkeypatch.setattr(configuration, "CONFIG_PATH", config_path)
    monkeypatch.setattr(configuration, "APP_CONFIG_PATH", config_path / "config.yaml")
    monkeypatch.setattr(configuration, "DATA_PATH", data_path)
    monkeypatch.setattr(
        configuration,
        "DATA_SNAPSHOT_PATH",
        data_path / configuration.SNAPSHOT_FILE_NAME,
    )
    monkeypatch.setattr(SNAPSHOT_REPO, "_snapshot", None)
    monkeypatch.setattr(SNAPSHOT_REPO, "is_dirty", False)
    monkeypatch.setattr(CONFIGURATION_REPO, "_config", None)
    monkeypatch.setattr(CONFIGURATION_REPO, "is_dirty", False)
    return tmp_path
