# SPDX-License-Identifier: MIT

from toil.repository.configuration import CONFIGURATION_REPO
from toil.repository.snapshot import SNAPSHOT_REPO
from toil.repository.time_store import TimeStore
from toil.time import Clock, now_utc


def open_store(clock: Clock = now_utc) -> TimeStore:
    """Build a store from the persisted snapshot that saves back on every change."""
    config = CONFIGURATION_REPO.get_config()
    return TimeStore(
        SNAPSHOT_REPO.get_snapshot(),
        clock=clock,
        on_change=SNAPSHOT_REPO.save_snapshot,
        work_target_seconds=config["work_target_minutes"] * 60,
        break_target_seconds=config["break_target_minutes"] * 60,
    )
