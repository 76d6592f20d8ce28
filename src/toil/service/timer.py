# SPDX-License-Identifier: MIT

from typing import Optional

from toil.model.time_entry import TimeEntry
from toil.service.aggregate import effective_end
from toil.time import Clock, now_utc


def elapsed_seconds(entry: TimeEntry, clock: Clock = now_utc) -> float:
    """Seconds since the entry started, up to its end if it has one."""
    elapsed = (effective_end(entry, clock()) - entry["start"]).total_seconds()
    return max(0.0, elapsed)


def remaining_seconds(entry: TimeEntry, clock: Clock = now_utc) -> Optional[float]:
    """
    Seconds left until the entry's target duration.

    Negative once the target has been passed, None if the entry has no target.
    """
    if entry["target_duration"] is None:
        return None
    return entry["target_duration"] - elapsed_seconds(entry, clock)


def is_target_reached(entry: TimeEntry, clock: Clock = now_utc) -> bool:
    remaining = remaining_seconds(entry, clock)
    return remaining is not None and remaining <= 0
