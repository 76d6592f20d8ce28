# SPDX-License-Identifier: MIT

from typing import Optional

from toil.model.time_entry import EntryType, TimeEntry
from toil.time import now_utc

DEFAULT_WORK_TARGET_SECONDS = 25 * 60
DEFAULT_BREAK_TARGET_SECONDS = 5 * 60


def get_time_entry_template(entry_type: EntryType = "work") -> TimeEntry:
    return {
        "id": None,
        "type": entry_type,
        "start": now_utc(),
        "end": None,
        "project_id": None,
        "tag_ids": [],
        "notes": None,
        "target_duration": None,
        "is_working_break": False,
    }


def get_default_target_duration(
    entry_type: EntryType,
    work_target_seconds: int = DEFAULT_WORK_TARGET_SECONDS,
    break_target_seconds: int = DEFAULT_BREAK_TARGET_SECONDS,
    target_duration: Optional[int] = None,
) -> int:
    if target_duration is not None:
        return target_duration
    return work_target_seconds if entry_type == "work" else break_target_seconds
