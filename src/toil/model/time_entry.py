# SPDX-License-Identifier: MIT

from typing import Literal, Optional, TypedDict

import pendulum

from toil.model.entity_id import EntityId

EntryType = Literal["work", "break"]

ENTRY_TYPES: tuple[EntryType, ...] = ("work", "break")


class TimeEntry(TypedDict):
    id: Optional[EntityId]
    type: EntryType
    start: pendulum.DateTime
    end: Optional[pendulum.DateTime]  # None while the entry is running
    project_id: Optional[EntityId]  # Weak reference, may dangle
    tag_ids: list[EntityId]  # Weak references, may dangle
    notes: Optional[str]
    target_duration: Optional[int]  # Seconds, countdown only
    is_working_break: bool
