# SPDX-License-Identifier: MIT

from typing import Optional

import pendulum

from toil.model.entity_id import EntityId, short_entity_id
from toil.model.time_entry import ENTRY_TYPES, EntryType


class EntryValidationError(Exception):
    """Raised when entry validation fails."""

    pass


def validate_entry_times(
    start: pendulum.DateTime,
    end: Optional[pendulum.DateTime],
) -> bool:
    """
    Check that an entry does not end before it starts.

    The store accepts any times; callers that edit entries validate first.
    Returns True if valid, raises EntryValidationError if not.
    """
    if end is not None and end < start:
        raise EntryValidationError("End time cannot be before start time.")
    return True


def validate_entry_type(entry_type: str) -> EntryType:
    if entry_type not in ENTRY_TYPES:
        raise EntryValidationError(
            f"Unknown entry type '{entry_type}'. "
            f"Valid types: {', '.join(ENTRY_TYPES)}"
        )
    return entry_type  # type: ignore[return-value]


def validate_target_duration(target_duration: Optional[int]) -> bool:
    if target_duration is not None and target_duration <= 0:
        raise EntryValidationError(
            f"Target duration must be a positive number of minutes. Got: {target_duration}"
        )
    return True


def resolve_id_prefix(ids: list[EntityId], prefix: str) -> EntityId:
    """
    Find the single id starting with ``prefix``.

    Raises EntryValidationError when no id or more than one id matches.
    """
    prefix = prefix.strip().lower()
    if prefix == "":
        raise EntryValidationError("An id is required.")
    if prefix in ids:
        return prefix
    matches = [id for id in ids if id.lower().startswith(prefix)]
    if len(matches) == 0:
        raise EntryValidationError(f"No item found with id '{prefix}'.")
    if len(matches) > 1:
        candidates = ", ".join(short_entity_id(id) for id in matches)
        raise EntryValidationError(
            f"Id '{prefix}' is ambiguous, it matches: {candidates}"
        )
    return matches[0]
