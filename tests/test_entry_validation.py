"""Tests for entry validation and id prefix lookup."""

import pendulum
import pytest

from toil.service.entry import (
    EntryValidationError,
    resolve_id_prefix,
    validate_entry_times,
    validate_entry_type,
    validate_target_duration,
)

IDS = [
    "3f2a9c1e-0000-4000-8000-000000000001",
    "3f2b7d44-0000-4000-8000-000000000002",
    "a1b2c3d4-0000-4000-8000-000000000003",
]


def test_end_before_start_is_rejected():
    start = pendulum.datetime(2024, 6, 3, 10, tz="UTC")

    assert validate_entry_times(start, None)
    assert validate_entry_times(start, start)
    with pytest.raises(EntryValidationError, match="End time cannot be before"):
        validate_entry_times(start, start.subtract(minutes=1))


def test_entry_type_must_be_work_or_break():
    assert validate_entry_type("break") == "break"
    with pytest.raises(EntryValidationError):
        validate_entry_type("lunch")


def test_target_duration_must_be_positive():
    assert validate_target_duration(None)
    assert validate_target_duration(25)
    with pytest.raises(EntryValidationError):
        validate_target_duration(0)


def test_unique_prefix_resolves_to_full_id():
    assert resolve_id_prefix(IDS, "3f2b") == IDS[1]
    assert resolve_id_prefix(IDS, "A1B2") == IDS[2]
    assert resolve_id_prefix(IDS, IDS[0]) == IDS[0]


def test_ambiguous_prefix_is_rejected():
    with pytest.raises(EntryValidationError, match="ambiguous"):
        resolve_id_prefix(IDS, "3f2")


def test_unknown_prefix_is_rejected():
    with pytest.raises(EntryValidationError, match="No item found"):
        resolve_id_prefix(IDS, "ffff")
