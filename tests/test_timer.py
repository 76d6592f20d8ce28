"""Tests for running timer figures."""

from toil.service.timer import elapsed_seconds, is_target_reached, remaining_seconds


def test_running_timer_counts_down(store, clock):
    id = store.start_entry("work")
    clock.advance(minutes=10)
    entry = store.get_entry(id)

    assert elapsed_seconds(entry, clock) == 600
    assert remaining_seconds(entry, clock) == 900
    assert not is_target_reached(entry, clock)


def test_overtime_is_negative(store, clock):
    id = store.start_entry("break")
    clock.advance(minutes=7)
    entry = store.get_entry(id)

    assert remaining_seconds(entry, clock) == -120
    assert is_target_reached(entry, clock)


def test_stopped_entry_does_not_keep_counting(store, clock):
    id = store.start_entry("work")
    clock.advance(minutes=5)
    store.stop_entry()
    clock.advance(hours=1)

    assert elapsed_seconds(store.get_entry(id), clock) == 300


def test_entry_without_target_has_no_remaining_time(store, clock):
    id = store.add_manual_entry(
        {"type": "work", "start": clock.now, "end": None, "target_duration": None}
    )
    clock.advance(hours=3)
    entry = store.get_entry(id)

    assert remaining_seconds(entry, clock) is None
    assert not is_target_reached(entry, clock)
