# SPDX-License-Identifier: MIT

from typing import Iterable, Optional

import pendulum

from toil.color import UNASSIGNED_PROJECT_COLOR, UNKNOWN_PROJECT_COLOR
from toil.model.entity_id import EntityId
from toil.model.project import Project
from toil.model.report import (
    ActivityTotals,
    BucketTotal,
    GranularityType,
    PeriodType,
    ProjectTotal,
    Report,
)
from toil.model.time_entry import TimeEntry
from toil.time import Clock, fixed_clock, now_utc

UNASSIGNED_PROJECT_NAME = "No Project"
UNKNOWN_PROJECT_NAME = "Unknown"
UNASSIGNED_THRESHOLD_SECONDS = 60


def effective_end(entry: TimeEntry, now: pendulum.DateTime) -> pendulum.DateTime:
    """The end of an entry, or ``now`` while it is still running."""
    return entry["end"] if entry["end"] is not None else now


def clipped_seconds(
    entry: TimeEntry,
    window_start: pendulum.DateTime,
    window_end: pendulum.DateTime,
    now: pendulum.DateTime,
) -> float:
    """
    Seconds of ``entry`` that fall inside ``[window_start, window_end)``.

    Open entries run until ``now`` but never past ``window_end``. Entries
    outside the window, and malformed entries that end before they start,
    contribute zero.
    """
    clip_start = max(entry["start"], window_start)
    clip_end = min(effective_end(entry, now), window_end)
    if clip_end <= clip_start:
        return 0.0
    return (clip_end - clip_start).total_seconds()


def get_slot_boundaries(
    reference: pendulum.DateTime,
    granularity: GranularityType,
    tz: str = "local",
) -> tuple[pendulum.DateTime, pendulum.DateTime]:
    """
    Get the start and end boundaries of the slot containing ``reference``.

    Args:
        reference: Any instant inside the slot
        granularity: "day", "week" (Monday start) or "month"
        tz: Timezone whose calendar defines the slot

    Returns:
        Tuple of (start, end) as UTC DateTimes, end exclusive
    """
    local_time = reference.in_tz(tz)

    if granularity == "day":
        start = local_time.start_of("day")
        end = start.add(days=1)
    elif granularity == "week":
        start = local_time.start_of("week")
        end = start.add(weeks=1)
    elif granularity == "month":
        start = local_time.start_of("month")
        end = start.add(months=1)
    else:
        raise ValueError(f"Unknown granularity: {granularity}")

    return start.in_tz("UTC"), end.in_tz("UTC")


def get_day_window(
    day: pendulum.Date, tz: str = "local"
) -> tuple[pendulum.DateTime, pendulum.DateTime]:
    start = pendulum.datetime(day.year, day.month, day.day, tz=tz)
    return start.in_tz("UTC"), start.add(days=1).in_tz("UTC")


def get_bucket_totals(
    entries: Iterable[TimeEntry],
    start: pendulum.DateTime,
    end: pendulum.DateTime,
    granularity: GranularityType = "day",
    clock: Clock = now_utc,
    tz: str = "local",
) -> list[BucketTotal]:
    """
    Sum clipped work time for every slot that intersects ``[start, end)``.

    Each bucket covers the intersection of its slot and the window, so the
    first and last buckets may be partial. An entry that crosses a slot
    boundary is split between the slots it touches. Break time is not
    counted.
    """
    now = clock()
    work_entries = [entry for entry in entries if entry["type"] == "work"]
    buckets: list[BucketTotal] = []

    if start >= end:
        return buckets

    slot_start, slot_end = get_slot_boundaries(start, granularity, tz)
    while slot_start < end:
        bucket_start = max(slot_start, start)
        bucket_end = min(slot_end, end)
        work_seconds = sum(
            clipped_seconds(entry, bucket_start, bucket_end, now)
            for entry in work_entries
        )
        buckets.append(
            {
                "start": bucket_start,
                "end": bucket_end,
                "work_seconds": work_seconds,
            }
        )
        slot_start, slot_end = get_slot_boundaries(slot_end, granularity, tz)

    return buckets


def get_daily_totals(
    entries: Iterable[TimeEntry],
    start: pendulum.DateTime,
    end: pendulum.DateTime,
    clock: Clock = now_utc,
    tz: str = "local",
) -> list[BucketTotal]:
    return get_bucket_totals(entries, start, end, "day", clock, tz)


def get_activity_totals(
    entries: Iterable[TimeEntry],
    day: Optional[pendulum.Date] = None,
    clock: Clock = now_utc,
    tz: str = "local",
) -> ActivityTotals:
    """
    Work, break, active and rest time for a single calendar day.

    Active time is work plus working breaks; rest time is the remaining
    breaks. ``day`` defaults to the current local day.
    """
    now = clock()
    if day is None:
        day = now.in_tz(tz).date()
    day_start, day_end = get_day_window(day, tz)

    totals: ActivityTotals = {
        "work_seconds": 0.0,
        "break_seconds": 0.0,
        "active_seconds": 0.0,
        "rest_seconds": 0.0,
    }
    for entry in entries:
        seconds = clipped_seconds(entry, day_start, day_end, now)
        if entry["type"] == "work":
            totals["work_seconds"] += seconds
            totals["active_seconds"] += seconds
        else:
            totals["break_seconds"] += seconds
            if entry["is_working_break"]:
                totals["active_seconds"] += seconds
            else:
                totals["rest_seconds"] += seconds
    return totals


def get_project_totals(
    entries: Iterable[TimeEntry],
    projects: Iterable[Project],
    start: pendulum.DateTime,
    end: pendulum.DateTime,
    clock: Clock = now_utc,
    unassigned_threshold_seconds: float = UNASSIGNED_THRESHOLD_SECONDS,
) -> list[ProjectTotal]:
    """
    Sum clipped work time per project inside ``[start, end)``.

    Work without a project is reported as "No Project", and only when it
    exceeds ``unassigned_threshold_seconds``. Work pointing at a project
    that no longer exists is reported as a single "Unknown" row. Rows are
    ordered by total time, largest first, with "No Project" last.
    """
    now = clock()
    projects_by_id: dict[EntityId, Project] = {
        project["id"]: project for project in projects if project["id"] is not None
    }

    project_seconds: dict[EntityId, float] = {}
    unknown_seconds = 0.0
    unassigned_seconds = 0.0

    for entry in entries:
        if entry["type"] != "work":
            continue
        seconds = clipped_seconds(entry, start, end, now)
        if seconds == 0:
            continue
        project_id = entry["project_id"]
        if not project_id:
            unassigned_seconds += seconds
        elif project_id in projects_by_id:
            project_seconds[project_id] = project_seconds.get(project_id, 0.0) + seconds
        else:
            unknown_seconds += seconds

    totals: list[ProjectTotal] = [
        {
            "project_id": project_id,
            "name": projects_by_id[project_id]["name"],
            "color": projects_by_id[project_id]["color"],
            "seconds": seconds,
        }
        for project_id, seconds in project_seconds.items()
    ]
    if unknown_seconds > 0:
        totals.append(
            {
                "project_id": None,
                "name": UNKNOWN_PROJECT_NAME,
                "color": UNKNOWN_PROJECT_COLOR,
                "seconds": unknown_seconds,
            }
        )
    totals.sort(key=lambda total: total["seconds"], reverse=True)

    if unassigned_seconds > unassigned_threshold_seconds:
        totals.append(
            {
                "project_id": None,
                "name": UNASSIGNED_PROJECT_NAME,
                "color": UNASSIGNED_PROJECT_COLOR,
                "seconds": unassigned_seconds,
            }
        )
    return totals


def get_report_window(
    period: PeriodType,
    clock: Clock = now_utc,
    tz: str = "local",
) -> tuple[pendulum.DateTime, pendulum.DateTime]:
    """
    Get the reporting window for a period relative to now.

    day, week and month are the current calendar periods (weeks start on
    Monday). fortnight is the last 14 days up to the end of today.
    """
    now = clock().in_tz(tz)

    if period == "day":
        start = now.start_of("day")
        end = start.add(days=1)
    elif period == "week":
        start = now.start_of("week")
        end = start.add(weeks=1)
    elif period == "fortnight":
        start = now.subtract(days=14)
        end = now.start_of("day").add(days=1)
    elif period == "month":
        start = now.start_of("month")
        end = start.add(months=1)
    else:
        raise ValueError(f"Unknown period: {period}")

    return start.in_tz("UTC"), end.in_tz("UTC")


def get_report(
    entries: Iterable[TimeEntry],
    projects: Iterable[Project],
    period: PeriodType,
    clock: Clock = now_utc,
    tz: str = "local",
    unassigned_threshold_seconds: float = UNASSIGNED_THRESHOLD_SECONDS,
) -> Report:
    # Read the clock once so every figure in the report agrees on "now"
    report_clock = fixed_clock(clock())
    entries = list(entries)

    start, end = get_report_window(period, report_clock, tz)
    daily = get_daily_totals(entries, start, end, report_clock, tz)
    project_totals = get_project_totals(
        entries,
        projects,
        start,
        end,
        report_clock,
        unassigned_threshold_seconds,
    )

    return {
        "period": period,
        "start": start,
        "end": end,
        "daily": daily,
        "projects": project_totals,
        "total_work_seconds": sum(bucket["work_seconds"] for bucket in daily),
    }
