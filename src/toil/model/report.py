# SPDX-License-Identifier: MIT

from typing import Literal, Optional, TypedDict

import pendulum

from toil.model.entity_id import EntityId

GranularityType = Literal["day", "week", "month"]
PeriodType = Literal["day", "week", "fortnight", "month"]

PERIODS: tuple[PeriodType, ...] = ("day", "week", "fortnight", "month")


class BucketTotal(TypedDict):
    start: pendulum.DateTime  # Slot start clipped to the query window
    end: pendulum.DateTime  # Exclusive
    work_seconds: float


class ActivityTotals(TypedDict):
    work_seconds: float
    break_seconds: float
    active_seconds: float  # work plus working breaks
    rest_seconds: float  # breaks that are not working breaks


class ProjectTotal(TypedDict):
    project_id: Optional[EntityId]  # None for the unassigned and unknown buckets
    name: str
    color: str
    seconds: float


class Report(TypedDict):
    period: PeriodType
    start: pendulum.DateTime
    end: pendulum.DateTime
    daily: list[BucketTotal]
    projects: list[ProjectTotal]
    total_work_seconds: float
