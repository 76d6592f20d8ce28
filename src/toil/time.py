# SPDX-License-Identifier: MIT

from typing import Callable, Optional, TypeAlias, cast

import pendulum

Clock: TypeAlias = Callable[[], pendulum.DateTime]


def now_utc() -> pendulum.DateTime:
    return pendulum.now("UTC")


def fixed_clock(instant: pendulum.DateTime) -> Clock:
    """Return a clock that always reports the given instant."""

    def clock() -> pendulum.DateTime:
        return instant

    return clock


def datetime_to_iso_str(datetime: pendulum.DateTime) -> str:
    return datetime.isoformat()


def datetime_to_iso_str_optional(
    datetime: Optional[pendulum.DateTime],
) -> Optional[str]:
    if datetime is None:
        return None
    return datetime_to_iso_str(datetime)


def datetime_from_str(datetime: str) -> pendulum.DateTime:
    return cast(pendulum.DateTime, pendulum.parse(datetime)).in_tz("UTC")


def datetime_from_str_optional(datetime: Optional[str]) -> Optional[pendulum.DateTime]:
    if datetime is None or datetime == "":
        return None
    return datetime_from_str(datetime)


def datetime_from_str_utc(datetime: str) -> pendulum.DateTime:
    """Parse a naive local datetime string and convert it to UTC."""
    pendulum_date_time = cast(pendulum.DateTime, pendulum.parse(datetime))
    pendulum_date_time = pendulum_date_time.set(tz="local")
    pendulum_date_time = pendulum_date_time.in_tz("UTC")
    return pendulum_date_time


def datetime_to_display_local_datetime_str(datetime: pendulum.DateTime) -> str:
    return datetime.in_tz("local").format("MMM-DD ddd HH:mm")


def datetime_to_display_local_datetime_str_optional(
    datetime: Optional[pendulum.DateTime],
) -> Optional[str]:
    if datetime is None:
        return None
    return datetime_to_display_local_datetime_str(datetime)


def seconds_to_clock_str(seconds: float) -> str:
    """Format a second count as HH:MM:SS, prefixed with '-' when negative."""
    sign = "-" if seconds < 0 else ""
    total_seconds = int(abs(seconds))
    hours = total_seconds // 3600
    minutes = (total_seconds % 3600) // 60
    remainder = total_seconds % 60
    return f"{sign}{hours:02d}:{minutes:02d}:{remainder:02d}"


def seconds_to_hours_str(seconds: float) -> str:
    return f"{seconds / 3600:.2f}h"
