# SPDX-License-Identifier: MIT

import re
from typing import Optional

import pendulum
import typer
from rich.color import Color, ColorParseError

from toil.time import datetime_from_str_utc


def parse_datetime(datetime_param: Optional[str | int]) -> Optional[pendulum.DateTime]:
    if datetime_param is None:
        return None

    datetime = str(datetime_param)

    # Match YYYY-MM-DD format (with optional time component)
    if re.match(r"\d{4}-\d{2}-\d{2}", datetime):
        try:
            return datetime_from_str_utc(datetime)
        except ValueError as e:
            raise typer.BadParameter(f"Invalid datetime: {e}")

    # Match (H)H:mm format (time only, use today's date)
    time_match = re.match(r"^(\d{1,2}):(\d{2})$", datetime)
    if time_match:
        hour = int(time_match.group(1))
        minute = int(time_match.group(2))

        if hour < 0 or hour > 23:
            raise typer.BadParameter(f"Hour must be between 0 and 23, got {hour}")
        if minute < 0 or minute > 59:
            raise typer.BadParameter(f"Minute must be between 0 and 59, got {minute}")

        # Create datetime with today's date in local timezone, then convert to UTC
        pendulum_date_time = pendulum.today("local").set(
            hour=hour, minute=minute, second=0, microsecond=0
        )
        return pendulum_date_time.in_tz("UTC")

    # Match minute offsets relative to now (e.g., "-15m", "+5m")
    offset_match = re.match(r"^([+-]\d+)m$", datetime)
    if offset_match:
        return pendulum.now("UTC").add(minutes=int(offset_match.group(1)))

    if datetime == "now" or datetime == "n":
        return pendulum.now("UTC")
    if datetime == "today" or datetime == "t":
        return pendulum.today("local").in_tz("UTC")
    if datetime == "yesterday" or datetime == "y":
        return pendulum.yesterday("local").in_tz("UTC")
    raise typer.BadParameter("Incorrect datetime format")


def parse_color(color: Optional[str]) -> Optional[str]:
    """Accept any color rich can render: names like 'blue' or hex like '#3b82f6'."""
    if color is None:
        return None
    try:
        Color.parse(color)
    except ColorParseError:
        raise typer.BadParameter(f"Unknown color '{color}'")
    return color


def parse_id_list(id_param: str) -> list[str]:
    """
    Parse a single id prefix or a comma-separated list of id prefixes.

    Raises:
        typer.BadParameter: If no id is given
    """
    ids = [s.strip() for s in id_param.split(",") if s.strip()]
    if len(ids) == 0:
        raise typer.BadParameter("No valid IDs provided")
    # Remove duplicates, keep order
    return list(dict.fromkeys(ids))
