# SPDX-License-Identifier: MIT

from typing import Optional

from rich.text import Text

from toil.color import BREAK_COLOR, WORK_COLOR, WORKING_BREAK_COLOR
from toil.model.project import Project
from toil.model.tag import Tag
from toil.model.time_entry import TimeEntry
from toil.service.aggregate import UNKNOWN_PROJECT_NAME

BAR_CHARACTER = "█"


def colored(value: str, color: Optional[str]) -> Text:
    return Text(value, style=color or "")


def format_entry_type(entry: TimeEntry) -> Text:
    if entry["type"] == "work":
        return Text("work", style=WORK_COLOR)
    if entry["is_working_break"]:
        return Text("working break", style=WORKING_BREAK_COLOR)
    return Text("break", style=BREAK_COLOR)


def format_project(entry: TimeEntry, project: Optional[Project]) -> Text:
    if project is not None:
        return colored(project["name"], project["color"])
    if entry["project_id"]:
        # The project was deleted after the entry was recorded
        return Text(UNKNOWN_PROJECT_NAME, style="italic bright_black")
    return Text("")


def format_tags(tags: list[Tag]) -> Text:
    text = Text()
    for index, tag in enumerate(tags):
        if index > 0:
            text.append(" ")
        text.append(f"#{tag['name']}", style=tag["color"])
    return text


def render_bar(value: float, maximum: float, width: int = 30) -> str:
    if maximum <= 0 or value <= 0:
        return ""
    return BAR_CHARACTER * max(1, round(value / maximum * width))
