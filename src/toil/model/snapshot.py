# SPDX-License-Identifier: MIT

from typing import TypedDict

from toil.model.project import Project
from toil.model.tag import Tag
from toil.model.time_entry import TimeEntry


class Snapshot(TypedDict):
    entries: list[TimeEntry]
    projects: list[Project]
    tags: list[Tag]
