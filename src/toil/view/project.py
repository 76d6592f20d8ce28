# SPDX-License-Identifier: MIT

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from toil.model.entity_id import short_entity_id
from toil.model.project import Project
from toil.view.header import header
from toil.view.util import colored


def projects_report(projects: list[Project], show_archived: bool = False) -> None:
    header("projects")

    projects_table = Table(box=box.SIMPLE)
    projects_table.add_column("id")
    projects_table.add_column("name")
    projects_table.add_column("color")
    if show_archived:
        projects_table.add_column("archived")

    for project in sorted(projects, key=lambda p: p["name"].lower()):
        if project["is_archived"] and not show_archived:
            continue
        row: list[str | Text] = [
            short_entity_id(project["id"] or ""),
            colored(project["name"], project["color"]),
            project["color"],
        ]
        if show_archived:
            row.append("yes" if project["is_archived"] else "")
        projects_table.add_row(*row)

    console = Console()
    console.print(projects_table)
