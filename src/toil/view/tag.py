# SPDX-License-Identifier: MIT

from rich import box
from rich.console import Console
from rich.table import Table

from toil.model.entity_id import short_entity_id
from toil.model.tag import Tag
from toil.view.header import header
from toil.view.util import colored


def tags_report(tags: list[Tag]) -> None:
    header("tags")

    tags_table = Table(box=box.SIMPLE)
    tags_table.add_column("id")
    tags_table.add_column("name")
    tags_table.add_column("color")

    for tag in sorted(tags, key=lambda t: t["name"].lower()):
        tags_table.add_row(
            short_entity_id(tag["id"] or ""),
            colored(f"#{tag['name']}", tag["color"]),
            tag["color"],
        )

    console = Console()
    console.print(tags_table)
