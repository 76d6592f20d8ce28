# SPDX-License-Identifier: MIT

from rich import box
from rich.console import Console
from rich.table import Table

from toil.model.report import Report
from toil.time import seconds_to_hours_str
from toil.view.header import header
from toil.view.util import colored, render_bar


def period_report(report: Report) -> None:
    start_label = report["start"].in_tz("local").format("MMM D")
    # The window end is exclusive, label the last day it covers
    end_label = report["end"].in_tz("local").subtract(microseconds=1).format("MMM D")
    header(f"{report['period']} report: {start_label} - {end_label}")

    console = Console()
    console.print(
        f" [bold]total work[/bold] {seconds_to_hours_str(report['total_work_seconds'])}"
    )

    daily_table = Table(box=box.SIMPLE, title="work schedule")
    daily_table.add_column("day")
    daily_table.add_column("hours", justify="right")
    daily_table.add_column("")
    maximum = max((bucket["work_seconds"] for bucket in report["daily"]), default=0.0)
    for bucket in report["daily"]:
        daily_table.add_row(
            bucket["start"].in_tz("local").format("ddd D"),
            seconds_to_hours_str(bucket["work_seconds"]),
            render_bar(bucket["work_seconds"], maximum),
        )
    console.print(daily_table)

    if len(report["projects"]) == 0:
        console.print(" [bright_black]no project data for this period[/bright_black]")
        return

    projects_table = Table(box=box.SIMPLE, title="project distribution")
    projects_table.add_column("project")
    projects_table.add_column("hours", justify="right")
    projects_table.add_column("share", justify="right")
    projects_total = sum(total["seconds"] for total in report["projects"])
    for total in report["projects"]:
        share = total["seconds"] / projects_total * 100 if projects_total > 0 else 0
        projects_table.add_row(
            colored(total["name"], total["color"]),
            seconds_to_hours_str(total["seconds"]),
            f"{share:.0f}%",
        )
    console.print(projects_table)
