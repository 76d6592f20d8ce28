# SPDX-License-Identifier: MIT

import logging
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from toil import configuration
from toil.repository.configuration import CONFIGURATION_REPO
from toil.terminal.custom_typer import AliasedTyperGroup

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)

logger = logging.getLogger(__name__)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


@app.command("view, v")
def view() -> None:
    """Display current configuration settings."""
    config = CONFIGURATION_REPO.get_config()

    console = Console()
    table = Table()
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="magenta")

    table.add_row(
        "show_header",
        "✓ Enabled" if config["show_header"] else "✗ Disabled",
    )
    table.add_row("work_target_minutes", str(config["work_target_minutes"]))
    table.add_row("break_target_minutes", str(config["break_target_minutes"]))
    table.add_row(
        "unassigned_threshold_seconds", str(config["unassigned_threshold_seconds"])
    )
    table.add_row("log_level", config["log_level"])
    table.add_row("data_path", str(configuration.DATA_PATH))
    table.add_row("config_path", str(configuration.APP_CONFIG_PATH))

    console.print(table)


@app.command("set, s")
def set(
    show_header: Annotated[
        Optional[bool],
        typer.Option("--show-header/--hide-header", show_default=False),
    ] = None,
    work_target_minutes: Annotated[
        Optional[int],
        typer.Option("--work-target", "-wt", min=1, help="default work target"),
    ] = None,
    break_target_minutes: Annotated[
        Optional[int],
        typer.Option("--break-target", "-bt", min=1, help="default break target"),
    ] = None,
    unassigned_threshold_seconds: Annotated[
        Optional[int],
        typer.Option(
            "--unassigned-threshold",
            "-ut",
            min=0,
            help="seconds of work without a project before reports show it",
        ),
    ] = None,
    log_level: Annotated[
        Optional[str],
        typer.Option("--log-level", "-ll", help=f"one of: {', '.join(LOG_LEVELS)}"),
    ] = None,
    data_path: Annotated[
        Optional[str],
        typer.Option("--data-path", help="directory for the entry snapshot"),
    ] = None,
    remove_data_path: Annotated[
        bool,
        typer.Option("--remove-data-path", help="go back to the default data path"),
    ] = False,
) -> None:
    """Update configuration settings."""
    if log_level is not None and log_level.upper() not in LOG_LEVELS:
        raise typer.BadParameter(f"Log level must be one of: {', '.join(LOG_LEVELS)}")

    CONFIGURATION_REPO.update_config(
        show_header=show_header,
        work_target_minutes=work_target_minutes,
        break_target_minutes=break_target_minutes,
        unassigned_threshold_seconds=unassigned_threshold_seconds,
        log_level=log_level,
        data_path=data_path,
        remove_data_path=remove_data_path,
    )
    logger.debug("configuration updated")
    view()
