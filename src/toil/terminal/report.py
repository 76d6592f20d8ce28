# SPDX-License-Identifier: MIT

from typing import Annotated

import typer

from toil.model.report import PERIODS
from toil.repository.configuration import CONFIGURATION_REPO
from toil.service.aggregate import get_report
from toil.terminal.lookup import get_store
from toil.view.report import period_report


def report(
    ctx: typer.Context,
    period: Annotated[
        str,
        typer.Argument(help=f"one of: {', '.join(PERIODS)}"),
    ] = "week",
) -> None:
    """
    show daily work totals and the project distribution for a period
    """
    store = get_store(ctx)
    config = CONFIGURATION_REPO.get_config()

    if period not in PERIODS:
        raise typer.BadParameter(f"Period must be one of: {', '.join(PERIODS)}")

    period_report(
        get_report(
            store.entries,
            store.projects,
            period,  # type: ignore[arg-type]
            clock=store.clock,
            unassigned_threshold_seconds=config["unassigned_threshold_seconds"],
        )
    )
