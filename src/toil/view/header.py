# SPDX-License-Identifier: MIT

from contextvars import ContextVar
from typing import Optional

from rich import print
from rich.padding import Padding

# Turned off by --no-header or the show_header setting
show_header: ContextVar[bool] = ContextVar("show_header", default=True)


def header(sub_header: Optional[str] = None) -> None:
    """Print the application header, unless headers are switched off."""
    if not show_header.get():
        return

    print(Padding("[dark_orange]toil[/dark_orange]", (1, 0, 0, 1)))
    if sub_header is not None:
        print(Padding(f"[sandy_brown]{sub_header}[/sandy_brown]", (0, 1)))
