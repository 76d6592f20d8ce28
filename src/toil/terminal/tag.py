# SPDX-License-Identifier: MIT

from typing import Annotated, Any, Optional

import typer
from rich.console import Console

from toil.color import DEFAULT_TAG_COLOR
from toil.terminal.completion import complete_tag
from toil.terminal.custom_typer import AliasedTyperGroup
from toil.terminal.lookup import get_store, resolve_tag_id
from toil.terminal.parse import parse_color
from toil.view.tag import tags_report

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("add, a", no_args_is_help=True)
def add(
    ctx: typer.Context,
    name: str,
    color: Annotated[
        str, typer.Option("--color", "-col", parser=parse_color, help="name or #rrggbb")
    ] = DEFAULT_TAG_COLOR,
) -> None:
    """
    add a tag
    """
    store = get_store(ctx)
    name = name.removeprefix("#")

    if store.get_tag_by_name(name) is not None:
        typer.echo(f"Error: a tag named '{name}' already exists")
        raise typer.Exit(1)

    store.add_tag(name, color)
    tags_report(store.tags)


@app.command("modify, m", no_args_is_help=True)
def modify(
    ctx: typer.Context,
    tag: Annotated[
        str, typer.Argument(help="tag name or id", autocompletion=complete_tag)
    ],
    name: Annotated[Optional[str], typer.Option("--name", "-n")] = None,
    color: Annotated[
        Optional[str],
        typer.Option("--color", "-col", parser=parse_color, help="name or #rrggbb"),
    ] = None,
) -> None:
    """
    rename or recolor a tag
    """
    store = get_store(ctx)
    tag_id = resolve_tag_id(store, tag)

    updates: dict[str, Any] = {}
    if name is not None:
        name = name.removeprefix("#")
        existing = store.get_tag_by_name(name)
        if existing is not None and existing["id"] != tag_id:
            typer.echo(f"Error: a tag named '{name}' already exists")
            raise typer.Exit(1)
        updates["name"] = name
    if color is not None:
        updates["color"] = color

    store.update_tag(tag_id, updates)
    tags_report(store.tags)


@app.command("delete, d", no_args_is_help=True)
def delete(
    ctx: typer.Context,
    tag: Annotated[
        str, typer.Argument(help="tag name or id", autocompletion=complete_tag)
    ],
) -> None:
    """
    delete a tag; entries that used it simply lose it
    """
    store = get_store(ctx)
    tag_id = resolve_tag_id(store, tag)
    store.delete_tag(tag_id)

    console = Console()
    console.print(f"deleted tag '{tag}'")


@app.command("list, l")
def list_tags(ctx: typer.Context) -> None:
    """
    list tags
    """
    store = get_store(ctx)
    tags_report(store.tags)
