# SPDX-License-Identifier: MIT

from typing import Annotated, Any, Optional

import typer
from rich.console import Console

from toil.color import DEFAULT_PROJECT_COLOR
from toil.terminal.completion import complete_project
from toil.terminal.custom_typer import AliasedTyperGroup
from toil.terminal.lookup import get_store, resolve_project_id
from toil.terminal.parse import parse_color
from toil.view.project import projects_report

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("add, a", no_args_is_help=True)
def add(
    ctx: typer.Context,
    name: str,
    color: Annotated[
        str, typer.Option("--color", "-col", parser=parse_color, help="name or #rrggbb")
    ] = DEFAULT_PROJECT_COLOR,
) -> None:
    """
    add a project
    """
    store = get_store(ctx)

    if store.get_project_by_name(name) is not None:
        typer.echo(f"Error: a project named '{name}' already exists")
        raise typer.Exit(1)

    store.add_project(name, color)
    projects_report(store.projects)


@app.command("modify, m", no_args_is_help=True)
def modify(
    ctx: typer.Context,
    project: Annotated[
        str, typer.Argument(help="project name or id", autocompletion=complete_project)
    ],
    name: Annotated[Optional[str], typer.Option("--name", "-n")] = None,
    color: Annotated[
        Optional[str],
        typer.Option("--color", "-col", parser=parse_color, help="name or #rrggbb"),
    ] = None,
    archived: Annotated[
        Optional[bool],
        typer.Option("--archive/--unarchive", show_default=False),
    ] = None,
) -> None:
    """
    rename, recolor, archive or unarchive a project
    """
    store = get_store(ctx)
    project_id = resolve_project_id(store, project)

    updates: dict[str, Any] = {}
    if name is not None:
        existing = store.get_project_by_name(name)
        if existing is not None and existing["id"] != project_id:
            typer.echo(f"Error: a project named '{name}' already exists")
            raise typer.Exit(1)
        updates["name"] = name
    if color is not None:
        updates["color"] = color
    if archived is not None:
        updates["is_archived"] = archived

    store.update_project(project_id, updates)
    projects_report(store.projects, show_archived=True)


@app.command("delete, d", no_args_is_help=True)
def delete(
    ctx: typer.Context,
    project: Annotated[
        str, typer.Argument(help="project name or id", autocompletion=complete_project)
    ],
) -> None:
    """
    delete a project; its entries keep running under an unknown project
    """
    store = get_store(ctx)
    project_id = resolve_project_id(store, project)
    store.delete_project(project_id)

    console = Console()
    console.print(f"deleted project '{project}'")


@app.command("list, l")
def list_projects(
    ctx: typer.Context,
    archived: Annotated[
        bool, typer.Option("--archived", "-ar", help="include archived projects")
    ] = False,
) -> None:
    """
    list projects
    """
    store = get_store(ctx)
    projects_report(store.projects, show_archived=archived)
