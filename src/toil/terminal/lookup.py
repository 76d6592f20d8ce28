# SPDX-License-Identifier: MIT

from typing import Optional, cast

import typer

from toil.model.entity_id import EntityId
from toil.repository.time_store import TimeStore
from toil.service.entry import EntryValidationError, resolve_id_prefix
from toil.session import open_store


def get_store(ctx: typer.Context) -> TimeStore:
    """The store shared by every command of one invocation."""
    root = ctx.find_root()
    if not isinstance(root.obj, TimeStore):
        root.obj = open_store()
    return cast(TimeStore, root.obj)


def resolve_entry_id(store: TimeStore, prefix: str) -> EntityId:
    ids = [cast(EntityId, entry["id"]) for entry in store.entries]
    try:
        return resolve_id_prefix(ids, prefix)
    except EntryValidationError as e:
        raise typer.BadParameter(str(e))


def resolve_project_id(store: TimeStore, reference: str) -> EntityId:
    """Resolve a project by exact name, falling back to an id prefix."""
    project = store.get_project_by_name(reference)
    if project is not None and project["id"] is not None:
        return project["id"]
    ids = [cast(EntityId, project["id"]) for project in store.projects]
    try:
        return resolve_id_prefix(ids, reference)
    except EntryValidationError as e:
        raise typer.BadParameter(str(e))


def resolve_project_id_optional(
    store: TimeStore, reference: Optional[str]
) -> Optional[EntityId]:
    if reference is None:
        return None
    return resolve_project_id(store, reference)


def resolve_tag_id(store: TimeStore, reference: str) -> EntityId:
    """Resolve a tag by exact name (with or without '#'), falling back to an id prefix."""
    tag = store.get_tag_by_name(reference.removeprefix("#"))
    if tag is not None and tag["id"] is not None:
        return tag["id"]
    ids = [cast(EntityId, tag["id"]) for tag in store.tags]
    try:
        return resolve_id_prefix(ids, reference)
    except EntryValidationError as e:
        raise typer.BadParameter(str(e))


def resolve_tag_ids(
    store: TimeStore, references: Optional[list[str]]
) -> list[EntityId]:
    if references is None:
        return []
    return [resolve_tag_id(store, reference) for reference in references]
