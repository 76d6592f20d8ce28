# SPDX-License-Identifier: MIT

import logging
from copy import deepcopy
from typing import Any, Callable, Mapping, Optional, Sequence, TypeAlias, cast

import pendulum

from toil.color import DEFAULT_PROJECT_COLOR, DEFAULT_TAG_COLOR
from toil.model.entity_id import EntityId, generate_entity_id
from toil.model.project import Project
from toil.model.snapshot import Snapshot
from toil.model.tag import Tag
from toil.model.time_entry import EntryType, TimeEntry
from toil.template.project import get_project_template
from toil.template.tag import get_tag_template
from toil.template.time_entry import (
    DEFAULT_BREAK_TARGET_SECONDS,
    DEFAULT_WORK_TARGET_SECONDS,
    get_default_target_duration,
    get_time_entry_template,
)
from toil.time import Clock, now_utc

logger = logging.getLogger(__name__)

ChangeListener: TypeAlias = Callable[[Snapshot], None]


class TimeStore:
    """
    In-memory state holder for time entries, projects and tags.

    All changes go through the methods of this class. After every change the
    optional ``on_change`` listener receives a copy of the whole snapshot.
    Operations never raise for unknown ids: updates and deletes of a missing
    id are no-ops.

    After ``start_entry`` or ``stop_entry`` at most one entry is running.
    ``add_manual_entry`` may leave two running entries behind; the next
    start or stop closes all of them.
    """

    def __init__(
        self,
        snapshot: Optional[Mapping[str, Any]] = None,
        clock: Clock = now_utc,
        on_change: Optional[ChangeListener] = None,
        work_target_seconds: int = DEFAULT_WORK_TARGET_SECONDS,
        break_target_seconds: int = DEFAULT_BREAK_TARGET_SECONDS,
    ) -> None:
        self._clock = clock
        self._on_change = on_change
        self.work_target_seconds = work_target_seconds
        self.break_target_seconds = break_target_seconds
        self._entries: list[TimeEntry] = []
        self._projects: list[Project] = []
        self._tags: list[Tag] = []
        if snapshot is not None:
            self.__replace(snapshot)

    @property
    def entries(self) -> list[TimeEntry]:
        return deepcopy(self._entries)

    @property
    def projects(self) -> list[Project]:
        return deepcopy(self._projects)

    @property
    def tags(self) -> list[Tag]:
        return deepcopy(self._tags)

    @property
    def clock(self) -> Clock:
        return self._clock

    def snapshot(self) -> Snapshot:
        return {
            "entries": self.entries,
            "projects": self.projects,
            "tags": self.tags,
        }

    # entries

    def start_entry(
        self,
        entry_type: EntryType,
        project_id: Optional[EntityId] = None,
        tag_ids: Optional[Sequence[EntityId]] = None,
        target_duration: Optional[int] = None,
        is_working_break: bool = False,
    ) -> EntityId:
        now = self._clock()
        self.__close_open_entries(now)

        id = generate_entity_id()
        entry = get_time_entry_template(entry_type)
        entry["id"] = id
        entry["start"] = now
        entry["project_id"] = project_id
        entry["tag_ids"] = _deduplicate(tag_ids)
        entry["target_duration"] = get_default_target_duration(
            entry_type,
            self.work_target_seconds,
            self.break_target_seconds,
            target_duration,
        )
        entry["is_working_break"] = is_working_break
        self._entries.append(entry)

        logger.debug("started %s entry %s", entry_type, id)
        self.__commit()
        return id

    def stop_entry(self) -> Optional[EntityId]:
        closed_ids = self.__close_open_entries(self._clock())
        if len(closed_ids) == 0:
            return None
        self.__commit()
        return closed_ids[-1]

    def add_manual_entry(self, entry: Mapping[str, Any]) -> EntityId:
        return self.add_manual_entries([entry])[0]

    def add_manual_entries(
        self, entries: Sequence[Mapping[str, Any]]
    ) -> list[EntityId]:
        """Insert several manual entries with a single change notification."""
        ids: list[EntityId] = []
        has_open_entry = any(existing["end"] is None for existing in self._entries)
        for entry in entries:
            new_entry = _normalize_entry(entry)
            id = generate_entity_id()
            new_entry["id"] = id

            if new_entry["end"] is None:
                if has_open_entry:
                    logger.warning(
                        "manual entry %s is open while another entry is running", id
                    )
                has_open_entry = True

            self._entries.append(new_entry)
            logger.debug("added manual %s entry %s", new_entry["type"], id)
            ids.append(id)

        if len(ids) > 0:
            self.__commit()
        return ids

    def update_entry(self, id: EntityId, updates: Mapping[str, Any]) -> None:
        entry = _find(self._entries, id)
        if entry is None:
            return
        for key, value in updates.items():
            # The id is immutable and unknown keys are not part of an entry
            if key == "id" or key not in entry:
                continue
            if key == "tag_ids":
                value = _deduplicate(value)
            entry[key] = value  # type: ignore[literal-required]
        logger.debug("updated entry %s: %s", id, ", ".join(updates.keys()))
        self.__commit()

    def delete_entry(self, id: EntityId) -> None:
        remaining = [entry for entry in self._entries if entry["id"] != id]
        if len(remaining) == len(self._entries):
            return
        self._entries = remaining
        logger.debug("deleted entry %s", id)
        self.__commit()

    def get_entry(self, id: EntityId) -> Optional[TimeEntry]:
        return deepcopy(_find(self._entries, id))

    def get_active_entry(self) -> Optional[TimeEntry]:
        open_entries = [entry for entry in self._entries if entry["end"] is None]
        if len(open_entries) == 0:
            return None
        # Latest start wins if a manual insert left more than one open
        return deepcopy(max(open_entries, key=lambda entry: entry["start"]))

    # projects

    def add_project(
        self,
        name: str,
        color: str = DEFAULT_PROJECT_COLOR,
        is_archived: bool = False,
    ) -> EntityId:
        id = generate_entity_id()
        project = get_project_template()
        project["id"] = id
        project["name"] = name
        project["color"] = color
        project["is_archived"] = is_archived
        self._projects.append(project)
        logger.debug("added project %s (%s)", id, name)
        self.__commit()
        return id

    def update_project(self, id: EntityId, updates: Mapping[str, Any]) -> None:
        project = _find(self._projects, id)
        if project is None:
            return
        _merge(project, updates)
        logger.debug("updated project %s", id)
        self.__commit()

    def delete_project(self, id: EntityId) -> None:
        remaining = [project for project in self._projects if project["id"] != id]
        if len(remaining) == len(self._projects):
            return
        # Entries keep their project_id, it now resolves to nothing
        self._projects = remaining
        logger.debug("deleted project %s", id)
        self.__commit()

    def get_project(self, id: EntityId) -> Optional[Project]:
        return deepcopy(_find(self._projects, id))

    def get_project_by_name(self, name: str) -> Optional[Project]:
        for project in self._projects:
            if project["name"] == name:
                return deepcopy(project)
        return None

    def resolve_project(self, project_id: Optional[EntityId]) -> Optional[Project]:
        if project_id is None:
            return None
        return self.get_project(project_id)

    # tags

    def add_tag(self, name: str, color: str = DEFAULT_TAG_COLOR) -> EntityId:
        id = generate_entity_id()
        tag = get_tag_template()
        tag["id"] = id
        tag["name"] = name
        tag["color"] = color
        self._tags.append(tag)
        logger.debug("added tag %s (%s)", id, name)
        self.__commit()
        return id

    def update_tag(self, id: EntityId, updates: Mapping[str, Any]) -> None:
        tag = _find(self._tags, id)
        if tag is None:
            return
        _merge(tag, updates)
        logger.debug("updated tag %s", id)
        self.__commit()

    def delete_tag(self, id: EntityId) -> None:
        remaining = [tag for tag in self._tags if tag["id"] != id]
        if len(remaining) == len(self._tags):
            return
        self._tags = remaining
        logger.debug("deleted tag %s", id)
        self.__commit()

    def get_tag(self, id: EntityId) -> Optional[Tag]:
        return deepcopy(_find(self._tags, id))

    def get_tag_by_name(self, name: str) -> Optional[Tag]:
        for tag in self._tags:
            if tag["name"] == name:
                return deepcopy(tag)
        return None

    def resolve_tags(self, tag_ids: Sequence[EntityId]) -> list[Tag]:
        """Return the tags that still exist, in the order of ``tag_ids``."""
        tags = [self.get_tag(tag_id) for tag_id in tag_ids]
        return [tag for tag in tags if tag is not None]

    # bulk

    def import_data(self, data: Mapping[str, Any]) -> None:
        """
        Replace entries, projects and tags wholesale.

        This is a restore, not a merge. A collection missing from ``data``
        becomes empty.
        """
        self.__replace(data)
        logger.debug(
            "imported %d entries, %d projects, %d tags",
            len(self._entries),
            len(self._projects),
            len(self._tags),
        )
        self.__commit()

    def __replace(self, data: Mapping[str, Any]) -> None:
        self._entries = []
        for raw_entry in data.get("entries") or []:
            entry = _normalize_entry(raw_entry)
            if entry["id"] is None:
                entry["id"] = generate_entity_id()
            self._entries.append(entry)

        self._projects = []
        for raw_project in data.get("projects") or []:
            project = get_project_template()
            _merge(project, raw_project, keep_id=True)
            if project["id"] is None:
                project["id"] = generate_entity_id()
            self._projects.append(project)

        self._tags = []
        for raw_tag in data.get("tags") or []:
            tag = get_tag_template()
            _merge(tag, raw_tag, keep_id=True)
            if tag["id"] is None:
                tag["id"] = generate_entity_id()
            self._tags.append(tag)

    def __close_open_entries(self, now: pendulum.DateTime) -> list[EntityId]:
        closed_ids: list[EntityId] = []
        for entry in self._entries:
            if entry["end"] is None:
                entry["end"] = now
                closed_ids.append(cast(EntityId, entry["id"]))
                logger.debug("stopped entry %s", entry["id"])
        return closed_ids

    def __commit(self) -> None:
        if self._on_change is not None:
            self._on_change(self.snapshot())


def _find(collection: Sequence[Any], id: EntityId) -> Any:
    for item in collection:
        if item["id"] == id:
            return item
    return None


def _merge(
    target: Any, updates: Mapping[str, Any], keep_id: bool = False
) -> None:
    for key, value in updates.items():
        if key == "id" and not keep_id:
            continue
        if key in target:
            target[key] = value


def _deduplicate(ids: Optional[Sequence[EntityId]]) -> list[EntityId]:
    if ids is None:
        return []
    return list(dict.fromkeys(ids))


def _normalize_entry(raw_entry: Mapping[str, Any]) -> TimeEntry:
    entry = get_time_entry_template(raw_entry.get("type") or "work")
    _merge(entry, raw_entry, keep_id=True)
    entry["tag_ids"] = _deduplicate(entry["tag_ids"])
    entry["is_working_break"] = bool(entry["is_working_break"])
    return entry
