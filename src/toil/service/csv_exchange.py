# SPDX-License-Identifier: MIT

import csv
import logging
from typing import Any, Optional, TextIO, TypedDict

import pendulum

from toil.color import IMPORTED_PROJECT_COLOR
from toil.model.entity_id import EntityId
from toil.repository.time_store import TimeStore
from toil.service.entry import EntryValidationError, validate_entry_type
from toil.time import datetime_from_str, datetime_to_iso_str

logger = logging.getLogger(__name__)

CSV_COLUMNS = [
    "id",
    "type",
    "startTime",
    "endTime",
    "projectName",
    "tags",
    "notes",
]
TAG_SEPARATOR = ";"


class CsvRow(TypedDict):
    line: int
    type: str
    start: pendulum.DateTime
    end: Optional[pendulum.DateTime]
    project_name: Optional[str]
    tag_names: list[str]
    notes: Optional[str]


def entries_to_rows(store: TimeStore) -> list[dict[str, str]]:
    """Flatten entries, resolving project and tag ids to their names."""
    rows = []
    for entry in store.entries:
        project = store.resolve_project(entry["project_id"])
        tags = store.resolve_tags(entry["tag_ids"])
        rows.append(
            {
                "id": entry["id"] or "",
                "type": entry["type"],
                "startTime": datetime_to_iso_str(entry["start"]),
                "endTime": (
                    datetime_to_iso_str(entry["end"]) if entry["end"] is not None else ""
                ),
                "projectName": project["name"] if project is not None else "",
                "tags": TAG_SEPARATOR.join(tag["name"] for tag in tags),
                "notes": entry["notes"] or "",
            }
        )
    return rows


def write_entries_csv(store: TimeStore, stream: TextIO) -> int:
    rows = entries_to_rows(store)
    writer = csv.DictWriter(stream, fieldnames=CSV_COLUMNS)
    writer.writeheader()
    writer.writerows(rows)
    return len(rows)


def parse_entries_csv(stream: TextIO) -> list[CsvRow]:
    """
    Parse exported rows without touching any store.

    Rows without a start time are skipped. A missing type means work.
    Raises EntryValidationError for unparseable times or unknown types.
    """
    parsed_rows: list[CsvRow] = []
    reader = csv.DictReader(stream)
    # Line 1 is the header
    for line, row in enumerate(reader, start=2):
        raw_start = (row.get("startTime") or "").strip()
        if raw_start == "":
            logger.info("skipping csv line %d without a start time", line)
            continue

        try:
            start = datetime_from_str(raw_start)
            raw_end = (row.get("endTime") or "").strip()
            end = datetime_from_str(raw_end) if raw_end != "" else None
        except ValueError as e:
            raise EntryValidationError(f"Line {line}: cannot parse time: {e}")

        entry_type = validate_entry_type((row.get("type") or "").strip() or "work")

        raw_tags = row.get("tags") or ""
        tag_names = [
            name.strip() for name in raw_tags.split(TAG_SEPARATOR) if name.strip()
        ]

        parsed_rows.append(
            {
                "line": line,
                "type": entry_type,
                "start": start,
                "end": end,
                "project_name": (row.get("projectName") or "").strip() or None,
                "tag_names": tag_names,
                "notes": row.get("notes") or None,
            }
        )
    return parsed_rows


def import_entries_csv(
    store: TimeStore,
    stream: TextIO,
    create_missing_projects: bool = True,
) -> int:
    """
    Add every row of an exported CSV to ``store`` as a manual entry.

    Project and tag names are resolved against the store. An unknown project
    name creates a new project when ``create_missing_projects`` is set,
    otherwise the entry is imported without a project. Unknown tag names are
    dropped. Nothing is added if any row fails to parse.

    Returns the number of imported entries.
    """
    parsed_rows = parse_entries_csv(stream)

    new_entries: list[dict[str, Any]] = []
    for row in parsed_rows:
        project_id = __resolve_project_id(
            store, row["project_name"], create_missing_projects
        )
        tag_ids: list[EntityId] = []
        for tag_name in row["tag_names"]:
            tag = store.get_tag_by_name(tag_name)
            if tag is None or tag["id"] is None:
                logger.info(
                    "csv line %d: dropping unknown tag '%s'", row["line"], tag_name
                )
                continue
            tag_ids.append(tag["id"])

        new_entries.append(
            {
                "type": row["type"],
                "start": row["start"],
                "end": row["end"],
                "project_id": project_id,
                "tag_ids": tag_ids,
                "notes": row["notes"],
            }
        )

    store.add_manual_entries(new_entries)
    logger.info("imported %d entries from csv", len(parsed_rows))
    return len(parsed_rows)


def __resolve_project_id(
    store: TimeStore,
    project_name: Optional[str],
    create_missing_projects: bool,
) -> Optional[EntityId]:
    if project_name is None:
        return None
    project = store.get_project_by_name(project_name)
    if project is not None:
        return project["id"]
    if not create_missing_projects:
        return None
    logger.info("creating project '%s' from csv", project_name)
    return store.add_project(project_name, IMPORTED_PROJECT_COLOR)
