# SPDX-License-Identifier: MIT

import logging
from copy import deepcopy
from typing import Any, Optional, cast

from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader  # noqa: F401
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from toil import configuration, time
from toil.model.snapshot import Snapshot
from toil.model.time_entry import TimeEntry
from toil.template.snapshot import get_snapshot_template

logger = logging.getLogger(__name__)


class SnapshotRepository:
    def __init__(self) -> None:
        self._snapshot: Optional[Snapshot] = None
        self.is_dirty = False

    @property
    def snapshot(self) -> Snapshot:
        if self._snapshot is None:
            self.__load_data()
        if self._snapshot is None:
            raise ValueError()
        return self._snapshot

    def __load_data(self) -> None:
        path = configuration.DATA_SNAPSHOT_PATH
        if not path.is_file():
            logger.debug("no snapshot at %s, starting empty", path)
            self._snapshot = get_snapshot_template()
            return
        self._snapshot = snapshot_from_yaml(path.read_text())
        logger.debug(
            "loaded %d entries from %s", len(self._snapshot["entries"]), path
        )

    def __save_data(self, snapshot: Snapshot) -> None:
        path = configuration.DATA_SNAPSHOT_PATH
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(snapshot_to_yaml(snapshot))
        logger.debug("wrote %d entries to %s", len(snapshot["entries"]), path)

    def flush(self) -> bool:
        if self._snapshot is not None and self.is_dirty:
            self.__save_data(self._snapshot)
            self.is_dirty = False
            return True
        return False

    def reload(self) -> None:
        """Drop the cached snapshot so the next read comes from disk."""
        if not self.is_dirty:
            self._snapshot = None

    def get_snapshot(self) -> Snapshot:
        return deepcopy(self.snapshot)

    def save_snapshot(self, snapshot: Snapshot) -> None:
        """Take ownership of ``snapshot``; callers hand over a fresh copy."""
        self.is_dirty = True
        self._snapshot = snapshot


def snapshot_to_yaml(snapshot: Snapshot) -> str:
    serializable_snapshot: dict[str, Any] = {
        "entries": [
            __convert_entry_for_serialization(entry)
            for entry in deepcopy(snapshot["entries"])
        ],
        "projects": deepcopy(snapshot["projects"]),
        "tags": deepcopy(snapshot["tags"]),
    }
    return cast(str, dump(serializable_snapshot, Dumper=Dumper, sort_keys=False))


def snapshot_from_yaml(text: str) -> Snapshot:
    """
    Parse a snapshot document. Missing collections come back empty; the
    entry fields themselves are normalized by the store on import.
    """
    raw_snapshot = load(text, Loader=Loader)
    snapshot = get_snapshot_template()
    if raw_snapshot is None:
        return snapshot
    if not isinstance(raw_snapshot, dict):
        raise ValueError("snapshot document must be a mapping")
    snapshot["entries"] = [
        __convert_entry_for_deserialization(raw_entry)
        for raw_entry in raw_snapshot.get("entries") or []
    ]
    snapshot["projects"] = list(raw_snapshot.get("projects") or [])
    snapshot["tags"] = list(raw_snapshot.get("tags") or [])
    return snapshot


def __convert_entry_for_serialization(entry: TimeEntry) -> dict[str, Any]:
    serializable_entry = cast(dict[str, Any], entry)
    serializable_entry["start"] = time.datetime_to_iso_str(entry["start"])
    serializable_entry["end"] = time.datetime_to_iso_str_optional(entry["end"])
    return serializable_entry


def __convert_entry_for_deserialization(entry: Any) -> TimeEntry:
    if not isinstance(entry, dict) or entry.get("start") is None:
        raise ValueError(f"snapshot entry without a start time: {entry!r}")
    deserializable_entry = entry
    deserializable_entry["start"] = time.datetime_from_str(
        str(deserializable_entry["start"])
    )
    # Unquoted timestamps are loaded as datetime objects by PyYAML
    raw_end = deserializable_entry.get("end")
    deserializable_entry["end"] = time.datetime_from_str_optional(
        str(raw_end) if raw_end is not None else None
    )
    return cast(TimeEntry, deserializable_entry)


SNAPSHOT_REPO = SnapshotRepository()
