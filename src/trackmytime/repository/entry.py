# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Any, Optional, cast

import pendulum

from trackmytime import configuration, time
from trackmytime.model.entity_id import EntityId
from trackmytime.model.entity_type import EntityType
from trackmytime.model.entry import Entry
from trackmytime.repository.entity import EntityRepository


class EntryRepository(EntityRepository[Entry]):
    entity_type = EntityType.ENTRY

    @property
    def data_dir(self) -> Path:
        return configuration.DATA_ENTRIES_DIR

    def _convert_for_serialization(self, entry: Entry) -> dict[str, Any]:
        serializable_entry = cast(dict[str, Any], entry)
        serializable_entry["entity_type"] = str(serializable_entry["entity_type"])
        serializable_entry["start"] = time.datetime_to_iso_str(
            serializable_entry["start"]
        )
        serializable_entry["end"] = time.datetime_to_iso_str_optional(
            serializable_entry["end"]
        )
        serializable_entry["created"] = time.datetime_to_iso_str(
            serializable_entry["created"]
        )
        serializable_entry["updated"] = time.datetime_to_iso_str(
            serializable_entry["updated"]
        )
        return serializable_entry

    def _convert_for_deserialization(self, entry: dict[str, Any]) -> Entry:
        deserializable_entry = entry
        deserializable_entry["start"] = time.datetime_from_str(
            deserializable_entry["start"]
        )
        deserializable_entry["end"] = time.datetime_from_str_optional(
            deserializable_entry.get("end")
        )
        deserializable_entry["created"] = time.datetime_from_str(
            deserializable_entry["created"]
        )
        deserializable_entry["updated"] = time.datetime_from_str(
            deserializable_entry["updated"]
        )
        deserializable_entry.setdefault("project_id", None)
        deserializable_entry["tag_ids"] = deserializable_entry.get("tag_ids") or []
        deserializable_entry["notes"] = deserializable_entry.get("notes") or ""
        return cast(Entry, deserializable_entry)

    def save_new_entry(self, entry: Entry) -> EntityId:
        # Deduplicate tags
        entry["tag_ids"] = list(dict.fromkeys(entry["tag_ids"]))
        return self._insert(entry)

    def modify_entry(
        self,
        id: EntityId,
        project_id: Optional[EntityId] = None,
        tag_ids: Optional[list[EntityId]] = None,
        notes: Optional[str] = None,
        start: Optional[pendulum.DateTime] = None,
        end: Optional[pendulum.DateTime] = None,
        remove_project: bool = False,
        remove_end: bool = False,
    ) -> None:
        entry = self._find(id)
        self._mark_dirty(id)

        entry["updated"] = time.now_utc()
        if project_id is not None:
            entry["project_id"] = project_id
        if tag_ids is not None:
            entry["tag_ids"] = list(dict.fromkeys(tag_ids))
        if notes is not None:
            entry["notes"] = notes
        if start is not None:
            entry["start"] = start
        if end is not None:
            entry["end"] = end

        if remove_project:
            entry["project_id"] = None
        if remove_end:
            entry["end"] = None

    def delete_entry(self, id: EntityId) -> None:
        self._delete(id)

    def get_all_entries(self) -> list[Entry]:
        return self._get_all()

    def get_entry(self, id: EntityId) -> Entry:
        return self._get(id)


ENTRY_REPO = EntryRepository()
