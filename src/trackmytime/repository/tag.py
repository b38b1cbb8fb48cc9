# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Any, Optional, cast

from trackmytime import configuration, time
from trackmytime.model.entity_id import EntityId
from trackmytime.model.entity_type import EntityType
from trackmytime.model.tag import Tag
from trackmytime.repository.entity import EntityRepository


class TagRepository(EntityRepository[Tag]):
    entity_type = EntityType.TAG

    @property
    def data_dir(self) -> Path:
        return configuration.DATA_TAGS_DIR

    def _convert_for_serialization(self, tag: Tag) -> dict[str, Any]:
        serializable_tag = cast(dict[str, Any], tag)
        serializable_tag["entity_type"] = str(serializable_tag["entity_type"])
        serializable_tag["created"] = time.datetime_to_iso_str(
            serializable_tag["created"]
        )
        serializable_tag["updated"] = time.datetime_to_iso_str(
            serializable_tag["updated"]
        )
        return serializable_tag

    def _convert_for_deserialization(self, tag: dict[str, Any]) -> Tag:
        tag["created"] = time.datetime_from_str(tag["created"])
        tag["updated"] = time.datetime_from_str(tag["updated"])
        tag.setdefault("color", None)
        return cast(Tag, tag)

    def save_new_tag(self, tag: Tag) -> EntityId:
        return self._insert(tag)

    def modify_tag(
        self,
        id: EntityId,
        name: Optional[str] = None,
        color: Optional[str] = None,
        remove_color: bool = False,
    ) -> None:
        tag = self._find(id)
        self._mark_dirty(id)

        tag["updated"] = time.now_utc()
        if name is not None:
            tag["name"] = name
        if color is not None:
            tag["color"] = color
        if remove_color:
            tag["color"] = None

    def delete_tag(self, id: EntityId) -> None:
        self._delete(id)

    def get_all_tags(self) -> list[Tag]:
        return sorted(self._get_all(), key=lambda tag: tag["name"].lower())

    def get_tag(self, id: EntityId) -> Tag:
        return self._get(id)

    def tag_exists(self, id: EntityId) -> bool:
        return self.exists(id)


TAG_REPO = TagRepository()
