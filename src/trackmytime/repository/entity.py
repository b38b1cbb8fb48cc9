# SPDX-License-Identifier: MIT

import logging
from abc import ABC, abstractmethod
from copy import deepcopy
from pathlib import Path
from typing import Any, Generic, Optional, TypeVar

from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from trackmytime.model.entity_id import EntityId, generate_entity_id

logger = logging.getLogger(__name__)

E = TypeVar("E")


class EntityNotFoundError(KeyError):
    """Raised when no stored entity has the requested id."""

    def __init__(self, entity_type: str, id: EntityId) -> None:
        super().__init__(f"{entity_type} not found: {id}")
        self.entity_type = entity_type
        self.id = id

    def __str__(self) -> str:
        return str(self.args[0])


class EntityRepository(ABC, Generic[E]):
    """
    One YAML file per entity inside `data_dir`.

    Data is loaded lazily on first access. Mutations only touch the in-memory
    list and record which ids are dirty or deleted; nothing reaches the disk
    until `flush()`.
    """

    entity_type: str = "entity"

    def __init__(self) -> None:
        self._entities: Optional[list[E]] = None
        self.is_dirty = False
        self._dirty_ids: set[str] = set()
        self._deleted_ids: set[str] = set()

    @property
    @abstractmethod
    def data_dir(self) -> Path: ...

    @abstractmethod
    def _convert_for_serialization(self, entity: E) -> dict[str, Any]: ...

    @abstractmethod
    def _convert_for_deserialization(self, raw_entity: dict[str, Any]) -> E: ...

    @property
    def entities(self) -> list[E]:
        if self._entities is None:
            self.__load_data()
        if self._entities is None:
            raise ValueError()
        return self._entities

    def __load_data(self) -> None:
        self._entities = []
        if not self.data_dir.is_dir():
            return
        for file_path in sorted(self.data_dir.iterdir()):
            if file_path.suffix != ".yaml":
                continue
            raw_entity = load(file_path.read_text(), Loader=Loader)
            if raw_entity is not None:
                self._entities.append(self._convert_for_deserialization(raw_entity))
        logger.debug(
            "loaded %d %s file(s) from %s",
            len(self._entities),
            self.entity_type,
            self.data_dir,
        )

    def __save_data(self) -> None:
        self.data_dir.mkdir(parents=True, exist_ok=True)

        for entity in self.entities:
            entity_id = self._id_of(entity)
            if entity_id in self._dirty_ids:
                serializable_entity = self._convert_for_serialization(
                    deepcopy(entity)
                )
                file_path = self.data_dir / f"{entity_id}.yaml"
                file_path.write_text(dump(serializable_entity, Dumper=Dumper))

        for entity_id in self._deleted_ids:
            file_path = self.data_dir / f"{entity_id}.yaml"
            if file_path.exists():
                file_path.unlink()

        logger.debug(
            "flushed %s: %d written, %d removed",
            self.entity_type,
            len(self._dirty_ids),
            len(self._deleted_ids),
        )
        self._dirty_ids.clear()
        self._deleted_ids.clear()

    def flush(self) -> bool:
        if self._entities is not None and self.is_dirty:
            self.__save_data()
            self.is_dirty = False
            return True
        return False

    def _id_of(self, entity: E) -> EntityId:
        return entity["id"]  # type: ignore[index]

    def _find(self, id: EntityId) -> E:
        for entity in self.entities:
            if self._id_of(entity) == id:
                return entity
        raise EntityNotFoundError(self.entity_type, id)

    def _mark_dirty(self, id: EntityId) -> None:
        self.is_dirty = True
        self._dirty_ids.add(id)

    def _insert(self, entity: E) -> EntityId:
        entity_id = generate_entity_id()
        entity["id"] = entity_id  # type: ignore[index]
        self.entities.append(entity)
        self._mark_dirty(entity_id)
        return entity_id

    def _delete(self, id: EntityId) -> None:
        entity = self._find(id)
        self.entities.remove(entity)
        self.is_dirty = True
        self._dirty_ids.discard(id)
        self._deleted_ids.add(id)

    def _get_all(self) -> list[E]:
        return deepcopy(self.entities)

    def _get(self, id: EntityId) -> E:
        return deepcopy(self._find(id))

    def exists(self, id: EntityId) -> bool:
        return any(self._id_of(entity) == id for entity in self.entities)
