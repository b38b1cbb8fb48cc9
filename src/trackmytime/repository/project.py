# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Any, Optional, cast

from trackmytime import configuration, time
from trackmytime.model.entity_id import EntityId
from trackmytime.model.entity_type import EntityType
from trackmytime.model.project import Project
from trackmytime.repository.entity import EntityRepository


class ProjectRepository(EntityRepository[Project]):
    entity_type = EntityType.PROJECT

    @property
    def data_dir(self) -> Path:
        return configuration.DATA_PROJECTS_DIR

    def _convert_for_serialization(self, project: Project) -> dict[str, Any]:
        serializable_project = cast(dict[str, Any], project)
        serializable_project["entity_type"] = str(serializable_project["entity_type"])
        serializable_project["created"] = time.datetime_to_iso_str(
            serializable_project["created"]
        )
        serializable_project["updated"] = time.datetime_to_iso_str(
            serializable_project["updated"]
        )
        return serializable_project

    def _convert_for_deserialization(self, project: dict[str, Any]) -> Project:
        project["created"] = time.datetime_from_str(project["created"])
        project["updated"] = time.datetime_from_str(project["updated"])
        project.setdefault("description", None)
        return cast(Project, project)

    def save_new_project(self, project: Project) -> EntityId:
        return self._insert(project)

    def modify_project(
        self,
        id: EntityId,
        name: Optional[str] = None,
        description: Optional[str] = None,
        remove_description: bool = False,
    ) -> None:
        project = self._find(id)
        self._mark_dirty(id)

        project["updated"] = time.now_utc()
        if name is not None:
            project["name"] = name
        if description is not None:
            project["description"] = description
        if remove_description:
            project["description"] = None

    def delete_project(self, id: EntityId) -> None:
        self._delete(id)

    def get_all_projects(self) -> list[Project]:
        return sorted(self._get_all(), key=lambda project: project["name"].lower())

    def get_project(self, id: EntityId) -> Project:
        return self._get(id)

    def project_exists(self, id: EntityId) -> bool:
        return self.exists(id)


PROJECT_REPO = ProjectRepository()
