# SPDX-License-Identifier: MIT

from typing import Optional

from rich.markup import escape

from trackmytime.model.entity_id import EntityId
from trackmytime.model.project import Project
from trackmytime.model.tag import Tag

NO_PROJECT = "No Project"


def project_name(
    project_id: Optional[EntityId], projects_by_id: dict[EntityId, Project]
) -> str:
    if project_id is None or project_id not in projects_by_id:
        return NO_PROJECT
    return escape(projects_by_id[project_id]["name"])


def format_tag(tag: Tag) -> str:
    """Tag name with a colored dot when the tag has a color."""
    if tag["color"] is None:
        return escape(tag["name"])
    return f"[{tag['color']}]●[/] {escape(tag['name'])}"


def format_tags(tag_ids: list[EntityId], tags_by_id: dict[EntityId, Tag]) -> str:
    """Format tags as a comma-separated string, skipping ids that no longer exist."""
    return ", ".join(
        format_tag(tags_by_id[tag_id]) for tag_id in tag_ids if tag_id in tags_by_id
    )


def index_by_id(
    projects: list[Project], tags: list[Tag]
) -> tuple[dict[EntityId, Project], dict[EntityId, Tag]]:
    projects_by_id = {p["id"]: p for p in projects if p["id"] is not None}
    tags_by_id = {t["id"]: t for t in tags if t["id"] is not None}
    return projects_by_id, tags_by_id
