# SPDX-License-Identifier: MIT

import logging
from typing import Optional

from trackmytime.model.entity_id import EntityId
from trackmytime.model.entry import Entry
from trackmytime.model.project import Project
from trackmytime.repository.entry import ENTRY_REPO
from trackmytime.repository.project import PROJECT_REPO
from trackmytime.service.entry import delete_entry, select_entries
from trackmytime.template.project import get_project_template

logger = logging.getLogger(__name__)


class ProjectValidationError(Exception):
    """Raised when project validation fails."""

    pass


def _clean_name(name: Optional[str]) -> str:
    trimmed = (name or "").strip()
    if trimmed == "":
        raise ProjectValidationError("Please provide a project name.")
    return trimmed


def _clean_description(description: Optional[str]) -> Optional[str]:
    if description is None:
        return None
    trimmed = description.strip()
    return trimmed if trimmed != "" else None


def create_project(name: str, description: Optional[str] = None) -> Project:
    project = get_project_template()
    project["name"] = _clean_name(name)
    project["description"] = _clean_description(description)

    id = PROJECT_REPO.save_new_project(project)
    logger.info("created project %s (%s)", id, project["name"])
    return PROJECT_REPO.get_project(id)


def modify_project(
    id: EntityId,
    name: Optional[str] = None,
    description: Optional[str] = None,
) -> Project:
    """
    Apply the project edit form.

    A blank description clears it, so passing "" removes an existing one.
    """
    cleaned_name = _clean_name(name) if name is not None else None
    cleaned_description = _clean_description(description)

    PROJECT_REPO.modify_project(
        id,
        name=cleaned_name,
        description=cleaned_description,
        remove_description=description is not None and cleaned_description is None,
    )
    return PROJECT_REPO.get_project(id)


def project_entries(id: EntityId) -> list[Entry]:
    return select_entries(ENTRY_REPO.get_all_entries(), project_id=id)


def delete_project_and_entries(id: EntityId) -> int:
    """Delete the project along with every entry that belongs to it."""
    PROJECT_REPO.get_project(id)

    entries = project_entries(id)
    for entry in entries:
        delete_entry(entry["id"])  # type: ignore[arg-type]
    PROJECT_REPO.delete_project(id)

    logger.info("deleted project %s and %d entries", id, len(entries))
    return len(entries)


def reassign_entries(source_id: EntityId, target_id: Optional[EntityId]) -> int:
    """Move every entry of the source project to the target, then delete the source."""
    PROJECT_REPO.get_project(source_id)
    if (
        target_id is None
        or target_id == source_id
        or not PROJECT_REPO.project_exists(target_id)
    ):
        raise ProjectValidationError(
            "Please select a target project to reassign entries to."
        )

    entries = project_entries(source_id)
    for entry in entries:
        ENTRY_REPO.modify_entry(entry["id"], project_id=target_id)  # type: ignore[arg-type]
    PROJECT_REPO.delete_project(source_id)

    logger.info(
        "reassigned %d entries from project %s to %s",
        len(entries),
        source_id,
        target_id,
    )
    return len(entries)
