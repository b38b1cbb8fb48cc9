# SPDX-License-Identifier: MIT

import logging
import re
from typing import Optional

from trackmytime.model.entity_id import EntityId
from trackmytime.model.entry import Entry
from trackmytime.model.tag import Tag
from trackmytime.repository.entry import ENTRY_REPO
from trackmytime.repository.tag import TAG_REPO
from trackmytime.service.entry import select_entries
from trackmytime.template.tag import get_tag_template

logger = logging.getLogger(__name__)

HEX_COLOR_PATTERN = re.compile(r"^#[0-9a-fA-F]{6}$")


class TagValidationError(Exception):
    """Raised when tag validation fails."""

    pass


def _clean_name(name: Optional[str]) -> str:
    trimmed = (name or "").strip()
    if trimmed == "":
        raise TagValidationError("Please provide a tag name.")
    return trimmed


def _clean_color(color: Optional[str]) -> Optional[str]:
    if color is None:
        return None
    if not HEX_COLOR_PATTERN.match(color):
        raise TagValidationError(
            f"Tag color must look like #RRGGBB. Got: {color}"
        )
    return color.upper()


def create_tag(name: str, color: Optional[str] = None) -> Tag:
    tag = get_tag_template()
    tag["name"] = _clean_name(name)
    tag["color"] = _clean_color(color)

    id = TAG_REPO.save_new_tag(tag)
    logger.info("created tag %s (%s)", id, tag["name"])
    return TAG_REPO.get_tag(id)


def modify_tag(
    id: EntityId,
    name: Optional[str] = None,
    color: Optional[str] = None,
    remove_color: bool = False,
) -> Tag:
    TAG_REPO.modify_tag(
        id,
        name=_clean_name(name) if name is not None else None,
        color=_clean_color(color),
        remove_color=remove_color,
    )
    return TAG_REPO.get_tag(id)


def tag_entries(id: EntityId) -> list[Entry]:
    return select_entries(ENTRY_REPO.get_all_entries(), tag_id=id)


def delete_tag(id: EntityId) -> int:
    """Remove the tag from every entry carrying it, then delete the tag."""
    TAG_REPO.get_tag(id)

    entries = tag_entries(id)
    for entry in entries:
        remaining_tag_ids = [tag_id for tag_id in entry["tag_ids"] if tag_id != id]
        ENTRY_REPO.modify_entry(entry["id"], tag_ids=remaining_tag_ids)  # type: ignore[arg-type]
    TAG_REPO.delete_tag(id)

    logger.info("deleted tag %s from %d entries", id, len(entries))
    return len(entries)
