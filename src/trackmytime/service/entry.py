# SPDX-License-Identifier: MIT

import logging
from typing import Optional, Sequence

import pendulum

from trackmytime.model.entity_id import EntityId
from trackmytime.model.entry import Entry
from trackmytime.query.filter import generate_entry_filter
from trackmytime.query.sort import sort_entries_by_start
from trackmytime.repository.entry import ENTRY_REPO
from trackmytime.repository.project import PROJECT_REPO
from trackmytime.repository.tag import TAG_REPO
from trackmytime.service.activity import ACTIVITY_MANAGER
from trackmytime.template.entry import get_entry_template
from trackmytime.time import now_utc, seconds_between

logger = logging.getLogger(__name__)


class EntryValidationError(Exception):
    """Raised when entry validation fails."""

    pass


def select_entries(
    entries: Sequence[Entry],
    project_id: Optional[EntityId] = None,
    tag_id: Optional[EntityId] = None,
    newest_first: bool = True,
) -> list[Entry]:
    """
    Filter entries by project and tag, then order them by start.

    A None filter matches every entry. Ids that match nothing give an empty
    list rather than an error. Entries with the same start keep their input
    order. The input is never modified.
    """
    entry_filter = generate_entry_filter(project_id=project_id, tag_id=tag_id)
    return sort_entries_by_start(entry_filter.filter(list(entries)), newest_first)


def running_entries(entries: Sequence[Entry]) -> list[Entry]:
    entry_filter = generate_entry_filter(running_only=True)
    return sort_entries_by_start(entry_filter.filter(list(entries)), True)


def is_running(entry: Entry) -> bool:
    return entry["end"] is None


def entry_duration_seconds(entry: Entry) -> Optional[float]:
    """Recorded duration, or None while the entry is still running."""
    if entry["end"] is None:
        return None
    return seconds_between(entry["start"], entry["end"])


def entry_elapsed_seconds(
    entry: Entry, now: Optional[pendulum.DateTime] = None
) -> float:
    """Duration so far, counting a running entry up to `now`. Never negative."""
    end = entry["end"]
    if end is None:
        end = now if now is not None else now_utc()
    return max(0.0, seconds_between(entry["start"], end))


def validate_entry(
    project_id: Optional[EntityId],
    start: pendulum.DateTime,
    end: Optional[pendulum.DateTime],
) -> bool:
    """
    Check the rules of the entry form.

    - A project must be selected and must exist
    - When an end is given it must not precede the start

    Returns True if valid, raises EntryValidationError if not.
    """
    if project_id is None or not PROJECT_REPO.project_exists(project_id):
        raise EntryValidationError("Please select a project.")
    if end is not None and end < start:
        raise EntryValidationError("End date must be after start date.")
    return True


def create_entry(
    project_id: Optional[EntityId],
    tag_ids: Optional[list[EntityId]] = None,
    notes: Optional[str] = None,
    start: Optional[pendulum.DateTime] = None,
    end: Optional[pendulum.DateTime] = None,
) -> Entry:
    if len(PROJECT_REPO.get_all_projects()) == 0:
        raise EntryValidationError(
            "You need to create a project before adding entries."
        )

    entry = get_entry_template()
    entry["project_id"] = project_id
    entry["tag_ids"] = [
        tag_id for tag_id in (tag_ids or []) if TAG_REPO.tag_exists(tag_id)
    ]
    entry["notes"] = (notes or "").strip()
    if start is not None:
        entry["start"] = start
    entry["end"] = end

    validate_entry(entry["project_id"], entry["start"], entry["end"])

    id = ENTRY_REPO.save_new_entry(entry)
    new_entry = ENTRY_REPO.get_entry(id)
    logger.info(
        "created %s entry %s", "running" if is_running(new_entry) else "closed", id
    )

    ACTIVITY_MANAGER.start_activity(new_entry)
    return new_entry


def start_entry(
    project_id: Optional[EntityId],
    tag_ids: Optional[list[EntityId]] = None,
    notes: Optional[str] = None,
) -> Entry:
    return create_entry(project_id, tag_ids, notes, start=now_utc(), end=None)


def stop_entry(id: EntityId, end: Optional[pendulum.DateTime] = None) -> Entry:
    entry = ENTRY_REPO.get_entry(id)
    if not is_running(entry):
        raise EntryValidationError("Entry is not running.")

    stop_at = end if end is not None else now_utc()
    if stop_at < entry["start"]:
        raise EntryValidationError("End date must be after start date.")

    ENTRY_REPO.modify_entry(id, end=stop_at)
    logger.info("stopped entry %s", id)

    ACTIVITY_MANAGER.end_activity(id)
    return ENTRY_REPO.get_entry(id)


def stop_all_entries(end: Optional[pendulum.DateTime] = None) -> list[Entry]:
    stop_at = end if end is not None else now_utc()
    return [
        stop_entry(entry["id"], stop_at)  # type: ignore[arg-type]
        for entry in running_entries(ENTRY_REPO.get_all_entries())
    ]


def modify_entry(
    id: EntityId,
    project_id: Optional[EntityId] = None,
    tag_ids: Optional[list[EntityId]] = None,
    notes: Optional[str] = None,
    start: Optional[pendulum.DateTime] = None,
    end: Optional[pendulum.DateTime] = None,
    remove_end: bool = False,
) -> Entry:
    """Apply the edit form. The merged result is validated before anything is stored."""
    before = ENTRY_REPO.get_entry(id)

    merged_project_id = project_id if project_id is not None else before["project_id"]
    merged_start = start if start is not None else before["start"]
    merged_end = None if remove_end else (end if end is not None else before["end"])
    validate_entry(merged_project_id, merged_start, merged_end)

    if tag_ids is not None:
        tag_ids = [tag_id for tag_id in tag_ids if TAG_REPO.tag_exists(tag_id)]

    ENTRY_REPO.modify_entry(
        id,
        project_id=project_id,
        tag_ids=tag_ids,
        notes=notes.strip() if notes is not None else None,
        start=start,
        end=end if not remove_end else None,
        remove_end=remove_end,
    )
    after = ENTRY_REPO.get_entry(id)
    logger.info("modified entry %s", id)

    if is_running(before) and not is_running(after):
        ACTIVITY_MANAGER.end_activity(id)
    elif not is_running(before) and is_running(after):
        ACTIVITY_MANAGER.start_activity(after)
    elif is_running(after) and before["start"] != after["start"]:
        ACTIVITY_MANAGER.update_activity(id, after["start"])

    return after


def delete_entry(id: EntityId) -> None:
    ENTRY_REPO.delete_entry(id)
    logger.info("deleted entry %s", id)

    if ACTIVITY_MANAGER.is_active(id):
        ACTIVITY_MANAGER.end_activity(id)
