# SPDX-License-Identifier: MIT

from typing import Optional, Sequence

from trackmytime.model.entity_id import EntityId
from trackmytime.model.entry import Entry
from trackmytime.model.project import Project
from trackmytime.model.tag import Tag
from trackmytime.service.entry import entry_duration_seconds
from trackmytime.time import datetime_to_iso_str, datetime_to_iso_str_optional

CSV_COLUMNS = ["id", "project", "tags", "notes", "start", "end", "duration_seconds"]
TAG_SEPARATOR = ";"


def sanitize_csv_field(value: Optional[str]) -> str:
    """Make a value safe for an unquoted CSV cell: no commas, no line breaks."""
    if value is None:
        return ""
    sanitized = value.replace("\r\n", " ").replace("\r", " ").replace("\n", " ")
    sanitized = sanitized.replace(",", " ")
    return sanitized.strip()


def entry_to_csv_row(
    entry: Entry,
    projects_by_id: dict[EntityId, Project],
    tags_by_id: dict[EntityId, Tag],
) -> str:
    project_name = ""
    if entry["project_id"] is not None and entry["project_id"] in projects_by_id:
        project_name = projects_by_id[entry["project_id"]]["name"]

    tag_names = [
        sanitize_csv_field(tags_by_id[tag_id]["name"]).replace(TAG_SEPARATOR, " ")
        for tag_id in entry["tag_ids"]
        if tag_id in tags_by_id
    ]

    duration = entry_duration_seconds(entry)
    duration_str = str(max(0, int(duration))) if duration is not None else ""

    fields = [
        sanitize_csv_field(entry["id"]),
        sanitize_csv_field(project_name),
        TAG_SEPARATOR.join(tag_names),
        sanitize_csv_field(entry["notes"]),
        datetime_to_iso_str(entry["start"]),
        datetime_to_iso_str_optional(entry["end"]) or "",
        duration_str,
    ]
    return ",".join(fields)


def entries_to_csv(
    entries: Sequence[Entry],
    projects: Sequence[Project],
    tags: Sequence[Tag],
) -> str:
    projects_by_id = {
        project["id"]: project for project in projects if project["id"] is not None
    }
    tags_by_id = {tag["id"]: tag for tag in tags if tag["id"] is not None}

    lines = [",".join(CSV_COLUMNS)]
    for entry in entries:
        lines.append(entry_to_csv_row(entry, projects_by_id, tags_by_id))
    return "\n".join(lines) + "\n"
