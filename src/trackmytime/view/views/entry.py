# SPDX-License-Identifier: MIT

from typing import Optional

import pendulum
from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from trackmytime.model.entity_id import short_id
from trackmytime.model.entry import Entry
from trackmytime.model.project import Project
from trackmytime.model.tag import Tag
from trackmytime.service.entry import entry_elapsed_seconds, is_running
from trackmytime.time import (
    datetime_to_display_local_datetime_str,
    datetime_to_display_local_datetime_str_optional,
    format_duration,
    now_utc,
)
from trackmytime.view.util import format_tags, index_by_id, project_name
from trackmytime.view.views.header import header


def entries_report(
    report_name: str,
    entries: list[Entry],
    projects: list[Project],
    tags: list[Tag],
    now: Optional[pendulum.DateTime] = None,
) -> None:
    header(report_name)

    reference_now = now if now is not None else now_utc()
    projects_by_id, tags_by_id = index_by_id(projects, tags)

    entries_table = Table(box=box.SIMPLE)
    entries_table.add_column("id")
    entries_table.add_column("project")
    entries_table.add_column("tags")
    entries_table.add_column("notes")
    entries_table.add_column("start")
    entries_table.add_column("end")
    entries_table.add_column("duration", justify="right")

    total = 0.0
    for entry in entries:
        elapsed = entry_elapsed_seconds(entry, reference_now)
        total += elapsed

        row = [
            short_id(entry["id"] or ""),
            project_name(entry["project_id"], projects_by_id),
            format_tags(entry["tag_ids"], tags_by_id),
            escape(entry["notes"]),
            datetime_to_display_local_datetime_str(entry["start"]),
            datetime_to_display_local_datetime_str_optional(entry["end"])
            or "[red]●[/red] running",
            format_duration(elapsed),
        ]
        if is_running(entry):
            row = [f"[underline]{value}[/underline]" for value in row]
        entries_table.add_row(*row)

    if len(entries) > 0:
        entries_table.add_row("", "", "", "", "", "", format_duration(total), style="bold")

    console = Console()
    console.print(entries_table)


def single_entry_report(
    entry: Entry,
    projects: list[Project],
    tags: list[Tag],
    title: str = "entry",
) -> None:
    header(title)

    projects_by_id, tags_by_id = index_by_id(projects, tags)

    entry_table = Table(box=box.SIMPLE)
    entry_table.add_column("property")
    entry_table.add_column("value")

    entry_table.add_row("id", entry["id"])
    entry_table.add_row("project", project_name(entry["project_id"], projects_by_id))
    entry_table.add_row("tags", format_tags(entry["tag_ids"], tags_by_id))
    entry_table.add_row("notes", escape(entry["notes"]))
    entry_table.add_row("start", datetime_to_display_local_datetime_str(entry["start"]))
    entry_table.add_row(
        "end", datetime_to_display_local_datetime_str_optional(entry["end"]) or "running"
    )
    entry_table.add_row("duration", format_duration(entry_elapsed_seconds(entry)))
    entry_table.add_row(
        "created", datetime_to_display_local_datetime_str(entry["created"])
    )
    entry_table.add_row(
        "updated", datetime_to_display_local_datetime_str(entry["updated"])
    )

    console = Console()
    console.print(entry_table)


def running_entries_report(
    entries: list[Entry],
    projects: list[Project],
    tags: list[Tag],
) -> None:
    if len(entries) == 0:
        header("running")
        print()
        print("no running entries")
        return
    entries_report("running", entries, projects, tags)
