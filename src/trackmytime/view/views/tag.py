# SPDX-License-Identifier: MIT

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from trackmytime.model.entity_id import short_id
from trackmytime.model.entry import Entry
from trackmytime.model.project import Project
from trackmytime.model.tag import Tag
from trackmytime.time import datetime_to_display_local_datetime_str
from trackmytime.view.util import format_tag, project_name
from trackmytime.view.views.header import header


def tags_report(tags: list[Tag], entries: list[Entry]) -> None:
    header("tags")

    tags_table = Table(box=box.SIMPLE)
    tags_table.add_column("id")
    tags_table.add_column("name")
    tags_table.add_column("color")
    tags_table.add_column("entries", justify="right")

    for tag in tags:
        count = len([e for e in entries if tag["id"] in e["tag_ids"]])
        tags_table.add_row(
            short_id(tag["id"] or ""),
            format_tag(tag),
            tag["color"] or "",
            str(count),
        )

    console = Console()
    console.print(tags_table)


def tag_report(tag: Tag, entries: list[Entry], projects: list[Project]) -> None:
    header(f"tag: {escape(tag['name'])}")

    projects_by_id = {p["id"]: p for p in projects if p["id"] is not None}

    entries_table = Table(box=box.SIMPLE, title="entries with tag")
    entries_table.add_column("id")
    entries_table.add_column("project")
    entries_table.add_column("notes")
    entries_table.add_column("start")
    for entry in entries:
        entries_table.add_row(
            short_id(entry["id"] or ""),
            project_name(entry["project_id"], projects_by_id),
            escape(entry["notes"]),
            datetime_to_display_local_datetime_str(entry["start"]),
        )

    console = Console()
    console.print(entries_table)
