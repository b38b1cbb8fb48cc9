# SPDX-License-Identifier: MIT

from typing import Optional

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from trackmytime.model.chart import ChartWindow, DayTotal
from trackmytime.model.entity_id import short_id
from trackmytime.model.entry import Entry
from trackmytime.model.project import Project
from trackmytime.service.entry import entry_elapsed_seconds
from trackmytime.time import datetime_to_display_local_datetime_str, format_duration
from trackmytime.view.views.chart import duration_chart
from trackmytime.view.views.header import header


def projects_report(projects: list[Project], entries: list[Entry]) -> None:
    header("projects")

    projects_table = Table(box=box.SIMPLE)
    projects_table.add_column("id")
    projects_table.add_column("name")
    projects_table.add_column("description")
    projects_table.add_column("entries", justify="right")
    projects_table.add_column("tracked", justify="right")

    for project in projects:
        project_entries = [e for e in entries if e["project_id"] == project["id"]]
        tracked = sum(entry_elapsed_seconds(entry) for entry in project_entries)
        projects_table.add_row(
            short_id(project["id"] or ""),
            escape(project["name"]),
            escape(project["description"] or ""),
            str(len(project_entries)),
            format_duration(tracked),
        )

    console = Console()
    console.print(projects_table)


def project_report(
    project: Project,
    entries: list[Entry],
    day_totals: Optional[list[DayTotal]] = None,
    window: ChartWindow = ChartWindow.WEEK,
) -> None:
    header(f"project: {escape(project['name'])}")

    console = Console()
    if project["description"] is not None:
        console.print(f" {escape(project['description'])}")

    if day_totals is not None:
        console.print()
        duration_chart(day_totals, window)

    entries_table = Table(box=box.SIMPLE, title="entries for project")
    entries_table.add_column("id")
    entries_table.add_column("notes")
    entries_table.add_column("start")
    entries_table.add_column("duration", justify="right")
    for entry in entries:
        entries_table.add_row(
            short_id(entry["id"] or ""),
            escape(entry["notes"]),
            datetime_to_display_local_datetime_str(entry["start"]),
            format_duration(entry_elapsed_seconds(entry)),
        )
    console.print(entries_table)
