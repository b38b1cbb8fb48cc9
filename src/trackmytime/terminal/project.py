# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer

from trackmytime.model.chart import ChartWindow
from trackmytime.repository.configuration import CONFIGURATION_REPO
from trackmytime.repository.entry import ENTRY_REPO
from trackmytime.repository.project import PROJECT_REPO
from trackmytime.service.chart import aggregate_durations
from trackmytime.service.entry import select_entries
from trackmytime.service.project import (
    ProjectValidationError,
    create_project,
    delete_project_and_entries,
    modify_project,
    project_entries,
    reassign_entries,
)
from trackmytime.terminal.completion import complete_project, complete_window
from trackmytime.terminal.custom_typer import AliasedTyperGroup
from trackmytime.terminal.util import abort, resolve_project
from trackmytime.time import now_utc
from trackmytime.view.views import project as project_report

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("add, a", no_args_is_help=True)
def add(
    name: str,
    description: Annotated[
        Optional[str], typer.Option("--description", "-d")
    ] = None,
) -> None:
    """
    add a project
    """
    try:
        project = create_project(name, description)
    except ProjectValidationError as e:
        abort(str(e))

    typer.echo(f"added project {project['name']} ({project['id']})")


@app.command("modify, m", no_args_is_help=True)
def modify(
    project: Annotated[str, typer.Argument(autocompletion=complete_project)],
    name: Annotated[Optional[str], typer.Option("--name", "-n")] = None,
    description: Annotated[
        Optional[str],
        typer.Option("--description", "-d", help="an empty value clears it"),
    ] = None,
) -> None:
    """
    rename a project or change its description
    """
    try:
        modified = modify_project(resolve_project(project), name, description)
    except ProjectValidationError as e:
        abort(str(e))

    typer.echo(f"modified project {modified['name']} ({modified['id']})")


@app.command("list, ls")
def list_projects() -> None:
    """
    list projects
    """
    project_report.projects_report(
        PROJECT_REPO.get_all_projects(), ENTRY_REPO.get_all_entries()
    )


@app.command("show, sh", no_args_is_help=True)
def show(
    project: Annotated[str, typer.Argument(autocompletion=complete_project)],
    window: Annotated[
        Optional[ChartWindow],
        typer.Option(
            "--window",
            "-w",
            help="chart range, defaults to the configured chart_window",
            autocompletion=complete_window,
        ),
    ] = None,
) -> None:
    """
    show a project with a per-day chart of tracked time
    """
    project_id = resolve_project(project)
    selected_window = (
        window
        if window is not None
        else ChartWindow(CONFIGURATION_REPO.get_config()["chart_window"])
    )

    entries = select_entries(ENTRY_REPO.get_all_entries(), project_id=project_id)
    day_totals = aggregate_durations(entries, selected_window, now_utc())

    project_report.project_report(
        PROJECT_REPO.get_project(project_id),
        entries,
        day_totals=day_totals,
        window=selected_window,
    )


@app.command("delete, d", no_args_is_help=True)
def delete(
    project: Annotated[str, typer.Argument(autocompletion=complete_project)],
    reassign_to: Annotated[
        Optional[str],
        typer.Option(
            "--reassign-to",
            "-r",
            help="move the project's entries to this project first",
            autocompletion=complete_project,
        ),
    ] = None,
    delete_entries: Annotated[
        bool,
        typer.Option("--delete-entries", help="delete the project's entries as well"),
    ] = False,
) -> None:
    """
    delete a project; its entries must be reassigned or deleted
    """
    project_id = resolve_project(project)
    name = PROJECT_REPO.get_project(project_id)["name"]

    if reassign_to is not None and delete_entries:
        abort("Choose either --reassign-to or --delete-entries.")

    try:
        if reassign_to is not None:
            count = reassign_entries(project_id, resolve_project(reassign_to))
            typer.echo(f"reassigned {count} entries and deleted project {name}")
        elif delete_entries or len(project_entries(project_id)) == 0:
            count = delete_project_and_entries(project_id)
            typer.echo(f"deleted project {name} and {count} entries")
        else:
            abort(
                "What should we do with entries that belong to this project? "
                "Pass --reassign-to PROJECT or --delete-entries."
            )
    except ProjectValidationError as e:
        abort(str(e))
