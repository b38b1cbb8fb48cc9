# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import pendulum
import typer

from trackmytime.repository.configuration import CONFIGURATION_REPO
from trackmytime.repository.entry import ENTRY_REPO
from trackmytime.repository.project import PROJECT_REPO
from trackmytime.repository.tag import TAG_REPO
from trackmytime.service.entry import (
    EntryValidationError,
    create_entry,
    delete_entry,
    modify_entry,
    running_entries,
    select_entries,
    start_entry,
    stop_all_entries,
    stop_entry,
)
from trackmytime.terminal.completion import complete_project, complete_tag
from trackmytime.terminal.custom_typer import AliasedTyperGroup
from trackmytime.terminal.parse import parse_datetime
from trackmytime.terminal.util import (
    abort,
    resolve_entry,
    resolve_project,
    resolve_project_optional,
    resolve_tag_optional,
    resolve_tags_optional,
)
from trackmytime.view.views import entry as entry_report

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)

DATETIME_HELP = "valid inputs: YYYY-MM-DD HH:mm, (H)H:mm, now, today, yesterday, or day offset like 1, -1"


def __show_entry(id: str, title: str) -> None:
    entry_report.single_entry_report(
        ENTRY_REPO.get_entry(id),
        PROJECT_REPO.get_all_projects(),
        TAG_REPO.get_all_tags(),
        title=title,
    )


@app.command("start, s", no_args_is_help=True)
def start(
    project: Annotated[str, typer.Argument(autocompletion=complete_project)],
    tags: Annotated[
        Optional[list[str]],
        typer.Option(
            "--tag",
            "-t",
            help="accepts multiple tag options",
            autocompletion=complete_tag,
        ),
    ] = None,
    notes: Annotated[Optional[str], typer.Option("--notes", "-n")] = None,
) -> None:
    """
    start a running entry now
    """
    try:
        new_entry = start_entry(
            resolve_project(project), resolve_tags_optional(tags), notes
        )
    except EntryValidationError as e:
        abort(str(e))

    assert new_entry["id"] is not None
    __show_entry(new_entry["id"], "started entry")


@app.command("stop, st")
def stop(
    id: Annotated[Optional[str], typer.Argument(help="entry id prefix")] = None,
    all: Annotated[
        bool, typer.Option("--all", "-a", help="stop every running entry")
    ] = False,
    end: Annotated[
        Optional[pendulum.DateTime],
        typer.Option("--end", "-e", parser=parse_datetime, help=DATETIME_HELP),
    ] = None,
) -> None:
    """
    stop a running entry, or the only running entry when no id is given
    """
    try:
        if all:
            stopped = stop_all_entries(end)
        else:
            if id is not None:
                entry_id = resolve_entry(id)
            else:
                running = running_entries(ENTRY_REPO.get_all_entries())
                if len(running) == 0:
                    abort("No running entry.")
                if len(running) > 1:
                    abort("Several entries are running, pass an id or --all.")
                entry_id = running[0]["id"]  # type: ignore[assignment]
            stopped = [stop_entry(entry_id, end)]
    except EntryValidationError as e:
        abort(str(e))

    entry_report.entries_report(
        "stopped entries",
        stopped,
        PROJECT_REPO.get_all_projects(),
        TAG_REPO.get_all_tags(),
    )


@app.command("add, a", no_args_is_help=True)
def add(
    project: Annotated[str, typer.Argument(autocompletion=complete_project)],
    start: Annotated[
        Optional[pendulum.DateTime],
        typer.Option("--start", "-s", parser=parse_datetime, help=DATETIME_HELP),
    ] = None,
    end: Annotated[
        Optional[pendulum.DateTime],
        typer.Option("--end", "-e", parser=parse_datetime, help=DATETIME_HELP),
    ] = None,
    tags: Annotated[
        Optional[list[str]],
        typer.Option(
            "--tag",
            "-t",
            help="accepts multiple tag options",
            autocompletion=complete_tag,
        ),
    ] = None,
    notes: Annotated[Optional[str], typer.Option("--notes", "-n")] = None,
) -> None:
    """
    add an entry; without --end it keeps running
    """
    try:
        new_entry = create_entry(
            resolve_project(project),
            resolve_tags_optional(tags),
            notes,
            start=start,
            end=end,
        )
    except EntryValidationError as e:
        abort(str(e))

    assert new_entry["id"] is not None
    __show_entry(new_entry["id"], "added entry")


@app.command("modify, m", no_args_is_help=True)
def modify(
    id: Annotated[str, typer.Argument(help="entry id prefix")],
    project: Annotated[
        Optional[str],
        typer.Option("--project", "-p", autocompletion=complete_project),
    ] = None,
    tags: Annotated[
        Optional[list[str]],
        typer.Option(
            "--tag",
            "-t",
            help="replaces the tags; accepts multiple tag options",
            autocompletion=complete_tag,
        ),
    ] = None,
    remove_tags: Annotated[
        bool, typer.Option("--remove-tags", "-rt", help="remove every tag")
    ] = False,
    notes: Annotated[Optional[str], typer.Option("--notes", "-n")] = None,
    start: Annotated[
        Optional[pendulum.DateTime],
        typer.Option("--start", "-s", parser=parse_datetime, help=DATETIME_HELP),
    ] = None,
    end: Annotated[
        Optional[pendulum.DateTime],
        typer.Option("--end", "-e", parser=parse_datetime, help=DATETIME_HELP),
    ] = None,
    remove_end: Annotated[
        bool, typer.Option("--remove-end", "-re", help="make the entry running again")
    ] = False,
) -> None:
    """
    modify an entry
    """
    entry_id = resolve_entry(id)
    tag_ids = [] if remove_tags else resolve_tags_optional(tags)
    try:
        modify_entry(
            entry_id,
            project_id=resolve_project_optional(project),
            tag_ids=tag_ids,
            notes=notes,
            start=start,
            end=end,
            remove_end=remove_end,
        )
    except EntryValidationError as e:
        abort(str(e))

    __show_entry(entry_id, "modified entry")


@app.command("delete, d", no_args_is_help=True)
def delete(id: Annotated[str, typer.Argument(help="entry id prefix")]) -> None:
    """
    delete an entry
    """
    entry_id = resolve_entry(id)
    delete_entry(entry_id)
    typer.echo(f"deleted entry {entry_id}")


@app.command("list, ls")
def list_entries(
    project: Annotated[
        Optional[str],
        typer.Option("--project", "-p", autocompletion=complete_project),
    ] = None,
    tag: Annotated[
        Optional[str],
        typer.Option("--tag", "-t", autocompletion=complete_tag),
    ] = None,
    oldest_first: Annotated[
        Optional[bool],
        typer.Option("--oldest-first/--newest-first", help="overrides the configured order"),
    ] = None,
) -> None:
    """
    list entries, optionally filtered by project and tag
    """
    newest_first = (
        CONFIGURATION_REPO.get_config()["newest_first"]
        if oldest_first is None
        else not oldest_first
    )
    entries = select_entries(
        ENTRY_REPO.get_all_entries(),
        project_id=resolve_project_optional(project),
        tag_id=resolve_tag_optional(tag),
        newest_first=newest_first,
    )
    entry_report.entries_report(
        "entries", entries, PROJECT_REPO.get_all_projects(), TAG_REPO.get_all_tags()
    )


@app.command("running, r")
def running() -> None:
    """
    list running entries
    """
    entry_report.running_entries_report(
        running_entries(ENTRY_REPO.get_all_entries()),
        PROJECT_REPO.get_all_projects(),
        TAG_REPO.get_all_tags(),
    )
