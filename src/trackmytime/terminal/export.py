# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer

from trackmytime.repository.entry import ENTRY_REPO
from trackmytime.repository.project import PROJECT_REPO
from trackmytime.repository.tag import TAG_REPO
from trackmytime.service.entry import select_entries
from trackmytime.service.export import entries_to_csv
from trackmytime.terminal.completion import complete_project, complete_tag
from trackmytime.terminal.util import resolve_project_optional, resolve_tag_optional


def export(
    project: Annotated[
        Optional[str],
        typer.Option("--project", "-p", autocompletion=complete_project),
    ] = None,
    tag: Annotated[
        Optional[str],
        typer.Option("--tag", "-t", autocompletion=complete_tag),
    ] = None,
) -> None:
    """
    write entries as CSV to stdout, oldest first
    """
    entries = select_entries(
        ENTRY_REPO.get_all_entries(),
        project_id=resolve_project_optional(project),
        tag_id=resolve_tag_optional(tag),
        newest_first=False,
    )
    typer.echo(
        entries_to_csv(
            entries, PROJECT_REPO.get_all_projects(), TAG_REPO.get_all_tags()
        ),
        nl=False,
    )
