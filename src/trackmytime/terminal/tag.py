# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer

from trackmytime.repository.entry import ENTRY_REPO
from trackmytime.repository.project import PROJECT_REPO
from trackmytime.repository.tag import TAG_REPO
from trackmytime.service.tag import (
    TagValidationError,
    create_tag,
    delete_tag,
    modify_tag,
    tag_entries,
)
from trackmytime.terminal.completion import complete_tag
from trackmytime.terminal.custom_typer import AliasedTyperGroup
from trackmytime.terminal.util import abort, resolve_tag
from trackmytime.view.views import tag as tag_report

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("add, a", no_args_is_help=True)
def add(
    name: str,
    color: Annotated[
        Optional[str], typer.Option("--color", "-col", help="hex color like #FF3B30")
    ] = None,
) -> None:
    """
    add a tag
    """
    try:
        tag = create_tag(name, color)
    except TagValidationError as e:
        abort(str(e))

    typer.echo(f"added tag {tag['name']} ({tag['id']})")


@app.command("modify, m", no_args_is_help=True)
def modify(
    tag: Annotated[str, typer.Argument(autocompletion=complete_tag)],
    name: Annotated[Optional[str], typer.Option("--name", "-n")] = None,
    color: Annotated[Optional[str], typer.Option("--color", "-col")] = None,
    remove_color: Annotated[bool, typer.Option("--remove-color", "-rc")] = False,
) -> None:
    """
    rename a tag or change its color
    """
    try:
        modified = modify_tag(resolve_tag(tag), name, color, remove_color)
    except TagValidationError as e:
        abort(str(e))

    typer.echo(f"modified tag {modified['name']} ({modified['id']})")


@app.command("list, ls")
def list_tags() -> None:
    """
    list tags
    """
    tag_report.tags_report(TAG_REPO.get_all_tags(), ENTRY_REPO.get_all_entries())


@app.command("show, sh", no_args_is_help=True)
def show(tag: Annotated[str, typer.Argument(autocompletion=complete_tag)]) -> None:
    """
    show the entries carrying a tag
    """
    tag_id = resolve_tag(tag)
    tag_report.tag_report(
        TAG_REPO.get_tag(tag_id), tag_entries(tag_id), PROJECT_REPO.get_all_projects()
    )


@app.command("delete, d", no_args_is_help=True)
def delete(tag: Annotated[str, typer.Argument(autocompletion=complete_tag)]) -> None:
    """
    delete a tag and remove it from all entries
    """
    tag_id = resolve_tag(tag)
    name = TAG_REPO.get_tag(tag_id)["name"]
    count = delete_tag(tag_id)
    typer.echo(f"deleted tag {name} from {count} entries")
