# SPDX-License-Identifier: MIT

from typing import NoReturn, Optional, Sequence

import typer
from rich.console import Console
from rich.markup import escape

from trackmytime.model.entity_id import EntityId
from trackmytime.model.entry import Entry
from trackmytime.model.project import Project
from trackmytime.model.tag import Tag
from trackmytime.repository.entry import ENTRY_REPO
from trackmytime.repository.project import PROJECT_REPO
from trackmytime.repository.tag import TAG_REPO

error_console = Console(stderr=True)


def abort(message: str) -> NoReturn:
    """Print a validation message and leave with exit code 1."""
    error_console.print(f"[red]{escape(message)}[/red]")
    raise typer.Exit(code=1)


def _resolve_prefix(kind: str, reference: str, ids: Sequence[EntityId]) -> EntityId:
    matches = [id for id in ids if id.startswith(reference.lower())]
    if len(matches) == 1:
        return matches[0]
    if len(matches) > 1:
        raise typer.BadParameter(f"{kind} id prefix '{reference}' is ambiguous")
    raise typer.BadParameter(f"no {kind} matches '{reference}'")


def _resolve_named(
    kind: str, reference: str, named: Sequence[Project] | Sequence[Tag]
) -> EntityId:
    """Exact name match (case-insensitive) wins over an id prefix."""
    wanted = reference.strip().lower()
    by_name = [
        entity["id"]
        for entity in named
        if entity["id"] is not None and entity["name"].lower() == wanted
    ]
    if len(by_name) == 1:
        return by_name[0]
    if len(by_name) > 1:
        raise typer.BadParameter(
            f"several {kind}s are named '{reference}', use an id prefix"
        )
    return _resolve_prefix(
        kind, reference, [entity["id"] for entity in named if entity["id"] is not None]
    )


def resolve_project(reference: str) -> EntityId:
    return _resolve_named("project", reference, PROJECT_REPO.get_all_projects())


def resolve_project_optional(reference: Optional[str]) -> Optional[EntityId]:
    if reference is None:
        return None
    return resolve_project(reference)


def resolve_tag(reference: str) -> EntityId:
    return _resolve_named("tag", reference, TAG_REPO.get_all_tags())


def resolve_tag_optional(reference: Optional[str]) -> Optional[EntityId]:
    if reference is None:
        return None
    return resolve_tag(reference)


def resolve_tags_optional(references: Optional[list[str]]) -> Optional[list[EntityId]]:
    if references is None:
        return None
    return [resolve_tag(reference) for reference in references]


def resolve_entry(reference: str) -> EntityId:
    entries: list[Entry] = ENTRY_REPO.get_all_entries()
    return _resolve_prefix(
        "entry", reference, [entry["id"] for entry in entries if entry["id"] is not None]
    )
