# SPDX-License-Identifier: MIT

from abc import ABC, abstractmethod
from typing import Optional

from trackmytime.model.entity_id import EntityId
from trackmytime.model.entry import Entry


def generate_entry_filter(
    project_id: Optional[EntityId] = None,
    tag_id: Optional[EntityId] = None,
    running_only: bool = False,
) -> "Predicate":
    """Combine the selected criteria into a single predicate. No criteria keeps everything."""
    filter_obj = And()
    if project_id is not None:
        filter_obj.add_predicate(ProjectPredicate(project_id))
    if tag_id is not None:
        filter_obj.add_predicate(TagPredicate(tag_id))
    if running_only:
        filter_obj.add_predicate(RunningPredicate())
    return filter_obj


class Predicate(ABC):
    @abstractmethod
    def include(self, entry: Entry) -> bool: ...

    def filter(self, entries: list[Entry]) -> list[Entry]:
        return [entry for entry in entries if self.include(entry)]


class And(Predicate):
    def __init__(self) -> None:
        self.predicates: list[Predicate] = []

    def add_predicate(self, predicate: Predicate) -> None:
        self.predicates.append(predicate)

    def include(self, entry: Entry) -> bool:
        return all(predicate.include(entry) for predicate in self.predicates)


class ProjectPredicate(Predicate):
    def __init__(self, project_id: EntityId) -> None:
        self.project_id = project_id

    def include(self, entry: Entry) -> bool:
        return entry.get("project_id") == self.project_id


class TagPredicate(Predicate):
    def __init__(self, tag_id: EntityId) -> None:
        self.tag_id = tag_id

    def include(self, entry: Entry) -> bool:
        tag_ids = entry.get("tag_ids")
        return tag_ids is not None and self.tag_id in tag_ids


class RunningPredicate(Predicate):
    def include(self, entry: Entry) -> bool:
        return entry["end"] is None
