"""
Shared pytest fixtures.

Every test gets its own config file and data directory under tmp_path, empty
repository caches and a fresh live-activity manager state.
"""

from typing import Callable, Optional

import pendulum
import pytest

from trackmytime import configuration
from trackmytime.model.entity_id import EntityId, generate_entity_id
from trackmytime.model.entity_type import EntityType
from trackmytime.model.entry import Entry
from trackmytime.repository.configuration import CONFIGURATION_REPO
from trackmytime.repository.entry import ENTRY_REPO
from trackmytime.repository.project import PROJECT_REPO
from trackmytime.repository.tag import TAG_REPO
from trackmytime.service.activity import ACTIVITY_MANAGER
from trackmytime.view import state as view_state


class RecordingLiveActivity:
    """Live-activity sink that remembers every call."""

    def __init__(self) -> None:
        self.calls: list[tuple] = []

    def start(self, entry_id: EntityId, start: pendulum.DateTime) -> None:
        self.calls.append(("start", entry_id, start))

    def update(self, entry_id: EntityId, start: pendulum.DateTime) -> None:
        self.calls.append(("update", entry_id, start))

    def end(self, entry_id: EntityId) -> None:
        self.calls.append(("end", entry_id))


@pytest.fixture(autouse=True)
def isolated_storage(tmp_path, monkeypatch):
    """Point configuration and data paths at tmp_path and reset cached state."""
    data_path = tmp_path / "data"
    monkeypatch.setattr(configuration, "CONFIG_PATH", tmp_path / "config")
    monkeypatch.setattr(
        configuration, "APP_CONFIG_PATH", tmp_path / "config" / "config.yaml"
    )
    monkeypatch.setattr(configuration, "DATA_PATH", data_path)
    monkeypatch.setattr(configuration, "DATA_ENTRIES_DIR", data_path / "entries")
    monkeypatch.setattr(configuration, "DATA_PROJECTS_DIR", data_path / "projects")
    monkeypatch.setattr(configuration, "DATA_TAGS_DIR", data_path / "tags")

    for repository in (ENTRY_REPO, PROJECT_REPO, TAG_REPO):
        monkeypatch.setattr(repository, "_entities", None)
        monkeypatch.setattr(repository, "is_dirty", False)
        monkeypatch.setattr(repository, "_dirty_ids", set())
        monkeypatch.setattr(repository, "_deleted_ids", set())
    monkeypatch.setattr(CONFIGURATION_REPO, "_config", None)
    monkeypatch.setattr(CONFIGURATION_REPO, "is_dirty", False)

    monkeypatch.setattr(ACTIVITY_MANAGER, "sink", None)
    monkeypatch.setattr(ACTIVITY_MANAGER, "enabled", True)
    monkeypatch.setattr(ACTIVITY_MANAGER, "_active_ids", set())

    view_state.set_show_header(True)
    return data_path


@pytest.fixture
def recording_sink() -> RecordingLiveActivity:
    sink = RecordingLiveActivity()
    ACTIVITY_MANAGER.set_sink(sink)
    return sink


@pytest.fixture
def make_entry() -> Callable[..., Entry]:
    """Build an in-memory entry without touching any repository."""

    def factory(
        start: pendulum.DateTime,
        end: Optional[pendulum.DateTime] = None,
        project_id: Optional[EntityId] = None,
        tag_ids: Optional[list[EntityId]] = None,
        notes: str = "",
        id: Optional[EntityId] = None,
    ) -> Entry:
        return {
            "id": id if id is not None else generate_entity_id(),
            "entity_type": EntityType.ENTRY,
            "project_id": project_id,
            "tag_ids": tag_ids if tag_ids is not None else [],
            "notes": notes,
            "start": start,
            "end": end,
            "created": start,
            "updated": start,
        }

    return factory


def utc(*args: int) -> pendulum.DateTime:
    return pendulum.datetime(*args, tz="UTC")


@pytest.fixture
def at() -> Callable[..., pendulum.DateTime]:
    """Shorthand for UTC instants: at(2024, 6, 10, 12)."""
    return utc
