# SPDX-License-Identifier: MIT

import logging
from typing import Iterable, Optional, Protocol

import pendulum
from rich.console import Console

from trackmytime.model.entity_id import EntityId, short_id
from trackmytime.model.entry import Entry
from trackmytime.time import datetime_to_display_local_datetime_str

logger = logging.getLogger(__name__)

RUNNING_DEEPLINK = "trackmytime://running"


class LiveActivity(Protocol):
    """Anything that can show a running entry outside of the command output."""

    def start(self, entry_id: EntityId, start: pendulum.DateTime) -> None: ...

    def update(self, entry_id: EntityId, start: pendulum.DateTime) -> None: ...

    def end(self, entry_id: EntityId) -> None: ...


class ConsoleLiveActivity:
    """Prints a one-line status whenever the running indicator changes."""

    def __init__(self, console: Optional[Console] = None) -> None:
        self.console = console if console is not None else Console(stderr=True)

    def start(self, entry_id: EntityId, start: pendulum.DateTime) -> None:
        self.console.print(
            f"[red]●[/red] running [bold]{short_id(entry_id)}[/bold] "
            f"since {datetime_to_display_local_datetime_str(start)} "
            f"[bright_black]{RUNNING_DEEPLINK}[/bright_black]"
        )

    def update(self, entry_id: EntityId, start: pendulum.DateTime) -> None:
        self.console.print(
            f"[red]●[/red] running [bold]{short_id(entry_id)}[/bold] "
            f"now since {datetime_to_display_local_datetime_str(start)}"
        )

    def end(self, entry_id: EntityId) -> None:
        self.console.print(f"[bright_black]■ stopped {short_id(entry_id)}[/bright_black]")


class ActivityManager:
    """
    Tracks which entries currently have a live activity and forwards changes
    to a sink.

    The indicator is best effort: sink failures are logged, never raised.
    """

    def __init__(self, sink: Optional[LiveActivity] = None) -> None:
        self.sink = sink
        self.enabled = True
        self._active_ids: set[EntityId] = set()

    def set_sink(self, sink: Optional[LiveActivity]) -> None:
        self.sink = sink

    def set_enabled(self, enabled: bool) -> None:
        self.enabled = enabled

    def is_active(self, entry_id: EntityId) -> bool:
        return entry_id in self._active_ids

    def adopt(self, entries: Iterable[Entry]) -> None:
        """Record running entries whose indicator was started by an earlier process."""
        for entry in entries:
            if entry["id"] is not None and entry["end"] is None:
                self._active_ids.add(entry["id"])

    def start_activity(self, entry: Entry) -> None:
        entry_id = entry["id"]
        if entry_id is None or entry["end"] is not None:
            return
        if entry_id in self._active_ids:
            return

        logger.debug("starting activity for entry %s", entry_id)
        if self.__forward("start", entry_id, entry["start"]):
            self._active_ids.add(entry_id)

    def update_activity(self, entry_id: EntityId, start: pendulum.DateTime) -> None:
        if entry_id not in self._active_ids:
            logger.warning(
                "no active activity found for entry %s when trying to update",
                entry_id,
            )
            return
        self.__forward("update", entry_id, start)

    def end_activity(self, entry_id: EntityId) -> None:
        if entry_id not in self._active_ids:
            logger.warning(
                "no active activity found for entry %s when trying to end", entry_id
            )
            return
        self.__forward("end", entry_id)
        self._active_ids.discard(entry_id)

    def __forward(
        self,
        action: str,
        entry_id: EntityId,
        start: Optional[pendulum.DateTime] = None,
    ) -> bool:
        if not self.enabled or self.sink is None:
            # Bookkeeping still happens so later updates and ends stay consistent
            return True
        try:
            if action == "start":
                assert start is not None
                self.sink.start(entry_id, start)
            elif action == "update":
                assert start is not None
                self.sink.update(entry_id, start)
            else:
                self.sink.end(entry_id)
        except Exception:
            logger.warning(
                "failed to %s live activity for entry %s",
                action,
                entry_id,
                exc_info=True,
            )
            return False
        return True


ACTIVITY_MANAGER = ActivityManager()
