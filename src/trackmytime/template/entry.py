# SPDX-License-Identifier: MIT

from trackmytime.model.entity_type import EntityType
from trackmytime.model.entry import Entry
from trackmytime.time import now_utc


def get_entry_template() -> Entry:
    now = now_utc()
    return {
        "id": None,
        "entity_type": EntityType.ENTRY,
        "project_id": None,
        "tag_ids": [],
        "notes": "",
        "start": now,
        "end": None,
        "created": now,
        "updated": now,
    }
