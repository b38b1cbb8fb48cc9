# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

import pendulum

from trackmytime.model.entity_id import EntityId


class Entry(TypedDict):
    id: Optional[EntityId]
    entity_type: str  # "entry"
    project_id: Optional[EntityId]  # None when unassigned
    tag_ids: list[EntityId]
    notes: str
    start: pendulum.DateTime
    end: Optional[pendulum.DateTime]  # None while running
    created: pendulum.DateTime
    updated: pendulum.DateTime
