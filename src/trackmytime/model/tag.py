# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

import pendulum

from trackmytime.model.entity_id import EntityId


class Tag(TypedDict):
    id: Optional[EntityId]
    entity_type: str
    name: str
    color: Optional[str]  # "#RRGGBB"
    created: pendulum.DateTime
    updated: pendulum.DateTime
