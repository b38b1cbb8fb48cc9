# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

import pendulum

from trackmytime.model.entity_id import EntityId


class Project(TypedDict):
    id: Optional[EntityId]
    entity_type: str
    name: str
    description: Optional[str]
    created: pendulum.DateTime
    updated: pendulum.DateTime
