# SPDX-License-Identifier: MIT

import uuid
from typing import TypeAlias

EntityId: TypeAlias = str


def generate_entity_id() -> EntityId:
    return str(uuid.uuid4())


def short_id(id: EntityId) -> str:
    return id[:8]
