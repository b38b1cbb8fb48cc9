# SPDX-License-Identifier: MIT

from trackmytime.model.entity_type import EntityType
from trackmytime.model.tag import Tag
from trackmytime.time import now_utc


def get_tag_template() -> Tag:
    now = now_utc()
    return {
        "id": None,
        "entity_type": EntityType.TAG,
        "name": "",
        "color": None,
        "created": now,
        "updated": now,
    }
