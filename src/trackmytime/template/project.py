# SPDX-License-Identifier: MIT

from trackmytime.model.entity_type import EntityType
from trackmytime.model.project import Project
from trackmytime.time import now_utc


def get_project_template() -> Project:
    now = now_utc()
    return {
        "id": None,
        "entity_type": EntityType.PROJECT,
        "name": "",
        "description": None,
        "created": now,
        "updated": now,
    }
