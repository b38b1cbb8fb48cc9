# SPDX-License-Identifier: MIT

from enum import StrEnum


class EntityType(StrEnum):
    ENTRY = "entry"
    PROJECT = "project"
    TAG = "tag"
