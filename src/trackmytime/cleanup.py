# SPDX-License-Identifier: MIT

import atexit

from trackmytime.repository.configuration import CONFIGURATION_REPO
from trackmytime.repository.entry import ENTRY_REPO
from trackmytime.repository.project import PROJECT_REPO
from trackmytime.repository.tag import TAG_REPO


def flush_all() -> None:
    CONFIGURATION_REPO.flush()

    # Flush entity repositories
    ENTRY_REPO.flush()
    PROJECT_REPO.flush()
    TAG_REPO.flush()


def register_cleanup() -> None:
    atexit.register(flush_all)
