# SPDX-License-Identifier: MIT

import logging

from trackmytime import configuration
from trackmytime.logging_config import configure_logging
from trackmytime.repository.configuration import CONFIGURATION_REPO
from trackmytime.view import state as view_state

logger = logging.getLogger(__name__)


def initialize() -> None:
    configuration.CONFIG_PATH.mkdir(parents=True, exist_ok=True)
    configuration.load_data_path_configuration()
    configuration.DATA_PATH.mkdir(parents=True, exist_ok=True)

    __ensure_config_file()
    __ensure_data_dirs()

    config = CONFIGURATION_REPO.get_config()
    configure_logging(config["log_level"])
    view_state.set_show_header(config["show_header"])
    logger.debug("data path: %s", configuration.DATA_PATH)


def __ensure_config_file() -> None:
    if not configuration.APP_CONFIG_PATH.is_file():
        # Writing the defaults once leaves an editable file behind
        CONFIGURATION_REPO.update_config()
        CONFIGURATION_REPO.flush()


def __ensure_data_dirs() -> None:
    for data_dir in (
        configuration.DATA_ENTRIES_DIR,
        configuration.DATA_PROJECTS_DIR,
        configuration.DATA_TAGS_DIR,
    ):
        if not data_dir.is_dir():
            data_dir.mkdir(parents=True, exist_ok=True)
            (data_dir / ".gitkeep").touch()
