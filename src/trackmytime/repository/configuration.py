# SPDX-License-Identifier: MIT

import logging
from copy import deepcopy
from typing import Optional

from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from trackmytime import configuration

logger = logging.getLogger(__name__)


class ConfigurationRepository:
    def __init__(self) -> None:
        self._config: Optional[configuration.Configuration] = None
        self.is_dirty = False

    @property
    def config(self) -> configuration.Configuration:
        if self._config is None:
            self.__load_data()
        if self._config is None:
            raise ValueError()
        return self._config

    def __load_data(self) -> None:
        loaded = None
        if configuration.APP_CONFIG_PATH.is_file():
            loaded = load(configuration.APP_CONFIG_PATH.read_text(), Loader=Loader)

        # Fill keys missing from older config files with their defaults
        config = configuration.get_default_configuration()
        if loaded is not None:
            for key, value in loaded.items():
                if key in config:
                    config[key] = value  # type: ignore[literal-required]
        self._config = config

    def __save_data(self, config: configuration.Configuration) -> None:
        configuration.APP_CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        configuration.APP_CONFIG_PATH.write_text(dump(dict(config), Dumper=Dumper))
        logger.debug("wrote config to %s", configuration.APP_CONFIG_PATH)

    def flush(self) -> bool:
        if self._config is not None and self.is_dirty:
            self.__save_data(self._config)
            self.is_dirty = False
            return True
        return False

    def get_config(self) -> configuration.Configuration:
        return deepcopy(self.config)

    def update_config(
        self,
        data_path: Optional[str] = None,
        remove_data_path: bool = False,
        show_header: Optional[bool] = None,
        newest_first: Optional[bool] = None,
        chart_window: Optional[str] = None,
        live_activity: Optional[bool] = None,
        log_level: Optional[str] = None,
    ) -> None:
        config = self.config
        self.is_dirty = True

        if data_path is not None:
            config["data_path"] = data_path
        if remove_data_path:
            config["data_path"] = None
        if show_header is not None:
            config["show_header"] = show_header
        if newest_first is not None:
            config["newest_first"] = newest_first
        if chart_window is not None:
            config["chart_window"] = chart_window
        if live_activity is not None:
            config["live_activity"] = live_activity
        if log_level is not None:
            config["log_level"] = log_level


CONFIGURATION_REPO = ConfigurationRepository()
