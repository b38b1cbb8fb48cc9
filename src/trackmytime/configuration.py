# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Optional, TypedDict

from yaml import load

try:
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Loader  # type: ignore[assignment]
import platformdirs

APP_NAME = "trackmytime"

CONFIG_PATH = platformdirs.user_config_path(APP_NAME)
APP_CONFIG_PATH = CONFIG_PATH / "config.yaml"

# These will be set dynamically by load_data_path_configuration()
DATA_PATH: Path = platformdirs.user_data_path(APP_NAME)
DATA_ENTRIES_DIR: Path = DATA_PATH / "entries"
DATA_PROJECTS_DIR: Path = DATA_PATH / "projects"
DATA_TAGS_DIR: Path = DATA_PATH / "tags"


class Configuration(TypedDict):
    data_path: Optional[str]
    show_header: bool
    newest_first: bool
    chart_window: str
    live_activity: bool
    log_level: str


def get_default_configuration() -> Configuration:
    return {
        "data_path": None,
        "show_header": True,
        "newest_first": True,
        "chart_window": "week",
        "live_activity": True,
        "log_level": "WARNING",
    }


def set_data_path(data_path: Path) -> None:
    global DATA_PATH, DATA_ENTRIES_DIR, DATA_PROJECTS_DIR, DATA_TAGS_DIR

    DATA_PATH = data_path
    DATA_ENTRIES_DIR = DATA_PATH / "entries"
    DATA_PROJECTS_DIR = DATA_PATH / "projects"
    DATA_TAGS_DIR = DATA_PATH / "tags"


def load_data_path_configuration() -> None:
    """
    Load the configuration and set the DATA_PATH variables dynamically.

    This must be called after the config file exists and before any
    repository loads its data.
    """
    if not APP_CONFIG_PATH.is_file():
        # Config doesn't exist yet, use defaults
        return

    config: Optional[Configuration] = load(APP_CONFIG_PATH.read_text(), Loader=Loader)
    if config is None:
        return

    data_path_setting = config.get("data_path")
    if data_path_setting is not None:
        set_data_path(Path(data_path_setting))
