# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import NotRequired, Optional, TypedDict

import platformdirs

from cadence.model.time_window import HourRange

APP_NAME = "cadence"

CONFIG_PATH: Path = platformdirs.user_config_path(APP_NAME)
APP_CONFIG_PATH: Path = CONFIG_PATH / "config.yaml"

DATA_PATH: Path = platformdirs.user_data_path(APP_NAME)
DEFAULT_SOURCE_PATH: Path = DATA_PATH / "events.yaml"


class Configuration(TypedDict):
    show_header: bool
    timezone: str
    default_view: str
    hour_height: int
    visible_hours: HourRange
    # Weekday (0 = Sunday) to opening hours; missing weekdays are closed
    working_hours: dict[int, HourRange]
    source_path: Optional[str]
    log_level: NotRequired[str]


def set_config_path(config_path: Path) -> None:
    """Point the configuration file somewhere else (used by --config and tests)."""
    global CONFIG_PATH, APP_CONFIG_PATH

    APP_CONFIG_PATH = config_path
    CONFIG_PATH = config_path.parent


def resolve_source_path(source_path: Optional[str]) -> Path:
    if source_path is None:
        return DEFAULT_SOURCE_PATH
    return Path(source_path).expanduser()
