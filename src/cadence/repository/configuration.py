# SPDX-License-Identifier: MIT

import logging
from copy import deepcopy
from typing import Any, Optional

from yaml import YAMLError, dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from cadence import configuration
from cadence.model.time_window import HourRange
from cadence.model.view import CalendarView
from cadence.service.time_window import parse_hour_range, parse_working_hours
from cadence.template.configuration import get_configuration_template
from cadence.time import parse_timezone


def _parse_default_view(value: Any) -> str:
    try:
        return CalendarView(value).value
    except ValueError:
        raise ValueError(
            f"default_view must be one of {', '.join(CalendarView)}, got {value!r}"
        )


def _parse_hour_height(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"hour_height must be an integer, got {value!r}")
    if value <= 0:
        raise ValueError(f"hour_height must be positive, got {value}")
    return value


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
            try:
                loaded = load(configuration.APP_CONFIG_PATH.read_text(), Loader=Loader)
            except YAMLError as e:
                raise ValueError(f"{configuration.APP_CONFIG_PATH} is not valid YAML") from e
        if loaded is None:
            loaded = {}
        if not isinstance(loaded, dict):
            raise ValueError(f"{configuration.APP_CONFIG_PATH} must contain a mapping")

        # Fill settings missing from older or hand-written files
        config = get_configuration_template()
        config.update(loaded)  # type: ignore[typeddict-item]

        # Normalize and validate every setting
        config["working_hours"] = parse_working_hours(config["working_hours"])
        config["visible_hours"] = parse_hour_range(config["visible_hours"])
        config["default_view"] = _parse_default_view(config["default_view"])
        config["hour_height"] = _parse_hour_height(config["hour_height"])
        config["timezone"] = parse_timezone(config["timezone"])
        if not isinstance(config["show_header"], bool):
            raise ValueError(f"show_header must be true or false, got {config['show_header']!r}")
        if config["source_path"] is not None and not isinstance(config["source_path"], str):
            raise ValueError(f"source_path must be a path, got {config['source_path']!r}")
        log_level = config.get("log_level", "WARNING")
        if log_level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log_level {log_level!r}")

        self._config = config

    def __save_data(self, config: configuration.Configuration) -> None:
        configuration.CONFIG_PATH.mkdir(parents=True, exist_ok=True)
        configuration.APP_CONFIG_PATH.write_text(dump(dict(config), Dumper=Dumper))

    def flush(self) -> bool:
        if self._config is not None and self.is_dirty:
            self.__save_data(self._config)
            self.is_dirty = False
            return True
        return False

    def reset(self) -> None:
        """Drop the cached configuration so the next access reloads the file."""
        self._config = None
        self.is_dirty = False

    def get_config(self) -> configuration.Configuration:
        return deepcopy(self.config)

    def update_config(
        self,
        show_header: Optional[bool] = None,
        timezone: Optional[str] = None,
        default_view: Optional[str] = None,
        hour_height: Optional[int] = None,
        source_path: Optional[str] = None,
        remove_source_path: bool = False,
    ) -> None:
        """
        Apply several settings at once.

        Raises:
            ValueError: If any value is invalid; nothing is changed then
        """
        config = deepcopy(self.config)

        if show_header is not None:
            config["show_header"] = show_header
        if timezone is not None:
            config["timezone"] = parse_timezone(timezone)
        if default_view is not None:
            config["default_view"] = _parse_default_view(default_view)
        if hour_height is not None:
            config["hour_height"] = _parse_hour_height(hour_height)
        if source_path is not None:
            config["source_path"] = source_path
        if remove_source_path:
            config["source_path"] = None

        self._config = config
        self.is_dirty = True

    def set_visible_hours(self, hour_range: HourRange) -> None:
        self.config["visible_hours"] = parse_hour_range(hour_range)
        self.is_dirty = True

    def set_working_hours(self, weekday: int, hour_range: Optional[HourRange]) -> None:
        """Set one weekday's opening hours; None removes the entry (closed)."""
        working_hours = dict(self.config["working_hours"])
        if hour_range is None:
            working_hours.pop(weekday, None)
        else:
            working_hours.update(parse_working_hours({weekday: hour_range}))
        self.config["working_hours"] = working_hours
        self.is_dirty = True


CONFIGURATION_REPO = ConfigurationRepository()
