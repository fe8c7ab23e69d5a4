# SPDX-License-Identifier: MIT

from cadence.configuration import Configuration
from cadence.model.view import CalendarView
from cadence.template.time_window import (
    DEFAULT_HOUR_HEIGHT,
    get_visible_hours_template,
    get_working_hours_template,
)


def get_configuration_template() -> Configuration:
    return {
        "show_header": True,
        "timezone": "local",
        "default_view": CalendarView.MONTH.value,
        "hour_height": DEFAULT_HOUR_HEIGHT,
        "visible_hours": get_visible_hours_template(),
        "working_hours": get_working_hours_template(),
        "source_path": None,
        "log_level": "WARNING",
    }
