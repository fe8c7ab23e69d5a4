# SPDX-License-Identifier: MIT

from cadence.model.time_window import HourRange, VisibleHours, WorkingHours

DEFAULT_HOUR_HEIGHT = 60


def get_working_hours_template() -> WorkingHours:
    return {
        0: {"from": 0, "to": 0},  # Sunday closed
        1: {"from": 9, "to": 18},
        2: {"from": 9, "to": 18},
        3: {"from": 9, "to": 18},
        4: {"from": 9, "to": 18},
        5: {"from": 9, "to": 18},
        6: {"from": 9, "to": 13},  # Saturday half day
    }


def get_visible_hours_template() -> VisibleHours:
    return {"from": 8, "to": 19}


def get_closed_hours_template() -> HourRange:
    return {"from": 0, "to": 0}
