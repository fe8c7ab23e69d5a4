# SPDX-License-Identifier: MIT

import pendulum

from cadence.model.view import ALL_ASSIGNEES, CalendarView, ViewState


def get_view_state_template(
    reference_date: pendulum.DateTime, view: CalendarView = CalendarView.MONTH
) -> ViewState:
    return {
        "view": view,
        "reference_date": reference_date,
        "filter_assignee_id": ALL_ASSIGNEES,
    }
