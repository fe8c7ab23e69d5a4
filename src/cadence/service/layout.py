# SPDX-License-Identifier: MIT

"""
Time-axis layout for the day and week views.

Positions are in pixels, measured from the top of the visible window. With
the default hour height of 60 one pixel equals one minute.
"""

import datetime
from typing import Optional

import pendulum

from cadence.model.event import Event
from cadence.model.layout import DayLayout, EventLayout, PositionedEvent
from cadence.model.time_window import VisibleHours
from cadence.service.time_window import visible_minutes
from cadence.template.time_window import DEFAULT_HOUR_HEIGHT
from cadence.time import same_day, to_date, wall_minutes

# Events longer than this are drawn in the banner row instead of the hour axis
BANNER_THRESHOLD_MINUTES = 12 * 60


def duration_minutes(event: Event) -> float:
    return (event["end"] - event["start"]).total_seconds() / 60


def is_banner_event(event: Event) -> bool:
    """
    Whether an event belongs in the all-day row rather than on the hour axis.

    There is no stored all-day flag: an event is a banner when its wall-clock
    span exceeds twelve hours or when it starts and ends on different days.
    """
    if not same_day(event["start"], event["end"]):
        return True
    day = event["start"]
    span = wall_minutes(event["end"], day) - wall_minutes(event["start"], day)
    return span > BANNER_THRESHOLD_MINUTES


def split_banner_events(events: list[Event]) -> tuple[list[Event], list[Event]]:
    """Split events into (banners, timed), keeping their order."""
    banners = [event for event in events if is_banner_event(event)]
    timed = [event for event in events if not is_banner_event(event)]
    return banners, timed


def minimum_block_height(hour_height: float) -> float:
    return hour_height / 2


def event_block_layout(
    event: Event,
    visible: VisibleHours,
    hour_height: float = DEFAULT_HOUR_HEIGHT,
    day: Optional[datetime.date] = None,
) -> EventLayout:
    """
    Compute the vertical position and height of an event block.

    The event is clamped to the visible window `[from:00, (to + 1):00]` of
    `day`, so blocks never start above or end below the grid. Blocks shorter
    than half an hour-row are stretched to that minimum and, near the bottom
    edge, shifted up to stay inside the grid.

    Args:
        event: The event to position
        visible: Visible hour range of the grid
        hour_height: Pixel height of one hour row
        day: Column the block is drawn in, defaults to the event's start day

    Returns:
        The block's `top` and `height` in pixels. An empty visible range
        yields a zero-size block.
    """
    window_minutes = visible_minutes(visible)
    if window_minutes == 0:
        return {"event_id": event["id"], "top": 0.0, "height": 0.0, "clipped": True}

    if day is None:
        day = event["start"]
    window_start = visible["from"] * 60
    window_end = window_start + window_minutes

    start = wall_minutes(event["start"], day)
    end = wall_minutes(event["end"], day)
    clipped = start < window_start or end > window_end

    clamped_start = min(max(start, window_start), window_end)
    clamped_end = min(max(end, window_start), window_end)

    scale = hour_height / 60
    grid_height = window_minutes * scale
    top = (clamped_start - window_start) * scale
    height = max((clamped_end - clamped_start) * scale, minimum_block_height(hour_height))
    height = min(height, grid_height)
    if top + height > grid_height:
        top = grid_height - height

    return {
        "event_id": event["id"],
        "top": float(top),
        "height": float(height),
        "clipped": clipped,
    }


def events_overlap(a: Event, b: Event) -> bool:
    """Half-open interval overlap; an event ending as the next starts does not overlap."""
    return a["start"] < b["end"] and a["end"] > b["start"]


def group_overlapping_events(events: list[Event]) -> list[list[Event]]:
    """
    Partition events into overlap clusters for side-by-side placement.

    Events are sorted by start. The current cluster keeps growing while the
    next event overlaps any event already in it; otherwise a new cluster
    starts. Clusters come back in chronological order.
    """
    if not events:
        return []

    ordered = sorted(events, key=lambda event: (event["start"], event["end"]))
    groups: list[list[Event]] = [[ordered[0]]]
    for event in ordered[1:]:
        current = groups[-1]
        if any(events_overlap(member, event) for member in current):
            current.append(event)
        else:
            groups.append([event])
    return groups


def assign_columns(group: list[Event]) -> tuple[list[int], int]:
    """
    Pack one overlap cluster into as few equal-width columns as possible.

    Each event goes into the leftmost column whose last event has ended.

    Returns:
        The column index of each event, in the cluster's order, and the
        number of columns the cluster needs
    """
    column_ends: list[pendulum.DateTime] = []
    columns: list[int] = []
    for event in group:
        for index, column_end in enumerate(column_ends):
            if column_end <= event["start"]:
                column_ends[index] = event["end"]
                columns.append(index)
                break
        else:
            column_ends.append(event["end"])
            columns.append(len(column_ends) - 1)
    return columns, max(len(column_ends), 1)


def current_time_indicator(
    now: pendulum.DateTime,
    day: datetime.date,
    visible: VisibleHours,
    hour_height: float = DEFAULT_HOUR_HEIGHT,
) -> Optional[float]:
    """
    Pixel offset of the current-time line, or None when it is not shown.

    The line only appears in today's column, and only while the current hour
    lies within the visible range.
    """
    if not same_day(now, day):
        return None
    if now.hour < visible["from"] or now.hour > visible["to"]:
        return None
    return float(((now.hour - visible["from"]) * 60 + now.minute) * hour_height / 60)


def layout_day(
    events: list[Event],
    day: datetime.date,
    visible: VisibleHours,
    hour_height: float = DEFAULT_HOUR_HEIGHT,
    now: Optional[pendulum.DateTime] = None,
) -> DayLayout:
    """
    Lay out one day column of the day or week view.

    Banner events touching the day are listed separately. Timed events
    starting on the day are clustered by overlap and packed into columns
    within their cluster.
    """
    column_day = to_date(day)
    banners, timed = split_banner_events(events)
    day_banners = [
        event
        for event in banners
        if to_date(event["start"]) <= column_day <= to_date(event["end"])
    ]
    day_timed = [event for event in timed if same_day(event["start"], column_day)]

    clusters: list[list[PositionedEvent]] = []
    for group in group_overlapping_events(day_timed):
        columns, column_count = assign_columns(group)
        clusters.append(
            [
                {
                    "event": event,
                    "layout": event_block_layout(event, visible, hour_height, column_day),
                    "column": column,
                    "column_count": column_count,
                }
                for event, column in zip(group, columns)
            ]
        )

    return {
        "date": column_day,
        "is_today": now is not None and same_day(now, column_day),
        "banners": sorted(day_banners, key=lambda event: (event["start"], event["end"])),
        "clusters": clusters,
        "now_top": (
            current_time_indicator(now, column_day, visible, hour_height)
            if now is not None
            else None
        ),
    }
