import itertools

import pendulum
import pytest

from cadence.service.layout import (
    assign_columns,
    current_time_indicator,
    event_block_layout,
    events_overlap,
    group_overlapping_events,
    is_banner_event,
    layout_day,
)
from cadence.template.time_window import get_visible_hours_template

VISIBLE = get_visible_hours_template()


def _ids(groups):
    return [[event["id"] for event in group] for group in groups]


def test_overlapping_events_share_a_cluster(make_event):
    events = [
        make_event("a", "2026-07-15T09:00:00", "2026-07-15T10:00:00"),
        make_event("b", "2026-07-15T09:30:00", "2026-07-15T10:30:00"),
        make_event("c", "2026-07-15T11:00:00", "2026-07-15T12:00:00"),
    ]

    assert _ids(group_overlapping_events(events)) == [["a", "b"], ["c"]]


def test_clusters_come_back_sorted(make_event):
    events = [
        make_event("c", "2026-07-15T11:00:00", "2026-07-15T12:00:00"),
        make_event("b", "2026-07-15T09:30:00", "2026-07-15T10:30:00"),
        make_event("a", "2026-07-15T09:00:00", "2026-07-15T10:00:00"),
    ]

    assert _ids(group_overlapping_events(events)) == [["a", "b"], ["c"]]


def test_touching_events_do_not_overlap(make_event):
    a = make_event("a", "2026-07-15T09:00:00", "2026-07-15T10:00:00")
    b = make_event("b", "2026-07-15T10:00:00", "2026-07-15T11:00:00")

    assert not events_overlap(a, b)
    assert _ids(group_overlapping_events([a, b])) == [["a"], ["b"]]


def test_chained_overlaps_form_one_cluster(make_event):
    events = [
        make_event("a", "2026-07-15T09:00:00", "2026-07-15T10:00:00"),
        make_event("b", "2026-07-15T09:30:00", "2026-07-15T11:00:00"),
        make_event("c", "2026-07-15T10:30:00", "2026-07-15T12:00:00"),
    ]

    assert _ids(group_overlapping_events(events)) == [["a", "b", "c"]]


def test_no_events_no_clusters():
    assert group_overlapping_events([]) == []


def test_overlap_is_symmetric_and_clusters_partition(make_event):
    events = [
        make_event("a", "2026-07-15T08:00:00", "2026-07-15T09:15:00"),
        make_event("b", "2026-07-15T09:00:00", "2026-07-15T09:30:00"),
        make_event("c", "2026-07-15T09:30:00", "2026-07-15T10:00:00"),
        make_event("d", "2026-07-15T13:00:00", "2026-07-15T13:00:00"),
        make_event("e", "2026-07-15T12:00:00", "2026-07-15T14:00:00"),
        make_event("f", "2026-07-15T15:00:00", "2026-07-15T16:00:00"),
    ]

    for a, b in itertools.permutations(events, 2):
        assert events_overlap(a, b) == events_overlap(b, a)

    groups = group_overlapping_events(events)
    assert sorted(event["id"] for group in groups for event in group) == [
        "a",
        "b",
        "c",
        "d",
        "e",
        "f",
    ]
    for first, second in itertools.combinations(groups, 2):
        assert not any(events_overlap(a, b) for a in first for b in second)


@pytest.mark.parametrize(
    "start, end, expected",
    [
        ("2026-07-15T09:00:00", "2026-07-15T21:30:00", True),
        ("2026-07-15T09:00:00", "2026-07-15T20:00:00", False),
        ("2026-07-15T09:00:00", "2026-07-15T21:00:00", False),
        ("2026-07-15T23:00:00", "2026-07-16T01:00:00", True),
        ("2026-07-15T00:00:00", "2026-07-15T23:59:00", True),
    ],
)
def test_banner_classification(make_event, start, end, expected):
    assert is_banner_event(make_event("e", start, end)) is expected


def test_block_position_within_window(make_event):
    layout = event_block_layout(
        make_event("e", "2026-07-15T09:00:00", "2026-07-15T10:00:00"), VISIBLE
    )

    assert layout == {"event_id": "e", "top": 60.0, "height": 60.0, "clipped": False}


def test_block_scales_with_hour_height(make_event):
    layout = event_block_layout(
        make_event("e", "2026-07-15T09:00:00", "2026-07-15T10:00:00"), VISIBLE, 120
    )

    assert layout["top"] == 120.0
    assert layout["height"] == 120.0


def test_short_block_gets_minimum_height(make_event):
    layout = event_block_layout(
        make_event("e", "2026-07-15T09:30:00", "2026-07-15T09:40:00"), VISIBLE
    )

    assert layout["top"] == 90.0
    assert layout["height"] == 30.0


def test_block_starting_before_window_is_clipped_to_the_top(make_event):
    layout = event_block_layout(
        make_event("e", "2026-07-15T07:00:00", "2026-07-15T09:00:00"), VISIBLE
    )

    assert layout["top"] == 0.0
    assert layout["height"] == 60.0
    assert layout["clipped"]


def test_block_ending_after_window_is_cut_at_the_bottom(make_event):
    layout = event_block_layout(
        make_event("e", "2026-07-15T18:00:00", "2026-07-15T23:00:00"), VISIBLE
    )

    assert layout["top"] == 600.0
    assert layout["height"] == 120.0
    assert layout["clipped"]


def test_block_after_window_stays_inside_grid(make_event):
    layout = event_block_layout(
        make_event("e", "2026-07-15T21:00:00", "2026-07-15T22:00:00"), VISIBLE
    )

    assert layout["top"] == 690.0
    assert layout["top"] + layout["height"] == 720.0


def test_block_in_empty_window_has_no_size(make_event):
    layout = event_block_layout(
        make_event("e", "2026-07-15T09:00:00", "2026-07-15T10:00:00"),
        {"from": 10, "to": 5},
    )

    assert layout["top"] == 0.0
    assert layout["height"] == 0.0


def test_block_on_a_later_column_day(make_event):
    event = make_event("e", "2026-07-14T22:00:00", "2026-07-15T10:00:00")

    layout = event_block_layout(event, VISIBLE, day=pendulum.date(2026, 7, 15))

    assert layout["top"] == 0.0
    assert layout["height"] == 120.0


def test_block_layout_is_deterministic(make_event):
    event = make_event("e", "2026-07-15T09:10:00", "2026-07-15T11:50:00")

    assert event_block_layout(event, VISIBLE) == event_block_layout(event, VISIBLE)


def test_assign_columns_reuses_freed_columns(make_event):
    group = [
        make_event("a", "2026-07-15T09:00:00", "2026-07-15T10:00:00"),
        make_event("b", "2026-07-15T09:30:00", "2026-07-15T10:30:00"),
        make_event("c", "2026-07-15T10:00:00", "2026-07-15T11:00:00"),
    ]

    assert assign_columns(group) == ([0, 1, 0], 2)


def test_assign_columns_single_event(make_event):
    assert assign_columns([make_event("a")]) == ([0], 1)


@pytest.mark.parametrize(
    "now, expected",
    [
        (pendulum.datetime(2026, 7, 15, 10, 30, tz="UTC"), 150.0),
        (pendulum.datetime(2026, 7, 15, 8, 0, tz="UTC"), 0.0),
        (pendulum.datetime(2026, 7, 15, 19, 30, tz="UTC"), 690.0),
        (pendulum.datetime(2026, 7, 15, 7, 59, tz="UTC"), None),
        (pendulum.datetime(2026, 7, 15, 20, 0, tz="UTC"), None),
        (pendulum.datetime(2026, 7, 16, 10, 30, tz="UTC"), None),
    ],
)
def test_current_time_indicator(now, expected):
    assert current_time_indicator(now, pendulum.date(2026, 7, 15), VISIBLE) == expected


def test_layout_day(make_event):
    events = [
        make_event("a", "2026-07-15T09:00:00", "2026-07-15T10:00:00"),
        make_event("b", "2026-07-15T09:30:00", "2026-07-15T10:30:00"),
        make_event("c", "2026-07-15T11:00:00", "2026-07-15T12:00:00"),
        make_event("onsite", "2026-07-14T08:00:00", "2026-07-16T17:00:00"),
        make_event("tomorrow", "2026-07-16T09:00:00", "2026-07-16T10:00:00"),
    ]
    now = pendulum.datetime(2026, 7, 15, 10, 30, tz="UTC")

    layout = layout_day(events, pendulum.date(2026, 7, 15), VISIBLE, now=now)

    assert layout["is_today"]
    assert layout["now_top"] == 150.0
    assert [event["id"] for event in layout["banners"]] == ["onsite"]
    assert [
        [(positioned["event"]["id"], positioned["column"]) for positioned in cluster]
        for cluster in layout["clusters"]
    ] == [[("a", 0), ("b", 1)], [("c", 0)]]
    assert layout["clusters"][0][0]["column_count"] == 2
    assert layout["clusters"][1][0]["layout"]["top"] == 180.0


def test_layout_day_without_clock(make_event):
    layout = layout_day([make_event("a")], pendulum.date(2026, 7, 15), VISIBLE)

    assert not layout["is_today"]
    assert layout["now_top"] is None
