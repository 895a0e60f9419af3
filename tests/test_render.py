from datetime import datetime, timezone

import matplotlib
import pytest

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402

from countdown_timeline.cli import _figure  # noqa: E402
from countdown_timeline.config import TimelineConfig  # noqa: E402
from countdown_timeline.core.interactions import PointerMove  # noqa: E402
from countdown_timeline.core.models import Event  # noqa: E402
from countdown_timeline.core.timeline import CountdownTimeline  # noqa: E402
from countdown_timeline.ui.plots.event_label_layer import draw_overview, draw_timeline  # noqa: E402

T0 = 1_700_000_000.0


def _timeline(events):
    return CountdownTimeline(
        events, height=440.0, width=720.0, config=TimelineConfig(initial_zoom=1.0), now=T0 + 5000
    )


def test_draw_timeline_creates_curve_labels_and_status():
    events = [
        Event(date=datetime.fromtimestamp(T0 + i * 1000, timezone.utc), timeDelta=1500, description=f"e{i}")
        for i in range(4)
    ]
    timeline = _timeline(events)
    timeline.move_pointer(PointerMove(150.0, 120.0))
    frame = timeline.frame()

    fig, (ax, strip) = plt.subplots(1, 2)
    try:
        artists = draw_timeline(ax, frame)
        overview = draw_overview(strip, frame, 100.0)
        assert len(ax.lines) == 1
        assert len(ax.texts) >= len([a for a in frame.annotations if a.expanded])
        assert len(artists) >= 1 + len(frame.annotations)
        assert len(overview) == 2
        assert ax.get_ylim() == (frame.plot_height, 0.0)
    finally:
        plt.close(fig)


def test_draw_empty_frame():
    frame = _timeline([]).frame()
    fig, ax = plt.subplots()
    try:
        assert draw_timeline(ax, frame) == []
    finally:
        plt.close(fig)


def _log(count: int = 4):
    return [
        Event(date=datetime.fromtimestamp(T0 + i * 1000, timezone.utc), timeDelta=1500, description=f"e{i}")
        for i in range(count)
    ]


def test_time_axis_ticks_follow_config():
    config = TimelineConfig(initial_zoom=1.0, time_ticks=4)
    frame = CountdownTimeline(_log(), height=440.0, width=720.0, config=config, now=T0 + 5000).frame()

    fig, ax = plt.subplots()
    try:
        draw_timeline(ax, frame)
        ticks = list(ax.get_xticks())
        assert frame.time_tick_count == 4
        assert 2 <= len(ticks) <= 5
        assert all(0.0 <= x <= frame.plot_width for x in ticks)
        assert ax.get_xticklabels()[0].get_text() == "0s"
    finally:
        plt.close(fig)


def test_time_axis_without_ticks():
    config = TimelineConfig(initial_zoom=1.0, time_ticks=0)
    frame = CountdownTimeline(_log(), height=440.0, width=720.0, config=config, now=T0 + 5000).frame()

    fig, ax = plt.subplots()
    try:
        draw_timeline(ax, frame)
        assert len(ax.get_xticks()) == 0
    finally:
        plt.close(fig)


def test_overview_strip_shares_plot_band():
    config = TimelineConfig(initial_zoom=1.0)
    frame = CountdownTimeline(_log(), height=440.0, width=720.0, config=config, now=T0 + 5000).frame()

    fig, ax, overview = _figure(frame, config, 720.0, 440.0)
    try:
        main_box, strip_box = ax.get_position(), overview.get_position()
        assert strip_box.y0 == pytest.approx(main_box.y0)
        assert strip_box.height == pytest.approx(main_box.height)
        assert main_box.height == pytest.approx(frame.plot_height / 440.0)
        assert strip_box.x1 == pytest.approx(1.0)
    finally:
        plt.close(fig)
