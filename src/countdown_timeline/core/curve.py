# CountdownTimeline
# Copyright © 2025 Osvaldo J. Vega Rodríguez
# Licensed under CC BY-NC-SA 4.0 International
# http://creativecommons.org/licenses/by-nc-sa/4.0/

"""Countdown curve construction and sampling.

The curve maps a date to the seconds left on the countdown. Between events the
value drains one second per second (unless the next event is frozen); each
event adds its ``time_delta``. Values are floored at zero and a synthetic point
is inserted wherever the drain would cross zero, so the polyline can be plotted
directly.
"""

from __future__ import annotations

import logging
import time as _time
from bisect import bisect_right
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from datetime import datetime

from .models import CurvePoint, Event

__all__ = ["CurveExtent", "build_curve", "curve_extent", "curve_time_at"]

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class CurveExtent:
    date_min: float
    date_max: float
    time_min: float
    time_max: float

    @property
    def dates(self) -> tuple[float, float]:
        return self.date_min, self.date_max

    @property
    def times(self) -> tuple[float, float]:
        return self.time_min, self.time_max


def _as_timestamp(value: float | datetime | None) -> float:
    if value is None:
        return _time.time()
    if isinstance(value, datetime):
        return value.timestamp()
    return float(value)


def _steps(events: Sequence[Event], now: float) -> Iterator[tuple[float, float, bool]]:
    for event in events:
        yield event.timestamp, float(event.time_delta), bool(event.frozen)
    # "now" sentinel so the curve reaches the present
    yield max(now, events[-1].timestamp), 0.0, False


def build_curve(
    events: Sequence[Event], now: float | datetime | None = None
) -> list[CurvePoint]:
    """Return the countdown polyline for chronologically ordered ``events``."""

    if not events:
        return []

    points: list[CurvePoint] = []
    last: CurvePoint | None = None
    for date, delta, frozen in _steps(events, _as_timestamp(now)):
        if last is None:
            last_time = 0.0
        elif frozen:
            last_time = last.time
        else:
            last_time = last.time - (date - last.date)

        if last_time < 0:
            if last is not None and last.time > 0:
                # decay has slope -1, so it meets zero after last.time seconds
                points.append(CurvePoint(date=last.date + last.time, time=0.0))
            last_time = 0.0

        points.append(CurvePoint(date=date, time=last_time))
        last = CurvePoint(date=date, time=max(last_time + delta, 0.0))
        points.append(last)

    log.debug("Built countdown curve: %d events -> %d points", len(events), len(points))
    return points


def curve_time_at(curve: Sequence[CurvePoint], date: float) -> float | None:
    """Interpolate the curve at ``date``; ``None`` outside the curve's range."""

    if len(curve) < 2:
        return None
    dates = [point.date for point in curve]
    idx = bisect_right(dates, date)
    if idx <= 0 or idx >= len(curve):
        return None

    left, right = curve[idx - 1], curve[idx]
    span = right.date - left.date
    if span <= 0:
        return left.time
    u = (date - left.date) / span
    return (1.0 - u) * left.time + u * right.time


def curve_extent(curve: Sequence[CurvePoint]) -> CurveExtent | None:
    """Bounding box of the curve; the time axis always includes zero."""

    if not curve:
        return None
    dates = [point.date for point in curve]
    times = [point.time for point in curve]
    return CurveExtent(
        date_min=min(dates),
        date_max=max(dates),
        time_min=min(0.0, min(times)),
        time_max=max(times),
    )
