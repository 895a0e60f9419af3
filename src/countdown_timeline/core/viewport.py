# CountdownTimeline
# Copyright © 2025 Osvaldo J. Vega Rodríguez
# Licensed under CC BY-NC-SA 4.0 International
# http://creativecommons.org/licenses/by-nc-sa/4.0/

"""Pan/zoom state of the vertical (date) axis and its coordinate mappings.

Two scales describe the date axis:

- the *overview* scale maps the full data extent onto ``[0, height]``; the
  brush strip lives in these coordinates and so does ``pan_offset``;
- the *detail* scale maps the same extent onto ``[0, height * zoom]``; the chart
  shows the slice of it starting at ``pan_offset * zoom``.

State only changes through :meth:`ViewportController.apply_brush` and
:meth:`ViewportController.apply_wheel`.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from countdown_timeline.config import DEFAULT_CONFIG, TimelineConfig

from .curve import CurveExtent
from .interactions import BrushGesture, WheelGesture

__all__ = [
    "LinearScale",
    "ViewportState",
    "ViewportMapping",
    "ViewportController",
    "time_scale",
]

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class LinearScale:
    """Linear map ``domain -> range`` with an exact inverse.

    A zero-width domain or range degrades to the identity offset
    ``r0 + (v - d0)`` so every value stays finite.
    """

    domain: tuple[float, float]
    range: tuple[float, float]

    @property
    def degenerate(self) -> bool:
        d0, d1 = self.domain
        r0, r1 = self.range
        return d1 == d0 or r1 == r0

    def __call__(self, value: float) -> float:
        d0, d1 = self.domain
        r0, r1 = self.range
        if self.degenerate:
            return r0 + (value - d0)
        return r0 + (value - d0) * (r1 - r0) / (d1 - d0)

    def invert(self, value: float) -> float:
        d0, d1 = self.domain
        r0, r1 = self.range
        if self.degenerate:
            return d0 + (value - r0)
        return d0 + (value - r0) * (d1 - d0) / (r1 - r0)


def time_scale(extent: CurveExtent | None, width: float) -> LinearScale:
    """Horizontal scale for seconds remaining; always starts at zero."""

    if extent is None:
        return LinearScale((0.0, 0.0), (0.0, float(width)))
    lo, hi = extent.times
    return LinearScale((min(0.0, lo), hi), (0.0, float(width)))


@dataclass(frozen=True)
class ViewportState:
    pan_offset: float  # overview pixels
    zoom_factor: float


@dataclass(frozen=True)
class ViewportMapping:
    """Immutable snapshot of the date-axis mapping for one recomputation."""

    detail: LinearScale
    state: ViewportState
    height: float

    @property
    def _shift(self) -> float:
        return self.state.pan_offset * self.state.zoom_factor

    def domain_to_screen(self, value: float) -> float:
        return self.detail(value) - self._shift

    def screen_to_domain(self, y: float) -> float:
        return self.detail.invert(y + self._shift)

    def visible_range(self) -> tuple[float, float]:
        return self.screen_to_domain(0.0), self.screen_to_domain(self.height)


class ViewportController:
    """Owns pan offset and zoom factor for one mounted chart."""

    def __init__(
        self,
        extent: tuple[float, float],
        height: float,
        *,
        config: TimelineConfig = DEFAULT_CONFIG,
    ) -> None:
        if not (math.isfinite(height) and height > 0):
            raise ValueError(f"Viewport height must be positive, got {height!r}")
        self._config = config
        self._height = float(height)
        self._extent = self._normalise_extent(extent)
        zoom = config.initial_zoom if config.initial_zoom > 0 else 1.0
        self._state = ViewportState(pan_offset=0.0, zoom_factor=float(zoom))

    @classmethod
    def from_extent(
        cls,
        extent: CurveExtent | None,
        height: float,
        *,
        config: TimelineConfig = DEFAULT_CONFIG,
    ) -> ViewportController:
        dates = extent.dates if extent is not None else (0.0, 0.0)
        return cls(dates, height, config=config)

    @staticmethod
    def _normalise_extent(extent: tuple[float, float]) -> tuple[float, float]:
        lo, hi = (float(v) for v in extent)
        return (lo, hi) if lo <= hi else (hi, lo)

    # ------------------------------------------------------------------ state
    @property
    def state(self) -> ViewportState:
        return self._state

    @property
    def height(self) -> float:
        return self._height

    @property
    def extent(self) -> tuple[float, float]:
        return self._extent

    def set_extent(self, extent: tuple[float, float]) -> None:
        """Adopt a new data extent, keeping the current selection in bounds."""

        self._extent = self._normalise_extent(extent)
        self._state = ViewportState(
            pan_offset=self._clamp_pan(self._state.pan_offset, self._state.zoom_factor),
            zoom_factor=self._state.zoom_factor,
        )

    # --------------------------------------------------------------- mapping
    @property
    def overview_scale(self) -> LinearScale:
        return LinearScale(self._extent, (0.0, self._height))

    @property
    def detail_scale(self) -> LinearScale:
        return LinearScale(self._extent, (0.0, self._height * self._state.zoom_factor))

    @property
    def mapping(self) -> ViewportMapping:
        return ViewportMapping(detail=self.detail_scale, state=self._state, height=self._height)

    def domain_to_screen(self, value: float) -> float:
        return self.mapping.domain_to_screen(value)

    def screen_to_domain(self, y: float) -> float:
        return self.mapping.screen_to_domain(y)

    def visible_range(self) -> tuple[float, float]:
        return self.mapping.visible_range()

    def pan_domain(self) -> float:
        """Date at the top edge of the visible window."""

        return self.overview_scale.invert(self._state.pan_offset)

    def selection(self) -> tuple[float, float]:
        """Brush selection ``(y0, y1)`` in overview pixels."""

        y0 = self._state.pan_offset
        return y0, y0 + self._height / self._state.zoom_factor

    def tick_count(self) -> int:
        return max(int(round(self._config.base_ticks * self._state.zoom_factor)), 1)

    # ----------------------------------------------------------- transitions
    def _clamp_pan(self, pan: float, zoom: float) -> float:
        upper = max(self._height - self._height / zoom, 0.0)
        return min(max(pan, 0.0), upper)

    def apply_brush(self, gesture: BrushGesture) -> ViewportState:
        """Show exactly the brushed overview range."""

        y0, y1 = float(gesture.y0), float(gesture.y1)
        if math.isfinite(y0) and math.isfinite(y1):
            y0 = min(max(y0, 0.0), self._height)
            y1 = min(max(y1, 0.0), self._height)
        if not (math.isfinite(y0) and math.isfinite(y1)) or y1 - y0 <= 0:
            log.debug("Ignoring empty brush selection %r", gesture)
            return self._state

        zoom = self._height / (y1 - y0)
        self._state = ViewportState(pan_offset=self._clamp_pan(y0, zoom), zoom_factor=zoom)
        log.debug("Brush (%.2f, %.2f) -> %r", y0, y1, self._state)
        return self._state

    def apply_wheel(self, gesture: WheelGesture) -> ViewportState:
        """Pan by ``delta_y / zoom``, or resize the selection when zooming."""

        delta = float(gesture.delta_y)
        if delta == 0 or not math.isfinite(delta):
            return self._state

        y0, y1 = self.selection()
        span = y1 - y0
        if gesture.zooming:
            step = self._config.wheel_zoom_step * math.copysign(1.0, delta)
            return self.apply_brush(BrushGesture(y0, min(self._height, y0 + span * (1 + step))))

        zoom = self._state.zoom_factor
        self._state = ViewportState(pan_offset=self._clamp_pan(y0 + delta / zoom, zoom), zoom_factor=zoom)
        log.debug("Wheel pan %.2f -> %r", delta, self._state)
        return self._state
