# CountdownTimeline
# Copyright © 2025 Osvaldo J. Vega Rodríguez
# Licensed under CC BY-NC-SA 4.0 International
# http://creativecommons.org/licenses/by-nc-sa/4.0/

"""Recomputation cycle tying curve, clusters, viewport and hover together.

:class:`CountdownTimeline` is what a host widget talks to: it forwards gesture
callbacks to the viewport and produces a :class:`TimelineFrame` with everything
the renderer needs for one paint.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime

from countdown_timeline.config import DEFAULT_CONFIG, TimelineConfig

from .annotations import Annotation, layout_annotations
from .curve import CurveExtent, build_curve, curve_extent
from .events.cluster import cluster_visible
from .events.partition import Partitioner, natural_breaks
from .hover import HoverLocator, HoverPoint, HoverResult
from .interactions import BrushGesture, PointerMove, WheelGesture
from .models import Cluster, CurvePoint, Event
from .status import hover_summary
from .viewport import LinearScale, ViewportController, ViewportMapping, ViewportState, time_scale

__all__ = ["TimelineFrame", "CountdownTimeline"]

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class TimelineFrame:
    curve: tuple[CurvePoint, ...]
    clusters: tuple[Cluster, ...]
    annotations: tuple[Annotation, ...]
    hover: HoverPoint | None
    hovered_cluster: int | None
    status: str | None
    state: ViewportState
    mapping: ViewportMapping
    overview: LinearScale
    x_scale: LinearScale
    visible_range: tuple[float, float]
    tick_count: int
    time_tick_count: int
    plot_width: float
    plot_height: float

    @property
    def empty(self) -> bool:
        return not self.curve


class CountdownTimeline:
    """Stateful chart model for one event log."""

    def __init__(
        self,
        events: Sequence[Event],
        *,
        height: float,
        width: float,
        config: TimelineConfig = DEFAULT_CONFIG,
        partitioner: Partitioner = natural_breaks,
        now: float | datetime | None = None,
    ) -> None:
        self._config = config
        self._partitioner = partitioner
        margin = config.margin
        self.plot_height = max(float(height) - margin.top - margin.bottom, 1.0)
        self.plot_width = max(float(width) - config.brush_width - margin.left - margin.right, 1.0)
        self._locator = HoverLocator(config)
        self._pointer: PointerMove | None = None
        self._cluster_cache: tuple[ViewportState, tuple[Cluster, ...]] | None = None

        self._events: tuple[Event, ...] = ()
        self._curve: tuple[CurvePoint, ...] = ()
        self._extent: CurveExtent | None = None
        self.viewport = ViewportController((0.0, 0.0), self.plot_height, config=config)
        self.set_events(events, now=now)

    # ------------------------------------------------------------------ data
    @property
    def events(self) -> tuple[Event, ...]:
        return self._events

    @property
    def curve(self) -> tuple[CurvePoint, ...]:
        return self._curve

    def set_events(self, events: Sequence[Event], *, now: float | datetime | None = None) -> None:
        self._events = tuple(events)
        self._curve = tuple(build_curve(self._events, now=now))
        self._extent = curve_extent(self._curve)
        self.viewport.set_extent(self._extent.dates if self._extent else (0.0, 0.0))
        self._cluster_cache = None
        log.info("Timeline loaded: %d events, %d curve points", len(self._events), len(self._curve))

    # -------------------------------------------------------------- gestures
    def apply_brush(self, gesture: BrushGesture) -> ViewportState:
        return self.viewport.apply_brush(gesture)

    def apply_wheel(self, gesture: WheelGesture) -> ViewportState:
        return self.viewport.apply_wheel(gesture)

    def move_pointer(self, pointer: PointerMove | None) -> None:
        self._pointer = pointer

    # ---------------------------------------------------------- computations
    def clusters(self) -> tuple[Cluster, ...]:
        state = self.viewport.state
        if self._cluster_cache is not None and self._cluster_cache[0] == state:
            return self._cluster_cache[1]
        clusters = tuple(
            cluster_visible(
                self._events,
                self.viewport.visible_range(),
                state.zoom_factor,
                config=self._config,
                partitioner=self._partitioner,
            )
        )
        self._cluster_cache = (state, clusters)
        return clusters

    def hover(self, x_scale: LinearScale | None = None) -> HoverResult:
        if self._pointer is None:
            return HoverResult()
        x_scale = x_scale or time_scale(self._extent, self.plot_width)
        return self._locator.locate(
            self._pointer, self._curve, self.clusters(), self.viewport.mapping, x_scale
        )

    def frame(self, *, details: bool = True) -> TimelineFrame:
        """Snapshot everything the renderer needs for the current state."""

        mapping = self.viewport.mapping
        x_scale = time_scale(self._extent, self.plot_width)
        clusters = self.clusters()
        result = self.hover(x_scale)
        annotations = layout_annotations(
            clusters,
            self._curve,
            mapping,
            x_scale,
            width=self.plot_width,
            hovered=result.cluster_index,
            config=self._config,
        )
        status = None
        if result.point is not None and self._events:
            status = hover_summary(result.point, self._events[0].timestamp, details=details)

        return TimelineFrame(
            curve=self._curve,
            clusters=clusters,
            annotations=tuple(annotations),
            hover=result.point,
            hovered_cluster=result.cluster_index,
            status=status,
            state=self.viewport.state,
            mapping=mapping,
            overview=self.viewport.overview_scale,
            x_scale=x_scale,
            visible_range=mapping.visible_range(),
            tick_count=self.viewport.tick_count(),
            time_tick_count=self._config.time_ticks,
            plot_width=self.plot_width,
            plot_height=self.plot_height,
        )
