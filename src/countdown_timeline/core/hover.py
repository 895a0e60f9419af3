# CountdownTimeline
# Copyright © 2025 Osvaldo J. Vega Rodríguez
# Licensed under CC BY-NC-SA 4.0 International
# http://creativecommons.org/licenses/by-nc-sa/4.0/

"""Resolve a pointer position to a point on the curve and a cluster annotation."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from countdown_timeline.config import DEFAULT_CONFIG, TimelineConfig

from .curve import curve_time_at
from .interactions import PointerMove
from .models import Cluster, CurvePoint
from .viewport import LinearScale, ViewportMapping

__all__ = [
    "HoverPoint",
    "HoverResult",
    "HoverLocator",
    "cluster_anchor",
    "hit_test_clusters",
    "locate_hover",
]

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class HoverPoint:
    date: float
    time: float
    x: float  # plot-area pixels
    y: float


@dataclass(frozen=True)
class HoverResult:
    point: HoverPoint | None = None
    cluster_index: int | None = None


def locate_hover(
    pointer_y: float,
    curve: Sequence[CurvePoint],
    mapping: ViewportMapping,
    x_scale: LinearScale,
) -> HoverPoint | None:
    """Curve point under ``pointer_y``; ``None`` outside the curve's dates."""

    if not curve:
        return None
    date = mapping.screen_to_domain(pointer_y)
    value = curve_time_at(curve, date)
    if value is None:
        return None
    return HoverPoint(date=date, time=value, x=x_scale(value), y=mapping.domain_to_screen(date))


def cluster_anchor(
    cluster: Cluster,
    curve: Sequence[CurvePoint],
    mapping: ViewportMapping,
    x_scale: LinearScale,
) -> tuple[float, float]:
    """Screen position of a cluster's annotation: on the curve at its centroid."""

    value = curve_time_at(curve, cluster.centroid)
    return x_scale(value if value is not None else 0.0), mapping.domain_to_screen(cluster.centroid)


def hit_test_clusters(
    pointer: tuple[float, float],
    clusters: Sequence[Cluster],
    curve: Sequence[CurvePoint],
    mapping: ViewportMapping,
    x_scale: LinearScale,
    *,
    radius: float,
) -> int | None:
    """Index of the first cluster whose anchor lies within ``radius`` of ``pointer``."""

    px, py = pointer
    limit = radius * radius
    for idx, cluster in enumerate(clusters):
        if not cluster.members:
            continue
        ax, ay = cluster_anchor(cluster, curve, mapping, x_scale)
        if (px - ax) * (px - ax) + (py - ay) * (py - ay) < limit:
            return idx
    return None


class HoverLocator:
    """Translate widget pointer events into hover results."""

    def __init__(self, config: TimelineConfig = DEFAULT_CONFIG) -> None:
        self._config = config

    def to_plot(self, pointer: PointerMove) -> tuple[float, float]:
        margin = self._config.margin
        return pointer.x - margin.left, pointer.y - margin.top

    def locate(
        self,
        pointer: PointerMove,
        curve: Sequence[CurvePoint],
        clusters: Sequence[Cluster],
        mapping: ViewportMapping,
        x_scale: LinearScale,
    ) -> HoverResult:
        x, y = self.to_plot(pointer)
        point = locate_hover(y, curve, mapping, x_scale)
        index = hit_test_clusters(
            (x, y), clusters, curve, mapping, x_scale, radius=self._config.annotation_radius
        )
        if index is not None:
            log.debug("Pointer (%.1f, %.1f) over cluster %d", x, y, index)
        return HoverResult(point=point, cluster_index=index)
