# CountdownTimeline
# Copyright © 2025 Osvaldo J. Vega Rodríguez
# Licensed under CC BY-NC-SA 4.0 International
# http://creativecommons.org/licenses/by-nc-sa/4.0/

"""Placement of cluster annotations next to the countdown curve."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from countdown_timeline.config import DEFAULT_CONFIG, TimelineConfig

from .events.summary import cluster_subtitles
from .hover import cluster_anchor
from .models import Cluster, CurvePoint
from .viewport import LinearScale, ViewportMapping

__all__ = ["Annotation", "layout_annotations"]


@dataclass(frozen=True)
class Annotation:
    index: int
    x: float
    y: float
    dx: float
    dy: float
    subtitles: tuple[str, ...]
    hovered: bool
    expanded: bool  # draw connector and label, not just the marker


def layout_annotations(
    clusters: Sequence[Cluster],
    curve: Sequence[CurvePoint],
    mapping: ViewportMapping,
    x_scale: LinearScale,
    *,
    width: float,
    hovered: int | None = None,
    config: TimelineConfig = DEFAULT_CONFIG,
) -> list[Annotation]:
    """One annotation per non-empty cluster.

    Labels point towards the middle of the plot. While a cluster is hovered
    only that one is expanded and it lists every member description; otherwise
    all clusters are expanded with their first description.
    """

    mid = width / 2.0
    out: list[Annotation] = []
    for idx, cluster in enumerate(clusters):
        if not cluster.members:
            continue
        x, y = cluster_anchor(cluster, curve, mapping, x_scale)
        is_hovered = idx == hovered
        out.append(
            Annotation(
                index=idx,
                x=x,
                y=y,
                dx=config.label_offset_x if x < mid else -config.label_offset_x,
                dy=config.label_offset_y,
                subtitles=tuple(cluster_subtitles(cluster, expanded=is_hovered)),
                hovered=is_hovered,
                expanded=is_hovered or hovered is None,
            )
        )
    return out
