# CountdownTimeline
# Copyright © 2025 Osvaldo J. Vega Rodríguez
# Licensed under CC BY-NC-SA 4.0 International
# http://creativecommons.org/licenses/by-nc-sa/4.0/

from __future__ import annotations

import logging
import math
from collections.abc import Sequence

from countdown_timeline.config import DEFAULT_CONFIG, TimelineConfig
from countdown_timeline.core.models import Cluster, Event

from .partition import Partitioner, natural_breaks

__all__ = [
    "visible_events",
    "assign_clusters",
    "merge_threshold",
    "merge_clusters",
    "cluster_visible",
]

log = logging.getLogger(__name__)


def visible_events(events: Sequence[Event], date_range: tuple[float, float]) -> list[Event]:
    """Events whose timestamp falls inside ``date_range`` (inclusive), in order."""

    lo, hi = sorted(date_range)
    return [event for event in events if lo <= event.timestamp <= hi]


def _nearest(centroids: Sequence[float], value: float) -> int:
    best = 0
    best_dist = abs(centroids[0] - value)
    for idx in range(1, len(centroids)):
        dist = abs(centroids[idx] - value)
        if dist < best_dist:  # ties keep the earlier centroid
            best, best_dist = idx, dist
    return best


def assign_clusters(
    events: Sequence[Event],
    *,
    config: TimelineConfig = DEFAULT_CONFIG,
    partitioner: Partitioner = natural_breaks,
) -> list[Cluster]:
    """Group ``events`` around natural-break centroids.

    Small sets (``config.partition_threshold`` events or fewer) are not
    partitioned: every event becomes its own cluster. Larger sets are binned
    around ``config.max_clusters`` centroids from ``partitioner`` by nearest
    absolute timestamp distance. Empty bins are dropped and each remaining
    cluster's centroid is the mean of its members. Clusters come back in
    ascending centroid order.
    """

    if not events:
        return []

    if len(events) <= config.partition_threshold:
        clusters = [Cluster(centroid=event.timestamp, members=(event,)) for event in events]
        return sorted(clusters, key=lambda c: c.centroid)

    stamps = [event.timestamp for event in events]
    centroids = [
        float(c) for c in partitioner(sorted(stamps), config.max_clusters) if math.isfinite(c)
    ]
    if not centroids:
        log.warning("Partitioner returned no centroids for %d events; using singletons", len(events))
        return [Cluster(centroid=s, members=(e,)) for s, e in sorted(zip(stamps, events), key=lambda p: p[0])]

    bins: list[list[Event]] = [[] for _ in centroids]
    for event, stamp in zip(events, stamps):
        bins[_nearest(centroids, stamp)].append(event)

    clusters = [Cluster.of(members) for members in bins if members]
    log.debug(
        "Assigned %d events to %d clusters (%d centroids)",
        len(events),
        len(clusters),
        len(centroids),
    )
    return sorted(clusters, key=lambda c: c.centroid)


def merge_threshold(zoom_factor: float, config: TimelineConfig = DEFAULT_CONFIG) -> float:
    """Minimum centroid separation in seconds; tighter as the view zooms in."""

    if not (math.isfinite(zoom_factor) and zoom_factor > 0):
        return float(config.merge_distance)
    return float(config.merge_distance) / zoom_factor


def merge_clusters(
    clusters: Sequence[Cluster],
    zoom_factor: float,
    *,
    config: TimelineConfig = DEFAULT_CONFIG,
) -> list[Cluster]:
    """Merge centroid-adjacent clusters closer than :func:`merge_threshold` until none remain."""

    threshold = merge_threshold(zoom_factor, config)
    merged = sorted((cluster for cluster in clusters if cluster.members), key=lambda c: c.centroid)
    idx = 0
    while idx < len(merged) - 1:
        left, right = merged[idx], merged[idx + 1]
        if abs(right.centroid - left.centroid) < threshold:
            merged[idx : idx + 2] = [left.merged_with(right)]
            idx = 0
            continue
        idx += 1
    return merged


def cluster_visible(
    events: Sequence[Event],
    date_range: tuple[float, float],
    zoom_factor: float,
    *,
    config: TimelineConfig = DEFAULT_CONFIG,
    partitioner: Partitioner = natural_breaks,
) -> list[Cluster]:
    """Visible filter, assignment and merge in one pass."""

    in_range = visible_events(events, date_range)
    clusters = assign_clusters(in_range, config=config, partitioner=partitioner)
    return merge_clusters(clusters, zoom_factor, config=config)
