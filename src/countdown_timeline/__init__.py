# CountdownTimeline
# Copyright © 2025 Osvaldo J. Vega Rodríguez
# Licensed under CC BY-NC-SA 4.0 International
# http://creativecommons.org/licenses/by-nc-sa/4.0/

"""Public package interface for the countdown timeline."""

from countdown_timeline.config import DEFAULT_CONFIG, Margin, TimelineConfig
from countdown_timeline.core import (
    BrushGesture,
    Cluster,
    CountdownTimeline,
    CurvePoint,
    Event,
    PointerMove,
    TimelineFrame,
    ViewportController,
    WheelGesture,
    build_curve,
)
from countdown_timeline.core.events import (
    assign_clusters,
    cluster_visible,
    merge_clusters,
    natural_breaks,
)
from countdown_timeline.io.events import EventLoadError, events_from_records, load_events

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_CONFIG",
    "Margin",
    "TimelineConfig",
    "Event",
    "CurvePoint",
    "Cluster",
    "build_curve",
    "natural_breaks",
    "assign_clusters",
    "merge_clusters",
    "cluster_visible",
    "ViewportController",
    "PointerMove",
    "WheelGesture",
    "BrushGesture",
    "CountdownTimeline",
    "TimelineFrame",
    "EventLoadError",
    "events_from_records",
    "load_events",
]
