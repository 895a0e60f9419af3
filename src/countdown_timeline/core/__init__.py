"""Domain models and core algorithms for the countdown timeline."""

from countdown_timeline.core.annotations import Annotation, layout_annotations
from countdown_timeline.core.curve import CurveExtent, build_curve, curve_extent, curve_time_at
from countdown_timeline.core.hover import (
    HoverLocator,
    HoverPoint,
    HoverResult,
    hit_test_clusters,
    locate_hover,
)
from countdown_timeline.core.interactions import BrushGesture, PointerMove, WheelGesture
from countdown_timeline.core.models import Cluster, CurvePoint, Event
from countdown_timeline.core.status import format_duration, hover_summary
from countdown_timeline.core.timeline import CountdownTimeline, TimelineFrame
from countdown_timeline.core.viewport import (
    LinearScale,
    ViewportController,
    ViewportMapping,
    ViewportState,
    time_scale,
)

__all__ = [
    "Event",
    "CurvePoint",
    "Cluster",
    "CurveExtent",
    "build_curve",
    "curve_extent",
    "curve_time_at",
    "LinearScale",
    "ViewportState",
    "ViewportMapping",
    "ViewportController",
    "time_scale",
    "PointerMove",
    "WheelGesture",
    "BrushGesture",
    "HoverPoint",
    "HoverResult",
    "HoverLocator",
    "locate_hover",
    "hit_test_clusters",
    "Annotation",
    "layout_annotations",
    "format_duration",
    "hover_summary",
    "CountdownTimeline",
    "TimelineFrame",
]
