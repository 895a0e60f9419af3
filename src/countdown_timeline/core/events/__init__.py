from .cluster import (
    assign_clusters,
    cluster_visible,
    merge_clusters,
    merge_threshold,
    visible_events,
)
from .partition import Partitioner, natural_breaks
from .summary import cluster_subtitles, total_count

__all__ = [
    "Partitioner",
    "natural_breaks",
    "visible_events",
    "assign_clusters",
    "merge_threshold",
    "merge_clusters",
    "cluster_visible",
    "cluster_subtitles",
    "total_count",
]
