from __future__ import annotations

from collections.abc import Iterable

from countdown_timeline.core.models import Cluster

__all__ = ["MORE_MARKER", "cluster_subtitles", "total_count"]

MORE_MARKER = "\n\n[...]"


def cluster_subtitles(cluster: Cluster, expanded: bool) -> list[str]:
    """Label lines for a cluster: every description, or the first plus a marker."""

    if not cluster.members:
        return []
    if expanded:
        return [event.description for event in cluster.members]
    first = cluster.members[0].description
    return [first + (MORE_MARKER if len(cluster.members) > 1 else "")]


def total_count(clusters: Iterable[Cluster]) -> int:
    """Return the number of events across clusters."""

    return sum(len(cluster.members) for cluster in clusters)
