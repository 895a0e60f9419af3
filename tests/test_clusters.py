import random
from datetime import datetime, timezone

import pytest

from countdown_timeline.config import TimelineConfig
from countdown_timeline.core.events.cluster import (
    assign_clusters,
    cluster_visible,
    merge_clusters,
    merge_threshold,
    visible_events,
)
from countdown_timeline.core.events.summary import MORE_MARKER, cluster_subtitles, total_count
from countdown_timeline.core.models import Cluster, Event

T0 = 1_700_000_000.0
YEAR = 365 * 24 * 3600.0


def _event(offset: float, text: str = "", delta: float = 60.0) -> Event:
    return Event(
        date=datetime.fromtimestamp(T0 + offset, timezone.utc),
        time_delta=delta,
        description=text,
    )


def _spread(count: int, span: float = YEAR) -> list[Event]:
    return [_event(i * span / (count - 1), f"e{i}") for i in range(count)]


def test_visible_events_is_inclusive_and_ordered():
    events = _spread(5, 400.0)

    picked = visible_events(events, (T0 + 300, T0 + 100))

    assert [e.description for e in picked] == ["e1", "e2", "e3"]


def test_small_sets_become_singletons():
    events = _spread(5, 1000.0)

    clusters = assign_clusters(events)

    assert [len(c) for c in clusters] == [1] * 5
    assert [c.centroid for c in clusters] == [e.timestamp for e in events]


def test_year_of_events_partitions_into_at_most_ten_clusters():
    events = _spread(30)

    clusters = assign_clusters(events)

    assert 0 < len(clusters) <= 10
    assert total_count(clusters) == 30
    members = sorted(e.description for c in clusters for e in c.members)
    assert members == sorted(e.description for e in events)


def test_centroid_is_mean_of_members():
    clusters = assign_clusters(_spread(40))

    for cluster in clusters:
        expected = sum(e.timestamp for e in cluster.members) / len(cluster)
        assert cluster.centroid == pytest.approx(expected)


def test_partitioner_receives_sorted_values_and_cluster_count():
    calls = []

    def partitioner(values, k):
        calls.append((list(values), k))
        return [values[0], values[-1]]

    events = list(reversed(_spread(30)))
    assign_clusters(events, partitioner=partitioner)

    values, k = calls[0]
    assert values == sorted(values)
    assert k == 10


def test_equidistant_event_goes_to_first_centroid():
    config = TimelineConfig(partition_threshold=0)
    events = [_event(0, "a"), _event(5, "b"), _event(10, "c")]

    clusters = assign_clusters(
        events, config=config, partitioner=lambda values, k: [T0, T0 + 10]
    )

    assert [[e.description for e in c.members] for c in clusters] == [["a", "b"], ["c"]]


def test_empty_bins_are_dropped():
    config = TimelineConfig(partition_threshold=0)
    events = [_event(0, "a"), _event(1, "b"), _event(2000, "c")]

    clusters = assign_clusters(
        events, config=config, partitioner=lambda values, k: [T0, T0 + 1000, T0 + 2000]
    )

    assert len(clusters) == 2
    assert total_count(clusters) == 3


def test_assign_empty_input():
    assert assign_clusters([]) == []


def test_merge_threshold_shrinks_with_zoom():
    config = TimelineConfig(merge_distance=100.0)

    assert merge_threshold(1.0, config) == 100.0
    assert merge_threshold(4.0, config) == 25.0
    assert merge_threshold(0.0, config) == 100.0


def test_merge_weights_centroid_by_member_count():
    config = TimelineConfig(merge_distance=100.0)
    heavy = Cluster.of([_event(0, "a"), _event(0, "b")])
    light = Cluster.of([_event(60, "c")])
    far = Cluster.of([_event(500, "d")])

    merged = merge_clusters([heavy, light, far], 1.0, config=config)

    assert len(merged) == 2
    assert merged[0].centroid == pytest.approx(T0 + 20)
    assert [e.description for e in merged[0].members] == ["a", "b", "c"]


def test_merge_pairs_clusters_by_centroid_order():
    config = TimelineConfig(merge_distance=100.0)
    clusters = [Cluster.of([_event(o, str(o))]) for o in (0, 500, 60)]

    merged = merge_clusters(clusters, 1.0, config=config)

    assert [c.centroid for c in merged] == [pytest.approx(T0 + 30), pytest.approx(T0 + 500)]
    assert [e.description for e in merged[0].members] == ["0", "60"]
    for left, right in zip(merged, merged[1:]):
        assert right.centroid - left.centroid >= merge_threshold(1.0, config)


def test_zooming_in_keeps_clusters_apart():
    config = TimelineConfig(merge_distance=100.0)
    clusters = [Cluster.of([_event(o)]) for o in (0, 60, 500)]

    assert len(merge_clusters(clusters, 2.0, config=config)) == 3


def test_merge_restarts_after_each_merge():
    config = TimelineConfig(merge_distance=100.0)
    a = Cluster.of([_event(0)])
    b = Cluster.of([_event(90), _event(90), _event(90)])
    c = Cluster.of([_event(160)])

    merged = merge_clusters([a, b, c], 1.0, config=config)

    assert len(merged) == 1
    assert merged[0].centroid == pytest.approx(T0 + (270 + 160) / 5)


def test_merge_postcondition_and_idempotence():
    rng = random.Random(3)
    config = TimelineConfig(merge_distance=3600.0)
    offsets = sorted(rng.uniform(0, 86_400) for _ in range(60))
    clusters = [Cluster.of([_event(o)]) for o in offsets]

    merged = merge_clusters(clusters, 1.5, config=config)
    threshold = merge_threshold(1.5, config)

    for left, right in zip(merged, merged[1:]):
        assert right.centroid - left.centroid >= threshold
    assert merge_clusters(merged, 1.5, config=config) == merged
    assert total_count(merged) == 60


def test_cluster_visible_pipeline():
    events = _spread(30)

    clusters = cluster_visible(events, (T0, T0 + YEAR / 2), 1.0)

    assert total_count(clusters) == len(visible_events(events, (T0, T0 + YEAR / 2)))


def test_subtitles_collapsed_and_expanded():
    cluster = Cluster.of([_event(0, "first"), _event(1, "second")])

    assert cluster_subtitles(cluster, expanded=False) == ["first" + MORE_MARKER]
    assert cluster_subtitles(cluster, expanded=True) == ["first", "second"]
    assert cluster_subtitles(Cluster.of([_event(0, "solo")]), expanded=False) == ["solo"]
