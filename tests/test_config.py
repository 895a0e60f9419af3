from countdown_timeline.config import ENV_VAR, TimelineConfig


def test_defaults():
    config = TimelineConfig()

    assert config.partition_threshold == 24
    assert config.max_clusters == 10
    assert config.wheel_zoom_step == 0.05


def test_env_overrides_are_typed_and_tolerant():
    config = TimelineConfig.from_env(
        "partition_threshold=40, merge-distance=3600, bogus=1, initial_zoom=abc, flag"
    )

    assert config.partition_threshold == 40
    assert config.merge_distance == 3600.0
    assert config.initial_zoom == 2.0


def test_env_variable_is_read(monkeypatch):
    monkeypatch.setenv(ENV_VAR, "max_clusters=6")

    assert TimelineConfig.from_env().max_clusters == 6
