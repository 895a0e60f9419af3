# CountdownTimeline
# Copyright © 2025 Osvaldo J. Vega Rodríguez
# Licensed under CC BY-NC-SA 4.0 International
# http://creativecommons.org/licenses/by-nc-sa/4.0/

"""Tunable constants for the countdown timeline.

Every component receives a :class:`TimelineConfig` explicitly. Overrides can be
supplied through the ``COUNTDOWN_TIMELINE`` environment variable as
comma-separated ``key=value`` tokens, e.g.
``COUNTDOWN_TIMELINE="partition_threshold=40,merge_distance=3600"``.
"""

from __future__ import annotations

import dataclasses
import logging
import os
from collections.abc import Iterable
from dataclasses import dataclass, field

__all__ = ["ENV_VAR", "Margin", "TimelineConfig", "DEFAULT_CONFIG"]

log = logging.getLogger(__name__)

ENV_VAR = "COUNTDOWN_TIMELINE"


@dataclass(frozen=True)
class Margin:
    top: float = 20.0
    right: float = 20.0
    bottom: float = 20.0
    left: float = 100.0


@dataclass(frozen=True)
class TimelineConfig:
    """Thresholds and layout constants shared by the timeline components."""

    # Clustering
    partition_threshold: int = 24  # at or below this many visible events, no partitioning
    max_clusters: int = 10
    merge_distance: float = 100.0  # seconds at zoom 1.0

    # Viewport
    initial_zoom: float = 2.0
    wheel_zoom_step: float = 0.05
    base_ticks: int = 10
    time_ticks: int = 16

    # Hover / annotations
    annotation_radius: float = 16.0
    label_offset_x: float = 35.0
    label_offset_y: float = 15.0

    # Chart geometry
    brush_width: float = 100.0
    margin: Margin = field(default_factory=Margin)

    def with_overrides(self, **overrides) -> TimelineConfig:
        return dataclasses.replace(self, **overrides)

    @classmethod
    def from_env(cls, env_value: str | None = None) -> TimelineConfig:
        """Return defaults updated from ``COUNTDOWN_TIMELINE``."""

        raw = env_value if env_value is not None else os.environ.get(ENV_VAR, "")
        return cls().with_overrides(**_parse_overrides(raw))


DEFAULT_CONFIG = TimelineConfig()


def _normalise(name: str) -> str:
    return name.strip().lower().replace("-", "_")


def _tokenise(raw: str) -> Iterable[str]:
    for token in raw.split(","):
        clean = token.strip()
        if clean:
            yield clean


def _parse_overrides(raw: str) -> dict[str, int | float]:
    types = {
        f.name: type(f.default)
        for f in dataclasses.fields(TimelineConfig)
        if isinstance(f.default, (int, float))
    }
    overrides: dict[str, int | float] = {}
    for token in _tokenise(raw):
        if "=" not in token:
            log.warning("Ignoring config token without value: %r", token)
            continue
        key, value = token.split("=", 1)
        key = _normalise(key)
        kind = types.get(key)
        if kind is None:
            log.warning("Ignoring unknown config key: %r", key)
            continue
        try:
            overrides[key] = kind(value.strip())
        except ValueError:
            log.warning("Ignoring unparsable value for %s: %r", key, value)
    return overrides
