# CountdownTimeline
# Copyright © 2025 Osvaldo J. Vega Rodríguez
# Licensed under CC BY-NC-SA 4.0 International
# http://creativecommons.org/licenses/by-nc-sa/4.0/

"""Event log records and the geometry derived from them."""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field, field_validator

__all__ = ["Event", "CurvePoint", "Cluster", "mean_timestamp"]


class Event(BaseModel):
    """One entry of the event log."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    date: datetime
    time_delta: float = Field(alias="timeDelta")
    description: str = ""
    frozen: bool = False

    @field_validator("date")
    def _aware(cls, value: datetime) -> datetime:
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value

    @field_validator("time_delta")
    def _finite(cls, value: float) -> float:
        if not math.isfinite(value):
            raise ValueError("timeDelta must be finite")
        return value

    @property
    def timestamp(self) -> float:
        """Seconds since the epoch."""

        return self.date.timestamp()


@dataclass(frozen=True)
class CurvePoint:
    date: float  # epoch seconds
    time: float  # seconds remaining, never negative


def mean_timestamp(events) -> float:
    stamps = [event.timestamp for event in events]
    return math.fsum(stamps) / len(stamps)


@dataclass(frozen=True)
class Cluster:
    """Events drawn behind a single annotation."""

    centroid: float
    members: tuple[Event, ...]

    @classmethod
    def of(cls, members) -> Cluster:
        members = tuple(members)
        return cls(centroid=mean_timestamp(members), members=members)

    def merged_with(self, other: Cluster) -> Cluster:
        """Concatenate members; the centroid is weighted by member count."""

        return Cluster.of(self.members + other.members)

    def __len__(self) -> int:
        return len(self.members)
