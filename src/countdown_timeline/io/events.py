# CountdownTimeline
# Copyright © 2025 Osvaldo J. Vega Rodríguez
# Licensed under CC BY-NC-SA 4.0 International
# http://creativecommons.org/licenses/by-nc-sa/4.0/

"""Load event logs from JSON or CSV files."""

from __future__ import annotations

import json
import logging
import re
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

import pandas as pd
from pydantic import ValidationError

from countdown_timeline.core.models import Event

__all__ = ["EventLoadError", "HEADER_ALIASES", "events_from_records", "load_events"]

log = logging.getLogger(__name__)

HEADER_ALIASES: dict[str, str] = {
    # Date
    "date": "date",
    "time": "date",
    "timestamp": "date",
    "datetime": "date",
    "when": "date",
    # Delta
    "timedelta": "timeDelta",
    "delta": "timeDelta",
    "deltaseconds": "timeDelta",
    "seconds": "timeDelta",
    # Description
    "description": "description",
    "label": "description",
    "event": "description",
    "note": "description",
    # Frozen
    "frozen": "frozen",
    "paused": "frozen",
}


class EventLoadError(ValueError):
    """Raised when an event log cannot be read or validated."""


def _normalize_column_name(name: str) -> str:
    return re.sub(r"[^a-z0-9]", "", str(name).lower())


def _standardize_headers(df: pd.DataFrame) -> pd.DataFrame:
    rename_map = {}
    for col in df.columns:
        norm = _normalize_column_name(col)
        if norm in HEADER_ALIASES:
            rename_map[col] = HEADER_ALIASES[norm]
    if rename_map:
        df = df.rename(columns=rename_map)
    return df


def events_from_records(records: Iterable[Mapping[str, Any]]) -> list[Event]:
    """Validate decoded records into events, preserving their order."""

    events: list[Event] = []
    for idx, record in enumerate(records):
        try:
            events.append(Event.model_validate(dict(record)))
        except ValidationError as exc:
            raise EventLoadError(f"Invalid event at index {idx}: {exc}") from exc
    return events


def _read_json(path: Path) -> list[Mapping[str, Any]]:
    payload = json.loads(path.read_text(encoding="utf-8"))
    if isinstance(payload, Mapping):
        payload = payload.get("events", [])
    if not isinstance(payload, list):
        raise EventLoadError(f"{path}: expected a list of events")
    return payload


def _coerce_frozen(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in {"1", "true", "yes", "y", "on"}
    if pd.isna(value):
        return False
    return bool(value)


def _read_csv(path: Path) -> list[Mapping[str, Any]]:
    df = _standardize_headers(pd.read_csv(path))
    missing = {"date", "timeDelta"} - set(df.columns)
    if missing:
        raise EventLoadError(f"{path}: missing column(s) {sorted(missing)}")
    if "description" not in df.columns:
        df["description"] = ""
    df["description"] = df["description"].fillna("").astype(str)
    if "frozen" in df.columns:
        df["frozen"] = df["frozen"].map(_coerce_frozen)
    else:
        df["frozen"] = False
    columns = ["date", "timeDelta", "description", "frozen"]
    return df[columns].to_dict(orient="records")


def load_events(path: str | Path) -> list[Event]:
    """Read an event log from ``.json`` or ``.csv``."""

    path = Path(path)
    suffix = path.suffix.lower()
    try:
        if suffix == ".json":
            records = _read_json(path)
        elif suffix in {".csv", ".txt"}:
            records = _read_csv(path)
        else:
            raise EventLoadError(f"Unsupported event file type: {path.suffix!r}")
    except (OSError, json.JSONDecodeError, pd.errors.ParserError, pd.errors.EmptyDataError) as exc:
        raise EventLoadError(f"Could not read {path}: {exc}") from exc

    events = events_from_records(records)
    log.info("Loaded %d events from %s", len(events), path)
    return events
