# CountdownTimeline
# Copyright © 2025 Osvaldo J. Vega Rodríguez
# Licensed under CC BY-NC-SA 4.0 International
# http://creativecommons.org/licenses/by-nc-sa/4.0/

"""Human-readable status line for the hovered point."""

from __future__ import annotations

import math
from datetime import datetime, timezone, tzinfo

from .hover import HoverPoint

__all__ = ["format_duration", "hover_summary"]

_UNITS = (
    ("y", 365 * 24 * 3600),
    ("d", 24 * 3600),
    ("h", 3600),
    ("m", 60),
    ("s", 1),
)


def format_duration(seconds: float, *, compact: bool = False) -> str:
    """Format ``seconds`` as ``"1d 2h 3m 4s"``; ``compact`` keeps the largest unit."""

    if not math.isfinite(seconds):
        return "?"
    sign = "-" if seconds < 0 else ""
    remaining = int(round(abs(seconds)))
    parts: list[str] = []
    for suffix, size in _UNITS:
        count, remaining = divmod(remaining, size)
        if count:
            parts.append(f"{count}{suffix}")
    if not parts:
        return "0s"
    if compact:
        parts = parts[:1]
    return sign + " ".join(parts)


def hover_summary(
    hover: HoverPoint,
    start: float,
    *,
    details: bool = True,
    tz: tzinfo | None = timezone.utc,
) -> str:
    """``"locked for X with Y left on <date>"`` for the hovered curve point.

    ``start`` is the timestamp of the first logged event.
    """

    when = datetime.fromtimestamp(hover.date, tz)
    locked = format_duration(hover.date - start, compact=not details)
    left = format_duration(hover.time, compact=not details)
    text = f"locked for {locked} with {left} left on {when:%B %d, %Y}"
    if details:
        text += f" at {when:%I:%M %p}"
    return text
