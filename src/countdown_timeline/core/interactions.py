"""Backend-agnostic gesture payloads consumed by the viewport and hover logic."""

from __future__ import annotations

from dataclasses import dataclass, field

__all__ = ["PointerMove", "WheelGesture", "BrushGesture", "ZOOM_MODIFIERS"]

# Holding any of these while scrolling resizes the selection instead of panning.
ZOOM_MODIFIERS = frozenset({"ctrl"})


@dataclass(frozen=True)
class PointerMove:
    """Pointer position in widget pixels (margins included)."""

    x: float
    y: float


@dataclass(frozen=True)
class WheelGesture:
    """One wheel tick.

    delta_y is positive when scrolling down/toward the user, matching DOM and
    Qt pixel deltas after sign normalisation by the host.
    """

    delta_y: float
    modifiers: frozenset[str] = field(default_factory=frozenset)

    @property
    def zooming(self) -> bool:
        return bool(self.modifiers & ZOOM_MODIFIERS)


@dataclass(frozen=True)
class BrushGesture:
    """Selected vertical range on the overview strip, in overview pixels."""

    y0: float
    y1: float
