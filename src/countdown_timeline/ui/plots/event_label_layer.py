# CountdownTimeline
# Copyright © 2025 Osvaldo J. Vega Rodríguez
# Licensed under CC BY-NC-SA 4.0 International
# http://creativecommons.org/licenses/by-nc-sa/4.0/

"""Draw a :class:`TimelineFrame` on matplotlib axes.

Axes are set up in plot-area pixels (origin top-left, y growing downward) so
the frame's screen coordinates can be used as-is.
"""

from __future__ import annotations

from collections.abc import Iterable

from matplotlib.axes import Axes
from matplotlib.patches import Rectangle
from matplotlib.ticker import MaxNLocator

from countdown_timeline.core.annotations import Annotation
from countdown_timeline.core.status import format_duration
from countdown_timeline.core.timeline import TimelineFrame

__all__ = ["draw_event_labels", "draw_overview", "draw_timeline"]

CURVE_COLOR = "#e07a3f"
ACCENT_COLOR = "#3b5b7a"
GRID_COLOR = "#c9d6e3"


def _pixel_axes(ax: Axes, width: float, height: float) -> None:
    ax.set_xlim(0.0, width)
    ax.set_ylim(height, 0.0)


def _time_ticks(ax: Axes, frame: TimelineFrame) -> None:
    """Label the time-remaining axis with at most ``time_tick_count`` intervals."""

    lo, hi = frame.x_scale.domain
    if frame.time_tick_count <= 0 or hi <= lo:
        ax.set_xticks([])
        return
    values = [v for v in MaxNLocator(nbins=frame.time_tick_count).tick_values(lo, hi) if lo <= v <= hi]
    ax.set_xticks([frame.x_scale(v) for v in values])
    ax.set_xticklabels([format_duration(v, compact=True) for v in values], fontsize=7, rotation=45)
    ax.grid(axis="x", color=GRID_COLOR, linewidth=0.5)


def draw_event_labels(ax: Axes, annotations: Iterable[Annotation]) -> list:
    """Draw cluster markers and, for expanded clusters, connector and label."""

    artists: list = []
    for annotation in annotations:
        marker = ax.scatter(
            [annotation.x],
            [annotation.y],
            s=120,
            facecolors="none",
            edgecolors=ACCENT_COLOR,
            zorder=20,
        )
        artists.append(marker)
        if not annotation.expanded:
            continue
        text = ax.annotate(
            "\n".join(annotation.subtitles),
            xy=(annotation.x, annotation.y),
            xytext=(annotation.x + annotation.dx, annotation.y + annotation.dy),
            ha="left" if annotation.dx >= 0 else "right",
            va="top",
            fontsize=8,
            color=ACCENT_COLOR,
            bbox={"boxstyle": "round,pad=0.3", "fc": "white", "ec": ACCENT_COLOR},
            arrowprops={"arrowstyle": "-", "color": ACCENT_COLOR, "connectionstyle": "angle"},
            annotation_clip=False,
            zorder=30,
        )
        artists.append(text)
    return artists


def draw_timeline(ax: Axes, frame: TimelineFrame) -> list:
    """Draw curve, hover marker and annotations; return the created artists."""

    _pixel_axes(ax, frame.plot_width, frame.plot_height)
    _time_ticks(ax, frame)
    ax.set_yticks([])
    artists: list = []
    if frame.empty:
        return artists

    xs = [frame.x_scale(point.time) for point in frame.curve]
    ys = [frame.mapping.domain_to_screen(point.date) for point in frame.curve]
    (line,) = ax.plot(xs, ys, color=CURVE_COLOR, linewidth=3, zorder=10)
    artists.append(line)

    if frame.hover is not None:
        marker = ax.scatter([frame.hover.x], [frame.hover.y], s=40, color=ACCENT_COLOR, zorder=25)
        artists.append(marker)

    artists.extend(draw_event_labels(ax, frame.annotations))

    if frame.status:
        artists.append(
            ax.text(
                0.98,
                0.02,
                frame.status,
                transform=ax.transAxes,
                ha="right",
                va="bottom",
                fontsize=8,
                color=ACCENT_COLOR,
            )
        )
    return artists


def draw_overview(ax: Axes, frame: TimelineFrame, width: float) -> list:
    """Draw the overview strip with the current brush selection."""

    _pixel_axes(ax, width, frame.plot_height)
    ax.set_xticks([])
    ax.set_yticks([])
    artists: list = []
    if frame.empty:
        return artists

    t_max = max(point.time for point in frame.curve) or 1.0
    xs = [width * point.time / t_max for point in frame.curve]
    ys = [frame.overview(point.date) for point in frame.curve]
    (line,) = ax.plot(xs, ys, color=CURVE_COLOR, linewidth=2)
    artists.append(line)

    y0 = frame.state.pan_offset
    span = frame.plot_height / frame.state.zoom_factor
    rect = Rectangle((0.0, y0), width, span, fill=False, hatch="//", edgecolor=GRID_COLOR)
    ax.add_patch(rect)
    artists.append(rect)
    return artists
