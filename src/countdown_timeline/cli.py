from __future__ import annotations

import argparse
import json
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path

from .config import TimelineConfig
from .core.events.summary import total_count
from .core.interactions import PointerMove
from .core.logging_config import setup_logging
from .core.status import format_duration
from .core.timeline import CountdownTimeline
from .io.events import EventLoadError, load_events

log = logging.getLogger(__name__)


def _now(args: argparse.Namespace) -> datetime | None:
    if not args.now:
        return None
    now = datetime.fromisoformat(args.now)
    return now if now.tzinfo else now.replace(tzinfo=timezone.utc)


def _config(args: argparse.Namespace) -> TimelineConfig:
    config = TimelineConfig.from_env()
    if args.zoom:
        config = config.with_overrides(initial_zoom=args.zoom)
    return config


def _timeline(args: argparse.Namespace) -> CountdownTimeline:
    config = _config(args)
    events = load_events(args.path)
    return CountdownTimeline(
        events, height=args.height, width=args.width, config=config, now=_now(args)
    )


def cmd_summary(args: argparse.Namespace) -> None:
    timeline = _timeline(args)
    frame = timeline.frame()
    peak = max((point.time for point in frame.curve), default=0.0)
    remaining = frame.curve[-1].time if frame.curve else 0.0
    payload = {
        "events": len(timeline.events),
        "curve_points": len(frame.curve),
        "peak": format_duration(peak),
        "remaining": format_duration(remaining),
        "visible_range": [
            datetime.fromtimestamp(v, timezone.utc).isoformat() for v in frame.visible_range
        ],
        "clusters": len(frame.clusters),
        "clustered_events": total_count(frame.clusters),
        "zoom": frame.state.zoom_factor,
    }
    print(json.dumps(payload, indent=2))


def _figure(frame, config: TimelineConfig, width: float, height: float, dpi: int = 100):
    """Figure with the chart axes and the overview strip sharing one vertical band."""

    import matplotlib.pyplot as plt

    fig = plt.figure(figsize=(width / dpi, height / dpi), dpi=dpi)
    left = config.margin.left / width
    bottom = config.margin.bottom / height
    band = frame.plot_height / height
    ax = fig.add_axes((left, bottom, frame.plot_width / width, band))
    brush_w = config.brush_width / width
    overview = fig.add_axes((1.0 - brush_w, bottom, brush_w, band))
    return fig, ax, overview


def cmd_render(args: argparse.Namespace) -> None:
    import matplotlib

    matplotlib.use("Agg")
    import matplotlib.pyplot as plt

    from .ui.plots.event_label_layer import draw_overview, draw_timeline

    timeline = _timeline(args)
    if args.hover is not None:
        timeline.move_pointer(PointerMove(*args.hover))
    frame = timeline.frame()

    config = _config(args)
    dpi = 100
    fig, ax, overview = _figure(frame, config, args.width, args.height, dpi)
    draw_timeline(ax, frame)
    draw_overview(overview, frame, config.brush_width)
    fig.savefig(args.output, dpi=dpi)
    plt.close(fig)
    print(f"Rendered {args.output}")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser("countdown-timeline")
    parser.add_argument("--log-dir", type=Path, default=None)
    parser.add_argument("-v", "--verbose", action="store_true")
    sub = parser.add_subparsers(dest="cmd", required=True)

    def _common(sp: argparse.ArgumentParser) -> None:
        sp.add_argument("path")
        sp.add_argument("--now", default=None, help="ISO timestamp used as 'now'")
        sp.add_argument("--height", type=float, default=600.0)
        sp.add_argument("--width", type=float, default=1000.0)
        sp.add_argument("--zoom", type=float, default=None)

    sp = sub.add_parser("summary")
    _common(sp)
    sp.set_defaults(func=cmd_summary)

    sp = sub.add_parser("render")
    _common(sp)
    sp.add_argument("-o", "--output", required=True)
    sp.add_argument("--hover", type=float, nargs=2, default=None, metavar=("X", "Y"))
    sp.set_defaults(func=cmd_render)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    if args.log_dir is not None:
        setup_logging(
            console_level=logging.DEBUG if args.verbose else logging.WARNING,
            log_dir=args.log_dir,
        )
    try:
        args.func(args)
    except EventLoadError as exc:
        log.error("%s", exc)
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
