"""Data loading helpers for the countdown timeline."""

# Import loaders from their submodules, e.g.
# ``from countdown_timeline.io.events import load_events``.
