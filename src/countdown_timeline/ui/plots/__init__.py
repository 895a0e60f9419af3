from .event_label_layer import draw_event_labels, draw_overview, draw_timeline

__all__ = ["draw_event_labels", "draw_overview", "draw_timeline"]
