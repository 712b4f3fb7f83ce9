from .render import ChartFrame, RenderOptions, build_frame
from .view import clamp_custom_window, grow_window, shrink_window, visible_window

__all__ = [
    "ChartFrame",
    "RenderOptions",
    "build_frame",
    "visible_window",
    "grow_window",
    "shrink_window",
    "clamp_custom_window",
]
