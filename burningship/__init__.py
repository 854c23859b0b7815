"""Public API for the burning ship viewer."""

from .colors import colorize, grayscale_intensity, pack_rgba32
from .config import ViewerConfig
from .events import QuitEvent, ZoomEvent, translate_event
from .renderer import MAX_ITERATION, RenderResult, iterate_field, render_frame
from .session import ViewerSession
from .viewport import (
    PlaneBounds,
    Viewport,
    compute_bounds,
    coordinate_field,
    pixel_index,
    pixel_to_complex,
)
from .zoom import ZoomController, ZoomDirection

__all__ = [
    "MAX_ITERATION",
    "PlaneBounds",
    "QuitEvent",
    "RenderResult",
    "Viewport",
    "ViewerConfig",
    "ViewerSession",
    "ZoomController",
    "ZoomDirection",
    "ZoomEvent",
    "colorize",
    "compute_bounds",
    "coordinate_field",
    "grayscale_intensity",
    "iterate_field",
    "pack_rgba32",
    "pixel_index",
    "pixel_to_complex",
    "render_frame",
    "translate_event",
]
