"""Viewer configuration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .renderer import MAX_ITERATION
from .viewport import MIN_ZOOM, Viewport
from .zoom import ZOOM_STEP

WINDOW_WIDTH = 720
WINDOW_HEIGHT = 480
DEFAULT_FPS = 60


@dataclass(frozen=True)
class ViewerConfig:
    """Recognized options of a viewer session."""

    width: int = WINDOW_WIDTH
    height: int = WINDOW_HEIGHT
    max_iteration: int = MAX_ITERATION
    initial_zoom: float = MIN_ZOOM
    origin: complex = 0j
    zoom_step: float = ZOOM_STEP
    colormap: Optional[str] = None
    fps: int = DEFAULT_FPS

    def __post_init__(self) -> None:
        if self.width < 1 or self.height < 1:
            raise ValueError(f"window size must be positive, got {self.width}x{self.height}")
        if self.max_iteration < 1:
            raise ValueError(f"max_iteration must be at least 1, got {self.max_iteration}")
        if self.initial_zoom < MIN_ZOOM:
            raise ValueError(f"initial_zoom must be at least {MIN_ZOOM}, got {self.initial_zoom}")
        if not 0.0 < self.zoom_step < 1.0:
            raise ValueError(f"zoom_step must lie in (0, 1), got {self.zoom_step}")
        if self.fps < 1:
            raise ValueError(f"fps must be positive, got {self.fps}")

    def initial_viewport(self) -> Viewport:
        return Viewport(origin=complex(self.origin), zoom=float(self.initial_zoom), width=self.width, height=self.height)
