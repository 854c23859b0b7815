"""Single-threaded poll/zoom/render loop of an interactive session."""

from __future__ import annotations

from typing import Any, Callable, Optional

import numpy as np

from .colors import colorize
from .config import ViewerConfig
from .events import QuitEvent, ViewerEvent, ZoomEvent
from .renderer import RenderResult, render_frame
from .viewport import pixel_index
from .zoom import ZoomController


def _quiet(message, *args, **kwargs):
    pass


class ViewerSession:
    """Own the viewport and frame buffer and drive renders from input events.

    ``display`` needs ``poll()`` returning viewer events and
    ``present(pixels)``. ``recorder`` is optional and receives every
    presented frame through ``append``.
    """

    def __init__(
        self,
        config: ViewerConfig,
        display: Any,
        recorder: Any = None,
        *,
        device: Optional[str] = None,
        log: Callable[..., None] = _quiet,
    ) -> None:
        self.config = config
        self.display = display
        self.recorder = recorder
        self.device = device
        self.log = log
        self.controller = ZoomController(step=config.zoom_step)
        self.viewport = config.initial_viewport()
        self.frame = np.zeros((config.height, config.width, 4), dtype=np.uint8)
        self.cursor: Optional[tuple[int, int]] = None
        self.renders = 0

    def handle(self, event: ViewerEvent) -> bool:
        """Apply ``event`` and report whether the viewport changed."""

        if not isinstance(event, ZoomEvent):
            return False
        viewport = self.controller.apply(self.viewport, event.direction, event.x, event.y)
        self.cursor = (event.x, event.y)
        if viewport == self.viewport:
            return False
        self.viewport = viewport
        self.log("zoom %.6g origin (%.10g, %.10g)" % (viewport.zoom, viewport.origin.real, viewport.origin.imag))
        return True

    def render(self) -> RenderResult:
        result = render_frame(self.viewport, self.config.max_iteration, device=self.device)
        colorize(result.iterations, self.config.max_iteration, self.config.colormap, out=self.frame)
        self.display.present(self.frame)
        if self.recorder is not None:
            self.recorder.append(self.frame)
        self.renders += 1

        self.log("render %d took %.3fs" % (self.renders, result.elapsed))
        if self.cursor is not None:
            x, y = self.cursor
            count = result.iterations.reshape(-1)[pixel_index(x, y, self.viewport.width)]
            self.log("cursor (%d, %d) -> %d iterations" % (x, y, count))
        return result

    def run(self) -> None:
        """Loop until a quit event; renders only follow viewport changes."""

        need_to_render = True
        running = True
        while running:
            for event in self.display.poll():
                if isinstance(event, QuitEvent):
                    running = False
                    break
                if self.handle(event):
                    need_to_render = True
            if running and need_to_render:
                self.render()
                need_to_render = False
