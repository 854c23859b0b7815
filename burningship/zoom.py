"""Cursor-anchored zoom updates for a viewport.

A pixel's offset from the origin scales with ``1 / zoom``, so after a step
from ``old`` to ``new`` the cursor point sits at ``origin + d * old / new``.
Moving the origin by ``d * (new - old) / new`` puts it back under the
cursor. Dividing by ``old`` instead lets it drift by about ``step`` of the
offset on every notch.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, replace

from .viewport import MIN_ZOOM, Viewport, compute_bounds, pixel_to_complex

ZOOM_STEP = 0.1


class ZoomDirection(enum.Enum):
    IN = "in"
    OUT = "out"


@dataclass(frozen=True)
class ZoomController:
    """Produce the next viewport for a zoom step centred on a cursor pixel."""

    step: float = ZOOM_STEP
    min_zoom: float = MIN_ZOOM

    def next_zoom(self, zoom: float, direction: ZoomDirection) -> float:
        if direction is ZoomDirection.IN:
            return zoom + self.step * zoom
        return max(zoom - self.step * zoom, self.min_zoom)

    def apply(self, viewport: Viewport, direction: ZoomDirection, x: int, y: int) -> Viewport:
        """Zoom ``viewport`` while keeping the plane point under ``(x, y)`` fixed."""

        old_zoom = viewport.zoom
        new_zoom = self.next_zoom(old_zoom, direction)
        if new_zoom == old_zoom:
            return viewport

        cursor = pixel_to_complex(compute_bounds(viewport), x, y)
        scale_change = (new_zoom - old_zoom) / new_zoom
        origin = viewport.origin + (cursor - viewport.origin) * scale_change
        return replace(viewport, origin=origin, zoom=new_zoom)
