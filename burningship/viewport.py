"""Mapping between pixel coordinates and the complex plane."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

BASE_EXTENT = 2.0
MIN_ZOOM = 1.0


@dataclass(frozen=True)
class Viewport:
    """Region of the complex plane shown on a ``width`` x ``height`` grid."""

    origin: complex
    zoom: float
    width: int
    height: int

    def __post_init__(self) -> None:
        if self.zoom < MIN_ZOOM:
            raise ValueError(f"zoom must be at least {MIN_ZOOM}, got {self.zoom}")
        if self.width < 1 or self.height < 1:
            raise ValueError(f"grid must be at least 1x1, got {self.width}x{self.height}")

    @property
    def aspect(self) -> float:
        return self.width / self.height


@dataclass(frozen=True)
class PlaneBounds:
    """Sampling grid of a viewport: plane edges and per-pixel steps."""

    left: float
    right: float
    top: float
    bottom: float
    x_step: float
    y_step: float
    width: int
    height: int


def compute_bounds(viewport: Viewport) -> PlaneBounds:
    # At zoom 1 the plane spans 2 units either side of the origin vertically,
    # and the horizontal span is stretched by the aspect ratio.
    half_width = BASE_EXTENT * viewport.aspect / viewport.zoom
    half_height = BASE_EXTENT / viewport.zoom

    left = viewport.origin.real - half_width
    right = viewport.origin.real + half_width
    top = viewport.origin.imag + half_height
    bottom = viewport.origin.imag - half_height

    # n samples spaced evenly over a closed interval need n - 1 gaps.
    x_step = (right - left) / (viewport.width - 1) if viewport.width > 1 else 0.0
    y_step = (top - bottom) / (viewport.height - 1) if viewport.height > 1 else 0.0

    return PlaneBounds(
        left=left,
        right=right,
        top=top,
        bottom=bottom,
        x_step=x_step,
        y_step=y_step,
        width=viewport.width,
        height=viewport.height,
    )


def pixel_to_complex(bounds: PlaneBounds, x: int, y: int) -> complex:
    """Plane coordinate of pixel ``(x, y)``; screen y grows downward."""

    return complex(bounds.left + x * bounds.x_step, bounds.top - y * bounds.y_step)


def coordinate_field(viewport: Viewport) -> np.ndarray:
    """Return the ``(height, width)`` complex grid of per-pixel constants."""

    bounds = compute_bounds(viewport)
    xs = bounds.left + np.arange(bounds.width, dtype=np.float64) * np.float64(bounds.x_step)
    ys = bounds.top - np.arange(bounds.height, dtype=np.float64) * np.float64(bounds.y_step)
    X, Y = np.meshgrid(xs, ys)
    return X + 1j * Y


def pixel_index(x: int, y: int, width: int) -> int:
    """Row-major offset of pixel ``(x, y)`` in a flat buffer of the given width."""

    return y * width + x
