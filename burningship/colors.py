"""Iteration-count to pixel conversion."""

from __future__ import annotations

from typing import Optional

import numpy as np

try:
    from matplotlib import colormaps as _mpl_colormaps
except ImportError:  # Matplotlib < 3.5
    from matplotlib import cm as _mpl_colormaps  # type: ignore


def get_colormap(name):
    return _mpl_colormaps.get_cmap(name)


def grayscale_step(max_iteration: int) -> int:
    return 255 // (max_iteration + 1)


def grayscale_intensity(iterations: np.ndarray, max_iteration: int) -> np.ndarray:
    """Brightness per point: fast escapes are near white, bound points near black."""

    iterations = np.asarray(iterations, dtype=np.int64)
    return np.uint8(255 - iterations * grayscale_step(max_iteration))


def colorize(
    iterations: np.ndarray,
    max_iteration: int,
    colormap: Optional[str] = None,
    out: Optional[np.ndarray] = None,
) -> np.ndarray:
    """Convert an iteration grid into a ``(height, width, 4)`` RGBA array.

    Without ``colormap`` the pixel is ``(v, v, v, 255)`` for the grayscale
    intensity ``v``. With a matplotlib colormap name the intensity is
    normalized to ``[0, 1]`` and looked up in that colormap instead.
    """

    intensity = grayscale_intensity(iterations, max_iteration)
    if out is None:
        out = np.empty(intensity.shape + (4,), dtype=np.uint8)

    if colormap is None:
        for k in (0, 1, 2):
            out[..., k] = intensity
    else:
        cmap = get_colormap(colormap)
        rgba = np.asarray(cmap(intensity / 255.0))
        out[..., :3] = np.uint8(np.clip(rgba[..., :3] * 255, 0, 255))
    out[..., 3] = 255
    return out


def pack_rgba32(pixels: np.ndarray) -> np.ndarray:
    """Pack RGBA pixels row-major into ``0xRRGGBBAA`` words.

    For sinks that take 32-bit words; the pygame window blits the
    ``(height, width, 4)`` array from :func:`colorize` directly.
    """

    channels = pixels.reshape(-1, 4).astype(np.uint32)
    return (channels[:, 0] << 24) | (channels[:, 1] << 16) | (channels[:, 2] << 8) | channels[:, 3]
