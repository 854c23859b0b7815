"""Image and GIF writers for rendered frames."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import imageio
import numpy as np
import PIL.Image


def _pil_format_name(ext: str) -> str:
    upper = ext.upper()
    if upper == "JPG":
        return "JPEG"
    if upper == "TIF":
        return "TIFF"
    return upper


def write_single_image(pixels: np.ndarray, output_path: Path, image_format: str) -> None:
    """Write an RGBA frame to ``output_path`` using the provided format."""

    pil_format = _pil_format_name(image_format)
    image = PIL.Image.fromarray(pixels)
    if pil_format in {"JPEG", "BMP"}:
        image = image.convert("RGB")
    output_path.parent.mkdir(parents=True, exist_ok=True)
    image.save(str(output_path), format=pil_format)


def write_gif(writer: Any, frame_array: np.ndarray) -> None:
    """Append ``frame_array`` to an active GIF writer."""

    writer.append_data(frame_array)


class GifRecorder:
    """Collect every presented frame of a session into an animated GIF."""

    def __init__(self, path: Path, duration: float = 0.1) -> None:
        self.path = path
        self.frames = 0
        path.parent.mkdir(parents=True, exist_ok=True)
        self._writer = imageio.get_writer(str(path), mode='I', duration=duration, loop=0)

    def append(self, frame_array: np.ndarray) -> None:
        write_gif(self._writer, frame_array)
        self.frames += 1

    def close(self) -> None:
        if self._writer is not None:
            self._writer.close()
            self._writer = None
