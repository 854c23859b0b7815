"""Input events understood by the viewer and their translation from pygame."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

import pygame

from .zoom import ZoomDirection


@dataclass(frozen=True)
class QuitEvent:
    pass


@dataclass(frozen=True)
class ZoomEvent:
    direction: ZoomDirection
    x: int
    y: int


ViewerEvent = Union[QuitEvent, ZoomEvent]


def cursor_in_bounds(cursor: tuple[int, int], size: tuple[int, int]) -> bool:
    x, y = cursor
    width, height = size
    return 0 <= x < width and 0 <= y < height


def translate_event(event: pygame.event.Event, cursor: tuple[int, int], size: tuple[int, int]) -> Optional[ViewerEvent]:
    """Map a pygame event to a viewer event, or ``None`` when it is ignored.

    Wheel events only become zooms when ``cursor`` lies on the ``size`` grid.
    """

    if event.type == pygame.QUIT:
        return QuitEvent()
    if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
        return QuitEvent()
    if event.type == pygame.MOUSEWHEEL:
        if event.y == 0 or not cursor_in_bounds(cursor, size):
            return None
        direction = ZoomDirection.IN if event.y > 0 else ZoomDirection.OUT
        return ZoomEvent(direction, int(cursor[0]), int(cursor[1]))
    return None
