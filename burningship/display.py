"""Pygame window acting as pixel sink and event source."""

from __future__ import annotations

import numpy as np
import pygame

from .events import ViewerEvent, translate_event


class DisplayError(RuntimeError):
    """The window or its surface could not be created."""


class PygameDisplay:
    def __init__(self, width: int, height: int, *, title: str = "Burning Ship", fps: int = 60) -> None:
        self.width = width
        self.height = height
        self.title = title
        self.fps = fps
        self._screen = None
        self._clock = None

    @property
    def size(self) -> tuple[int, int]:
        return self.width, self.height

    def open(self) -> None:
        pygame.init()
        try:
            self._screen = pygame.display.set_mode(self.size)
        except pygame.error as exc:
            pygame.quit()
            raise DisplayError(f"could not open a {self.width}x{self.height} window: {exc}") from exc
        pygame.display.set_caption(self.title)
        self._clock = pygame.time.Clock()

    def poll(self) -> list[ViewerEvent]:
        """Wait for the next frame tick and return the pending viewer events."""

        self._clock.tick(self.fps)
        cursor = pygame.mouse.get_pos()
        events = []
        for event in pygame.event.get():
            translated = translate_event(event, cursor, self.size)
            if translated is not None:
                events.append(translated)
        return events

    def present(self, pixels: np.ndarray) -> None:
        # surfarray indexes surfaces as [x, y]
        pygame.surfarray.blit_array(self._screen, np.transpose(pixels[..., :3], (1, 0, 2)))
        pygame.display.flip()

    def close(self) -> None:
        self._screen = None
        pygame.quit()
