"""pygame event capture translated into InputEvents."""
from __future__ import annotations

import pygame

from maze_app import Cancel, Confirm, Direction, InputEvent, Navigate, Quit

_KEYMAP: dict[int, InputEvent] = {
    pygame.K_UP: Navigate(Direction.UP),
    pygame.K_k: Navigate(Direction.UP),
    pygame.K_DOWN: Navigate(Direction.DOWN),
    pygame.K_j: Navigate(Direction.DOWN),
    pygame.K_RETURN: Confirm(),
    pygame.K_KP_ENTER: Confirm(),
    pygame.K_SPACE: Confirm(),
    pygame.K_RIGHT: Confirm(),
    pygame.K_l: Confirm(),
    pygame.K_ESCAPE: Cancel(),
    pygame.K_BACKSPACE: Cancel(),
    pygame.K_LEFT: Cancel(),
    pygame.K_h: Cancel(),
    pygame.K_q: Quit(),
}


class WindowInput:
    """InputSource that waits on the pygame event queue."""

    def poll(self, timeout: float) -> list[InputEvent]:
        # wait(0) would block forever.
        first = pygame.event.wait(max(1, int(timeout * 1000)))
        events: list[InputEvent] = []
        for event in [first, *pygame.event.get()]:
            if event.type == pygame.QUIT:
                events.append(Quit())
            elif event.type == pygame.KEYDOWN and event.key in _KEYMAP:
                events.append(_KEYMAP[event.key])
        return events
