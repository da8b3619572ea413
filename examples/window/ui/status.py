"""Bottom status bar."""
from __future__ import annotations

from typing import Any

import pygame

from maze_app import SignalBus
from maze_app.bus import MAP_REJECTED, describe

from ui.constants import COLOR_ERROR, COLOR_INFO, COLOR_STATUS_BG, SCREEN_H, SCREEN_W, STATUS_H


class StatusBar:
    """Displays the latest app signal at the bottom of the screen."""

    def __init__(self) -> None:
        self._message = ""
        self._color = COLOR_INFO

    def attach(self, bus: SignalBus) -> None:
        bus.subscribe_all(self.on_signal)

    def detach(self, bus: SignalBus) -> None:
        bus.unsubscribe_all(self.on_signal)

    def on_signal(self, signal_name: str, data: dict[str, Any]) -> None:
        color = COLOR_ERROR if signal_name == MAP_REJECTED else COLOR_INFO
        self.set(describe(signal_name, data), color)

    def set(self, message: str, color: tuple[int, int, int] = COLOR_INFO) -> None:
        self._message = message
        self._color = color

    def draw(
        self,
        surface: pygame.Surface,
        font: pygame.font.Font,
        line: str = "",
        error: str | None = None,
    ) -> None:
        top = SCREEN_H - STATUS_H
        pygame.draw.rect(surface, COLOR_STATUS_BG, (0, top, SCREEN_W, STATUS_H))
        if line:
            surface.blit(font.render(line, True, (230, 230, 230)), (8, top + 6))
        message, color = (error, COLOR_ERROR) if error else (self._message, self._color)
        if message:
            surface.blit(font.render(message, True, color), (8, top + 30))
