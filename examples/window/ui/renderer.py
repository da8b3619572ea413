"""pygame drawing for menu, map list and animated search frames."""
from __future__ import annotations

import pygame

from maze_app import BrowserView, FrameSnapshot, MenuView, View

from ui.constants import (
    BROWSER_HINT,
    COLOR_ACCENT,
    COLOR_BG,
    COLOR_SELECTED_TEXT,
    COLOR_TEXT,
    COLOR_TEXT_DIM,
    GAME_HINT,
    LAYER_COLORS,
    LIST_ROW_H,
    MAZE_H,
    MENU_HINT,
    SCREEN_W,
    TITLE_H,
    tile_size,
)
from ui.status import StatusBar


def draw_title(surface: pygame.Surface, font: pygame.font.Font, title: str, hint: str) -> None:
    text = font.render(title, True, COLOR_ACCENT)
    surface.blit(text, ((SCREEN_W - text.get_width()) // 2, 8))
    hint_text = font.render(hint, True, COLOR_TEXT_DIM)
    surface.blit(hint_text, (SCREEN_W - hint_text.get_width() - 8, TITLE_H + MAZE_H - 22))


def draw_list(
    surface: pygame.Surface,
    font: pygame.font.Font,
    rows: list[tuple[str, bool]],
    top: int,
) -> None:
    """Centered list of entries with the active one highlighted."""
    width = 320
    x = (SCREEN_W - width) // 2
    for i, (label, active) in enumerate(rows):
        rect = pygame.Rect(x, top + i * LIST_ROW_H, width, LIST_ROW_H - 4)
        if active:
            pygame.draw.rect(surface, COLOR_ACCENT, rect)
            color = COLOR_SELECTED_TEXT
        else:
            color = COLOR_ACCENT
        surface.blit(font.render(label, True, color), (rect.x + 12, rect.y + 4))


def draw_maze(surface: pygame.Surface, frame: FrameSnapshot) -> None:
    grid = frame.grid
    size = tile_size(grid.rows, grid.cols)
    x0 = (SCREEN_W - grid.cols * size) // 2
    y0 = TITLE_H + max(0, (MAZE_H - grid.rows * size) // 2)
    for r, c in grid.coords():
        color = LAYER_COLORS[frame.layer_at((r, c))]
        rect = pygame.Rect(x0 + c * size, y0 + r * size, size, size)
        pygame.draw.rect(surface, color, rect)


class WindowRenderer:
    """Renderer drawing every view into the display surface."""

    def __init__(self, screen: pygame.Surface, status: StatusBar) -> None:
        self._screen = screen
        self._status = status
        self._font = pygame.font.SysFont("monospace", 16)

    def draw(self, view: View) -> None:
        self._screen.fill(COLOR_BG)
        if isinstance(view, MenuView):
            draw_title(self._screen, self._font, "Maze pathfinding", MENU_HINT)
            rows = [(item, i == view.cursor) for i, item in enumerate(view.items)]
            draw_list(self._screen, self._font, rows, top=TITLE_H + 40)
            self._status.draw(self._screen, self._font, f"Map: {view.current_map}", view.error)
        elif isinstance(view, BrowserView):
            draw_title(self._screen, self._font, "Map list", BROWSER_HINT)
            rows = [(name, i == view.cursor) for i, name in view.visible]
            draw_list(self._screen, self._font, rows, top=TITLE_H + 8)
            position = f"{view.cursor + 1}/{len(view.names)}" if view.names else "no maps"
            self._status.draw(self._screen, self._font, position, view.error)
        else:
            draw_title(self._screen, self._font, view.map_name or "Maze", GAME_HINT)
            draw_maze(self._screen, view)
            self._status.draw(self._screen, self._font, view.status_line())
        pygame.display.flip()
