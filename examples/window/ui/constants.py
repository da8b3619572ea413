"""Layout, color, and rendering constants."""
from __future__ import annotations

from maze_app import Layer

SCREEN_W = 800
SCREEN_H = 600
TITLE_H = 36
STATUS_H = 56
MAZE_H = SCREEN_H - TITLE_H - STATUS_H
MAX_TILE = 32
MIN_TILE = 4
LIST_ROW_H = 28

# UI colors
COLOR_BG = (20, 20, 30)
COLOR_STATUS_BG = (30, 30, 40)
COLOR_TEXT = (200, 200, 200)
COLOR_TEXT_DIM = (130, 130, 140)
COLOR_ACCENT = (60, 180, 90)
COLOR_SELECTED_TEXT = (255, 255, 255)
COLOR_ERROR = (255, 80, 80)
COLOR_INFO = (100, 255, 100)

LAYER_COLORS: dict[Layer, tuple[int, int, int]] = {
    Layer.WALL: (40, 120, 60),
    Layer.OPEN: (28, 28, 38),
    Layer.ENTRY: (230, 200, 60),
    Layer.EXIT: (240, 140, 40),
    Layer.VISITED: (50, 70, 130),
    Layer.PATH: (200, 60, 60),
    Layer.HEAD: (255, 255, 255),
}

MENU_HINT = "Up/Down move  Enter select  Q quit"
BROWSER_HINT = "Up/Down move  Enter open  Esc back"
GAME_HINT = "Up faster  Down slower  Space pause/replay  Esc menu"


def tile_size(rows: int, cols: int) -> int:
    """Largest square tile that fits the maze area."""
    size = min(SCREEN_W // max(1, cols), MAZE_H // max(1, rows))
    return max(MIN_TILE, min(MAX_TILE, size))
