"""Glyphs, color pairs and key bindings for the curses front end."""
from __future__ import annotations

import curses

from maze_app import Layer

# Two terminal columns per maze cell keeps cells roughly square.
CELL_W = 2

GLYPHS: dict[Layer, str] = {
    Layer.WALL: "##",
    Layer.OPEN: "  ",
    Layer.ENTRY: "[]",
    Layer.EXIT: "<>",
    Layer.VISITED: "..",
    Layer.PATH: "::",
    Layer.HEAD: "@@",
}

# Color pair ids, initialised in CursesRenderer.
PAIR_FRAME = 1
PAIR_WALL = 2
PAIR_PATH = 3
PAIR_VISITED = 4
PAIR_MARK = 5
PAIR_ERROR = 6

LAYER_PAIRS: dict[Layer, int] = {
    Layer.WALL: PAIR_WALL,
    Layer.OPEN: 0,
    Layer.ENTRY: PAIR_MARK,
    Layer.EXIT: PAIR_MARK,
    Layer.VISITED: PAIR_VISITED,
    Layer.PATH: PAIR_PATH,
    Layer.HEAD: PAIR_PATH,
}

# Foreground per pair; the background is the terminal default when available.
PAIR_COLORS: dict[int, int] = {
    PAIR_FRAME: curses.COLOR_GREEN,
    PAIR_WALL: curses.COLOR_GREEN,
    PAIR_PATH: curses.COLOR_RED,
    PAIR_VISITED: curses.COLOR_BLUE,
    PAIR_MARK: curses.COLOR_YELLOW,
    PAIR_ERROR: curses.COLOR_RED,
}

KEYS_ENTER = (10, 13, curses.KEY_ENTER)
KEYS_BACK = (27, curses.KEY_BACKSPACE, 127)

MENU_HINT = "(j) down / (k) up / (l) select / (q) quit"
BROWSER_HINT = "(j) down / (k) up / (l) select / (h) return"
GAME_HINT = "(k) faster / (j) slower / (l) pause or replay / (h) return to menu"
