"""Curses drawing for menu, map list and animated search frames."""
from __future__ import annotations

import curses

from maze_app import BrowserView, FrameSnapshot, MenuView, View

from ui.constants import (
    BROWSER_HINT,
    CELL_W,
    GAME_HINT,
    GLYPHS,
    LAYER_PAIRS,
    MENU_HINT,
    PAIR_COLORS,
    PAIR_ERROR,
    PAIR_FRAME,
)
from ui.status import StatusLine


def safe_addstr(stdscr: curses.window, y: int, x: int, s: str, attr: int = 0) -> None:
    """addstr that ignores writes falling outside the window."""
    h, w = stdscr.getmaxyx()
    if y < 0 or y >= h or x < 0 or x >= w:
        return
    try:
        stdscr.addstr(y, x, s[: max(0, w - x - 1)], attr)
    except curses.error:
        pass


class CursesRenderer:
    """Renderer drawing every view into one curses window."""

    def __init__(self, stdscr: curses.window, status: StatusLine) -> None:
        self._screen = stdscr
        self._status = status
        self._colors = False
        if curses.has_colors():
            curses.start_color()
            try:
                curses.use_default_colors()
                background = -1
            except curses.error:
                background = curses.COLOR_BLACK
            for pair, fg in PAIR_COLORS.items():
                curses.init_pair(pair, fg, background)
            self._colors = True

    def _pair(self, pair: int) -> int:
        return curses.color_pair(pair) if self._colors and pair else curses.A_NORMAL

    def draw(self, view: View) -> None:
        self._screen.erase()
        if isinstance(view, MenuView):
            self._draw_menu(view)
        elif isinstance(view, BrowserView):
            self._draw_browser(view)
        else:
            self._draw_frame(view)
        self._screen.refresh()

    # --- Chrome ---

    def _draw_title(self, title: str, hint: str) -> None:
        h, w = self._screen.getmaxyx()
        attr = self._pair(PAIR_FRAME) | curses.A_BOLD
        safe_addstr(self._screen, 0, max(0, (w - len(title)) // 2), title, attr)
        safe_addstr(self._screen, h - 2, max(0, (w - len(hint)) // 2), hint, self._pair(PAIR_FRAME))

    def _draw_status(self, error: str | None = None) -> None:
        h, _ = self._screen.getmaxyx()
        if error:
            safe_addstr(self._screen, h - 1, 0, error, self._pair(PAIR_ERROR) | curses.A_BOLD)
        elif self._status.message:
            attr = self._pair(PAIR_ERROR) if self._status.is_error else curses.A_DIM
            safe_addstr(self._screen, h - 1, 0, self._status.message, attr)

    def _draw_list(self, rows: list[tuple[str, bool]], top: int) -> None:
        _, w = self._screen.getmaxyx()
        width = max((len(text) for text, _ in rows), default=0) + 4
        x = max(0, (w - width) // 2)
        for i, (text, active) in enumerate(rows):
            if active:
                attr = curses.A_REVERSE | self._pair(PAIR_FRAME)
            else:
                attr = self._pair(PAIR_FRAME)
            safe_addstr(self._screen, top + i, x, f"  {text}".ljust(width), attr)

    # --- Views ---

    def _draw_menu(self, view: MenuView) -> None:
        self._draw_title("Maze pathfinding", MENU_HINT)
        rows = [(item, i == view.cursor) for i, item in enumerate(view.items)]
        self._draw_list(rows, top=3)
        safe_addstr(self._screen, 4 + len(rows), 2, f"Map: {view.current_map}", curses.A_DIM)
        self._draw_status(view.error)

    def _draw_browser(self, view: BrowserView) -> None:
        self._draw_title("Map list", BROWSER_HINT)
        rows = [(name, i == view.cursor) for i, name in view.visible]
        self._draw_list(rows, top=2)
        if view.offset > 0:
            safe_addstr(self._screen, 1, 2, "^ more", curses.A_DIM)
        if view.offset + view.height < len(view.names):
            safe_addstr(self._screen, 2 + len(rows), 2, "v more", curses.A_DIM)
        self._draw_status(view.error)

    def _draw_frame(self, frame: FrameSnapshot) -> None:
        h, w = self._screen.getmaxyx()
        self._draw_title(frame.map_name or "Maze", GAME_HINT)
        grid = frame.grid
        visible_rows = max(1, h - 5)
        # Scroll vertically so the search head stays on screen.
        first_row = 0
        head = frame.head
        if grid.rows > visible_rows and head is not None:
            first_row = min(max(0, head[0] - visible_rows // 2), grid.rows - visible_rows)
        x0 = max(0, (w - grid.cols * CELL_W) // 2)
        for r in range(first_row, min(grid.rows, first_row + visible_rows)):
            y = 2 + r - first_row
            for c in range(grid.cols):
                layer = frame.layer_at((r, c))
                attr = self._pair(LAYER_PAIRS[layer])
                safe_addstr(self._screen, y, x0 + c * CELL_W, GLYPHS[layer], attr)
        safe_addstr(self._screen, h - 3, 0, frame.status_line(), curses.A_BOLD)
        self._draw_status()
