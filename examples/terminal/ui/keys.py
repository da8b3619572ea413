"""Key capture for curses: raw key codes in, InputEvents out."""
from __future__ import annotations

import curses

from maze_app import Cancel, Confirm, Direction, InputEvent, Navigate, Quit

from ui.constants import KEYS_BACK, KEYS_ENTER


def translate(key: int) -> InputEvent | None:
    """Map one curses key code to an event, or None for unbound keys."""
    if key in (curses.KEY_UP, ord("k")):
        return Navigate(Direction.UP)
    if key in (curses.KEY_DOWN, ord("j")):
        return Navigate(Direction.DOWN)
    if key in KEYS_ENTER or key in (curses.KEY_RIGHT, ord("l"), ord(" ")):
        return Confirm()
    if key in KEYS_BACK or key in (curses.KEY_LEFT, ord("h")):
        return Cancel()
    if key in (ord("q"), ord("Q")):
        return Quit()
    return None


class KeyboardInput:
    """InputSource reading from a curses window.

    The first key waits up to ``timeout``; anything already buffered
    after it is drained without waiting.
    """

    def __init__(self, stdscr: curses.window) -> None:
        self._screen = stdscr

    def poll(self, timeout: float) -> list[InputEvent]:
        events: list[InputEvent] = []
        self._screen.timeout(max(0, int(timeout * 1000)))
        key = self._screen.getch()
        self._screen.timeout(0)
        while key != -1:
            if key == curses.KEY_RESIZE:
                self._screen.clear()
            else:
                event = translate(key)
                if event is not None:
                    events.append(event)
            key = self._screen.getch()
        return events
