"""Maze pathfinding in the terminal: watch a depth-first search solve a maze.

Controls:
  j / Down        Move down (slower in game)
  k / Up          Move up (faster in game)
  l / Enter       Select; pause, resume or replay in game
  h / Esc         Back to the menu
  q               Quit
"""
from __future__ import annotations

import argparse
import curses
from pathlib import Path

from maze_app import App, AppConfig, SignalBus, run

from ui.keys import KeyboardInput
from ui.renderer import CursesRenderer
from ui.status import StatusLine

MAPS_DIR = Path(__file__).resolve().parent.parent / "maps"


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Maze pathfinding animation (terminal)")
    p.add_argument("--maps-dir", default=str(MAPS_DIR),
                   help="Directory scanned for *.labmap files (default: examples/maps)")
    p.add_argument("--speed", type=float, default=5.0, help="Search steps per second (default: 5)")
    p.add_argument("--burst", type=int, default=8, help="Most search steps per frame (default: 8)")
    p.add_argument("--fps", type=int, default=20, help="Frames per second (default: 20)")
    p.add_argument("--strict", action="store_true",
                   help="Only accept maps enclosed by walls and exits")
    return p.parse_args()


def build_config(args: argparse.Namespace) -> AppConfig:
    return AppConfig(
        steps_per_second=args.speed,
        max_burst=args.burst,
        frame_interval=1.0 / max(1, args.fps),
        map_dir=args.maps_dir,
        require_border=args.strict,
    )


def play(stdscr: curses.window, config: AppConfig) -> None:
    curses.curs_set(0)
    stdscr.keypad(True)
    bus = SignalBus()
    status = StatusLine()
    status.attach(bus)
    app = App(config=config, bus=bus)
    try:
        run(app, CursesRenderer(stdscr, status), KeyboardInput(stdscr))
    finally:
        status.detach(bus)


def main() -> None:
    args = parse_args()
    try:
        config = build_config(args)
    except ValueError as exc:
        raise SystemExit(f"invalid option: {exc}")
    curses.wrapper(play, config)


if __name__ == "__main__":
    main()
