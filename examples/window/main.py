"""Maze pathfinding in a window: watch a depth-first search solve a maze.

Controls:
  Up / Down       Move the cursor; faster / slower in game
  Enter / Space   Select; pause, resume or replay in game
  Escape          Back to the menu
  Q               Quit
"""
from __future__ import annotations

import argparse
from pathlib import Path

import pygame

from maze_app import App, AppConfig, SignalBus, run

from ui.constants import SCREEN_H, SCREEN_W
from ui.input import WindowInput
from ui.renderer import WindowRenderer
from ui.status import StatusBar

MAPS_DIR = Path(__file__).resolve().parent.parent / "maps"


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Maze pathfinding animation (pygame window)")
    p.add_argument("--maps-dir", default=str(MAPS_DIR),
                   help="Directory scanned for *.labmap files (default: examples/maps)")
    p.add_argument("--speed", type=float, default=5.0, help="Search steps per second (default: 5)")
    p.add_argument("--burst", type=int, default=8, help="Most search steps per frame (default: 8)")
    p.add_argument("--fps", type=int, default=60, help="Frames per second (default: 60)")
    p.add_argument("--rows", type=int, default=12, help="Visible rows in the map list (default: 12)")
    p.add_argument("--strict", action="store_true",
                   help="Only accept maps enclosed by walls and exits")
    return p.parse_args()


def main() -> None:
    args = parse_args()
    try:
        config = AppConfig(
            steps_per_second=args.speed,
            max_burst=args.burst,
            frame_interval=1.0 / max(1, args.fps),
            map_dir=args.maps_dir,
            viewport_height=args.rows,
            require_border=args.strict,
        )
    except ValueError as exc:
        raise SystemExit(f"invalid option: {exc}")

    pygame.init()
    try:
        screen = pygame.display.set_mode((SCREEN_W, SCREEN_H))
        pygame.display.set_caption("Maze pathfinding")
        bus = SignalBus()
        status = StatusBar()
        status.attach(bus)
        app = App(config=config, bus=bus)
        try:
            run(app, WindowRenderer(screen, status), WindowInput())
        finally:
            status.detach(bus)
    finally:
        pygame.quit()


if __name__ == "__main__":
    main()
