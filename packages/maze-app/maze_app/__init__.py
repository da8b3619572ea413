"""maze-app - Menu, map browser and animated search state machine."""
from __future__ import annotations

from maze_app.config import AppConfig
from maze_app.events import Cancel, Confirm, Direction, InputEvent, Navigate, Quit
from maze_app.bus import SignalBus
from maze_app.snapshot import BrowserView, FrameSnapshot, Layer, MenuView, View
from maze_app.app import (
    App,
    BrowserState,
    GameSession,
    GameState,
    MenuItem,
    MenuState,
)
from maze_app.loop import InputSource, Renderer, run

__all__ = [
    "AppConfig",
    "Direction",
    "Navigate",
    "Confirm",
    "Cancel",
    "Quit",
    "InputEvent",
    "SignalBus",
    "FrameSnapshot",
    "Layer",
    "MenuView",
    "BrowserView",
    "View",
    "App",
    "MenuItem",
    "MenuState",
    "BrowserState",
    "GameState",
    "GameSession",
    "Renderer",
    "InputSource",
    "run",
]
