"""Cell tags, coordinates and map errors for maze-grid."""
from __future__ import annotations

from enum import Enum

Coord = tuple[int, int]


class Cell(Enum):
    """Tag of a single maze cell. Values are the map file tokens."""

    ENTRY = "1"
    WALL = "2"
    OPEN = "3"
    EXIT = "4"

    @property
    def walkable(self) -> bool:
        return self is not Cell.WALL


class MapError(Exception):
    """Base class for maps that cannot be turned into a Grid."""

    def __init__(self, name: str, message: str) -> None:
        self.name = name
        self.reason = message
        super().__init__(f"{name}: {message}" if name else message)


class InvalidMap(MapError, ValueError):
    """Raised when map data violates the Grid invariants or the token format."""


class MapUnreadable(MapError, OSError):
    """Raised when a map file cannot be read."""
