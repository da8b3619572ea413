"""Read-only views handed to renderers once per tick."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Union

from maze_grid import Cell, Coord, Grid
from maze_search import SearchEngine, SearchStatus


class Layer(Enum):
    """What a renderer should show in one cell of a FrameSnapshot."""

    WALL = "wall"
    OPEN = "open"
    ENTRY = "entry"
    EXIT = "exit"
    VISITED = "visited"
    PATH = "path"
    HEAD = "head"


@dataclass(frozen=True)
class FrameSnapshot:
    grid: Grid
    stack: tuple[Coord, ...]
    visited: frozenset[Coord]
    status: SearchStatus
    map_name: str = ""
    steps: int = 0
    steps_per_second: float = 0.0
    paused: bool = False
    path_cells: frozenset[Coord] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "path_cells", frozenset(self.stack))

    @classmethod
    def capture(
        cls,
        engine: SearchEngine,
        map_name: str = "",
        steps_per_second: float = 0.0,
        paused: bool = False,
    ) -> FrameSnapshot:
        return cls(
            grid=engine.grid,
            stack=engine.stack,
            visited=engine.visited,
            status=engine.status,
            map_name=map_name,
            steps=engine.steps,
            steps_per_second=steps_per_second,
            paused=paused,
        )

    @property
    def head(self) -> Coord | None:
        return self.stack[-1] if self.stack else None

    def layer_at(self, coord: Coord) -> Layer:
        """Topmost layer at ``coord``: search head, path, visited, then the cell itself."""
        cell = self.grid.at(coord)
        if coord == self.head:
            return Layer.HEAD
        if cell is Cell.ENTRY:
            return Layer.ENTRY
        if cell is Cell.EXIT:
            return Layer.EXIT
        if coord in self.path_cells:
            return Layer.PATH
        if coord in self.visited:
            return Layer.VISITED
        return Layer.WALL if cell is Cell.WALL else Layer.OPEN

    def status_line(self) -> str:
        speed = f"{self.steps_per_second:g} steps/s"
        state = "paused" if self.paused and self.status is SearchStatus.EXPLORING else self.status.value
        return f"{self.map_name}  |  {state}  |  step {self.steps}  |  {speed}"


@dataclass(frozen=True)
class MenuView:
    items: tuple[str, ...]
    cursor: int
    current_map: str
    error: str | None = None


@dataclass(frozen=True)
class BrowserView:
    names: tuple[str, ...]
    cursor: int
    offset: int
    height: int
    error: str | None = None

    @property
    def visible(self) -> tuple[tuple[int, str], ...]:
        """``(index, name)`` pairs inside the viewport."""
        end = self.offset + self.height
        return tuple(
            (i, name) for i, name in enumerate(self.names) if self.offset <= i < end
        )


View = Union[MenuView, BrowserView, FrameSnapshot]
