"""Grid - immutable rectangular maze of tagged cells."""
from __future__ import annotations

from typing import Callable, Iterator, Sequence

from maze_grid.types import Cell, Coord, InvalidMap

# Compass order used by neighbors(): Down, Right, Up, Left.
DOWN = (1, 0)
RIGHT = (0, 1)
UP = (-1, 0)
LEFT = (0, -1)
NEIGHBOR_ORDER: tuple[Coord, ...] = (DOWN, RIGHT, UP, LEFT)


class Grid:
    """Fixed-size maze addressed by ``(row, column)``.

    Every constructor validates that the grid is non-empty and rectangular,
    has exactly one ENTRY cell and at least one EXIT cell. Entry and exits
    are derived from the cells, never passed in.
    """

    __slots__ = ("_rows", "_cols", "_cells", "_entry", "_exits", "_name")

    def __init__(self, cells: Sequence[Sequence[Cell]], name: str = "") -> None:
        if not cells or not cells[0]:
            cols = len(cells[0]) if cells else 0
            raise InvalidMap(name, f"dimensions must be non-zero, got {len(cells)}x{cols}")
        width = len(cells[0])
        for i, row in enumerate(cells):
            if len(row) != width:
                raise InvalidMap(name, f"row {i} has {len(row)} cells, expected {width}")

        entries: list[Coord] = []
        exits: list[Coord] = []
        for r, row in enumerate(cells):
            for c, cell in enumerate(row):
                if cell is Cell.ENTRY:
                    entries.append((r, c))
                elif cell is Cell.EXIT:
                    exits.append((r, c))
        if len(entries) != 1:
            raise InvalidMap(name, f"expected exactly one entry, found {len(entries)}")
        if not exits:
            raise InvalidMap(name, "map has no exit")

        self._cells = tuple(tuple(row) for row in cells)
        self._rows = len(self._cells)
        self._cols = width
        self._entry = entries[0]
        self._exits = frozenset(exits)
        self._name = name

    @classmethod
    def build(
        cls,
        rows: int,
        cols: int,
        cell_at: Callable[[int, int], Cell],
        name: str = "",
    ) -> Grid:
        if rows <= 0 or cols <= 0:
            raise InvalidMap(name, f"dimensions must be non-zero, got {rows}x{cols}")

        cells = tuple(
            tuple(cell_at(r, c) for c in range(cols)) for r in range(rows)
        )
        return cls(cells, name)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Cell]], name: str = "") -> Grid:
        """Build from nested rows of cells. Ragged rows raise InvalidMap."""
        return cls(rows, name)

    # --- Properties ---

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    @property
    def name(self) -> str:
        return self._name

    # --- Queries ---

    def in_bounds(self, coord: Coord) -> bool:
        r, c = coord
        return 0 <= r < self._rows and 0 <= c < self._cols

    def at(self, coord: Coord) -> Cell:
        if not self.in_bounds(coord):
            raise ValueError(
                f"{coord} out of bounds for {self._rows}x{self._cols} grid"
            )
        r, c = coord
        return self._cells[r][c]

    def entry(self) -> Coord:
        return self._entry

    def exits(self) -> frozenset[Coord]:
        return self._exits

    def is_exit(self, coord: Coord) -> bool:
        return coord in self._exits

    def neighbors(self, coord: Coord) -> list[Coord]:
        """Walkable in-bounds neighbors of ``coord`` in NEIGHBOR_ORDER."""
        r, c = coord
        result: list[Coord] = []
        for dr, dc in NEIGHBOR_ORDER:
            nr, nc = r + dr, c + dc
            if 0 <= nr < self._rows and 0 <= nc < self._cols:
                if self._cells[nr][nc].walkable:
                    result.append((nr, nc))
        return result

    def coords(self) -> Iterator[Coord]:
        for r in range(self._rows):
            for c in range(self._cols):
                yield (r, c)

    def walkable_count(self) -> int:
        return sum(1 for row in self._cells for cell in row if cell.walkable)

    def __repr__(self) -> str:
        return f"Grid(name={self._name!r}, rows={self._rows}, cols={self._cols})"
