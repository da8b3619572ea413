"""Map text format, the built-in default map and ``.labmap`` discovery.

A map is a rectangular block of single-character tokens, one row per line:
``1`` entry, ``2`` wall, ``3`` open, ``4`` exit. Spaces or tabs between
tokens are ignored, so ``1 3 2`` and ``132`` describe the same row.
"""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from maze_grid.grid import Grid
from maze_grid.types import Cell, InvalidMap, MapUnreadable

MAP_SUFFIX = ".labmap"
DEFAULT_NAME = "Default"

DEFAULT_MAP = """\
2222222222222222222222222222222
2133333333222223333332222223332
2232222223332223232232322223232
2233333223232223232232322223232
2232323223232223232232322222232
2232323223333333232233333333232
2232323222222222232222222222232
2232323333333332233333333332232
2232222222222232222222222232232
2232333333322233333322332232232
2232322232322222232322232232232
2232322232333332232322232232232
2232322232222232232322233332232
2232322233332232232322232232232
2232322222222232232322232232232
2232333333333232232322232232232
2232222222222232232322232232232
2233333332222232232322232232232
2222222232222232232322232232232
2333333333333332232222232233334
2222222222222222222222222222222"""

_TOKENS = {cell.value: cell for cell in Cell}


@dataclass(frozen=True)
class MapSource:
    """A selectable map: either a file on disk or inline text."""

    name: str
    path: Path | None = None
    text: str | None = None


def parse_map(text: str, name: str = "", require_border: bool = False) -> Grid:
    """Parse map text into a Grid.

    Raises InvalidMap for unknown tokens, ragged rows, or a grid that breaks
    the Grid invariants. With ``require_border`` the map must also be at
    least 3x3, its edge may hold only walls and exits, and exits may not
    appear in the interior.
    """
    rows: list[list[Cell]] = []
    for lineno, line in enumerate(text.strip().splitlines(), start=1):
        tokens = "".join(line.split())
        row: list[Cell] = []
        for ch in tokens:
            cell = _TOKENS.get(ch)
            if cell is None:
                raise InvalidMap(name, f"line {lineno}: unknown token {ch!r}")
            row.append(cell)
        rows.append(row)

    grid = Grid.from_rows(rows, name=name)
    if require_border:
        _check_border(grid)
    return grid


def _check_border(grid: Grid) -> None:
    if grid.rows < 3 or grid.cols < 3:
        raise InvalidMap(
            grid.name, f"enclosed maps must be at least 3x3, got {grid.rows}x{grid.cols}"
        )
    last_row, last_col = grid.rows - 1, grid.cols - 1
    for coord in grid.coords():
        r, c = coord
        cell = grid.at(coord)
        on_edge = r in (0, last_row) or c in (0, last_col)
        if on_edge and cell not in (Cell.WALL, Cell.EXIT):
            raise InvalidMap(grid.name, f"edge cell {coord} must be a wall or exit")
        if not on_edge and cell is Cell.EXIT:
            raise InvalidMap(grid.name, f"exit {coord} is not on the edge")


def default_source() -> MapSource:
    return MapSource(name=DEFAULT_NAME, text=DEFAULT_MAP)


def discover_maps(directory: str | Path, suffix: str = MAP_SUFFIX) -> list[MapSource]:
    """List map files in ``directory``, sorted by name.

    Files are not opened here; problems surface when a map is loaded.
    A missing directory yields an empty list.
    """
    root = Path(directory)
    if not root.is_dir():
        return []
    found: list[MapSource] = []
    for path in sorted(root.iterdir()):
        if path.is_file() and path.name.endswith(suffix) and len(path.name) > len(suffix):
            found.append(MapSource(name=path.name[: -len(suffix)], path=path))
    return found


def catalog(directory: str | Path, suffix: str = MAP_SUFFIX) -> list[MapSource]:
    """The default map followed by every map discovered in ``directory``."""
    return [default_source(), *discover_maps(directory, suffix)]


def load_source(source: MapSource, require_border: bool = False) -> Grid:
    """Read and parse a MapSource. Raises MapUnreadable or InvalidMap."""
    if source.text is not None:
        text = source.text
    elif source.path is not None:
        try:
            text = source.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise MapUnreadable(source.name, str(exc)) from exc
    else:
        raise MapUnreadable(source.name, "map source has neither a path nor text")
    return parse_map(text, name=source.name, require_border=require_border)
