"""maze-grid - Immutable maze grids and map loading."""
from __future__ import annotations

from maze_grid.types import Cell, Coord, InvalidMap, MapError, MapUnreadable
from maze_grid.grid import NEIGHBOR_ORDER, Grid
from maze_grid.maps import (
    DEFAULT_MAP,
    MAP_SUFFIX,
    MapSource,
    catalog,
    default_source,
    discover_maps,
    load_source,
    parse_map,
)

__all__ = [
    "Cell",
    "Coord",
    "MapError",
    "InvalidMap",
    "MapUnreadable",
    "Grid",
    "NEIGHBOR_ORDER",
    "DEFAULT_MAP",
    "MAP_SUFFIX",
    "MapSource",
    "catalog",
    "default_source",
    "discover_maps",
    "load_source",
    "parse_map",
]
