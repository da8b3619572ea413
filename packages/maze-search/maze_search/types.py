"""Search status, step outcomes and errors for maze-search."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from maze_grid import Coord


class SearchStatus(Enum):
    """Lifecycle of a SearchEngine."""

    EXPLORING = "exploring"
    FOUND = "found"
    EXHAUSTED = "exhausted"
    CANCELLED = "cancelled"

    @property
    def terminal(self) -> bool:
        return self is not SearchStatus.EXPLORING


class StepKind(Enum):
    ADVANCED = "advanced"
    BACKTRACKED = "backtracked"
    FOUND = "found"
    EXHAUSTED = "exhausted"


@dataclass(frozen=True, slots=True)
class StepOutcome:
    """One event emitted by SearchEngine.step().

    ``coord`` is the cell pushed (ADVANCED), popped (BACKTRACKED) or
    reached (FOUND). EXHAUSTED carries no coordinate.
    """

    kind: StepKind
    coord: Coord | None = None

    @classmethod
    def advanced(cls, coord: Coord) -> StepOutcome:
        return cls(StepKind.ADVANCED, coord)

    @classmethod
    def backtracked(cls, coord: Coord) -> StepOutcome:
        return cls(StepKind.BACKTRACKED, coord)

    @classmethod
    def found(cls, coord: Coord) -> StepOutcome:
        return cls(StepKind.FOUND, coord)

    @classmethod
    def exhausted(cls) -> StepOutcome:
        return cls(StepKind.EXHAUSTED)


class SearchFinishedError(RuntimeError):
    """Raised when step() is called on a search that already found or exhausted."""
