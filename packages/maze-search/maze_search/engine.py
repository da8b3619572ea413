"""SearchEngine - depth-first search that advances one move per call."""
from __future__ import annotations

from typing import TYPE_CHECKING

from maze_search.types import (
    SearchFinishedError,
    SearchStatus,
    StepOutcome,
)

if TYPE_CHECKING:
    from maze_grid import Coord, Grid


class SearchEngine:
    """Explicit-stack DFS from the grid entry toward any exit.

    ``stack`` is both the control stack and the current partial path.
    ``visited`` only grows: a cell left by backtracking is never pushed
    again, so every cell is pushed at most once.
    """

    def __init__(self, grid: Grid) -> None:
        self._grid = grid
        entry = grid.entry()
        self._stack: list[Coord] = [entry]
        self._visited: set[Coord] = {entry}
        self._steps = 0
        self._status = (
            SearchStatus.FOUND if grid.is_exit(entry) else SearchStatus.EXPLORING
        )

    @property
    def grid(self) -> Grid:
        return self._grid

    @property
    def stack(self) -> tuple[Coord, ...]:
        return tuple(self._stack)

    @property
    def visited(self) -> frozenset[Coord]:
        return frozenset(self._visited)

    @property
    def status(self) -> SearchStatus:
        return self._status

    @property
    def steps(self) -> int:
        """Number of step() calls that changed the search."""
        return self._steps

    @property
    def finished(self) -> bool:
        return self._status.terminal

    def path(self) -> tuple[Coord, ...]:
        return tuple(self._stack)

    def step(self) -> tuple[StepOutcome, ...]:
        if self._status is SearchStatus.CANCELLED:
            return ()
        if self._status is not SearchStatus.EXPLORING:
            raise SearchFinishedError(
                f"search already {self._status.value}; step() is not accepted"
            )

        self._steps += 1
        current = self._stack[-1]
        if self._grid.is_exit(current):
            self._status = SearchStatus.FOUND
            return (StepOutcome.found(current),)

        for neighbor in self._grid.neighbors(current):
            if neighbor not in self._visited:
                self._visited.add(neighbor)
                self._stack.append(neighbor)
                return (StepOutcome.advanced(neighbor),)

        self._stack.pop()
        if self._stack:
            return (StepOutcome.backtracked(current),)
        self._status = SearchStatus.EXHAUSTED
        return (StepOutcome.backtracked(current), StepOutcome.exhausted())

    def cancel(self) -> None:
        """Stop the search. Any later step() is a no-op."""
        self._status = SearchStatus.CANCELLED

    def run(self, limit: int | None = None) -> list[StepOutcome]:
        """Step until the search is finished (or ``limit`` steps) and return every outcome."""
        outcomes: list[StepOutcome] = []
        taken = 0
        while self._status is SearchStatus.EXPLORING:
            if limit is not None and taken >= limit:
                break
            outcomes.extend(self.step())
            taken += 1
        return outcomes
