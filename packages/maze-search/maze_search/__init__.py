"""maze-search - Step-resumable maze search and animation pacing."""
from __future__ import annotations

from maze_search.types import SearchFinishedError, SearchStatus, StepKind, StepOutcome
from maze_search.engine import SearchEngine
from maze_search.clock import AnimationClock, ticks_due

__all__ = [
    "SearchStatus",
    "StepKind",
    "StepOutcome",
    "SearchFinishedError",
    "SearchEngine",
    "AnimationClock",
    "ticks_due",
]
