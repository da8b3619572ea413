"""Application configuration dataclass."""
from __future__ import annotations

from dataclasses import dataclass

from maze_grid import MAP_SUFFIX


@dataclass(frozen=True)
class AppConfig:
    """Immutable settings for the maze application.

    Attributes:
        steps_per_second: Initial search animation speed.
        min_steps_per_second: Lower bound when the user slows the animation.
        max_steps_per_second: Upper bound when the user speeds it up.
        max_burst: Most search steps a single frame may run.
        frame_interval: Seconds between frames; also the input poll timeout.
        map_dir: Directory scanned for map files.
        map_suffix: File name suffix of map files.
        viewport_height: Rows of the map list visible at once.
        require_border: Reject maps whose edge is not walls and exits.
    """

    steps_per_second: float = 5.0
    min_steps_per_second: float = 0.5
    max_steps_per_second: float = 160.0
    max_burst: int = 8
    frame_interval: float = 0.05
    map_dir: str = "."
    map_suffix: str = MAP_SUFFIX
    viewport_height: int = 10
    require_border: bool = False

    def __post_init__(self) -> None:
        if not 0 < self.min_steps_per_second <= self.max_steps_per_second:
            raise ValueError(
                "speed bounds must satisfy 0 < min_steps_per_second <= max_steps_per_second"
            )
        if not self.min_steps_per_second <= self.steps_per_second <= self.max_steps_per_second:
            raise ValueError(
                f"steps_per_second must be within [{self.min_steps_per_second}, "
                f"{self.max_steps_per_second}], got {self.steps_per_second}"
            )
        if self.max_burst < 1:
            raise ValueError(f"max_burst must be >= 1, got {self.max_burst}")
        if self.frame_interval <= 0:
            raise ValueError(f"frame_interval must be > 0, got {self.frame_interval}")
        if self.viewport_height < 1:
            raise ValueError(f"viewport_height must be >= 1, got {self.viewport_height}")
