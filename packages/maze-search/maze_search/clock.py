"""AnimationClock - how many search steps a rendered frame may run."""
from __future__ import annotations

import math

DEFAULT_MAX_BURST = 8


def ticks_due(
    now: float,
    last_tick: float,
    steps_per_second: float,
    max_burst: int | None = DEFAULT_MAX_BURST,
) -> int:
    """Steps owed since ``last_tick``, floored and clamped to ``[0, max_burst]``.

    ``max_burst=None`` returns the uncapped count.
    """
    elapsed = now - last_tick
    if elapsed <= 0:
        return 0
    owed = math.floor(elapsed * steps_per_second)
    return owed if max_burst is None else min(owed, max_burst)


class AnimationClock:
    """Wall-clock pacing for one animated search.

    The clock never touches the search itself; it only says how many
    ``step()`` calls the current frame is allowed to make.
    """

    def __init__(
        self,
        steps_per_second: float,
        now: float,
        max_burst: int = DEFAULT_MAX_BURST,
    ) -> None:
        if steps_per_second <= 0:
            raise ValueError("steps_per_second must be positive")
        if max_burst < 1:
            raise ValueError("max_burst must be at least 1")
        self._rate = float(steps_per_second)
        self._max_burst = max_burst
        self._last_tick = now
        self._paused = False

    @property
    def steps_per_second(self) -> float:
        return self._rate

    @property
    def interval(self) -> float:
        return 1.0 / self._rate

    @property
    def max_burst(self) -> int:
        return self._max_burst

    @property
    def last_tick(self) -> float:
        return self._last_tick

    @property
    def paused(self) -> bool:
        return self._paused

    def advance(self, now: float) -> int:
        if self._paused:
            return 0
        owed = ticks_due(now, self._last_tick, self._rate, max_burst=None)
        if owed > self._max_burst:
            # Behind by more than one burst: drop the backlog.
            self._last_tick = now
            return self._max_burst
        self._last_tick += owed / self._rate
        return owed

    def set_rate(self, steps_per_second: float, now: float) -> None:
        if steps_per_second <= 0:
            raise ValueError("steps_per_second must be positive")
        self._rate = float(steps_per_second)
        self._last_tick = now

    def pause(self, now: float) -> None:
        self._paused = True
        self._last_tick = now

    def resume(self, now: float) -> None:
        self._paused = False
        self._last_tick = now

    def toggle(self, now: float) -> bool:
        """Flip the paused flag and return the new value."""
        if self._paused:
            self.resume(now)
        else:
            self.pause(now)
        return self._paused

    def reset(self, now: float) -> None:
        self._last_tick = now

