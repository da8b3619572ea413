"""Main loop and the front-end protocols it drives."""
from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from maze_app.app import App
    from maze_app.events import InputEvent
    from maze_app.snapshot import View


@runtime_checkable
class Renderer(Protocol):
    """Draws one view per tick. Must not mutate anything it is given."""

    def draw(self, view: View) -> None: ...


@runtime_checkable
class InputSource(Protocol):
    """Blocks for at most ``timeout`` seconds and returns the events received."""

    def poll(self, timeout: float) -> list[InputEvent]: ...


def run(
    app: App,
    renderer: Renderer,
    source: InputSource,
    max_ticks: int | None = None,
) -> int:
    """Drive ``app`` until it stops (or ``max_ticks`` ticks). Returns ticks run.

    Each tick: wait up to one frame interval for input, apply every event,
    advance the app, flush pending signals, then draw.
    """
    interval = app.config.frame_interval
    ticks = 0
    while app.running:
        if max_ticks is not None and ticks >= max_ticks:
            break
        for event in source.poll(interval):
            app.handle(event)
            if not app.running:
                break
        if not app.running:
            break
        view = app.tick()
        app.bus.flush()
        renderer.draw(view)
        ticks += 1
    app.bus.flush()
    return ticks
