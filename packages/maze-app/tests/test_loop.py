"""Tests for the main loop with scripted input and a recording renderer."""
from __future__ import annotations

from maze_grid import MapSource
from maze_search import SearchStatus
from maze_app import (
    App,
    AppConfig,
    Confirm,
    Direction,
    FrameSnapshot,
    InputSource,
    MenuView,
    Navigate,
    Quit,
    Renderer,
    SignalBus,
    run,
)

CORRIDOR = MapSource(name="corridor", text="1 3 2\n3 3 2\n2 3 4")


class RecordingRenderer:
    def __init__(self) -> None:
        self.views = []

    def draw(self, view) -> None:
        self.views.append(view)


class ScriptedInput:
    """Returns one scripted batch per poll and advances a fake clock by ``timeout``."""

    def __init__(self, batches, time) -> None:
        self.batches = list(batches)
        self.time = time
        self.timeouts = []

    def poll(self, timeout: float):
        self.timeouts.append(timeout)
        self.time.now += timeout
        return self.batches.pop(0) if self.batches else []


class FakeTime:
    def __init__(self) -> None:
        self.now = 0.0

    def __call__(self) -> float:
        return self.now


def make_app(time: FakeTime, bus: SignalBus | None = None) -> App:
    config = AppConfig(steps_per_second=8, frame_interval=0.125)
    return App(
        config=config,
        catalog=lambda: [CORRIDOR],
        clock=time,
        bus=bus,
    )


def test_fakes_satisfy_protocols():
    time = FakeTime()
    assert isinstance(RecordingRenderer(), Renderer)
    assert isinstance(ScriptedInput([], time), InputSource)


def test_quit_stops_before_drawing():
    time = FakeTime()
    app = make_app(time)
    renderer = RecordingRenderer()

    ticks = run(app, renderer, ScriptedInput([[Quit()]], time))

    assert ticks == 0
    assert renderer.views == []
    assert not app.running


def test_max_ticks_bounds_the_loop():
    time = FakeTime()
    app = make_app(time)
    renderer = RecordingRenderer()
    source = ScriptedInput([], time)

    assert run(app, renderer, source, max_ticks=3) == 3
    assert len(renderer.views) == 3
    assert all(isinstance(view, MenuView) for view in renderer.views)
    assert source.timeouts == [0.125, 0.125, 0.125]


def test_search_animates_to_completion():
    time = FakeTime()
    app = make_app(time)
    renderer = RecordingRenderer()
    # Menu -> Maps -> first entry.
    source = ScriptedInput([[Navigate(Direction.DOWN), Confirm()], [Confirm()]], time)

    run(app, renderer, source, max_ticks=12)

    assert app.current_map == CORRIDOR

    last = renderer.views[-1]
    assert isinstance(last, FrameSnapshot)
    assert last.status is SearchStatus.FOUND
    steps_seen = [view.steps for view in renderer.views if isinstance(view, FrameSnapshot)]
    assert steps_seen == sorted(steps_seen)


def test_signals_are_flushed_before_draw():
    time = FakeTime()
    bus = SignalBus()
    app = make_app(time, bus)
    order = []
    bus.subscribe_all(lambda name, data: order.append(name))

    class OrderRenderer:
        def draw(self, view) -> None:
            order.append("draw")

    source = ScriptedInput([[Confirm()]], time)
    run(app, OrderRenderer(), source, max_ticks=1)

    assert order == ["map_loaded", "search_started", "draw"]
