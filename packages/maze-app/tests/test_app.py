"""Tests for the App state machine."""
from __future__ import annotations

from pathlib import Path

from maze_grid import MapSource, MapUnreadable
from maze_search import SearchStatus
from maze_app import (
    App,
    AppConfig,
    BrowserState,
    BrowserView,
    Cancel,
    Confirm,
    Direction,
    FrameSnapshot,
    GameState,
    MenuState,
    MenuView,
    Navigate,
    Quit,
    SignalBus,
)

CORRIDOR = MapSource(name="corridor", text="1 3 2\n3 3 2\n2 3 4")
WALLED = MapSource(name="walled", text="1 3 2\n2 2 2\n3 3 4")
BROKEN = MapSource(name="broken", text="3 3 4")

UP = Navigate(Direction.UP)
DOWN = Navigate(Direction.DOWN)


class FakeTime:
    def __init__(self, now: float = 0.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now


def make_app(
    sources: list[MapSource] | None = None,
    config: AppConfig | None = None,
) -> tuple[App, FakeTime, list[tuple[str, dict]]]:
    time = FakeTime()
    bus = SignalBus()
    received: list[tuple[str, dict]] = []
    bus.subscribe_all(lambda name, data: received.append((name, data)))
    app = App(
        config=config or AppConfig(steps_per_second=4, max_burst=8),
        catalog=lambda: list(sources if sources is not None else [CORRIDOR, WALLED, BROKEN]),
        clock=time,
        bus=bus,
    )
    return app, time, received


def open_map(app: App, index: int) -> None:
    """Menu -> Maps -> pick the map at ``index``."""
    app.handle(DOWN)
    app.handle(Confirm())
    for _ in range(index):
        app.handle(DOWN)
    app.handle(Confirm())


class TestMenu:
    def test_initial_state(self):
        app, _, _ = make_app()
        assert isinstance(app.state, MenuState)
        assert app.running
        view = app.view()
        assert isinstance(view, MenuView)
        assert view.items == ("Start", "Maps", "Quit")
        assert view.cursor == 0
        assert view.current_map == "Default"

    def test_cursor_is_clamped(self):
        app, _, _ = make_app()
        app.handle(UP)
        assert app.state.cursor == 0
        for _ in range(5):
            app.handle(DOWN)
        assert app.state.cursor == 2

    def test_start_opens_default_map(self):
        app, _, received = make_app()
        app.handle(Confirm())
        assert isinstance(app.state, GameState)
        assert app.state.session.name == "Default"
        assert app.state.session.grid.rows == 21
        app.bus.flush()
        assert [name for name, _ in received] == ["map_loaded", "search_started"]

    def test_quit_item_stops_app(self):
        app, _, _ = make_app()
        app.handle(DOWN)
        app.handle(DOWN)
        app.handle(Confirm())
        assert not app.running

    def test_quit_event_from_any_state(self):
        app, _, _ = make_app()
        open_map(app, 0)
        assert isinstance(app.state, GameState)
        app.handle(Quit())
        assert not app.running

    def test_cancel_in_menu_is_ignored(self):
        app, _, _ = make_app()
        app.handle(Cancel())
        assert isinstance(app.state, MenuState)
        assert app.running

    def test_catalog_failure_reported_in_menu(self):
        def failing() -> list[MapSource]:
            raise PermissionError("denied")

        app = App(catalog=failing, clock=FakeTime())
        app.handle(DOWN)
        app.handle(Confirm())
        assert isinstance(app.state, MenuState)
        assert "denied" in app.state.error


class TestBrowser:
    def test_maps_item_opens_browser(self):
        app, _, _ = make_app()
        app.handle(DOWN)
        app.handle(Confirm())
        assert isinstance(app.state, BrowserState)
        view = app.view()
        assert isinstance(view, BrowserView)
        assert view.names == ("corridor", "walled", "broken")
        assert view.cursor == 0

    def test_navigation_is_clamped(self):
        app, _, _ = make_app()
        app.handle(DOWN)
        app.handle(Confirm())
        for _ in range(10):
            app.handle(DOWN)
        assert app.state.cursor == 2
        app.handle(UP)
        assert app.state.cursor == 1

    def test_viewport_scrolls_with_cursor(self):
        sources = [MapSource(name=f"m{i}", text="14") for i in range(6)]
        app, _, _ = make_app(sources, AppConfig(viewport_height=3))
        app.handle(DOWN)
        app.handle(Confirm())
        for _ in range(4):
            app.handle(DOWN)
        assert (app.state.cursor, app.state.offset) == (4, 2)
        assert [i for i, _ in app.view().visible] == [2, 3, 4]
        for _ in range(4):
            app.handle(UP)
        assert (app.state.cursor, app.state.offset) == (0, 0)

    def test_selecting_valid_map_enters_game(self):
        app, _, _ = make_app()
        open_map(app, 0)
        assert isinstance(app.state, GameState)
        assert app.state.session.name == "corridor"
        assert app.current_map == CORRIDOR

    def test_invalid_map_stays_in_browser(self):
        app, _, received = make_app()
        open_map(app, 2)
        assert isinstance(app.state, BrowserState)
        assert "broken" in app.state.error
        assert "entry" in app.view().error
        app.bus.flush()
        assert received[-1][0] == "map_rejected"
        assert received[-1][1]["map"] == "broken"

    def test_selection_is_retryable_after_error(self):
        app, _, _ = make_app()
        open_map(app, 2)
        app.handle(UP)
        app.handle(Confirm())
        assert isinstance(app.state, GameState)
        assert app.state.session.name == "walled"

    def test_unreadable_map_stays_in_browser(self, tmp_path: Path):
        missing = MapSource(name="missing", path=tmp_path / "missing.labmap")
        app, _, _ = make_app([missing])
        open_map(app, 0)
        assert isinstance(app.state, BrowserState)
        assert "missing" in app.state.error

    def test_custom_loader_errors_are_surfaced(self):
        def loader(source: MapSource):
            raise MapUnreadable(source.name, "disk on fire")

        app = App(catalog=lambda: [CORRIDOR], loader=loader, clock=FakeTime())
        open_map(app, 0)
        assert isinstance(app.state, BrowserState)
        assert "disk on fire" in app.state.error

    def test_cancel_returns_to_menu_on_maps_item(self):
        app, _, _ = make_app()
        app.handle(DOWN)
        app.handle(Confirm())
        app.handle(Cancel())
        assert isinstance(app.state, MenuState)
        assert app.state.cursor == 1

    def test_browser_opens_on_current_map(self):
        app, _, _ = make_app()
        open_map(app, 1)
        app.handle(Cancel())
        app.handle(DOWN)
        app.handle(Confirm())
        assert app.state.cursor == 1

    def test_start_reuses_chosen_map(self):
        app, _, _ = make_app()
        open_map(app, 1)
        app.handle(Cancel())
        app.handle(Confirm())
        assert isinstance(app.state, GameState)
        assert app.state.session.name == "walled"

    def test_border_rule_from_config(self):
        app, _, _ = make_app(config=AppConfig(require_border=True))
        open_map(app, 0)
        assert isinstance(app.state, BrowserState)
        assert "edge" in app.state.error

    def test_empty_catalog(self):
        app, _, _ = make_app([])
        open_map(app, 0)
        assert isinstance(app.state, BrowserState)
        assert app.view().names == ()


class TestGame:
    def test_tick_returns_snapshot(self):
        app, time, _ = make_app()
        open_map(app, 0)
        view = app.tick()
        assert isinstance(view, FrameSnapshot)
        assert view.map_name == "corridor"
        assert view.stack == ((0, 0),)
        assert view.status is SearchStatus.EXPLORING

    def test_clock_paces_steps(self):
        app, time, _ = make_app()
        open_map(app, 0)
        time.now = 0.25
        assert app.tick().stack == ((0, 0), (1, 0))
        time.now = 0.75
        assert app.tick().stack == ((0, 0), (1, 0), (1, 1), (2, 1))

    def test_explicit_now(self):
        app, _, _ = make_app()
        open_map(app, 0)
        assert app.tick(now=0.5).steps == 2

    def test_stepping_stops_at_terminal_status(self):
        app, time, received = make_app()
        open_map(app, 0)
        time.now = 100.0
        snapshot = app.tick()
        assert snapshot.status is SearchStatus.FOUND
        assert snapshot.steps == 5
        assert snapshot.stack == ((0, 0), (1, 0), (1, 1), (2, 1), (2, 2))

        time.now = 200.0
        again = app.tick()
        assert again.steps == 5
        assert isinstance(app.state, GameState)

        app.bus.flush()
        finished = [data for name, data in received if name == "search_finished"]
        assert finished == [
            {"map": "corridor", "status": "found", "steps": 5, "path_length": 5}
        ]

    def test_exhausted_search_stays_on_screen(self):
        app, time, received = make_app()
        open_map(app, 1)
        time.now = 100.0
        snapshot = app.tick()
        assert snapshot.status is SearchStatus.EXHAUSTED
        assert snapshot.stack == ()
        assert isinstance(app.state, GameState)
        app.bus.flush()
        assert received[-1] == (
            "search_finished",
            {"map": "walled", "status": "exhausted", "steps": 3, "path_length": 0},
        )

    def test_cancel_mid_search_returns_to_menu(self):
        app, time, received = make_app()
        open_map(app, 0)
        time.now = 0.5
        app.tick()
        engine = app.state.session.engine

        app.handle(Cancel())

        assert isinstance(app.state, MenuState)
        assert engine.status is SearchStatus.CANCELLED
        assert engine.step() == ()
        app.bus.flush()
        assert received[-1] == ("search_cancelled", {"map": "corridor", "steps": 2})

    def test_cancel_after_finish_publishes_no_cancel(self):
        app, time, received = make_app()
        open_map(app, 0)
        time.now = 100.0
        app.tick()
        app.handle(Cancel())
        app.bus.flush()
        assert isinstance(app.state, MenuState)
        assert "search_cancelled" not in [name for name, _ in received]

    def test_menu_tick_returns_menu_view(self):
        app, _, _ = make_app()
        assert isinstance(app.tick(), MenuView)

    def test_speed_up_and_down(self):
        app, time, received = make_app()
        open_map(app, 0)
        app.handle(UP)
        assert app.state.session.clock.steps_per_second == 8
        app.handle(DOWN)
        app.handle(DOWN)
        assert app.state.session.clock.steps_per_second == 2
        app.bus.flush()
        speeds = [d["steps_per_second"] for n, d in received if n == "speed_changed"]
        assert speeds == [8, 4, 2]

    def test_speed_is_clamped(self):
        config = AppConfig(steps_per_second=4, min_steps_per_second=2, max_steps_per_second=8)
        app, _, received = make_app(config=config)
        open_map(app, 0)
        for _ in range(3):
            app.handle(UP)
        assert app.state.session.clock.steps_per_second == 8
        for _ in range(5):
            app.handle(DOWN)
        assert app.state.session.clock.steps_per_second == 2
        app.bus.flush()
        assert len([n for n, _ in received if n == "speed_changed"]) == 3

    def test_confirm_pauses_and_resumes(self):
        app, time, _ = make_app()
        open_map(app, 0)
        app.handle(Confirm())
        time.now = 10.0
        snapshot = app.tick()
        assert snapshot.paused
        assert snapshot.steps == 0
        app.handle(Confirm())
        time.now = 10.25
        snapshot = app.tick()
        assert not snapshot.paused
        assert snapshot.steps == 1

    def test_confirm_after_finish_replays(self):
        app, time, _ = make_app()
        open_map(app, 0)
        time.now = 100.0
        app.tick()
        old_session = app.state.session

        app.handle(Confirm())

        session = app.state.session
        assert session is not old_session
        assert session.grid is old_session.grid
        assert session.engine.stack == ((0, 0),)
        assert session.engine.status is SearchStatus.EXPLORING

    def test_left_right_ignored_in_game(self):
        app, _, _ = make_app()
        open_map(app, 0)
        app.handle(Navigate(Direction.LEFT))
        app.handle(Navigate(Direction.RIGHT))
        assert app.state.session.clock.steps_per_second == 4

    def test_new_game_gets_fresh_engine(self):
        app, time, _ = make_app()
        open_map(app, 0)
        time.now = 0.5
        app.tick()
        first = app.state.session.engine
        app.handle(Cancel())
        app.handle(Confirm())
        assert app.state.session.engine is not first
        assert app.state.session.engine.stack == ((0, 0),)


def test_default_collaborators_read_map_dir(tmp_path: Path):
    (tmp_path / "tiny.labmap").write_text("1 4\n")
    app = App(config=AppConfig(map_dir=str(tmp_path)), clock=FakeTime())
    app.handle(DOWN)
    app.handle(Confirm())
    assert app.view().names == ("Default", "tiny")
    app.handle(DOWN)
    app.handle(Confirm())
    assert isinstance(app.state, GameState)
    assert app.state.session.grid.cols == 2
