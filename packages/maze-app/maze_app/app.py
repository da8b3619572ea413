"""App - Menu / MapBrowser / Game state machine driven by input and ticks."""
from __future__ import annotations

import time
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Union

from maze_grid import Grid, MapError, MapSource, default_source, load_source
from maze_grid.maps import catalog as map_catalog
from maze_search import AnimationClock, SearchEngine, SearchStatus

from maze_app import bus as signals
from maze_app.bus import SignalBus
from maze_app.config import AppConfig
from maze_app.events import Cancel, Confirm, Direction, InputEvent, Navigate, Quit
from maze_app.snapshot import BrowserView, FrameSnapshot, MenuView, View


class MenuItem(Enum):
    START = "Start"
    MAPS = "Maps"
    QUIT = "Quit"


MENU_ITEMS: tuple[MenuItem, ...] = tuple(MenuItem)


@dataclass
class MenuState:
    cursor: int = 0
    error: str | None = None


@dataclass
class BrowserState:
    sources: list[MapSource]
    cursor: int = 0
    offset: int = 0
    error: str | None = None


@dataclass
class GameSession:
    """Everything owned by one animated search; dropped when the game ends."""

    name: str
    grid: Grid
    engine: SearchEngine
    clock: AnimationClock


@dataclass
class GameState:
    session: GameSession


State = Union[MenuState, BrowserState, GameState]


class App:
    """Top-level state machine.

    ``handle`` applies one input event; ``tick`` advances the active search
    by however many steps the animation clock allows and returns the view
    to draw. Notifications go out on ``bus`` and are delivered when the
    owner flushes it.

    Args:
        config: Application settings.
        catalog: Returns the selectable map sources. Defaults to the
            built-in map plus the files found in ``config.map_dir``.
        loader: Turns a MapSource into a Grid, raising MapError.
        clock: Monotonic time source in seconds.
        bus: Signal bus for notifications.
    """

    def __init__(
        self,
        config: AppConfig | None = None,
        catalog: Callable[[], list[MapSource]] | None = None,
        loader: Callable[[MapSource], Grid] | None = None,
        clock: Callable[[], float] = time.monotonic,
        bus: SignalBus | None = None,
    ) -> None:
        self._config = config if config is not None else AppConfig()
        self._catalog = catalog if catalog is not None else self._default_catalog
        self._loader = loader if loader is not None else self._default_loader
        self._now = clock
        self._bus = bus if bus is not None else SignalBus()
        self._current: MapSource = default_source()
        self._state: State = MenuState()
        self._running = True

    # --- Properties ---

    @property
    def config(self) -> AppConfig:
        return self._config

    @property
    def bus(self) -> SignalBus:
        return self._bus

    @property
    def state(self) -> State:
        return self._state

    @property
    def running(self) -> bool:
        return self._running

    @property
    def current_map(self) -> MapSource:
        """The map START launches."""
        return self._current

    # --- Collaborator defaults ---

    def _default_catalog(self) -> list[MapSource]:
        return map_catalog(self._config.map_dir, self._config.map_suffix)

    def _default_loader(self, source: MapSource) -> Grid:
        return load_source(source, require_border=self._config.require_border)

    # --- Input ---

    def handle(self, event: InputEvent) -> None:
        if isinstance(event, Quit):
            self._running = False
            return
        state = self._state
        if isinstance(state, MenuState):
            self._handle_menu(state, event)
        elif isinstance(state, BrowserState):
            self._handle_browser(state, event)
        else:
            self._handle_game(state, event)

    def _handle_menu(self, state: MenuState, event: InputEvent) -> None:
        if isinstance(event, Navigate):
            if event.direction is Direction.UP:
                state.cursor = max(0, state.cursor - 1)
            elif event.direction is Direction.DOWN:
                state.cursor = min(len(MENU_ITEMS) - 1, state.cursor + 1)
        elif isinstance(event, Confirm):
            item = MENU_ITEMS[state.cursor]
            if item is MenuItem.START:
                error = self._open(self._current)
                if error is not None:
                    state.error = error
            elif item is MenuItem.MAPS:
                self._open_browser(state)
            else:
                self._running = False

    def _open_browser(self, menu: MenuState) -> None:
        try:
            sources = self._catalog()
        except OSError as exc:
            menu.error = f"cannot list maps: {exc}"
            return
        cursor = 0
        for i, source in enumerate(sources):
            if source == self._current:
                cursor = i
                break
        browser = BrowserState(sources=sources, cursor=cursor)
        self._scroll(browser)
        self._state = browser

    def _handle_browser(self, state: BrowserState, event: InputEvent) -> None:
        if isinstance(event, Cancel):
            self._state = MenuState(cursor=MENU_ITEMS.index(MenuItem.MAPS))
        elif isinstance(event, Navigate):
            if event.direction is Direction.UP:
                state.cursor = max(0, state.cursor - 1)
            elif event.direction is Direction.DOWN:
                state.cursor = min(max(len(state.sources) - 1, 0), state.cursor + 1)
            self._scroll(state)
        elif isinstance(event, Confirm) and state.sources:
            error = self._open(state.sources[state.cursor])
            if error is not None:
                state.error = error

    def _scroll(self, state: BrowserState) -> None:
        height = self._config.viewport_height
        if state.cursor < state.offset:
            state.offset = state.cursor
        elif state.cursor >= state.offset + height:
            state.offset = state.cursor - height + 1

    def _handle_game(self, state: GameState, event: InputEvent) -> None:
        session = state.session
        if isinstance(event, Cancel):
            was_exploring = session.engine.status is SearchStatus.EXPLORING
            session.engine.cancel()
            if was_exploring:
                self._bus.publish(
                    signals.SEARCH_CANCELLED, map=session.name, steps=session.engine.steps,
                )
            self._state = MenuState()
        elif isinstance(event, Navigate):
            rate = session.clock.steps_per_second
            if event.direction is Direction.UP:
                rate = min(rate * 2, self._config.max_steps_per_second)
            elif event.direction is Direction.DOWN:
                rate = max(rate / 2, self._config.min_steps_per_second)
            else:
                return
            if rate != session.clock.steps_per_second:
                session.clock.set_rate(rate, self._now())
                self._bus.publish(signals.SPEED_CHANGED, steps_per_second=rate)
        elif isinstance(event, Confirm):
            if session.engine.finished:
                self._state = GameState(self._new_session(session.name, session.grid))
                self._bus.publish(signals.SEARCH_STARTED, map=session.name)
            else:
                paused = session.clock.toggle(self._now())
                self._bus.publish(signals.PAUSED, paused=paused)

    # --- Game lifecycle ---

    def _new_session(self, name: str, grid: Grid) -> GameSession:
        return GameSession(
            name=name,
            grid=grid,
            engine=SearchEngine(grid),
            clock=AnimationClock(
                self._config.steps_per_second,
                self._now(),
                max_burst=self._config.max_burst,
            ),
        )

    def _open(self, source: MapSource) -> str | None:
        """Load ``source`` and enter Game. Returns an error message on failure."""
        try:
            grid = self._loader(source)
        except MapError as exc:
            self._bus.publish(signals.MAP_REJECTED, map=source.name, reason=exc.reason)
            return str(exc)
        self._current = source
        self._state = GameState(self._new_session(source.name, grid))
        self._bus.publish(signals.MAP_LOADED, map=source.name, rows=grid.rows, cols=grid.cols)
        self._bus.publish(signals.SEARCH_STARTED, map=source.name)
        return None

    # --- Ticks ---

    def tick(self, now: float | None = None) -> View:
        if now is None:
            now = self._now()
        state = self._state
        if isinstance(state, GameState):
            session = state.session
            engine = session.engine
            due = session.clock.advance(now)
            for _ in range(due):
                if engine.status is not SearchStatus.EXPLORING:
                    break
                engine.step()
                if engine.status in (SearchStatus.FOUND, SearchStatus.EXHAUSTED):
                    self._bus.publish(
                        signals.SEARCH_FINISHED,
                        map=session.name,
                        status=engine.status.value,
                        steps=engine.steps,
                        path_length=len(engine.stack),
                    )
        return self.view()

    def view(self) -> View:
        state = self._state
        if isinstance(state, MenuState):
            return MenuView(
                items=tuple(item.value for item in MENU_ITEMS),
                cursor=state.cursor,
                current_map=self._current.name,
                error=state.error,
            )
        if isinstance(state, BrowserState):
            return BrowserView(
                names=tuple(source.name for source in state.sources),
                cursor=state.cursor,
                offset=state.offset,
                height=self._config.viewport_height,
                error=state.error,
            )
        session = state.session
        return FrameSnapshot.capture(
            session.engine,
            map_name=session.name,
            steps_per_second=session.clock.steps_per_second,
            paused=session.clock.paused,
        )
