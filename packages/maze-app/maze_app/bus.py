"""In-memory pub/sub bus for app notifications, flushed once per tick."""
from __future__ import annotations

from typing import Any, Callable

_Handler = Callable[[str, dict[str, Any]], None]

# Signals published by App.
MAP_LOADED = "map_loaded"
MAP_REJECTED = "map_rejected"
SEARCH_STARTED = "search_started"
SEARCH_FINISHED = "search_finished"
SEARCH_CANCELLED = "search_cancelled"
SPEED_CHANGED = "speed_changed"
PAUSED = "paused"


class SignalBus:

    def __init__(self) -> None:
        self._subscribers: dict[str, list[_Handler]] = {}
        self._queue: list[tuple[str, dict[str, Any]]] = []

    def subscribe(self, signal_name: str, handler: _Handler) -> None:
        self._subscribers.setdefault(signal_name, []).append(handler)

    def subscribe_all(self, handler: _Handler, names: tuple[str, ...] | None = None) -> None:
        """Subscribe one handler to every app signal (or to ``names``)."""
        for name in names or ALL_SIGNALS:
            self.subscribe(name, handler)

    def unsubscribe(self, signal_name: str, handler: _Handler) -> None:
        handlers = self._subscribers.get(signal_name)
        if handlers is None:
            return
        if handler in handlers:
            handlers.remove(handler)

    def unsubscribe_all(self, handler: _Handler, names: tuple[str, ...] | None = None) -> None:
        """Undo subscribe_all for the same handler and names."""
        for name in names or ALL_SIGNALS:
            self.unsubscribe(name, handler)

    def publish(self, signal_name: str, **data: Any) -> None:
        self._queue.append((signal_name, data))

    def flush(self) -> None:
        snapshot = self._queue
        self._queue = []
        for signal_name, data in snapshot:
            for handler in self._subscribers.get(signal_name, []):
                handler(signal_name, data)


ALL_SIGNALS = (
    MAP_LOADED,
    MAP_REJECTED,
    SEARCH_STARTED,
    SEARCH_FINISHED,
    SEARCH_CANCELLED,
    SPEED_CHANGED,
    PAUSED,
)


def describe(signal_name: str, data: dict[str, Any]) -> str:
    """One-line human description of an app signal, for status lines."""
    if signal_name == MAP_LOADED:
        return f"Loaded {data['map']} ({data['rows']}x{data['cols']})"
    if signal_name == MAP_REJECTED:
        return f"Cannot open {data['map']}: {data['reason']}"
    if signal_name == SEARCH_STARTED:
        return f"Searching {data['map']}"
    if signal_name == SEARCH_FINISHED:
        if data["status"] == "found":
            return f"Exit found in {data['steps']} steps, path length {data['path_length']}"
        return f"No path to an exit ({data['steps']} steps)"
    if signal_name == SEARCH_CANCELLED:
        return f"Search on {data['map']} cancelled after {data['steps']} steps"
    if signal_name == SPEED_CHANGED:
        return f"Speed {data['steps_per_second']:g} steps/s"
    if signal_name == PAUSED:
        return "Paused" if data["paused"] else "Resumed"
    return signal_name
