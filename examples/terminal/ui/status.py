"""Bottom status line fed from the app's signal bus."""
from __future__ import annotations

from typing import Any

from maze_app import SignalBus
from maze_app.bus import MAP_REJECTED, describe


class StatusLine:
    """Keeps the most recent signal message for display."""

    def __init__(self) -> None:
        self.message = ""
        self.is_error = False

    def attach(self, bus: SignalBus) -> None:
        bus.subscribe_all(self.on_signal)

    def detach(self, bus: SignalBus) -> None:
        bus.unsubscribe_all(self.on_signal)

    def on_signal(self, signal_name: str, data: dict[str, Any]) -> None:
        self.message = describe(signal_name, data)
        self.is_error = signal_name == MAP_REJECTED
