"""In-process pub/sub for simulation events, flushed once per tick."""
from __future__ import annotations

from typing import Any, Callable

STARTED = "started"
STICK_SWITCHED = "stick_switched"
LANDED = "landed"
SCORED = "scored"
SPEED_CHANGED = "speed_changed"
GAME_OVER = "game_over"

SIGNALS = (STARTED, STICK_SWITCHED, LANDED, SCORED, SPEED_CHANGED, GAME_OVER)

_Handler = Callable[[str, dict[str, Any]], None]


class SignalBus:
    """Queues published signals and dispatches them on :meth:`flush`.

    Handlers receive ``(signal_name, data)``.  Signals published while a flush
    is dispatching are held for the next flush.
    """

    def __init__(self) -> None:
        self._subscribers: dict[str, list[_Handler]] = {}
        self._catch_all: list[_Handler] = []
        self._queue: list[tuple[str, dict[str, Any]]] = []

    def subscribe(self, signal_name: str, handler: _Handler) -> None:
        self._subscribers.setdefault(signal_name, []).append(handler)

    def subscribe_all(self, handler: _Handler) -> None:
        """Receive every signal, after the named subscribers."""
        self._catch_all.append(handler)

    def unsubscribe(self, signal_name: str, handler: _Handler) -> None:
        handlers = self._subscribers.get(signal_name, [])
        if handler in handlers:
            handlers.remove(handler)

    def publish(self, signal_name: str, **data: Any) -> None:
        self._queue.append((signal_name, data))

    def pending(self) -> int:
        return len(self._queue)

    def flush(self) -> int:
        """Dispatch queued signals in publish order. Returns how many were sent."""
        batch = self._queue
        self._queue = []
        for signal_name, data in batch:
            for handler in self._subscribers.get(signal_name, []):
                handler(signal_name, data)
            for handler in self._catch_all:
                handler(signal_name, data)
        return len(batch)

    def clear(self) -> None:
        self._queue.clear()
