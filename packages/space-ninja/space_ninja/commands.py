"""Player commands and the queue that applies them on the tick thread."""
from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Any, Callable

from space_ninja.types import FrameContext


@dataclass(frozen=True)
class StartGame:
    """Begin a new run, discarding any run in progress."""


@dataclass(frozen=True)
class SwitchColor:
    """Recolour the stick nearest the ninja."""


class CommandQueue:
    """FIFO of player commands, dispatched by type.

    :meth:`enqueue` may be called from an input thread; :meth:`drain` runs on
    the simulation thread at the start of a tick.  ``deque`` appends and
    pops are atomic, so no lock is taken.
    """

    def __init__(self) -> None:
        self._handlers: dict[type[Any], Callable[[Any, FrameContext], bool]] = {}
        self._pending: deque[Any] = deque()

    def handle(
        self,
        cmd_type: type[Any],
        handler: Callable[[Any, FrameContext], bool],
    ) -> None:
        """Register ``handler(cmd, ctx) -> accepted`` for ``cmd_type``.

        One handler per type; later calls overwrite.
        """
        self._handlers[cmd_type] = handler

    def enqueue(self, cmd: Any) -> None:
        if type(cmd) not in self._handlers:
            raise TypeError(f"No handler registered for {type(cmd).__qualname__}")
        self._pending.append(cmd)

    def pending(self) -> int:
        return len(self._pending)

    def clear(self) -> None:
        self._pending.clear()

    def drain(self, ctx: FrameContext) -> list[tuple[Any, bool]]:
        """Apply every pending command in order. Returns ``[(cmd, accepted), ...]``."""
        results: list[tuple[Any, bool]] = []
        while self._pending:
            cmd = self._pending.popleft()
            accepted = self._handlers[type(cmd)](cmd, ctx)
            results.append((cmd, accepted))
        return results
