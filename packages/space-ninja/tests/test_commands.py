"""Tests for CommandQueue."""
from __future__ import annotations

from dataclasses import dataclass

import pytest

from space_ninja import CommandQueue, FrameContext, StartGame, SwitchColor

CTX = FrameContext(tick_number=1, dt=0.25, elapsed=0.0)


@dataclass(frozen=True)
class Unknown:
    pass


def test_drain_in_fifo_order():
    """Commands are applied in the order they were enqueued."""
    queue = CommandQueue()
    seen = []
    queue.handle(StartGame, lambda cmd, ctx: seen.append("start") or True)
    queue.handle(SwitchColor, lambda cmd, ctx: seen.append("switch") or False)

    queue.enqueue(SwitchColor())
    queue.enqueue(StartGame())
    queue.enqueue(SwitchColor())
    assert queue.pending() == 3

    results = queue.drain(CTX)
    assert seen == ["switch", "start", "switch"]
    assert [accepted for _, accepted in results] == [False, True, False]
    assert queue.pending() == 0


def test_handler_receives_context():
    """Handlers see the tick's context."""
    queue = CommandQueue()
    contexts = []
    queue.handle(StartGame, lambda cmd, ctx: contexts.append(ctx) or True)
    queue.enqueue(StartGame())
    queue.drain(CTX)
    assert contexts == [CTX]


def test_unknown_command_type_rejected():
    """Enqueueing a type with no handler raises TypeError."""
    queue = CommandQueue()
    with pytest.raises(TypeError, match="Unknown"):
        queue.enqueue(Unknown())


def test_later_handler_overwrites():
    """Only the most recent handler for a type runs."""
    queue = CommandQueue()
    seen = []
    queue.handle(StartGame, lambda cmd, ctx: seen.append("old") or True)
    queue.handle(StartGame, lambda cmd, ctx: seen.append("new") or True)
    queue.enqueue(StartGame())
    queue.drain(CTX)
    assert seen == ["new"]


def test_clear():
    """clear() drops pending commands."""
    queue = CommandQueue()
    queue.handle(StartGame, lambda cmd, ctx: True)
    queue.enqueue(StartGame())
    queue.clear()
    assert queue.drain(CTX) == []


def test_commands_compare_by_value():
    """Commands are plain frozen values."""
    assert StartGame() == StartGame()
    assert SwitchColor() != StartGame()
