"""Tests for FixedStepDriver."""
from __future__ import annotations

import pytest

from space_ninja import FixedStepDriver, GameSimulation, Phase


def test_rejects_bad_tps():
    """tps must be positive."""
    with pytest.raises(ValueError):
        FixedStepDriver(GameSimulation(seed=1), tps=0)
    with pytest.raises(ValueError):
        FixedStepDriver(GameSimulation(seed=1), max_steps_per_pump=0)


def test_dt_from_tps():
    """dt is the reciprocal of tps."""
    driver = FixedStepDriver(GameSimulation(seed=1), tps=4)
    assert driver.tps == 4
    assert driver.dt == 0.25


def test_step_ticks_simulation():
    """One step is one simulation tick of dt seconds."""
    sim = GameSimulation(seed=1)
    sim.start()
    driver = FixedStepDriver(sim, tps=4)
    driver.step()
    assert driver.tick_number == 1
    assert sim.tick_number == 1
    assert sim.elapsed == 0.25


def test_run_counts_steps_when_idle():
    """An idle simulation is stepped the full count."""
    sim = GameSimulation(seed=1)
    driver = FixedStepDriver(sim, tps=4)
    assert driver.run(7) == 7
    assert sim.phase is Phase.IDLE


def test_run_stops_at_game_over():
    """run() returns as soon as the run ends."""
    sim = GameSimulation(seed=1)
    sim.start()
    driver = FixedStepDriver(sim, tps=4)
    assert driver.run(1000) == 20
    assert sim.phase is Phase.GAME_OVER


def test_before_tick_hooks():
    """Hooks run once per step, before the tick."""
    sim = GameSimulation(seed=1)
    driver = FixedStepDriver(sim, tps=4)
    seen = []
    driver.before_tick(lambda s: seen.append(s.tick_number))
    driver.run(3)
    assert seen == [0, 1, 2]


class TestPump:
    """pump() converts wall time into fixed steps."""

    def test_whole_steps_and_carry(self):
        driver = FixedStepDriver(GameSimulation(seed=1), tps=4)
        assert driver.pump(0.625) == 2
        assert driver.accumulator == pytest.approx(0.125)
        assert driver.pump(0.125) == 1
        assert driver.accumulator == pytest.approx(0.0)

    def test_small_frames_accumulate(self):
        driver = FixedStepDriver(GameSimulation(seed=1), tps=4)
        assert driver.pump(0.125) == 0
        assert driver.pump(0.125) == 1

    def test_backlog_is_capped(self):
        driver = FixedStepDriver(GameSimulation(seed=1), tps=4, max_steps_per_pump=5)
        assert driver.pump(10.0) == 5
        assert driver.accumulator == 0.0


def test_run_forever_paces_steps(monkeypatch):
    """run_forever steps until told to stop and sleeps off spare time."""
    sleeps = []
    monkeypatch.setattr("space_ninja.driver.time.sleep", sleeps.append)
    driver = FixedStepDriver(GameSimulation(seed=1), tps=4)
    remaining = [3]

    def should_continue():
        remaining[0] -= 1
        return remaining[0] >= 0

    driver.run_forever(should_continue)
    assert driver.tick_number == 3
    assert len(sleeps) == 3
    assert all(0 < s <= 0.25 for s in sleeps)
