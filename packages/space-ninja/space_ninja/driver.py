"""FixedStepDriver - feeds a GameSimulation fixed-size ticks."""
from __future__ import annotations

import logging
import time
from typing import Callable

from space_ninja.simulation import GameSimulation

logger = logging.getLogger(__name__)


class FixedStepDriver:
    """Runs a simulation at a fixed tick rate regardless of display rate.

    Use :meth:`pump` from a render loop with the real frame time, or
    :meth:`run_forever` for a headless paced loop.
    """

    def __init__(
        self,
        sim: GameSimulation,
        tps: int = 60,
        max_steps_per_pump: int = 5,
    ) -> None:
        if tps <= 0:
            raise ValueError("tps must be positive")
        if max_steps_per_pump < 1:
            raise ValueError(f"max_steps_per_pump must be >= 1, got {max_steps_per_pump}")
        self._sim = sim
        self._tps = tps
        self._dt = 1.0 / tps
        self._tick_number = 0
        self._max_steps = max_steps_per_pump
        self._accumulator = 0.0
        self._hooks: list[Callable[[GameSimulation], None]] = []

    @property
    def sim(self) -> GameSimulation:
        return self._sim

    @property
    def tps(self) -> int:
        return self._tps

    @property
    def dt(self) -> float:
        return self._dt

    @property
    def tick_number(self) -> int:
        return self._tick_number

    @property
    def accumulator(self) -> float:
        return self._accumulator

    def before_tick(self, hook: Callable[[GameSimulation], None]) -> None:
        """Register a hook called before every fixed step (input, bots)."""
        self._hooks.append(hook)

    def step(self) -> None:
        self._tick_number += 1
        for hook in self._hooks:
            hook(self._sim)
        self._sim.tick(self._dt)

    def run(self, n: int) -> int:
        """Run up to ``n`` steps, stopping early when a run ends.

        Returns the number of steps taken.
        """
        was_running = self._sim.is_running
        for i in range(n):
            self.step()
            if was_running and not self._sim.is_running:
                return i + 1
            was_running = self._sim.is_running
        return n

    def pump(self, real_dt: float) -> int:
        """Account for ``real_dt`` seconds of wall time. Returns steps taken.

        Leftover time below one step carries over.  When more than
        ``max_steps_per_pump`` steps are owed the backlog is dropped.
        """
        self._accumulator += real_dt
        steps = 0
        while self._accumulator >= self._dt:
            if steps >= self._max_steps:
                logger.debug(
                    "Dropping %.3fs of backlog after %d steps", self._accumulator, steps
                )
                self._accumulator = 0.0
                break
            self.step()
            self._accumulator -= self._dt
            steps += 1
        return steps

    def run_forever(self, should_continue: Callable[[], bool]) -> None:
        while should_continue():
            start = time.monotonic()
            self.step()
            sleep_time = self._dt - (time.monotonic() - start)
            if sleep_time > 0:
                time.sleep(sleep_time)
