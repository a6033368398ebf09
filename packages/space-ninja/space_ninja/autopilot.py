"""Autopilot - a scripted player for headless runs."""
from __future__ import annotations

from space_ninja.simulation import GameSimulation
from space_ninja.stick import Stick


class Autopilot:
    """Recolours the stick the ninja is about to land on.

    Before each tick it projects the track forward to the next landing.  When
    the stick that will be under the ninja is also the one a colour switch
    would hit, it switches until the stick shows the ninja's next colour.
    Register it with :meth:`FixedStepDriver.before_tick`.
    """

    def __init__(self, sim: GameSimulation) -> None:
        self._sim = sim
        self.presses = 0

    def __call__(self, sim: GameSimulation) -> None:
        self.act()

    def landing_stick(self) -> Stick | None:
        """The stick predicted to be under the ninja at the next landing."""
        sim = self._sim
        cfg = sim.config
        time_left = cfg.jump_period - sim.cycle.elapsed
        shift = sim.speed / cfg.frame_time * time_left
        for stick in sim.track:
            left = stick.x - shift
            if left <= cfg.ninja_x <= left + stick.width:
                return stick
        return None

    def act(self) -> int:
        """Make this tick's presses. Returns how many were made."""
        sim = self._sim
        if not sim.is_running:
            return 0
        cfg = sim.config
        candidate = self.landing_stick()
        if candidate is None:
            return 0
        if sim.track.closest_stick_near(cfg.ninja_x, cfg.switch_window) is not candidate:
            return 0
        wanted = (sim.ninja_color_index + 1) % len(cfg.palette)
        presses = 0
        while candidate.color_index != wanted and presses <= len(cfg.palette):
            sim.request_color_switch()
            presses += 1
        self.presses += presses
        return presses
