"""Short scale pulses triggered by simulation signals."""
from __future__ import annotations

from space_ninja import SignalBus, signals

from ui.constants import PULSE_NINJA, PULSE_SCORE, PULSE_STICK


class Pulse:
    """Scale that ramps 1.0 -> peak -> 1.0 over ``duration`` seconds."""

    def __init__(self, peak: float, duration: float) -> None:
        self.peak = peak
        self.duration = duration
        self.age = duration

    def trigger(self) -> None:
        self.age = 0.0

    def update(self, dt: float) -> None:
        self.age = min(self.age + dt, self.duration)

    @property
    def scale(self) -> float:
        t = self.age / self.duration
        if t >= 1.0:
            return 1.0
        ramp = t * 2 if t < 0.5 else (1 - t) * 2
        return 1.0 + (self.peak - 1.0) * ramp


class Effects:
    """Keeps one pulse per stick plus pulses for the ninja and score label."""

    def __init__(self, bus: SignalBus) -> None:
        self.ninja = Pulse(*PULSE_NINJA)
        self.score = Pulse(*PULSE_SCORE)
        self._sticks: dict[int, Pulse] = {}
        bus.subscribe(signals.STICK_SWITCHED, self._on_switch)
        bus.subscribe(signals.LANDED, self._on_landed)
        bus.subscribe(signals.SCORED, self._on_scored)
        bus.subscribe(signals.STARTED, self._on_started)

    def _on_switch(self, signal: str, data: dict) -> None:
        pulse = self._sticks.setdefault(data["stick_id"], Pulse(*PULSE_STICK))
        pulse.trigger()

    def _on_landed(self, signal: str, data: dict) -> None:
        self.ninja.trigger()

    def _on_scored(self, signal: str, data: dict) -> None:
        self.score.trigger()

    def _on_started(self, signal: str, data: dict) -> None:
        self._sticks.clear()

    def stick_scale(self, stick_id: int) -> float:
        pulse = self._sticks.get(stick_id)
        return pulse.scale if pulse is not None else 1.0

    def update(self, dt: float) -> None:
        self.ninja.update(dt)
        self.score.update(dt)
        for pulse in self._sticks.values():
            pulse.update(dt)
