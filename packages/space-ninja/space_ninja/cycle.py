"""NinjaCycle - the periodic jump/land schedule and the ninja's colour."""
from __future__ import annotations

from typing import Callable

from space_ninja.config import GameConfig
from space_ninja.easing import EASINGS, arc, lerp


class NinjaCycle:
    """Fixed-period jump loop.

    Time accumulates in :meth:`advance`; every time it crosses a period
    boundary the ``on_landed`` listener fires once and the next jump starts
    immediately.  The listener is expected to call :meth:`next_color`.
    """

    def __init__(
        self,
        config: GameConfig,
        on_landed: Callable[[], None] | None = None,
    ) -> None:
        self._period = config.jump_period
        self._split = config.rise_fraction
        self._hop_height = config.hop_height
        self._curve = EASINGS[config.hop_easing]
        self._palette_size = len(config.palette)
        self._on_landed = on_landed
        self._elapsed = 0.0
        self._color_index = 0
        self._running = False
        self._landings = 0

    @property
    def color_index(self) -> int:
        return self._color_index

    @property
    def running(self) -> bool:
        return self._running

    @property
    def landings(self) -> int:
        return self._landings

    @property
    def elapsed(self) -> float:
        """Time into the current jump, in ``[0, period)``."""
        return self._elapsed

    @property
    def phase_fraction(self) -> float:
        return self._elapsed / self._period

    @property
    def rising(self) -> bool:
        return self.phase_fraction < self._split

    def set_listener(self, on_landed: Callable[[], None] | None) -> None:
        self._on_landed = on_landed

    def start(self) -> None:
        self._elapsed = 0.0
        self._color_index = 0
        self._landings = 0
        self._running = True

    def stop(self) -> None:
        self._running = False

    def next_color(self) -> int:
        self._color_index = (self._color_index + 1) % self._palette_size
        return self._color_index

    def advance(self, dt: float) -> int:
        """Advance the jump clock by ``dt``. Returns the number of landings fired."""
        if not self._running:
            return 0
        fired = 0
        self._elapsed += dt
        while self._running and self._elapsed >= self._period:
            self._elapsed -= self._period
            self._landings += 1
            fired += 1
            if self._on_landed is not None:
                self._on_landed()
        return fired

    def hop_offset(self) -> float:
        """Height above the ground, 0 at take-off and landing."""
        return self._hop_height * arc(self.phase_fraction, self._split, self._curve)

    def scale_y(self) -> float:
        """Vertical stretch hint: 1.0 at take-off, 1.1 at the apex, 0.8 on landing."""
        t = self.phase_fraction
        if t < self._split:
            return lerp(1.0, 1.1, t / self._split)
        return lerp(1.1, 0.8, (t - self._split) / (1.0 - self._split))
