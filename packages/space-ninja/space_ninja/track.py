"""StickTrack - evenly spaced sticks with off-screen recycling."""
from __future__ import annotations

import logging
import random
from typing import Iterator

from space_ninja.config import GameConfig
from space_ninja.stick import STYLES, Stick

logger = logging.getLogger(__name__)


class StickTrack:
    """Ordered sequence of sticks, leftmost first.

    The track keeps ``config.capacity`` sticks alive.  Sticks that scroll past
    ``config.recycle_x`` are dropped and at most one new stick is appended per
    :meth:`advance`, one spacing unit right of the current last stick.
    """

    def __init__(self, config: GameConfig, rng: random.Random | None = None) -> None:
        self._config = config
        self._rng = rng if rng is not None else random.Random()
        self._sticks: list[Stick] = []
        self._next_id = 0

    def __len__(self) -> int:
        return len(self._sticks)

    def __iter__(self) -> Iterator[Stick]:
        return iter(self._sticks)

    @property
    def sticks(self) -> tuple[Stick, ...]:
        return tuple(self._sticks)

    def _make_stick(self, x: float, y: float) -> Stick:
        stick = Stick(
            x=x,
            y=y,
            width=self._config.stick_width,
            palette_size=len(self._config.palette),
            style=self._rng.choice(STYLES),
            id=self._next_id,
        )
        self._next_id += 1
        return stick

    def reset(self) -> None:
        """Clear the track and seed it with a full row off the right edge."""
        self._sticks.clear()
        self._next_id = 0
        cfg = self._config
        for i in range(cfg.capacity):
            x = cfg.scene_width + i * cfg.spacing
            self._sticks.append(self._make_stick(x, cfg.initial_stick_y))

    def advance(self, distance: float) -> list[Stick]:
        """Scroll every stick left by ``distance``. Returns the recycled sticks."""
        cfg = self._config
        for stick in self._sticks:
            stick.move_left(distance)

        removed = [s for s in self._sticks if s.x < cfg.recycle_x]
        if removed:
            self._sticks = [s for s in self._sticks if s.x >= cfg.recycle_x]
            logger.debug("Recycled sticks %s", [s.id for s in removed])

        if len(self._sticks) < cfg.capacity:
            last_x = self._sticks[-1].x if self._sticks else cfg.scene_width
            self._sticks.append(self._make_stick(last_x + cfg.spacing, cfg.spawn_stick_y))
        return removed

    def closest_stick_near(self, x: float, window_behind: float) -> Stick | None:
        """Return the stick whose centre is nearest ``x``.

        Only sticks whose right edge is still within ``window_behind`` of ``x``
        qualify.  The leftmost of equally near sticks wins.
        """
        closest: Stick | None = None
        min_distance = float("inf")
        for stick in self._sticks:
            if stick.right <= x - window_behind:
                continue
            distance = abs(stick.center - x)
            if distance < min_distance:
                min_distance = distance
                closest = stick
        return closest

    def stick_under(self, x: float) -> Stick | None:
        """Return the first stick whose span contains ``x``."""
        for stick in self._sticks:
            if stick.contains(x):
                return stick
        return None
