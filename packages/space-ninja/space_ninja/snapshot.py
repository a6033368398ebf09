"""Immutable views of the simulation for renderers."""
from __future__ import annotations

from dataclasses import dataclass

from space_ninja.stick import Stick
from space_ninja.types import Phase


@dataclass(frozen=True, slots=True)
class StickView:
    id: int
    x: float
    y: float
    color_index: int
    style: int

    @classmethod
    def of(cls, stick: Stick) -> StickView:
        return cls(
            id=stick.id,
            x=stick.x,
            y=stick.y,
            color_index=stick.color_index,
            style=stick.style,
        )


@dataclass(frozen=True, slots=True)
class NinjaView:
    x: float
    y: float
    color_index: int
    hop_offset: float
    scale_y: float


@dataclass(frozen=True, slots=True)
class GameSnapshot:
    """Everything a renderer needs to draw one frame.

    ``final_score`` and ``grade`` are set only in ``Phase.GAME_OVER``.
    """

    phase: Phase
    score: int
    speed: float
    elapsed: float
    ninja: NinjaView
    sticks: tuple[StickView, ...]
    hint_opacity: float = 0.0
    final_score: int | None = None
    grade: str | None = None

    @property
    def is_running(self) -> bool:
        return self.phase is Phase.RUNNING
