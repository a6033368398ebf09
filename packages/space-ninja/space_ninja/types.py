"""Shared types for the space ninja simulation."""
from __future__ import annotations

import enum
from dataclasses import dataclass

INACTIVE = -1


class Phase(enum.Enum):
    IDLE = "idle"
    RUNNING = "running"
    GAME_OVER = "game_over"


@dataclass(frozen=True, slots=True)
class FrameContext:
    tick_number: int
    dt: float
    elapsed: float
