"""Pure scoring helpers: letter grades and the speed curve."""
from __future__ import annotations

from space_ninja.config import GameConfig

# (exclusive lower bound, grade), checked top down.
GRADES: tuple[tuple[int, str], ...] = (
    (30, "Chuck Norris?"),
    (25, "You're da man"),
    (20, "Awesome"),
    (15, "Great!"),
    (13, "Nice!"),
    (10, "Good Job!"),
    (5, "Really?"),
)

LOWEST_GRADE = "Poor..."


def grade(score: int) -> str:
    for floor, label in GRADES:
        if score > floor:
            return label
    return LOWEST_GRADE


def speed_for_score(score: int, config: GameConfig) -> float:
    return min(config.max_speed, config.base_speed + score * config.speed_step)


def crosses_speed_threshold(score: int, config: GameConfig) -> bool:
    """True when the speed curve should be re-evaluated for ``score``."""
    return score > 0 and score % config.speed_threshold == 0
