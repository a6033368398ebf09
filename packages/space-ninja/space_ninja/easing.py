"""Easing curves for the ninja hop animation hint.

Curves map normalized time ``t`` in [0, 1] to progress in [0, 1].
"""
from __future__ import annotations

from typing import Callable


def linear(t: float) -> float:
    return t


def ease_in(t: float) -> float:
    return t * t


def ease_out(t: float) -> float:
    return t * (2 - t)


def ease_in_out(t: float) -> float:
    if t < 0.5:
        return 2 * t * t
    return 1 - (-2 * t + 2) ** 2 / 2


EASINGS: dict[str, Callable[[float], float]] = {
    "linear": linear,
    "ease_in": ease_in,
    "ease_out": ease_out,
    "ease_in_out": ease_in_out,
}


def lerp(start: float, end: float, t: float) -> float:
    return start + (end - start) * t


def arc(t: float, split: float, curve: Callable[[float], float] = linear) -> float:
    """Rise from 0 to 1 over ``[0, split)``, fall back to 0 over ``[split, 1]``.

    The fall mirrors the rise, so ``ease_out`` decelerates into the apex and
    accelerates away from it.
    """
    t = min(max(t, 0.0), 1.0)
    if t < split:
        return curve(t / split)
    return curve((1.0 - t) / (1.0 - split))
