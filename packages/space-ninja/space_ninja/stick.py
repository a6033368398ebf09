"""Stick entity - one scrolling obstacle."""
from __future__ import annotations

from dataclasses import dataclass

from space_ninja.types import INACTIVE

STYLE_BUBBLES = 0
STYLE_TRIANGLES = 1
STYLE_BLOCKS = 2
STYLES = (STYLE_BUBBLES, STYLE_TRIANGLES, STYLE_BLOCKS)


@dataclass
class Stick:
    """A vertical stick scrolling left across the playfield.

    ``color_index`` is ``INACTIVE`` until the player first switches the stick,
    then cycles through the palette in the same order as the ninja.
    ``style`` is an opaque tag a renderer may use for decoration.
    """

    x: float
    y: float
    width: float = 90.0
    palette_size: int = 3
    color_index: int = INACTIVE
    style: int = STYLE_BUBBLES
    id: int = 0

    @property
    def is_active(self) -> bool:
        return self.color_index != INACTIVE

    @property
    def left(self) -> float:
        return self.x

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def center(self) -> float:
        return self.x + self.width / 2

    def contains(self, x: float) -> bool:
        return self.left <= x <= self.right

    def move_left(self, distance: float) -> None:
        self.x -= distance

    def switch_color(self) -> int:
        """Advance to the next palette colour. Inactive sticks become colour 0."""
        if self.color_index == INACTIVE:
            self.color_index = 0
        else:
            self.color_index = (self.color_index + 1) % self.palette_size
        return self.color_index
