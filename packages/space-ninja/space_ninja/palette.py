"""Colour palette shared by the ninja and the sticks."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class PaletteColor:
    name: str
    hex: str

    @property
    def rgb(self) -> tuple[int, int, int]:
        value = self.hex.lstrip("#")
        return (int(value[0:2], 16), int(value[2:4], 16), int(value[4:6], 16))


RED = PaletteColor("red", "#E42334")
GREEN = PaletteColor("green", "#009c46")
BLUE = PaletteColor("blue", "#0079c9")

DEFAULT_PALETTE: tuple[PaletteColor, ...] = (RED, GREEN, BLUE)

INACTIVE_COLOR = PaletteColor("inactive", "#CDB8E6")
