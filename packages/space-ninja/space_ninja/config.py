"""Game configuration dataclass."""
from __future__ import annotations

from dataclasses import dataclass

from space_ninja.easing import EASINGS
from space_ninja.palette import DEFAULT_PALETTE, PaletteColor


@dataclass(frozen=True)
class GameConfig:
    """Immutable configuration for one :class:`GameSimulation`.

    Distances are in scene pixels, times in seconds.  Speeds are expressed in
    pixels per reference frame (``frame_time`` seconds); a tick of ``dt``
    seconds moves the track ``speed * dt / frame_time`` pixels.

    Attributes:
        palette: Ordered colour cycle shared by the ninja and the sticks.
        scene_width: Width of the playfield; initial sticks start here.
        scene_height: Height of the playfield.
        stick_width: Horizontal span of a stick used for collisions.
        stick_height: Visual height of a stick.
        margin: Gap between neighbouring sticks.
        capacity: Number of sticks the track keeps alive.
        ninja_x: Horizontal position the ninja lands on.
        switch_window: How far behind the ninja a stick may still be recoloured.
        jump_period: Duration of one jump, take-off to landing.
        rise_fraction: Share of the period spent rising.
        hop_height: Apex height of the jump.
        hop_easing: Name of the easing curve for the hop hint.
        base_speed: Track speed at the start of a run.
        speed_step: Speed gained per point of score.
        max_speed: Upper bound on track speed.
        frame_time: Reference frame the speeds are measured against.
        speed_threshold: Speed is recomputed when score is a multiple of this.
        hint_fade_in: End of the start hint fade-in.
        hint_hold: End of the start hint hold.
        hint_fade_out: End of the start hint fade-out.
    """

    palette: tuple[PaletteColor, ...] = DEFAULT_PALETTE
    scene_width: float = 1200.0
    scene_height: float = 800.0
    stick_width: float = 90.0
    stick_height: float = 362.0
    margin: float = 90.0
    capacity: int = 10
    ninja_x: float = 600.0
    switch_window: float = 150.0
    jump_period: float = 1.0
    rise_fraction: float = 0.5
    hop_height: float = 100.0
    hop_easing: str = "linear"
    base_speed: float = 2.0
    speed_step: float = 0.02
    max_speed: float = 4.0
    frame_time: float = 0.016
    speed_threshold: int = 10
    hint_fade_in: float = 0.5
    hint_hold: float = 3.0
    hint_fade_out: float = 4.0

    def __post_init__(self) -> None:
        if not self.palette:
            raise ValueError("palette must contain at least one colour")
        if self.stick_width <= 0:
            raise ValueError(f"stick_width must be > 0, got {self.stick_width}")
        if self.margin < 0:
            raise ValueError(f"margin must be >= 0, got {self.margin}")
        if self.capacity < 1:
            raise ValueError(f"capacity must be >= 1, got {self.capacity}")
        if self.jump_period <= 0:
            raise ValueError(f"jump_period must be > 0, got {self.jump_period}")
        if not 0 < self.rise_fraction < 1:
            raise ValueError(
                f"rise_fraction must be in (0, 1), got {self.rise_fraction}"
            )
        if self.hop_easing not in EASINGS:
            raise ValueError(f"Unknown hop_easing: '{self.hop_easing}'")
        if self.base_speed < 0:
            raise ValueError(f"base_speed must be >= 0, got {self.base_speed}")
        if self.max_speed < self.base_speed:
            raise ValueError(
                f"max_speed ({self.max_speed}) must be >= base_speed ({self.base_speed})"
            )
        if self.speed_step < 0:
            raise ValueError(f"speed_step must be >= 0, got {self.speed_step}")
        if self.frame_time <= 0:
            raise ValueError(f"frame_time must be > 0, got {self.frame_time}")
        if self.speed_threshold < 1:
            raise ValueError(
                f"speed_threshold must be >= 1, got {self.speed_threshold}"
            )
        if not 0 <= self.hint_fade_in <= self.hint_hold <= self.hint_fade_out:
            raise ValueError("hint timings must satisfy fade_in <= hold <= fade_out")

    @property
    def spacing(self) -> float:
        return self.stick_width + self.margin

    @property
    def recycle_x(self) -> float:
        """Sticks left of this x are removed from the track."""
        return -(self.stick_width + self.margin)

    @property
    def initial_stick_y(self) -> float:
        return self.scene_height - 252

    @property
    def spawn_stick_y(self) -> float:
        return self.scene_height - 362

    @property
    def ninja_y(self) -> float:
        return self.scene_height - 200

    @property
    def rise_time(self) -> float:
        return self.jump_period * self.rise_fraction
