"""Tests for GameConfig defaults, derived values and validation."""
from __future__ import annotations

import dataclasses

import pytest

from space_ninja import DEFAULT_PALETTE, GameConfig, INACTIVE_COLOR, PaletteColor


def test_default_layout():
    """Default geometry is the 1200x800 playfield."""
    config = GameConfig()
    assert config.scene_width == 1200.0
    assert config.stick_width == 90.0
    assert config.capacity == 10
    assert config.ninja_x == 600.0
    assert config.palette == DEFAULT_PALETTE


def test_derived_values():
    """Spacing, recycle threshold and y positions derive from geometry."""
    config = GameConfig()
    assert config.spacing == 180.0
    assert config.recycle_x == -180.0
    assert config.initial_stick_y == 548.0
    assert config.spawn_stick_y == 438.0
    assert config.ninja_y == 600.0
    assert config.rise_time == 0.5


def test_config_is_frozen():
    """Configuration cannot be mutated after construction."""
    config = GameConfig()
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.max_speed = 10.0


def test_replace_builds_variant():
    """dataclasses.replace gives a validated copy."""
    config = dataclasses.replace(GameConfig(), capacity=4)
    assert config.capacity == 4
    with pytest.raises(ValueError):
        dataclasses.replace(config, capacity=0)


@pytest.mark.parametrize(
    "overrides",
    [
        {"palette": ()},
        {"stick_width": 0.0},
        {"margin": -1.0},
        {"capacity": 0},
        {"jump_period": 0.0},
        {"rise_fraction": 0.0},
        {"rise_fraction": 1.0},
        {"hop_easing": "bounce"},
        {"base_speed": -1.0},
        {"max_speed": 1.0},
        {"speed_step": -0.1},
        {"frame_time": 0.0},
        {"speed_threshold": 0},
        {"hint_hold": 5.0},
    ],
)
def test_invalid_values_raise(overrides):
    """Out-of-range settings are rejected with ValueError."""
    with pytest.raises(ValueError):
        GameConfig(**overrides)


class TestPalette:
    """Palette colours."""

    def test_default_order(self):
        assert [c.name for c in DEFAULT_PALETTE] == ["red", "green", "blue"]

    def test_rgb(self):
        assert DEFAULT_PALETTE[0].rgb == (0xE4, 0x23, 0x34)
        assert INACTIVE_COLOR.rgb == (0xCD, 0xB8, 0xE6)

    def test_custom_palette(self):
        palette = (PaletteColor("black", "#000000"), PaletteColor("white", "#FFFFFF"))
        config = GameConfig(palette=palette)
        assert len(config.palette) == 2
