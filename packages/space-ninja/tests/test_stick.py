"""Tests for the Stick entity."""
from __future__ import annotations

import pytest

from space_ninja import INACTIVE, Stick


def test_new_stick_is_inactive():
    """A freshly created stick has no colour yet."""
    stick = Stick(x=100.0, y=50.0)
    assert stick.color_index == INACTIVE
    assert stick.color_index == -1
    assert not stick.is_active


def test_first_switch_activates_red():
    """Switching an inactive stick selects the first palette colour."""
    stick = Stick(x=0.0, y=0.0)
    assert stick.switch_color() == 0
    assert stick.is_active


@pytest.mark.parametrize("k", range(1, 10))
def test_switch_k_times_from_inactive(k):
    """k switches from inactive yield colour (k - 1) mod 3."""
    stick = Stick(x=0.0, y=0.0)
    for _ in range(k):
        stick.switch_color()
    assert stick.color_index == (k - 1) % 3


def test_switch_follows_palette_size():
    """A two-colour stick alternates between 0 and 1."""
    stick = Stick(x=0.0, y=0.0, palette_size=2)
    seen = [stick.switch_color() for _ in range(5)]
    assert seen == [0, 1, 0, 1, 0]


def test_move_left_has_no_bounds_check():
    """move_left keeps subtracting past the left edge."""
    stick = Stick(x=10.0, y=0.0)
    stick.move_left(4.0)
    assert stick.x == 6.0
    stick.move_left(100.0)
    assert stick.x == -94.0


class TestGeometry:
    """Span helpers used for collisions."""

    def test_edges_and_center(self):
        stick = Stick(x=100.0, y=0.0, width=90.0)
        assert stick.left == 100.0
        assert stick.right == 190.0
        assert stick.center == 145.0

    def test_contains_is_inclusive(self):
        stick = Stick(x=100.0, y=0.0, width=90.0)
        assert stick.contains(100.0)
        assert stick.contains(190.0)
        assert stick.contains(150.0)
        assert not stick.contains(99.9)
        assert not stick.contains(190.1)
