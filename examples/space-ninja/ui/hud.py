"""Score label, start hint and the start / game-over screens."""
from __future__ import annotations

from functools import lru_cache

import pygame

from space_ninja import GameSnapshot

from ui.constants import (
    GAME_OVER_OVERLAY,
    GRADE_COLOR,
    SCREEN_H,
    SCREEN_W,
    START_OVERLAY,
    TEXT_COLOR,
    TEXT_DIM,
    TITLE_RED,
)
from ui.effects import Effects

HINT_TEXT = "Click or press SPACE to change color!"

INSTRUCTIONS = [
    "Ninja changes color while jumping",
    "Click or press SPACE to change stick colors",
    "Match ninja color with stick color to score",
]


@lru_cache(maxsize=None)
def _font(size: int, bold: bool = False) -> pygame.font.Font:
    return pygame.font.SysFont("arial", size, bold=bold)


def _center(surface: pygame.Surface, text: pygame.Surface, y: int) -> None:
    surface.blit(text, text.get_rect(center=(SCREEN_W // 2, y)))


def _overlay(surface: pygame.Surface, rgba: tuple[int, int, int, int]) -> None:
    overlay = pygame.Surface((SCREEN_W, SCREEN_H), pygame.SRCALPHA)
    overlay.fill(rgba)
    surface.blit(overlay, (0, 0))


def draw_score(surface: pygame.Surface, snap: GameSnapshot, effects: Effects) -> None:
    size = int(48 * effects.score.scale)
    font = _font(size, True)
    _center(surface, font.render(str(snap.score), True, TEXT_COLOR), 75)


def draw_hint(surface: pygame.Surface, snap: GameSnapshot) -> None:
    if snap.hint_opacity <= 0:
        return
    font = _font(20, True)
    text = font.render(HINT_TEXT, True, TEXT_COLOR)
    text.set_alpha(int(255 * snap.hint_opacity))
    _center(surface, text, 150)


def draw_start_screen(surface: pygame.Surface) -> None:
    _overlay(surface, START_OVERLAY)
    title = _font(72, True)
    body = _font(18)
    _center(surface, title.render("SPACE NINJA", True, TEXT_COLOR), 200)
    _center(
        surface,
        _font(24).render(
            "Navigate through space by matching colors!", True, TEXT_DIM
        ),
        270,
    )
    y = 340
    for line in INSTRUCTIONS:
        _center(surface, body.render(f"- {line}", True, TEXT_COLOR), y)
        y += 30
    hint = _font(20, True)
    _center(surface, hint.render("Hint: Red color always comes first", True, TITLE_RED), y + 10)
    _center(surface, body.render("Press ENTER or click to play", True, TEXT_DIM), y + 80)


def draw_game_over_screen(surface: pygame.Surface, snap: GameSnapshot) -> None:
    _overlay(surface, GAME_OVER_OVERLAY)
    _center(
        surface,
        _font(48, True).render("GAME OVER", True, TITLE_RED),
        280,
    )
    _center(
        surface,
        _font(36, True).render(
            f"Final Score: {snap.final_score}", True, TEXT_COLOR
        ),
        360,
    )
    _center(
        surface,
        _font(24, True).render(snap.grade or "", True, GRADE_COLOR),
        420,
    )
    _center(
        surface,
        _font(18).render(
            "Press ENTER or click to play again", True, TEXT_DIM
        ),
        500,
    )
