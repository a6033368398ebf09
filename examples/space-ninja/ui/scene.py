"""Playfield renderer: background, sticks and the ninja."""
from __future__ import annotations

import random

import pygame

from space_ninja import DEFAULT_PALETTE, INACTIVE_COLOR, GameSnapshot, StickView

from ui.constants import (
    BG_BOTTOM,
    BG_MID,
    BG_TOP,
    DECOR_COUNT,
    GLOW_COLOR,
    NINJA_SIZE,
    SCREEN_H,
    SCREEN_W,
    STAR_COUNT,
    STICK_CORNER,
    STYLE_ACCENTS,
)
from ui.effects import Effects

STICK_W = 90
STICK_H = 362


def _mix(a: tuple[int, int, int], b: tuple[int, int, int], t: float) -> tuple[int, int, int]:
    return tuple(int(x + (y - x) * t) for x, y in zip(a, b))


def build_background() -> pygame.Surface:
    """Pre-render the gradient sky, stars and glow once."""
    surface = pygame.Surface((SCREEN_W, SCREEN_H))
    half = SCREEN_H // 2
    for y in range(SCREEN_H):
        if y < half:
            color = _mix(BG_TOP, BG_MID, y / half)
        else:
            color = _mix(BG_MID, BG_BOTTOM, (y - half) / half)
        pygame.draw.line(surface, color, (0, y), (SCREEN_W, y))

    rng = random.Random(1)
    for _ in range(STAR_COUNT):
        x = rng.randrange(SCREEN_W)
        y = rng.randrange(int(SCREEN_H * 0.7))
        level = rng.randint(50, 255)
        pygame.draw.circle(surface, (level, level, level), (x, y), rng.randint(1, 3))

    glow = pygame.Surface((400, 400), pygame.SRCALPHA)
    pygame.draw.circle(glow, (*GLOW_COLOR, 25), (200, 200), 200)
    surface.blit(glow, (int(SCREEN_W * 0.3) - 200, int(SCREEN_H * 0.3) - 200))
    return surface


def _stick_color(view: StickView) -> tuple[int, int, int]:
    if view.color_index < 0:
        return INACTIVE_COLOR.rgb
    return DEFAULT_PALETTE[view.color_index].rgb


def _draw_decor(surface: pygame.Surface, rect: pygame.Rect, view: StickView) -> None:
    # Seeded by stick id so decoration stays put while the stick scrolls.
    rng = random.Random(view.id)
    accent = STYLE_ACCENTS[view.style]
    if view.color_index >= 0:
        accent = _mix(accent, _stick_color(view), 0.6)
    for _ in range(DECOR_COUNT[view.style]):
        x = rect.x + rng.randrange(max(rect.w, 1))
        y = rect.y + rng.randrange(rect.h)
        if view.style == 0:
            pygame.draw.circle(surface, accent, (x, y), rng.randint(5, 20), 2)
        elif view.style == 1:
            pygame.draw.polygon(surface, accent, [(x, y - 5), (x + 5, y + 4), (x - 5, y + 4)])
        else:
            pygame.draw.rect(surface, accent, (x, y, 12, 12), 1)


def draw_sticks(surface: pygame.Surface, snap: GameSnapshot, effects: Effects) -> None:
    for view in snap.sticks:
        scale = effects.stick_scale(view.id)
        w = int(STICK_W * scale)
        rect = pygame.Rect(int(view.x) - (w - STICK_W) // 2, int(view.y), w, STICK_H)
        if rect.right < 0 or rect.left > SCREEN_W:
            continue
        pygame.draw.rect(surface, _stick_color(view), rect, border_radius=STICK_CORNER)
        pygame.draw.rect(surface, (0, 0, 0), rect, 1, border_radius=STICK_CORNER)
        _draw_decor(surface, rect, view)


def draw_ninja(surface: pygame.Surface, snap: GameSnapshot, effects: Effects) -> None:
    ninja = snap.ninja
    color = DEFAULT_PALETTE[ninja.color_index].rgb
    w = int(NINJA_SIZE * effects.ninja.scale)
    h = int(NINJA_SIZE * ninja.scale_y)
    cx = int(ninja.x)
    bottom = int(ninja.y - ninja.hop_offset)
    body = pygame.Rect(0, 0, w, h)
    body.midbottom = (cx, bottom)
    pygame.draw.ellipse(surface, color, body)
    pygame.draw.ellipse(surface, (0, 0, 0), body, 2)
    eye_y = body.top + h // 3
    pygame.draw.circle(surface, (0, 0, 0), (cx - 12, eye_y), 6)
    pygame.draw.circle(surface, (0, 0, 0), (cx + 12, eye_y), 6)
