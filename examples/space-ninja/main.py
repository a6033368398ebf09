"""Space Ninja - pygame front-end for the space_ninja simulation.

The ninja hops once a second and changes color on every landing. Recolor
the stick it is about to land on so the colors match.

Controls:
  Space   Change the color of the stick nearest the ninja
  Enter   Start / play again
  Click   Change color while playing, start otherwise
  Esc     Quit
"""
from __future__ import annotations

import argparse
import logging
import sys

import pygame

from space_ninja import FixedStepDriver, GameSimulation, Phase, StartGame, SwitchColor

from ui.constants import FPS, SCREEN_H, SCREEN_W, TPS
from ui.effects import Effects
from ui.hud import draw_game_over_screen, draw_hint, draw_score, draw_start_screen
from ui.scene import build_background, draw_ninja, draw_sticks


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Space Ninja - pygame demo")
    p.add_argument("--seed", type=int, default=None, help="Random seed (default: random)")
    p.add_argument("--tps", type=int, default=TPS, help=f"Ticks per second (default: {TPS})")
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return p.parse_args()


def main() -> None:
    args = parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    pygame.init()
    screen = pygame.display.set_mode((SCREEN_W, SCREEN_H))
    pygame.display.set_caption("Space Ninja")
    clock = pygame.time.Clock()

    sim = GameSimulation(seed=args.seed)
    driver = FixedStepDriver(sim, tps=args.tps)
    effects = Effects(sim.bus)
    background = build_background()

    running = True
    while running:
        dt = clock.tick(FPS) / 1000.0

        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_SPACE:
                    sim.submit(SwitchColor())
                elif event.key in (pygame.K_RETURN, pygame.K_KP_ENTER):
                    if not sim.is_running:
                        sim.submit(StartGame())

            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                sim.submit(SwitchColor() if sim.is_running else StartGame())

        # --- Tick ---
        driver.pump(dt)
        effects.update(dt)

        # --- Render ---
        snap = sim.snapshot()
        screen.blit(background, (0, 0))

        if snap.phase is Phase.IDLE:
            draw_start_screen(screen)
        else:
            draw_sticks(screen, snap, effects)
            draw_ninja(screen, snap, effects)
            draw_score(screen, snap, effects)
            draw_hint(screen, snap)
            if snap.phase is Phase.GAME_OVER:
                draw_game_over_screen(screen, snap)

        pygame.display.flip()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
