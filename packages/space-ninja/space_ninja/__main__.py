"""Headless Space Ninja run.

Usage:
  python -m space_ninja [--ticks N] [--tps N] [--seed N] [--manual] [-v]

Runs one game at the fixed tick rate as fast as possible (no pacing) and
prints the final score and grade.  The autopilot plays unless --manual is
given, in which case nobody switches sticks and the first landing on a stick
ends the run.
"""
from __future__ import annotations

import argparse
import logging
import sys

from space_ninja.autopilot import Autopilot
from space_ninja.driver import FixedStepDriver
from space_ninja.scoring import grade
from space_ninja.simulation import GameSimulation


def setup_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Space Ninja - headless simulation run")
    p.add_argument("--ticks", type=int, default=60 * 120,
                   help="Maximum ticks to simulate (default: 7200)")
    p.add_argument("--tps", type=int, default=60, help="Ticks per second (default: 60)")
    p.add_argument("--seed", type=int, default=42, help="Random seed (default: 42)")
    p.add_argument("--manual", action="store_true", help="Disable the autopilot")
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return p.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    setup_logging(args.verbose)

    sim = GameSimulation(seed=args.seed)
    driver = FixedStepDriver(sim, tps=args.tps)
    if not args.manual:
        driver.before_tick(Autopilot(sim))

    sim.start()
    steps = driver.run(args.ticks)

    score = sim.final_score if sim.final_score is not None else sim.score
    status = "game over" if sim.final_score is not None else "still running"
    print(f"{status} after {steps} ticks ({steps / args.tps:.1f}s)")
    print(f"score: {score}  grade: {grade(score)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
