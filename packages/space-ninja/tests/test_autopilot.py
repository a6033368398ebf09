"""Tests for the scripted Autopilot player."""
from __future__ import annotations

from space_ninja import Autopilot, FixedStepDriver, GameSimulation


def test_idle_autopilot_does_nothing():
    """No presses while the simulation is idle."""
    sim = GameSimulation(seed=3)
    pilot = Autopilot(sim)
    assert pilot.act() == 0


def test_no_target_while_sticks_are_far():
    """At the start of a run no stick reaches the ninja by the next landing."""
    sim = GameSimulation(seed=3)
    sim.start()
    pilot = Autopilot(sim)
    assert pilot.landing_stick() is None
    assert pilot.act() == 0


def test_colours_the_landing_stick():
    """The stick under the ninja at the next landing gets the next ninja colour."""
    sim = GameSimulation(seed=3)
    sim.start()
    sim.track.advance(525.0)  # first stick reaches 550..640 one second from now
    pilot = Autopilot(sim)
    stick = pilot.landing_stick()
    assert stick is sim.track.sticks[0]
    assert pilot.act() == 2
    assert stick.color_index == 1


def test_autopilot_scores_in_a_headless_run():
    """Driven by the autopilot the first landing on a stick scores."""
    sim = GameSimulation(seed=3)
    driver = FixedStepDriver(sim, tps=60)
    pilot = Autopilot(sim)
    driver.before_tick(pilot)
    sim.start()
    driver.run(60 * 30)
    score = sim.final_score if sim.final_score is not None else sim.score
    assert score >= 1
    assert pilot.presses >= 2
