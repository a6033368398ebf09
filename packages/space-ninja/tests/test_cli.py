"""Tests for the headless command-line runner."""
from __future__ import annotations

from space_ninja.__main__ import main, parse_args


def test_defaults():
    """Defaults run two minutes at 60 tps with the autopilot."""
    args = parse_args([])
    assert args.ticks == 7200
    assert args.tps == 60
    assert args.seed == 42
    assert not args.manual


def test_manual_run_loses_on_first_stick(capsys):
    """Without input the first stick under the ninja ends the run."""
    assert main(["--manual", "--ticks", "600"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("game over after")
    assert "score: 0  grade: Poor..." in out


def test_short_run_reports_still_running(capsys):
    """A run cut short before any stick arrives is still in progress."""
    assert main(["--ticks", "60"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("still running after 60 ticks (1.0s)")
