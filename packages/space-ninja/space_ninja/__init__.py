"""space_ninja - Colour-matching arcade game simulation."""

from space_ninja.autopilot import Autopilot
from space_ninja.commands import CommandQueue, StartGame, SwitchColor
from space_ninja.config import GameConfig
from space_ninja.cycle import NinjaCycle
from space_ninja.driver import FixedStepDriver
from space_ninja.palette import DEFAULT_PALETTE, INACTIVE_COLOR, PaletteColor
from space_ninja.scoring import grade, speed_for_score
from space_ninja.signals import SignalBus
from space_ninja.simulation import GameSimulation
from space_ninja.snapshot import GameSnapshot, NinjaView, StickView
from space_ninja.stick import Stick
from space_ninja.track import StickTrack
from space_ninja.types import INACTIVE, FrameContext, Phase

__all__ = [
    "GameSimulation",
    "GameConfig",
    "Stick",
    "StickTrack",
    "NinjaCycle",
    "FixedStepDriver",
    "Autopilot",
    "SignalBus",
    "CommandQueue",
    "StartGame",
    "SwitchColor",
    "GameSnapshot",
    "NinjaView",
    "StickView",
    "PaletteColor",
    "DEFAULT_PALETTE",
    "INACTIVE_COLOR",
    "INACTIVE",
    "FrameContext",
    "Phase",
    "grade",
    "speed_for_score",
]
