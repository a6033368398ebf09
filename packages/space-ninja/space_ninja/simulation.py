"""GameSimulation - score, run state and the per-tick update order."""
from __future__ import annotations

import logging
import os
import random
from typing import Any, Callable

from space_ninja import signals
from space_ninja.commands import CommandQueue, StartGame, SwitchColor
from space_ninja.config import GameConfig
from space_ninja.cycle import NinjaCycle
from space_ninja.easing import lerp
from space_ninja.scoring import crosses_speed_threshold, grade, speed_for_score
from space_ninja.signals import SignalBus
from space_ninja.snapshot import GameSnapshot, NinjaView, StickView
from space_ninja.stick import Stick
from space_ninja.track import StickTrack
from space_ninja.types import FrameContext, Phase

logger = logging.getLogger(__name__)

_System = Callable[[FrameContext], None]


class GameSimulation:
    """Owns one game: the stick track, the ninja cycle, score and speed.

    Drive it with :meth:`tick`.  Each running tick applies queued commands,
    scrolls the track, re-evaluates the speed curve and advances the jump
    cycle, which resolves landings through :meth:`on_ninja_landed`.  Signals
    published during the tick are flushed at its end.

    Calls made in the wrong phase (ticking before :meth:`start`, switching
    after game over) are ignored.
    """

    def __init__(self, config: GameConfig | None = None, seed: int | None = None) -> None:
        self._config = config if config is not None else GameConfig()

        if seed is None:
            seed = int.from_bytes(os.urandom(8))
        self._seed = seed
        self._rng = random.Random(seed)

        self._track = StickTrack(self._config, self._rng)
        self._cycle = NinjaCycle(self._config, on_landed=self.on_ninja_landed)
        self._bus = SignalBus()
        self._commands = CommandQueue()
        self._commands.handle(StartGame, self._handle_start)
        self._commands.handle(SwitchColor, self._handle_switch)

        # Order matters: landings must see this tick's stick positions.
        self._systems: list[_System] = [
            self._track_system,
            self._speed_system,
            self._cycle_system,
        ]

        self._phase = Phase.IDLE
        self._score = 0
        self._speed = self._config.base_speed
        self._elapsed = 0.0
        self._tick_number = 0
        self._final_score: int | None = None
        self._grade: str | None = None

    @property
    def config(self) -> GameConfig:
        return self._config

    @property
    def seed(self) -> int:
        return self._seed

    @property
    def bus(self) -> SignalBus:
        return self._bus

    @property
    def track(self) -> StickTrack:
        return self._track

    @property
    def cycle(self) -> NinjaCycle:
        return self._cycle

    @property
    def phase(self) -> Phase:
        return self._phase

    @property
    def is_running(self) -> bool:
        return self._phase is Phase.RUNNING

    @property
    def score(self) -> int:
        return self._score

    @property
    def speed(self) -> float:
        return self._speed

    @property
    def elapsed(self) -> float:
        return self._elapsed

    @property
    def tick_number(self) -> int:
        return self._tick_number

    @property
    def ninja_color_index(self) -> int:
        return self._cycle.color_index

    @property
    def final_score(self) -> int | None:
        return self._final_score

    @property
    def grade(self) -> str | None:
        return self._grade

    # -- commands ---------------------------------------------------------

    def start(self) -> None:
        """Begin a fresh run. Any run in progress is discarded."""
        self._score = 0
        self._speed = self._config.base_speed
        self._elapsed = 0.0
        self._final_score = None
        self._grade = None
        self._track.reset()
        self._cycle.start()
        self._phase = Phase.RUNNING
        self._bus.publish(signals.STARTED, speed=self._speed)
        logger.info("Run started (seed=%d)", self._seed)

    def request_color_switch(self) -> Stick | None:
        """Recolour the stick nearest the ninja. Returns it, or None."""
        if not self.is_running:
            return None
        stick = self._track.closest_stick_near(
            self._config.ninja_x, self._config.switch_window
        )
        if stick is None:
            return None
        stick.switch_color()
        self._bus.publish(
            signals.STICK_SWITCHED, stick_id=stick.id, color_index=stick.color_index
        )
        return stick

    def submit(self, command: Any) -> None:
        """Queue a :class:`StartGame` or :class:`SwitchColor` for the next tick.

        Safe to call from an input thread.
        """
        self._commands.enqueue(command)

    def _handle_start(self, cmd: StartGame, ctx: FrameContext) -> bool:
        self.start()
        return True

    def _handle_switch(self, cmd: SwitchColor, ctx: FrameContext) -> bool:
        return self.request_color_switch() is not None

    # -- tick -------------------------------------------------------------

    def tick(self, dt: float) -> None:
        if dt < 0:
            raise ValueError(f"dt must be >= 0, got {dt}")
        self._tick_number += 1
        ctx = FrameContext(tick_number=self._tick_number, dt=dt, elapsed=self._elapsed)
        self._commands.drain(ctx)
        if self.is_running:
            self._elapsed += dt
            for system in self._systems:
                system(ctx)
                if not self.is_running:
                    break
        self._bus.flush()

    def _track_system(self, ctx: FrameContext) -> None:
        distance = self._speed * ctx.dt / self._config.frame_time
        self._track.advance(distance)

    def _speed_system(self, ctx: FrameContext) -> None:
        if not crosses_speed_threshold(self._score, self._config):
            return
        speed = speed_for_score(self._score, self._config)
        if speed != self._speed:
            self._speed = speed
            self._bus.publish(signals.SPEED_CHANGED, speed=speed, score=self._score)
            logger.debug("Speed now %.2f at score %d", speed, self._score)

    def _cycle_system(self, ctx: FrameContext) -> None:
        self._cycle.advance(ctx.dt)

    # -- landing ----------------------------------------------------------

    def on_ninja_landed(self) -> None:
        """Resolve one landing: cycle the ninja colour, then score or end the run."""
        if not self.is_running:
            return
        color_index = self._cycle.next_color()
        stick = self._track.stick_under(self._config.ninja_x)
        self._bus.publish(
            signals.LANDED,
            color_index=color_index,
            stick_id=stick.id if stick is not None else None,
        )
        if stick is None:
            return
        if stick.color_index == color_index:
            self._score += 1
            self._bus.publish(signals.SCORED, score=self._score, stick_id=stick.id)
        else:
            self._game_over()

    def _game_over(self) -> None:
        self._phase = Phase.GAME_OVER
        self._cycle.stop()
        self._final_score = self._score
        self._grade = grade(self._score)
        self._bus.publish(
            signals.GAME_OVER, final_score=self._final_score, grade=self._grade
        )
        logger.info("Game over: score=%d grade=%r", self._final_score, self._grade)

    # -- queries ----------------------------------------------------------

    def hint_opacity(self) -> float:
        """Opacity of the start-of-run hint: fade in, hold, fade out."""
        if not self.is_running:
            return 0.0
        cfg = self._config
        t = self._elapsed
        if t < cfg.hint_fade_in:
            return lerp(0.0, 1.0, t / cfg.hint_fade_in)
        if t < cfg.hint_hold:
            return 1.0
        if t < cfg.hint_fade_out:
            return lerp(1.0, 0.0, (t - cfg.hint_hold) / (cfg.hint_fade_out - cfg.hint_hold))
        return 0.0

    def snapshot(self) -> GameSnapshot:
        cfg = self._config
        ninja = NinjaView(
            x=cfg.ninja_x,
            y=cfg.ninja_y,
            color_index=self._cycle.color_index,
            hop_offset=self._cycle.hop_offset(),
            scale_y=self._cycle.scale_y(),
        )
        return GameSnapshot(
            phase=self._phase,
            score=self._score,
            speed=self._speed,
            elapsed=self._elapsed,
            ninja=ninja,
            sticks=tuple(StickView.of(s) for s in self._track),
            hint_opacity=self.hint_opacity(),
            final_score=self._final_score,
            grade=self._grade,
        )
