"""
Spin Scheduler
==============
Owns one wheel's spin: outcome, trajectory, tick stream and completion.

Everything runs on a single asyncio loop. The tick loop and the
completion timer are the only callbacks a spin schedules, and both are
cancelled before completion fires or when the spin is torn down.
"""

import asyncio
import random
from dataclasses import dataclass
from typing import Callable, Optional, Protocol, Sequence

from lucky_wheel.config import (
    WheelState, SPIN_DURATION, TICK_INTERVAL, TICK_PROBABILITY, MIN_ITEMS,
    DEBUG_SPIN,
)
from lucky_wheel.core.options import Option
from lucky_wheel.core.timers import PeriodicTimer
from lucky_wheel.core.trajectory import RotationTrajectory, plan_trajectory, spin_speed


class TickSink(Protocol):
    def play_tick(self) -> None: ...


@dataclass
class ActiveSpin:
    """Per-spin handles and bookkeeping"""
    trajectory: RotationTrajectory
    options: Sequence[Option]
    on_complete: Callable[[Option], None]
    tick_timer: Optional[PeriodicTimer] = None
    completion: Optional[asyncio.TimerHandle] = None
    ticks: int = 0


class SpinScheduler:
    """
    Spin orchestration for one wheel.

    `committed_angle` is the cumulative rotation of this wheel. It only
    ever grows, so every spin animates forward from where the last one
    stopped. The scheduler reports IDLE or SPINNING; reacting to the
    winner (celebrating, closing the result) belongs to the caller.
    """

    def __init__(
        self,
        audio: Optional[TickSink] = None,
        rng: Optional[random.Random] = None,
        duration: float = SPIN_DURATION,
        tick_interval: float = TICK_INTERVAL,
        tick_probability: float = TICK_PROBABILITY,
        loop: Optional[asyncio.AbstractEventLoop] = None
    ):
        self.audio = audio
        self.rng = rng or random.Random()
        self.duration = duration
        self.tick_interval = tick_interval
        self.tick_probability = tick_probability
        self._loop = loop

        self.state: WheelState = WheelState.IDLE
        self.committed_angle = 0.0
        self.last_trajectory: Optional[RotationTrajectory] = None
        self._spin: Optional[ActiveSpin] = None

        # Stats
        self.spins_started = 0
        self.spins_completed = 0

    # =========================================================================
    # PUBLIC API
    # =========================================================================

    def request_spin(self, options: Sequence[Option],
                     on_complete: Callable[[Option], None]) -> bool:
        """
        Start a spin over `options`.

        Ignored (returns False) while a spin is running or with fewer
        than two options.
        """
        if self.state == WheelState.SPINNING or self._spin is not None:
            return False
        if len(options) < MIN_ITEMS:
            return False

        loop = self._get_loop()
        options = tuple(options)

        trajectory = plan_trajectory(
            len(options),
            self.committed_angle,
            rng=self.rng,
            started_at=loop.time(),
            duration=self.duration,
        )
        self.committed_angle = trajectory.target_angle
        self.last_trajectory = trajectory

        spin = ActiveSpin(trajectory=trajectory, options=options, on_complete=on_complete)
        self._spin = spin
        self.state = WheelState.SPINNING
        self.spins_started += 1

        spin.tick_timer = PeriodicTimer(
            self.tick_interval, lambda: self._on_tick_sample(spin), loop
        ).start()
        spin.completion = loop.call_later(self.duration, self._finish, spin)

        if DEBUG_SPIN:
            print(f"[Spin] #{self.spins_started}: winner={trajectory.winner_index} "
                  f"target={trajectory.target_angle:.1f} turns={trajectory.extra_turns}")
        return True

    def cancel(self):
        """Tear down the running spin; its completion will never fire"""
        spin = self._spin
        if spin is None:
            return
        self._release(spin)
        self.state = WheelState.IDLE

    def current_angle(self, now: Optional[float] = None) -> float:
        """Rotation to draw this frame"""
        spin = self._spin
        if spin is None:
            return self.committed_angle
        if now is None:
            now = self._get_loop().time()
        return spin.trajectory.angle_at(now)

    @property
    def is_spinning(self) -> bool:
        return self.state == WheelState.SPINNING

    # =========================================================================
    # INTERNALS
    # =========================================================================

    def _get_loop(self) -> asyncio.AbstractEventLoop:
        if self._loop is None:
            self._loop = asyncio.get_running_loop()
        return self._loop

    def _on_tick_sample(self, spin: ActiveSpin):
        if spin is not self._spin:
            return

        elapsed = self._get_loop().time() - spin.trajectory.started_at
        progress = elapsed / self.duration
        if progress >= 1:
            spin.tick_timer.cancel()
            return

        if self.should_tick(progress):
            spin.ticks += 1
            if self.audio is not None:
                self.audio.play_tick()

    def should_tick(self, progress: float) -> bool:
        """One Bernoulli draw: dense ticks at full speed, sparse near the end"""
        return self.rng.random() < spin_speed(progress) * self.tick_probability

    def _finish(self, spin: ActiveSpin):
        if spin is not self._spin:
            return

        # Ticks must be stopped before the winner is announced
        self._release(spin)
        self.state = WheelState.IDLE
        self.spins_completed += 1

        winner = spin.options[spin.trajectory.winner_index]
        if DEBUG_SPIN:
            print(f"[Spin] Landed on {winner.label!r} after {spin.ticks} ticks")
        spin.on_complete(winner)

    def _release(self, spin: ActiveSpin):
        if spin.tick_timer is not None:
            spin.tick_timer.cancel()
        if spin.completion is not None:
            spin.completion.cancel()
        self._spin = None
