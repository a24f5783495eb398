"""
Rotation Trajectory
===================
Winner selection, landing angle, and the easing curve of a spin.

Angles are in degrees, measured clockwise. At rest, slice `i` of an
`n`-slice wheel is centred `i * 360 / n` degrees clockwise from the
pointer at the top.
"""

import math
import random
from dataclasses import dataclass
from typing import Callable, Optional, Tuple

from lucky_wheel.config import (
    SPIN_DURATION, SPIN_EASING,
    MIN_EXTRA_TURNS, MAX_EXTRA_TURNS, JITTER_FRACTION,
)


def cubic_bezier(x1: float, y1: float, x2: float, y2: float) -> Callable[[float], float]:
    """
    CSS-style cubic-bezier timing function through (0,0) and (1,1).
    Returns f(progress) -> eased progress.
    """

    def sample(a1: float, a2: float, t: float) -> float:
        u = 1 - t
        return 3 * u * u * t * a1 + 3 * u * t * t * a2 + t * t * t

    def slope_x(t: float) -> float:
        u = 1 - t
        return 3 * u * u * x1 + 6 * u * t * (x2 - x1) + 3 * t * t * (1 - x2)

    def solve_t(x: float) -> float:
        # Newton first, bisection if the slope flattens out
        t = x
        for _ in range(8):
            err = sample(x1, x2, t) - x
            if abs(err) < 1e-7:
                return t
            d = slope_x(t)
            if abs(d) < 1e-6:
                break
            t -= err / d

        lo, hi = 0.0, 1.0
        t = x
        for _ in range(50):
            err = sample(x1, x2, t) - x
            if abs(err) < 1e-7:
                break
            if err > 0:
                hi = t
            else:
                lo = t
            t = (lo + hi) / 2
        return t

    def ease(progress: float) -> float:
        if progress <= 0:
            return 0.0
        if progress >= 1:
            return 1.0
        return sample(y1, y2, solve_t(progress))

    return ease


spin_easing = cubic_bezier(*SPIN_EASING)


def spin_speed(progress: float) -> float:
    """Apparent wheel speed: 1 at the start, 0 at the end (cubic ease-out proxy)"""
    progress = min(max(progress, 0.0), 1.0)
    return 1 - progress ** 3


def slice_angle(count: int) -> float:
    return 360.0 / count


def slice_at_pointer(angle: float, count: int) -> int:
    """Index of the slice under the pointer after rotating by `angle`"""
    width = slice_angle(count)
    under_pointer = (-angle) % 360.0
    return int(math.floor((under_pointer + width / 2) / width)) % count


@dataclass
class RotationTrajectory:
    """One spin's animation path"""
    start_angle: float
    target_angle: float
    winner_index: int
    extra_turns: int
    jitter: float
    started_at: float = 0.0
    duration: float = SPIN_DURATION

    def progress(self, now: float) -> float:
        if self.duration <= 0:
            return 1.0
        return min(max((now - self.started_at) / self.duration, 0.0), 1.0)

    def angle_at(self, now: float) -> float:
        eased = spin_easing(self.progress(now))
        return self.start_angle + (self.target_angle - self.start_angle) * eased

    @property
    def landing_offset(self) -> float:
        return self.target_angle - self.start_angle - self.extra_turns * 360


def landing_offset(winner_index: int, count: int, jitter: float) -> float:
    """Rotation past whole turns that brings `winner_index` under the pointer"""
    return (360 - winner_index * slice_angle(count)) + jitter


def plan_trajectory(count: int, start_angle: float,
                    rng: Optional[random.Random] = None,
                    started_at: float = 0.0,
                    duration: float = SPIN_DURATION) -> RotationTrajectory:
    """
    Draw a uniform winner and the angle that lands on it.

    At least MIN_EXTRA_TURNS full turns are added so the wheel always
    moves forward from `start_angle`.
    """
    if count < 1:
        raise ValueError("a wheel needs at least one slice")
    rng = rng or random

    winner_index = rng.randrange(count)
    width = slice_angle(count)
    extra_turns = rng.randint(MIN_EXTRA_TURNS, MAX_EXTRA_TURNS)
    jitter = rng.uniform(-JITTER_FRACTION * width, JITTER_FRACTION * width)

    target = start_angle + extra_turns * 360 + landing_offset(winner_index, count, jitter)
    return RotationTrajectory(
        start_angle=start_angle,
        target_angle=target,
        winner_index=winner_index,
        extra_turns=extra_turns,
        jitter=jitter,
        started_at=started_at,
        duration=duration,
    )


def expected_tick_stats(duration: float, interval: float,
                        probability: float) -> Tuple[float, float]:
    """Mean and variance of the tick count for one full spin"""
    mean = 0.0
    variance = 0.0
    k = 1
    while k * interval < duration:
        q = probability * spin_speed(k * interval / duration)
        mean += q
        variance += q * (1 - q)
        k += 1
    return mean, variance
