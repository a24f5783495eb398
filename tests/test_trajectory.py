import random

import pytest

from lucky_wheel.config import (
    SPIN_DURATION, TICK_INTERVAL, TICK_PROBABILITY, MIN_EXTRA_TURNS, MAX_EXTRA_TURNS,
)
from lucky_wheel.core.trajectory import (
    cubic_bezier, spin_easing, spin_speed, slice_angle, slice_at_pointer,
    landing_offset, plan_trajectory, expected_tick_stats, RotationTrajectory,
)

# Chi-squared critical values at p = 0.0001, indexed by degrees of freedom
CHI2_CRITICAL = {
    1: 15.137, 2: 18.421, 3: 21.108, 4: 23.513, 5: 25.745,
    6: 27.856, 7: 29.878, 8: 31.828, 9: 33.720,
}


@pytest.mark.parametrize("count", range(2, 11))
def test_winner_is_uniform(count):
    rng = random.Random(1000 + count)
    trials = 10_000
    hits = [0] * count
    for _ in range(trials):
        hits[plan_trajectory(count, 0.0, rng=rng).winner_index] += 1

    expected = trials / count
    chi2 = sum((h - expected) ** 2 / expected for h in hits)
    assert chi2 < CHI2_CRITICAL[count - 1]


@pytest.mark.parametrize("count", range(2, 11))
def test_target_lands_on_winner(count):
    rng = random.Random(count)
    width = slice_angle(count)
    angle = 0.0
    for _ in range(500):
        traj = plan_trajectory(count, angle, rng=rng)
        assert slice_at_pointer(traj.target_angle, count) == traj.winner_index

        # Distance from the winner's slice centre stays inside the jitter bound
        offset = (360 - traj.target_angle % 360 - traj.winner_index * width) % 360
        assert min(offset, 360 - offset) <= 0.4 * width + 1e-6
        angle = traj.target_angle


@pytest.mark.parametrize("count", [2, 3, 7, 10])
def test_extreme_jitter_stays_in_slice(count):
    width = slice_angle(count)
    for index in range(count):
        for jitter in (-0.4 * width, 0.4 * width):
            angle = 360 * 6 + landing_offset(index, count, jitter)
            assert slice_at_pointer(angle, count) == index


def test_turns_and_jitter_ranges():
    rng = random.Random(5)
    for _ in range(2000):
        traj = plan_trajectory(6, 123.0, rng=rng)
        assert MIN_EXTRA_TURNS <= traj.extra_turns <= MAX_EXTRA_TURNS
        assert abs(traj.jitter) <= 0.4 * slice_angle(6)
        assert traj.target_angle - traj.start_angle >= MIN_EXTRA_TURNS * 360
        assert traj.landing_offset == pytest.approx(
            landing_offset(traj.winner_index, 6, traj.jitter)
        )


def test_target_never_decreases_across_spins():
    rng = random.Random(11)
    angle = 0.0
    for _ in range(50):
        traj = plan_trajectory(4, angle, rng=rng)
        assert traj.target_angle > angle
        angle = traj.target_angle


def test_plan_rejects_empty_wheel():
    with pytest.raises(ValueError):
        plan_trajectory(0, 0.0)


def test_slice_at_pointer_at_rest():
    # Slice 0 is centred under the pointer before any rotation
    assert slice_at_pointer(0.0, 4) == 0
    # Rotating clockwise by one slice brings the last slice to the top
    assert slice_at_pointer(90.0, 4) == 3
    assert slice_at_pointer(270.0, 4) == 1


def test_spin_easing_endpoints_and_monotonic():
    assert spin_easing(0.0) == 0.0
    assert spin_easing(1.0) == 1.0
    assert spin_easing(-1.0) == 0.0
    assert spin_easing(2.0) == 1.0

    values = [spin_easing(i / 200) for i in range(201)]
    assert all(b >= a - 1e-9 for a, b in zip(values, values[1:]))
    # Decelerating curve: most of the distance is covered early
    assert spin_easing(0.5) > 0.75


def test_linear_bezier_is_identity():
    linear = cubic_bezier(0.0, 0.0, 1.0, 1.0)
    for x in (0.1, 0.25, 0.5, 0.9):
        assert linear(x) == pytest.approx(x, abs=1e-5)


def test_angle_at_moves_from_start_to_target():
    traj = RotationTrajectory(start_angle=100.0, target_angle=2000.0, winner_index=0,
                              extra_turns=5, jitter=0.0, started_at=10.0, duration=5.0)
    assert traj.angle_at(9.0) == 100.0
    assert traj.angle_at(10.0) == 100.0
    assert traj.angle_at(15.0) == 2000.0
    assert traj.angle_at(99.0) == 2000.0
    samples = [traj.angle_at(10.0 + i * 0.05) for i in range(101)]
    assert all(b >= a for a, b in zip(samples, samples[1:]))


def test_spin_speed_decays():
    assert spin_speed(0.0) == 1.0
    assert spin_speed(1.0) == 0.0
    assert spin_speed(0.5) == pytest.approx(0.875)
    assert spin_speed(1.5) == 0.0


def test_expected_tick_count_for_reference_spin():
    mean, variance = expected_tick_stats(SPIN_DURATION, TICK_INTERVAL, TICK_PROBABILITY)
    assert mean == pytest.approx(29.799, abs=0.01)
    assert 10 < variance < mean
