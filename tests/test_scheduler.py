import asyncio
import math
import random

import pytest

from lucky_wheel.config import WheelState
from lucky_wheel.core.scheduler import SpinScheduler
from lucky_wheel.core.trajectory import slice_at_pointer, expected_tick_stats

from tests.helpers import FakeAudio, make_options

DURATION = 0.2
INTERVAL = 0.01


def make_scheduler(seed: int = 7, **kwargs):
    loop = asyncio.get_running_loop()
    audio = FakeAudio(clock=loop.time)
    params = dict(audio=audio, rng=random.Random(seed), duration=DURATION, tick_interval=INTERVAL)
    params.update(kwargs)
    return SpinScheduler(**params), audio


def test_spin_completes_once_with_one_of_the_options():
    async def scenario():
        scheduler, audio = make_scheduler()
        options = make_options(4)
        calls = []
        loop = asyncio.get_running_loop()
        started = loop.time()

        def on_complete(winner):
            calls.append((winner, loop.time(), audio.tick_count, scheduler.state))

        assert scheduler.request_spin(options, on_complete)
        assert scheduler.state == WheelState.SPINNING
        assert scheduler.is_spinning

        await asyncio.sleep(DURATION * 2)
        return scheduler, audio, options, calls, started

    scheduler, audio, options, calls, started = asyncio.run(scenario())

    assert len(calls) == 1
    winner, fired_at, ticks_at_completion, state_in_callback = calls[0]
    assert winner in options
    assert fired_at - started >= DURATION - 0.01
    assert fired_at - started < DURATION + 0.15

    # Tick loop already stopped, scheduler back to idle, never CELEBRATING
    assert state_in_callback == WheelState.IDLE
    assert scheduler.state == WheelState.IDLE
    assert audio.tick_count == ticks_at_completion
    assert all(t <= fired_at for t in audio.tick_times)

    index = options.index(winner)
    assert scheduler.last_trajectory.winner_index == index
    assert slice_at_pointer(scheduler.committed_angle, len(options)) == index
    assert scheduler.current_angle() == scheduler.committed_angle


def test_request_while_spinning_is_ignored():
    async def scenario():
        scheduler, _ = make_scheduler()
        first, second = [], []

        assert scheduler.request_spin(make_options(3), first.append)
        angle = scheduler.committed_angle
        trajectory = scheduler.last_trajectory

        assert not scheduler.request_spin(make_options(5), second.append)
        assert scheduler.state == WheelState.SPINNING
        assert scheduler.committed_angle == angle
        assert scheduler.last_trajectory is trajectory

        await asyncio.sleep(DURATION * 2)
        return scheduler, first, second

    scheduler, first, second = asyncio.run(scenario())
    assert len(first) == 1
    assert second == []
    assert scheduler.spins_started == 1
    assert scheduler.spins_completed == 1


@pytest.mark.parametrize("count", [0, 1])
def test_request_with_too_few_options_is_ignored(count):
    async def scenario():
        scheduler, audio = make_scheduler()
        calls = []
        accepted = scheduler.request_spin(make_options(count), calls.append)
        await asyncio.sleep(DURATION * 1.5)
        return scheduler, audio, accepted, calls

    scheduler, audio, accepted, calls = asyncio.run(scenario())
    assert not accepted
    assert calls == []
    assert scheduler.state == WheelState.IDLE
    assert scheduler.committed_angle == 0.0
    assert scheduler.last_trajectory is None
    assert audio.tick_count == 0


def test_cancel_prevents_completion_and_further_ticks():
    async def scenario():
        scheduler, audio = make_scheduler(tick_probability=1.0)
        calls = []
        scheduler.request_spin(make_options(4), calls.append)
        await asyncio.sleep(DURATION / 4)

        scheduler.cancel()
        ticks_at_cancel = audio.tick_count
        angle = scheduler.committed_angle

        await asyncio.sleep(DURATION * 2)
        return scheduler, audio, calls, ticks_at_cancel, angle

    scheduler, audio, calls, ticks_at_cancel, angle = asyncio.run(scenario())
    assert calls == []
    assert audio.tick_count == ticks_at_cancel
    assert scheduler.state == WheelState.IDLE
    # The committed angle survives teardown so the next spin still moves forward
    assert scheduler.committed_angle == angle
    scheduler.cancel()


def test_angles_increase_across_consecutive_spins():
    async def scenario():
        scheduler, _ = make_scheduler()
        options = make_options(6)
        targets = []
        samples = []
        for _ in range(3):
            done = asyncio.get_running_loop().create_future()
            scheduler.request_spin(options, done.set_result)
            start = scheduler.last_trajectory.start_angle
            while not done.done():
                samples.append(scheduler.current_angle())
                await asyncio.sleep(INTERVAL)
            targets.append((start, scheduler.committed_angle))
        return targets, samples

    targets, samples = asyncio.run(scenario())
    previous = 0.0
    for start, target in targets:
        assert start == previous
        assert target > start
        previous = target
    assert all(b >= a for a, b in zip(samples, samples[1:]))


def test_tick_loop_emits_ticks_during_spin():
    async def scenario():
        scheduler, audio = make_scheduler(tick_probability=1.0)
        done = asyncio.get_running_loop().create_future()
        scheduler.request_spin(make_options(2), done.set_result)
        await done
        return audio

    audio = asyncio.run(scenario())
    max_samples = math.ceil(DURATION / INTERVAL)
    assert 1 <= audio.tick_count <= max_samples


def test_tick_count_matches_expected_distribution():
    # Drive the sampling decision directly over the reference 5 s / 50 ms grid
    scheduler = SpinScheduler(rng=random.Random(2024), duration=5.0, tick_interval=0.05)
    trials = 2000
    counts = []
    for _ in range(trials):
        ticks = 0
        for k in range(1, 100):
            if scheduler.should_tick(k * 0.05 / 5.0):
                ticks += 1
        counts.append(ticks)

    mean, variance = expected_tick_stats(5.0, 0.05, 0.4)
    observed = sum(counts) / trials
    assert abs(observed - mean) < 4 * math.sqrt(variance / trials)

    sd = math.sqrt(variance)
    outliers = sum(1 for c in counts if abs(c - mean) > 4 * sd)
    assert outliers <= trials * 0.001


def test_spin_without_audio_still_completes():
    async def scenario():
        scheduler = SpinScheduler(audio=None, rng=random.Random(1),
                                  duration=DURATION, tick_interval=INTERVAL)
        done = asyncio.get_running_loop().create_future()
        scheduler.request_spin(make_options(3), done.set_result)
        return await asyncio.wait_for(done, DURATION * 5)

    winner = asyncio.run(scenario())
    assert winner.label.startswith("option")


def test_current_angle_idle_is_committed_angle():
    scheduler = SpinScheduler()
    assert scheduler.current_angle() == 0.0
    scheduler.cancel()
