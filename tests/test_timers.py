import asyncio
import time

import pytest

from lucky_wheel.core.timers import PeriodicTimer


def test_fires_repeatedly_until_cancelled():
    async def scenario():
        calls = []
        timer = PeriodicTimer(0.01, lambda: calls.append(1)).start()
        await asyncio.sleep(0.075)
        timer.cancel()
        count = len(calls)
        await asyncio.sleep(0.05)
        return timer, calls, count

    timer, calls, count = asyncio.run(scenario())
    assert 3 <= count <= 8
    assert len(calls) == count
    assert timer.fire_count == count
    assert not timer.active


def test_callback_can_cancel_its_own_timer():
    async def scenario():
        calls = []

        def callback():
            calls.append(1)
            if len(calls) == 2:
                timer.cancel()

        timer = PeriodicTimer(0.005, callback).start()
        await asyncio.sleep(0.08)
        return calls

    assert len(asyncio.run(scenario())) == 2


def test_interval_must_be_positive():
    with pytest.raises(ValueError):
        PeriodicTimer(0, lambda: None)


def test_late_firings_keep_the_original_grid():
    async def scenario():
        timer = PeriodicTimer(0.01, lambda: time.sleep(0.004)).start()
        await asyncio.sleep(0.055)
        due = timer._handle.when()
        timer.cancel()
        return timer, due

    timer, due = asyncio.run(scenario())
    assert timer.fire_count >= 3
    assert due == pytest.approx(timer.started_at + (timer.fire_count + 1) * 0.01)


def test_blocking_frames_do_not_drop_samples():
    async def scenario():
        timer = PeriodicTimer(0.01, lambda: None).start()
        loop = asyncio.get_running_loop()
        end = timer.started_at + 0.3
        while loop.time() < end:
            # Render a frame, then yield until the next one
            time.sleep(0.007)
            await asyncio.sleep(1 / 60 - 0.007)
        await asyncio.sleep(0.002)
        timer.cancel()
        return timer

    timer = asyncio.run(scenario())
    assert timer.fire_count >= 28
