"""
Timers
======
Periodic callbacks on the asyncio loop, cancelled through a handle.
"""

import asyncio
from typing import Callable, Optional


class PeriodicTimer:
    """
    Calls `callback` every `interval` seconds until cancelled.

    The first call happens one interval after start(). Firing k is due at
    `started_at + k * interval`, so a late firing does not push back the
    ones after it. The callback may cancel the timer from inside itself.
    """

    def __init__(self, interval: float, callback: Callable[[], None],
                 loop: Optional[asyncio.AbstractEventLoop] = None):
        if interval <= 0:
            raise ValueError("interval must be positive")
        self.interval = interval
        self.callback = callback
        self._loop = loop
        self._handle: Optional[asyncio.TimerHandle] = None
        self._cancelled = False
        self.started_at = 0.0
        self.fire_count = 0

    def start(self) -> "PeriodicTimer":
        if self._loop is None:
            self._loop = asyncio.get_running_loop()
        self._cancelled = False
        self.started_at = self._loop.time()
        self.fire_count = 0
        self._schedule()
        return self

    def _schedule(self):
        due = self.started_at + (self.fire_count + 1) * self.interval
        self._handle = self._loop.call_at(due, self._fire)

    def _fire(self):
        self._handle = None
        if self._cancelled:
            return
        self.fire_count += 1
        self.callback()
        if not self._cancelled:
            self._schedule()

    def cancel(self):
        """Stop firing; safe to call more than once"""
        self._cancelled = True
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    @property
    def active(self) -> bool:
        return not self._cancelled and self._handle is not None
