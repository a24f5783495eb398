"""Shared fakes for the test suite"""

from typing import List

from lucky_wheel.core.options import Option, OptionList


def make_options(count: int) -> List[Option]:
    return list(OptionList([f"option {i}" for i in range(count)]))


class FakeAudio:
    """Records tick/win emissions instead of playing them"""

    def __init__(self, clock=None):
        self.clock = clock
        self.tick_times: List[float] = []
        self.win_count = 0
        self.resume_count = 0
        self.muted = False
        self.cleaned_up = False

    @property
    def tick_count(self) -> int:
        return len(self.tick_times)

    def play_tick(self):
        self.tick_times.append(self.clock() if self.clock else 0.0)

    def play_win(self):
        self.win_count += 1

    def resume(self):
        self.resume_count += 1

    def toggle_mute(self) -> bool:
        self.muted = not self.muted
        return self.muted

    def cleanup(self):
        self.cleaned_up = True
