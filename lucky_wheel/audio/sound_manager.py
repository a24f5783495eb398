"""
Sound Manager
=============
Best-effort audio feedback for the wheel: tick and win effects.

One pygame mixer is acquired lazily and held for the life of the process.
If it cannot be acquired every call becomes a silent no-op.
"""

import pygame
import numpy as np
from typing import Callable, Optional

from lucky_wheel.config import (
    AUDIO_ENABLED, AUDIO_SAMPLE_RATE, AUDIO_CHANNELS,
    AUDIO_BUFFER_SIZE, WIN_NOTES,
)
from lucky_wheel.audio.generator import SoundGenerator, tick_samples, win_note_samples


class MixerSink:
    """
    Thin wrapper around pygame.mixer.
    Accepts float mono buffers and plays each one as an independent Sound.
    """

    def __init__(self):
        if not pygame.mixer.get_init():
            pygame.mixer.pre_init(
                frequency=AUDIO_SAMPLE_RATE,
                size=-16,
                channels=AUDIO_CHANNELS,
                buffer=AUDIO_BUFFER_SIZE
            )
            pygame.mixer.init()

        frequency, _size, channels = pygame.mixer.get_init()
        self.sample_rate = frequency
        self.channels = channels

        # Ticks overlap with each other and with the fanfare
        pygame.mixer.set_num_channels(16)

    def play(self, samples: np.ndarray):
        """Play a float32 mono buffer in [-1, 1]"""
        samples_int = (np.clip(samples, -1, 1) * 32767).astype(np.int16)
        if self.channels > 1:
            samples_int = np.ascontiguousarray(
                np.column_stack([samples_int] * self.channels)
            )
        sound = pygame.sndarray.make_sound(samples_int)
        sound.play()

    def resume(self):
        pygame.mixer.unpause()

    def is_active(self) -> bool:
        return pygame.mixer.get_init() is not None

    def close(self):
        pygame.mixer.quit()


SinkFactory = Callable[[], MixerSink]


class SoundManager:
    """
    Audio feedback engine.

    play_tick() and play_win() synthesize their buffers on every call, so
    overlapping emissions never share mutable state. Mute is read before
    each emission and does not touch sounds already playing.
    """

    def __init__(self, sink_factory: Optional[SinkFactory] = None,
                 enabled: bool = AUDIO_ENABLED):
        self.enabled = enabled
        self.muted = False

        self._sink_factory = sink_factory or MixerSink
        self._sink: Optional[MixerSink] = None
        self._init_attempted = False
        self._generator: Optional[SoundGenerator] = None

    # =========================================================================
    # LIFECYCLE
    # =========================================================================

    def _get_sink(self) -> Optional[MixerSink]:
        """Acquire the output on first use; a failure is final"""
        if self._init_attempted:
            return self._sink

        self._init_attempted = True
        if not self.enabled:
            return None

        try:
            self._sink = self._sink_factory()
            self._generator = SoundGenerator(
                getattr(self._sink, "sample_rate", AUDIO_SAMPLE_RATE)
            )
            print("[Audio] Sound manager initialized")
        except Exception as e:
            print(f"[Audio] Failed to initialize: {e}")
            self._sink = None

        return self._sink

    @property
    def available(self) -> bool:
        return self._get_sink() is not None

    def set_muted(self, muted: bool):
        """Takes effect on the next emission"""
        self.muted = bool(muted)

    def toggle_mute(self) -> bool:
        """Toggle mute state, return new state"""
        self.set_muted(not self.muted)
        return self.muted

    def resume(self):
        """Make sure output is playing (safe to call repeatedly)"""
        sink = self._get_sink()
        if sink is None:
            return

        try:
            sink.resume()
        except Exception as e:
            print(f"[Audio] Could not resume output: {e}")

    def cleanup(self):
        """Release the mixer"""
        if self._sink is not None:
            try:
                self._sink.close()
            except Exception as e:
                print(f"[Audio] Cleanup failed: {e}")
            self._sink = None
            print("[Audio] Sound manager cleaned up")

    # =========================================================================
    # EFFECTS
    # =========================================================================

    def play_tick(self):
        """One short percussive tick"""
        sink = self._ready_sink()
        if sink is None:
            return

        self._emit(sink, tick_samples(self._generator))

    def play_win(self):
        """Six-note fanfare; each note is its own buffer offset by its slot"""
        sink = self._ready_sink()
        if sink is None:
            return

        for index in range(len(WIN_NOTES)):
            self._emit(sink, win_note_samples(index, self._generator))

    def _ready_sink(self) -> Optional[MixerSink]:
        if self.muted:
            return None
        return self._get_sink()

    def _emit(self, sink: MixerSink, samples: np.ndarray):
        try:
            sink.play(samples)
        except Exception as e:
            print(f"[Audio] Playback failed: {e}")


# Global sound manager instance
_sound_manager: Optional[SoundManager] = None


def get_sound_manager() -> SoundManager:
    """Get or create the process-wide sound manager"""
    global _sound_manager
    if _sound_manager is None:
        _sound_manager = SoundManager()
    return _sound_manager
