"""
Sound Generator
===============
Procedural sound synthesis for the wheel.
No external audio files: every effect is built from an oscillator
and an explicit amplitude envelope.
"""

import numpy as np
from typing import Optional
from dataclasses import dataclass
from enum import Enum

from lucky_wheel.config import (
    AUDIO_SAMPLE_RATE,
    TICK_START_FREQ, TICK_END_FREQ, TICK_RAMP, TICK_LIFETIME,
    TICK_START_GAIN, TICK_END_GAIN,
    WIN_NOTES, WIN_NOTE_DURATION, WIN_GAIN,
)


class WaveType(Enum):
    """Oscillator shapes"""
    SINE = "sine"
    SQUARE = "square"
    SAWTOOTH = "sawtooth"
    TRIANGLE = "triangle"


class RampType(Enum):
    """How a parameter moves between its start and end value"""
    LINEAR = "linear"
    EXPONENTIAL = "exponential"


@dataclass
class ToneParams:
    """
    Parameters for a single voice.

    Frequency and gain each ramp from their start to end value over
    `ramp` seconds and then hold the end value until `duration`.
    `delay` prepends silence so the voice starts later in its buffer.
    """
    start_freq: float = 440.0
    end_freq: Optional[float] = None
    start_gain: float = 0.1
    end_gain: float = 0.0
    duration: float = 0.2
    ramp: Optional[float] = None
    delay: float = 0.0
    wave_type: WaveType = WaveType.SINE
    freq_ramp: RampType = RampType.LINEAR
    gain_ramp: RampType = RampType.LINEAR


class SoundGenerator:
    """
    Renders ToneParams into float32 mono buffers in [-1, 1].
    """

    def __init__(self, sample_rate: int = AUDIO_SAMPLE_RATE):
        self.sample_rate = sample_rate

    def render(self, params: ToneParams) -> np.ndarray:
        """Render one voice, including any leading silence"""
        num_samples = int(round(params.duration * self.sample_rate))
        t = np.arange(num_samples, dtype=np.float64) / self.sample_rate
        ramp = params.duration if params.ramp is None else params.ramp

        end_freq = params.start_freq if params.end_freq is None else params.end_freq
        freq = self.ramp_curve(t, params.start_freq, end_freq, ramp, params.freq_ramp)
        gain = self.ramp_curve(t, params.start_gain, params.end_gain, ramp, params.gain_ramp)

        # Integrate frequency so the sweep stays phase-continuous
        phase = np.cumsum(freq / self.sample_rate) * 2 * np.pi
        samples = self.oscillator(phase, params.wave_type) * gain
        samples = np.clip(samples, -1, 1).astype(np.float32)

        delay_samples = int(round(params.delay * self.sample_rate))
        if delay_samples > 0:
            samples = np.concatenate((np.zeros(delay_samples, dtype=np.float32), samples))
        return samples

    @staticmethod
    def oscillator(phase: np.ndarray, wave_type: WaveType) -> np.ndarray:
        """Generate waveform from a phase array (radians)"""
        if wave_type == WaveType.SINE:
            return np.sin(phase)

        elif wave_type == WaveType.SQUARE:
            return np.sign(np.sin(phase))

        elif wave_type == WaveType.SAWTOOTH:
            return 2 * (phase / (2 * np.pi) % 1) - 1

        elif wave_type == WaveType.TRIANGLE:
            # Starts at 0 and rises, like a sine
            return 1 - 4 * np.abs((phase / (2 * np.pi) + 0.25) % 1 - 0.5)

        return np.zeros_like(phase)

    @staticmethod
    def ramp_curve(t: np.ndarray, start: float, end: float,
                   ramp: float, ramp_type: RampType) -> np.ndarray:
        """
        Value of a ramped parameter at times `t`.

        Exponential ramps need both ends strictly positive; a zero end
        falls back to a linear ramp.
        """
        if ramp <= 0:
            return np.full_like(t, end)

        progress = np.clip(t / ramp, 0.0, 1.0)
        if ramp_type == RampType.EXPONENTIAL and start > 0 and end > 0:
            return start * np.power(end / start, progress)
        return start + (end - start) * progress


# =============================================================================
# WHEEL EFFECTS
# =============================================================================

TICK_PARAMS = ToneParams(
    start_freq=TICK_START_FREQ,
    end_freq=TICK_END_FREQ,
    start_gain=TICK_START_GAIN,
    end_gain=TICK_END_GAIN,
    duration=TICK_LIFETIME,
    ramp=TICK_RAMP,
    wave_type=WaveType.TRIANGLE,
    freq_ramp=RampType.EXPONENTIAL,
    gain_ramp=RampType.EXPONENTIAL,
)


def win_note_params(index: int) -> ToneParams:
    """Note `index` of the win arpeggio, delayed to its slot"""
    return ToneParams(
        start_freq=WIN_NOTES[index],
        start_gain=WIN_GAIN,
        end_gain=0.0,
        duration=WIN_NOTE_DURATION,
        delay=index * WIN_NOTE_DURATION,
        wave_type=WaveType.SINE,
    )


def tick_samples(generator: Optional[SoundGenerator] = None) -> np.ndarray:
    """Short percussive tick: 600 -> 300 Hz triangle chirp"""
    generator = generator or SoundGenerator()
    return generator.render(TICK_PARAMS)


def win_note_samples(index: int, generator: Optional[SoundGenerator] = None) -> np.ndarray:
    """One note of the win fanfare, with leading silence"""
    generator = generator or SoundGenerator()
    return generator.render(win_note_params(index))
