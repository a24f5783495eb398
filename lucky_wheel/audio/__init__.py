"""
Audio System
============
Sound manager and procedural sound generation.
"""

from lucky_wheel.audio.sound_manager import SoundManager, MixerSink, get_sound_manager
from lucky_wheel.audio.generator import SoundGenerator, ToneParams, WaveType, RampType

__all__ = [
    'SoundManager',
    'MixerSink',
    'get_sound_manager',
    'SoundGenerator',
    'ToneParams',
    'WaveType',
    'RampType',
]
