"""
Graphics System Module
"""

from lucky_wheel.graphics.renderer import WheelRenderer

__all__ = ['WheelRenderer']
