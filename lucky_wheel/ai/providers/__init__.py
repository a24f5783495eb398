"""
Text Provider Module
"""

from lucky_wheel.ai.providers.base import BaseTextProvider
from lucky_wheel.ai.providers.openrouter import OpenRouterProvider

__all__ = ['BaseTextProvider', 'OpenRouterProvider']
