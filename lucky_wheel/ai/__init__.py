"""
AI Text Module
"""

from lucky_wheel.ai.service import SuggestionService
from lucky_wheel.ai.fallback import FallbackText

__all__ = ['SuggestionService', 'FallbackText']
