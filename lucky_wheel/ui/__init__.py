"""
UI System Module
"""

from lucky_wheel.ui.manager import UIManager
from lucky_wheel.ui.text_box import TextBox, InputBox

__all__ = ['UIManager', 'TextBox', 'InputBox']
