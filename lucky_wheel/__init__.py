"""
Lucky Wheel
===========
A spin-the-wheel picker with procedural sound effects.
"""

__version__ = "1.0.0"
