"""
Lucky Wheel - Configuration & Constants
=======================================
All wheel settings, colors, and constants in one place.
"""

from enum import Enum, auto
from typing import Tuple, List

# =============================================================================
# DISPLAY SETTINGS
# =============================================================================

SCREEN_WIDTH = 1280
SCREEN_HEIGHT = 720
FPS = 60
APP_TITLE = "LUCKY WHEEL - Spin to Decide"

# =============================================================================
# COLORS
# =============================================================================

BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
GRAY = (128, 128, 128)
DARK_GRAY = (40, 40, 40)
LIGHT_GRAY = (180, 180, 180)

# UI colors
UI_BG = (22, 33, 62)
UI_PANEL = (15, 52, 96)
UI_BORDER = (100, 100, 120)
ACCENT = (233, 69, 96)
GOLD = (255, 215, 0)

# Slice palette, assigned in insertion order
PALETTE: List[Tuple[int, int, int]] = [
    (255, 107, 107),
    (78, 205, 196),
    (69, 183, 209),
    (150, 206, 180),
    (255, 238, 173),
    (255, 159, 67),
    (84, 160, 255),
    (95, 39, 205),
    (255, 82, 82),
    (52, 31, 151),
]

# =============================================================================
# WHEEL SETTINGS
# =============================================================================

WHEEL_CENTER_X = 420
WHEEL_CENTER_Y = SCREEN_HEIGHT // 2
WHEEL_RADIUS = 260
HUB_RADIUS = 40
POINTER_SIZE = 28

# Option list limits
MIN_ITEMS = 2
MAX_ITEMS = 10

DEFAULT_LABELS = [
    "Hotpot", "Barbecue", "Bubble tea", "Gym",
    "Nap", "Study", "Movie", "Video games",
]

# =============================================================================
# SPIN SETTINGS
# =============================================================================

SPIN_DURATION = 5.0      # seconds, matches the rotation animation
TICK_INTERVAL = 0.05     # seconds between tick samples
TICK_PROBABILITY = 0.4   # chance of a tick at full speed
MIN_EXTRA_TURNS = 5
MAX_EXTRA_TURNS = 8
JITTER_FRACTION = 0.4    # max landing offset from slice center, in slices

# Rotation easing, CSS cubic-bezier control points
SPIN_EASING = (0.2, 0.0, 0.2, 1.0)

# =============================================================================
# STATE ENUMS
# =============================================================================

class WheelState(Enum):
    IDLE = auto()
    SPINNING = auto()
    CELEBRATING = auto()

# =============================================================================
# AUDIO SETTINGS
# =============================================================================

AUDIO_ENABLED = True
AUDIO_SAMPLE_RATE = 44100
AUDIO_CHANNELS = 2
AUDIO_BUFFER_SIZE = 512

# Tick: triangle chirp
TICK_START_FREQ = 600.0
TICK_END_FREQ = 300.0
TICK_RAMP = 0.05          # seconds
TICK_LIFETIME = 0.06      # seconds
TICK_START_GAIN = 0.1
TICK_END_GAIN = 0.01

# Win: C major arpeggio
WIN_NOTES = [523.25, 659.25, 783.99, 1046.50, 783.99, 1046.50]
WIN_NOTE_DURATION = 0.15  # seconds
WIN_GAIN = 0.1

# =============================================================================
# LLM SETTINGS
# =============================================================================

LLM_TIMEOUT = 10.0  # seconds
LLM_MAX_RETRIES = 2
LLM_DEFAULT_MODEL = "google/gemini-2.5-flash"
SUGGESTION_MAX_LABEL = 20  # characters

# =============================================================================
# DEBUG FLAGS
# =============================================================================

DEBUG_SPIN = False
DEBUG_FRAMERATE = False
