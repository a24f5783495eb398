"""
Fallback Text
=============
Fixed strings used when no text provider is configured or it fails.
"""

import random
from typing import List, Optional


NO_KEY_OPTIONS = ["Error: no API key", "Check your config"]
BUSY_OPTIONS = ["Try again", "AI is busy"]

CONGRATULATIONS = [
    "Congratulations! You got {winner}!",
    "The wheel has spoken: {winner}!",
    "Enjoy your {winner}!",
]


class FallbackText:
    """
    Offline stand-in for the suggestion service.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def options(self, has_provider: bool) -> List[str]:
        if not has_provider:
            return list(NO_KEY_OPTIONS)
        return list(BUSY_OPTIONS)

    def congratulation(self, winner: str) -> str:
        return self.rng.choice(CONGRATULATIONS).format(winner=winner)
