"""
Suggestion Service
==================
Option suggestions and congratulation lines for the wheel.
Uses a text provider when one is configured, fixed text otherwise.
Never raises: spins do not depend on it.
"""

from typing import List, Optional

from lucky_wheel.ai.providers.base import BaseTextProvider
from lucky_wheel.ai.fallback import FallbackText


OPTIONS_SYSTEM = "You suggest options for a lucky wheel game. Respond only in valid JSON format."
CONGRATS_SYSTEM = "You write short, playful one-line messages for a lucky wheel game."


class SuggestionService:
    """
    Front for the text provider with offline fallbacks.
    """

    def __init__(self, provider: Optional[BaseTextProvider] = None,
                 fallback: Optional[FallbackText] = None):
        self.provider = provider
        self.fallback = fallback or FallbackText()

        # None until initialize() has checked the provider
        self.provider_online: Optional[bool] = None

        # Stats
        self.provider_replies = 0
        self.fallback_replies = 0

    @property
    def has_provider(self) -> bool:
        return self.provider is not None and bool(self.provider.api_key)

    @property
    def can_ask(self) -> bool:
        """Provider configured and not known to be unreachable"""
        return self.has_provider and self.provider_online is not False

    async def initialize(self):
        """Check provider availability once; an unreachable one is skipped"""
        if not self.has_provider:
            return
        try:
            self.provider_online = await self.provider.check_availability()
        except Exception as e:
            self.provider.last_error = str(e)
            self.provider_online = False
        if not self.provider_online:
            print(f"[AI] Provider unavailable: {self.provider.last_error}")

    async def generate_options(self, topic: str) -> List[str]:
        """Up to MAX_ITEMS short labels on `topic`"""
        topic = (topic or "").strip()
        if not self.can_ask or not topic:
            self.fallback_replies += 1
            return self.fallback.options(self.has_provider)

        reply = await self._complete(OPTIONS_SYSTEM, self.provider.build_options_prompt(topic))
        labels = self.provider.parse_options(reply) if reply else []
        if not labels:
            self.fallback_replies += 1
            return self.fallback.options(True)

        self.provider_replies += 1
        return labels

    async def generate_congratulation(self, winner: str) -> str:
        """One short line celebrating `winner`"""
        if not self.can_ask:
            self.fallback_replies += 1
            return self.fallback.congratulation(winner)

        reply = await self._complete(CONGRATS_SYSTEM,
                                     self.provider.build_congratulation_prompt(winner))
        lines = [line.strip().strip('"').strip() for line in (reply or "").splitlines()]
        lines = [line for line in lines if line]
        if not lines:
            self.fallback_replies += 1
            return self.fallback.congratulation(winner)

        self.provider_replies += 1
        return lines[0]

    async def _complete(self, system: str, prompt: str) -> Optional[str]:
        try:
            return await self.provider.complete(system, prompt)
        except Exception as e:
            print(f"[AI] Provider error: {e}")
            return None
