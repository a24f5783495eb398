"""
Base Text Provider
==================
Abstract base class for text-generation providers.
"""

import json
import re
from abc import ABC, abstractmethod
from typing import List, Optional

from lucky_wheel.config import MAX_ITEMS, SUGGESTION_MAX_LABEL


class BaseTextProvider(ABC):
    """
    Base class for LLM providers.
    """

    def __init__(self, api_key: str = "", model: str = ""):
        self.api_key = api_key
        self.model = model
        self.is_available = False
        self.last_error: Optional[str] = None

    @abstractmethod
    async def complete(self, system: str, prompt: str) -> Optional[str]:
        """
        Run one chat completion.
        Return the reply text, or None if the provider could not answer.
        """
        pass

    @abstractmethod
    async def check_availability(self) -> bool:
        """Check whether the provider can be reached"""
        pass

    def build_options_prompt(self, topic: str) -> str:
        """Prompt asking for wheel options on a theme"""
        return (
            f"Generate a list of {MAX_ITEMS} short, creative, and fun options "
            f"for a lucky wheel game based on the theme: \"{topic}\". "
            f"Keep each option under {SUGGESTION_MAX_LABEL} characters.\n\n"
            "Respond in this exact JSON format:\n"
            "{\"options\": [\"option 1\", \"option 2\"]}"
        )

    def build_congratulation_prompt(self, winner: str) -> str:
        """Prompt asking for a one-line congratulation"""
        return (
            f"The user just won \"{winner}\" on a lucky wheel. Write a very short, "
            "funny, one-sentence congratulatory message or fortune cookie style "
            "prediction (max 80 characters). Reply with the sentence only."
        )

    def parse_options(self, response: str) -> List[str]:
        """Extract option labels from an LLM reply"""
        labels: List[str] = []

        # Pattern 1: JSON object embedded in the reply
        try:
            json_match = re.search(r'\{.*\}', response, re.DOTALL)
            if json_match:
                data = json.loads(json_match.group())
                raw = data.get('options', [])
                if isinstance(raw, list):
                    labels = [str(item) for item in raw]
        except (json.JSONDecodeError, ValueError, TypeError, AttributeError):
            labels = []

        # Pattern 2: bare JSON array
        if not labels:
            try:
                array_match = re.search(r'\[.*\]', response, re.DOTALL)
                if array_match:
                    raw = json.loads(array_match.group())
                    if isinstance(raw, list):
                        labels = [str(item) for item in raw]
            except (json.JSONDecodeError, ValueError, TypeError):
                labels = []

        # Fallback: one option per line, list markers stripped
        if not labels:
            for line in response.splitlines():
                line = re.sub(r'^\s*(?:[-*•]|\d+[.)])\s*', '', line)
                labels.append(line)

        return self.clean_labels(labels)

    @staticmethod
    def clean_labels(labels: List[str]) -> List[str]:
        """Trim, drop empties and duplicates, cap count and length"""
        cleaned: List[str] = []
        for label in labels:
            label = label.strip().strip('"').strip()[:SUGGESTION_MAX_LABEL].strip()
            if not label or label in cleaned:
                continue
            cleaned.append(label)
            if len(cleaned) >= MAX_ITEMS:
                break
        return cleaned
