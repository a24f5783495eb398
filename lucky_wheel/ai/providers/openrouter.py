"""
OpenRouter Text Provider
========================
Provider for the OpenRouter chat completions API.
"""

import httpx
import asyncio
import os
from typing import Optional

from lucky_wheel.config import LLM_TIMEOUT, LLM_MAX_RETRIES, LLM_DEFAULT_MODEL
from lucky_wheel.ai.providers.base import BaseTextProvider


class OpenRouterProvider(BaseTextProvider):
    """
    Text provider using the OpenRouter API.
    Any chat model hosted there can be selected.
    """

    API_URL = "https://openrouter.ai/api/v1/chat/completions"
    MODELS_URL = "https://openrouter.ai/api/v1/models"

    def __init__(self, api_key: str = "", model: str = "",
                 transport: Optional[httpx.AsyncBaseTransport] = None,
                 retry_delay: float = 0.5):
        # Try environment variable if not provided
        if not api_key:
            api_key = os.environ.get('OPENROUTER_API_KEY', '').strip().strip('"').strip("'")

        if not model:
            model = LLM_DEFAULT_MODEL

        super().__init__(api_key, model)

        self.headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
            "X-Title": "Lucky Wheel"
        }

        self._transport = transport
        self._retry_delay = retry_delay

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=self._transport, timeout=LLM_TIMEOUT)

    async def check_availability(self) -> bool:
        """Check whether the API answers with our key"""
        if not self.api_key:
            self.last_error = "No API key provided"
            self.is_available = False
            return False

        try:
            async with self._client() as client:
                response = await client.get(
                    self.MODELS_URL,
                    headers={"Authorization": f"Bearer {self.api_key}"},
                    timeout=5.0
                )

                if response.status_code == 200:
                    self.is_available = True
                    return True
                else:
                    self.last_error = f"API returned status {response.status_code}"
                    self.is_available = False
                    return False

        except httpx.HTTPError as e:
            self.last_error = str(e)
            self.is_available = False
            return False

    async def complete(self, system: str, prompt: str) -> Optional[str]:
        """Run one chat completion, retrying on rate limits and timeouts"""
        if not self.api_key:
            self.last_error = "No API key configured"
            return None

        payload = {
            "model": self.model,
            "messages": [
                {"role": "system", "content": system},
                {"role": "user", "content": prompt}
            ],
            "max_tokens": 300,
            "temperature": 0.9,
        }

        # Make request with retries
        for attempt in range(LLM_MAX_RETRIES + 1):
            try:
                async with self._client() as client:
                    response = await client.post(
                        self.API_URL,
                        headers=self.headers,
                        json=payload
                    )

                if response.status_code == 200:
                    data = response.json()
                    content = data['choices'][0]['message']['content']
                    self.is_available = True
                    return content or None

                elif response.status_code == 401:
                    self.last_error = "Invalid API key"
                    self.is_available = False
                    return None

                elif response.status_code == 429:
                    # Rate limited, back off before the next attempt
                    self.last_error = "Rate limited"
                    if attempt < LLM_MAX_RETRIES:
                        await asyncio.sleep(self._retry_delay * (attempt + 1))
                    continue

                else:
                    self.last_error = f"API error: {response.status_code}"

            except httpx.TimeoutException:
                self.last_error = "Request timed out"

            except httpx.HTTPError as e:
                self.last_error = str(e)

            except (KeyError, IndexError, TypeError, ValueError) as e:
                self.last_error = f"Malformed response: {e}"
                return None

            if attempt < LLM_MAX_RETRIES:
                await asyncio.sleep(self._retry_delay)

        return None
