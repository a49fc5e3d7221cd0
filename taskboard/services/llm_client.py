"""
Text generation through Google Gemini's OpenAI-compatible API
"""
from __future__ import annotations

import logging

from openai import AsyncOpenAI

from taskboard.config import GEMINI_BASE_URL
from taskboard.errors import ConfigurationError, GenerationError

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "gemini-2.0-flash"
SYSTEM_PROMPT = "You are a helpful project management assistant."
EMPTY_RESPONSE = "No response from Gemini"


class GeminiClient:
    """Single-shot chat completion against Gemini.

    The caller is expected to have checked that ``api_key`` is a real key;
    only an empty key is rejected here.
    """

    def __init__(self, api_key: str, model: str = DEFAULT_MODEL, base_url: str = GEMINI_BASE_URL) -> None:
        if not api_key:
            raise ConfigurationError("GEMINI_API_KEY not configured")
        self.model = model
        self._client = AsyncOpenAI(api_key=api_key, base_url=base_url)

    async def generate(self, prompt: str) -> str:
        try:
            response = await self._client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": SYSTEM_PROMPT},
                    {"role": "user", "content": prompt},
                ],
            )
        except Exception as exc:
            logger.error(f"Gemini API error: {exc}")
            raise GenerationError(str(exc) or "Failed to call Gemini API") from exc

        choices = getattr(response, "choices", None) or []
        content = choices[0].message.content if choices and choices[0].message else None
        text = (content or "").strip()
        return text or EMPTY_RESPONSE
