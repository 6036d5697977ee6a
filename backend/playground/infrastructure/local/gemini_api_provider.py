"""
Gemini API provider.

Uses Gemini API with API Key (no GCP project required).
"""

from typing import Any, Optional

from google import genai
from google.genai.types import Content, GenerateContentConfig, Part

from playground.core.config import get_settings
from playground.core.exceptions import LLMError
from playground.core.logger import logger
from playground.interfaces.llm_provider import ILLMProvider

# Gemini uses "model" for assistant turns
_ROLE_MAP = {"user": "user", "assistant": "model"}


class GeminiAPIProvider(ILLMProvider):
    """Gemini API provider using API Key."""

    def __init__(self, model_name: str):
        """
        Initialize Gemini API provider.

        Args:
            model_name: Gemini model name (e.g., "gemini-2.0-flash")
        """
        self._model_name = model_name
        self._settings = get_settings()

        if not self._settings.GOOGLE_API_KEY:
            raise ValueError(
                "GOOGLE_API_KEY is required for Gemini API provider. "
                "Get your API key from https://aistudio.google.com/apikey"
            )
        self._client = genai.Client(api_key=self._settings.GOOGLE_API_KEY)

    def get_model_name(self) -> str:
        """Get human-readable model name."""
        return f"Gemini API ({self._model_name})"

    async def complete(
        self,
        messages: list[dict[str, Any]],
        system_instruction: Optional[str] = None,
        temperature: float = 0.7,
        max_output_tokens: int = 2000,
    ) -> str:
        """Run a chat completion through the Gemini API."""
        contents = [
            Content(
                role=_ROLE_MAP.get(str(message.get("role")), "user"),
                parts=[Part(text=str(message.get("content") or ""))],
            )
            for message in messages
        ]
        config_kwargs: dict = {
            "temperature": temperature,
            "max_output_tokens": max_output_tokens,
        }
        if system_instruction:
            config_kwargs["system_instruction"] = system_instruction

        try:
            response = await self._client.aio.models.generate_content(
                model=self._model_name,
                contents=contents,
                config=GenerateContentConfig(**config_kwargs),
            )
        except Exception as exc:
            logger.warning(f"GenAI request failed: {exc}")
            raise LLMError(f"GenAI request failed: {exc}") from exc
        return response.text or ""
