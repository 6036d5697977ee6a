"""
LiteLLM provider implementation.

Supports OpenAI, Bedrock, and other providers via LiteLLM.
Includes support for custom endpoints (api_base) for proxy servers.
"""

import os
from typing import Any, Optional

import litellm

from playground.core.config import get_settings
from playground.core.exceptions import LLMError
from playground.core.logger import logger
from playground.interfaces.llm_provider import ILLMProvider


class LiteLLMProvider(ILLMProvider):
    """LiteLLM provider with custom endpoint support."""

    def __init__(
        self,
        model_name: str,
        api_base: Optional[str] = None,
        api_key: Optional[str] = None,
    ):
        """
        Initialize LiteLLM provider.

        Args:
            model_name: LiteLLM model identifier (e.g., "gpt-4o-mini")
            api_base: Custom API endpoint URL (optional, for proxy servers)
            api_key: Custom API key (optional, overrides default)
        """
        self._model_name = model_name
        self._settings = get_settings()
        self._api_base = api_base or self._settings.LITELLM_API_BASE or None
        self._api_key = api_key or self._settings.LITELLM_API_KEY or None

        if self._settings.DEBUG:
            os.environ.setdefault("LITELLM_LOG", "INFO")

    def get_model_name(self) -> str:
        """Get human-readable model name."""
        if self._api_base:
            return f"LiteLLM ({self._model_name} @ {self._api_base})"
        return f"LiteLLM ({self._model_name})"

    async def complete(
        self,
        messages: list[dict[str, Any]],
        system_instruction: Optional[str] = None,
        temperature: float = 0.7,
        max_output_tokens: int = 2000,
    ) -> str:
        """Run a chat completion through LiteLLM."""
        payload: list[dict[str, Any]] = []
        if system_instruction:
            payload.append({"role": "system", "content": system_instruction})
        payload.extend(messages)

        kwargs: dict[str, Any] = {
            "model": self._model_name,
            "messages": payload,
            "temperature": temperature,
            "max_tokens": max_output_tokens,
        }
        if self._api_base:
            kwargs["api_base"] = self._api_base
        if self._api_key:
            kwargs["api_key"] = self._api_key

        try:
            response = await litellm.acompletion(**kwargs)
        except Exception as exc:
            logger.warning(f"LiteLLM request failed: {exc}")
            raise LLMError(f"LiteLLM request failed: {exc}") from exc

        try:
            content = response.choices[0].message.content
        except (AttributeError, IndexError, KeyError, TypeError) as exc:
            raise LLMError("LiteLLM returned an unexpected payload") from exc
        return content or ""
