from types import SimpleNamespace
from unittest.mock import patch

import pytest

from playground.api import deps


def _base_settings() -> SimpleNamespace:
    return SimpleNamespace(
        LLM_PROVIDER="litellm",
        LITELLM_MODEL="gpt-4o-mini",
        GEMINI_MODEL="gemini-2.0-flash",
    )


def test_get_llm_provider_selects_litellm() -> None:
    settings = _base_settings()
    provider = object()

    deps.get_llm_provider.cache_clear()
    with patch("playground.api.deps.get_settings", return_value=settings):
        with patch("playground.infrastructure.local.litellm_provider.LiteLLMProvider") as provider_cls:
            provider_cls.return_value = provider
            resolved = deps.get_llm_provider()
    deps.get_llm_provider.cache_clear()

    assert resolved is provider
    provider_cls.assert_called_once_with("gpt-4o-mini")


def test_get_llm_provider_selects_gemini_api() -> None:
    settings = _base_settings()
    settings.LLM_PROVIDER = "gemini-api"
    provider = object()

    deps.get_llm_provider.cache_clear()
    with patch("playground.api.deps.get_settings", return_value=settings):
        with patch(
            "playground.infrastructure.local.gemini_api_provider.GeminiAPIProvider"
        ) as provider_cls:
            provider_cls.return_value = provider
            resolved = deps.get_llm_provider()
    deps.get_llm_provider.cache_clear()

    assert resolved is provider
    provider_cls.assert_called_once_with("gemini-2.0-flash")


def test_get_llm_provider_rejects_unknown_provider() -> None:
    settings = _base_settings()
    settings.LLM_PROVIDER = "nope"

    deps.get_llm_provider.cache_clear()
    with patch("playground.api.deps.get_settings", return_value=settings):
        with pytest.raises(ValueError):
            deps.get_llm_provider()
    deps.get_llm_provider.cache_clear()
