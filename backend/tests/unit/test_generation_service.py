"""
Unit tests for the generation service boundary.
"""

from unittest.mock import AsyncMock

import pytest

from playground.core.config import Settings
from playground.core.exceptions import GenerationError, LLMError
from playground.models.enums import MessageRole
from playground.models.generation import ContextMessage, GenerationRequest
from playground.services.generation_service import COMPONENT_SYSTEM_PROMPT, GenerationService


@pytest.fixture
def settings():
    return Settings(GENERATION_TEMPERATURE=0.7, GENERATION_MAX_TOKENS=2000)


@pytest.mark.asyncio
async def test_generate_sends_system_prompt_context_and_prompt(llm_provider, settings):
    llm_provider.replies = ["```jsx\n<a />\n```"]
    service = GenerationService(llm_provider=llm_provider, settings=settings)

    result = await service.generate(
        GenerationRequest(
            prompt="Make it blue",
            messages=[
                ContextMessage(role=MessageRole.USER, content="A button"),
                ContextMessage(role=MessageRole.ASSISTANT, content="```jsx\n<b />\n```"),
            ],
        )
    )

    assert result.generated_text == "```jsx\n<a />\n```"
    call = llm_provider.calls[0]
    assert call["system_instruction"] == COMPONENT_SYSTEM_PROMPT
    assert call["temperature"] == 0.7
    assert call["max_output_tokens"] == 2000
    assert call["messages"] == [
        {"role": "user", "content": "A button"},
        {"role": "assistant", "content": "```jsx\n<b />\n```"},
        {"role": "user", "content": "Make it blue"},
    ]


@pytest.mark.asyncio
async def test_provider_error_becomes_generation_error(llm_provider, settings):
    llm_provider.replies = [LLMError("upstream 500")]
    service = GenerationService(llm_provider=llm_provider, settings=settings)

    with pytest.raises(GenerationError):
        await service.generate(GenerationRequest(prompt="Card"))


@pytest.mark.asyncio
async def test_empty_completion_is_a_failure(settings):
    provider = AsyncMock()
    provider.get_model_name = lambda: "mock"
    provider.complete = AsyncMock(return_value="   ")
    service = GenerationService(llm_provider=provider, settings=settings)

    with pytest.raises(GenerationError):
        await service.generate(GenerationRequest(prompt="Card"))

    provider.complete.assert_awaited_once()


def test_generation_result_uses_wire_alias():
    from playground.models.generation import GenerationResult

    result = GenerationResult.model_validate({"generatedText": "hi"})

    assert result.generated_text == "hi"
    assert result.model_dump(by_alias=True) == {"generatedText": "hi"}
