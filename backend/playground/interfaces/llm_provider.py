"""
LLM provider interface.

Defines the contract for LLM (Large Language Model) access.
Implementations: LiteLLM (OpenAI, Bedrock, etc.), Gemini API
"""

from abc import ABC, abstractmethod
from typing import Any, Optional


class ILLMProvider(ABC):
    """Abstract interface for LLM providers."""

    @abstractmethod
    def get_model_name(self) -> str:
        """
        Get the human-readable model name.

        Returns:
            Model name string for logging/display
        """
        pass

    @abstractmethod
    async def complete(
        self,
        messages: list[dict[str, Any]],
        system_instruction: Optional[str] = None,
        temperature: float = 0.7,
        max_output_tokens: int = 2000,
    ) -> str:
        """
        Run a chat completion.

        Args:
            messages: Conversation turns as {"role", "content"} dicts, oldest first
            system_instruction: Optional system prompt
            temperature: Sampling temperature
            max_output_tokens: Completion token limit

        Returns:
            Completion text

        Raises:
            LLMError: If the provider call fails
        """
        pass
