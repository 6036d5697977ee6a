"""
Component generation service.

Composes the generator system instruction plus recent conversation context
and asks the configured LLM provider for a component. This is the single
external network dependency of the send pipeline.
"""

from __future__ import annotations

from typing import Optional

from playground.core.config import Settings, get_settings
from playground.core.exceptions import GenerationError
from playground.core.logger import logger
from playground.interfaces.llm_provider import ILLMProvider
from playground.models.generation import GenerationRequest, GenerationResult

COMPONENT_SYSTEM_PROMPT = """You are an expert React component generator. Generate production-ready React components based on user prompts.

Rules:
1. Always provide BOTH JSX and CSS code
2. Use modern React with functional components and hooks
3. Use semantic HTML elements
4. Make components responsive and accessible
5. Include proper TypeScript types
6. Use CSS modules or styled-components patterns
7. Include interactive features when appropriate
8. Make the design modern and visually appealing
9. Use proper color schemes and typography

Return your response in this EXACT format:
```jsx
[Your JSX code here]
```

```css
[Your CSS code here]
```

Focus on creating beautiful, functional components that work out of the box."""


class GenerationService:
    """Turns a prompt plus context into raw assistant text."""

    def __init__(
        self,
        llm_provider: ILLMProvider,
        settings: Optional[Settings] = None,
        system_prompt: str = COMPONENT_SYSTEM_PROMPT,
    ):
        self._llm_provider = llm_provider
        self._settings = settings or get_settings()
        self._system_prompt = system_prompt

    def build_messages(self, request: GenerationRequest) -> list[dict[str, str]]:
        """Context turns (oldest first) followed by the prompt as the final user turn."""
        messages = [
            {"role": message.role.value, "content": message.content}
            for message in request.messages
        ]
        messages.append({"role": "user", "content": request.prompt})
        return messages

    async def generate(self, request: GenerationRequest) -> GenerationResult:
        """
        Generate a component for the given request.

        Raises:
            GenerationError: On any provider failure or an empty completion.
                Not retried.
        """
        logger.info(
            f"Generating component with {self._llm_provider.get_model_name()} "
            f"({len(request.messages)} context messages)"
        )
        try:
            text = await self._llm_provider.complete(
                messages=self.build_messages(request),
                system_instruction=self._system_prompt,
                temperature=self._settings.GENERATION_TEMPERATURE,
                max_output_tokens=self._settings.GENERATION_MAX_TOKENS,
            )
        except GenerationError:
            raise
        except Exception as exc:
            raise GenerationError(f"Generation failed: {exc}") from exc

        if not isinstance(text, str) or not text.strip():
            raise GenerationError("Generation returned no text")

        return GenerationResult(generated_text=text)
