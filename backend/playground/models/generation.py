"""
Generation boundary models.

Request/response shapes for the component generation service and the
result of extracting code blocks from an assistant response.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from playground.models.enums import MessageRole


class ContextMessage(BaseModel):
    """One prior chat turn passed to the generation service as context."""

    role: MessageRole
    content: str = ""


class GenerationRequest(BaseModel):
    """Request for the generation service."""

    prompt: str = Field(..., min_length=1, description="User prompt")
    messages: list[ContextMessage] = Field(
        default_factory=list,
        max_length=10,
        description="Most recent prior messages (oldest first)",
    )


class GenerationResult(BaseModel):
    """Successful generation response."""

    model_config = ConfigDict(populate_by_name=True)

    generated_text: str = Field(..., alias="generatedText")


class ExtractedCode(BaseModel):
    """Markup and stylesheet pulled out of an assistant response."""

    model_config = ConfigDict(frozen=True)

    markup: Optional[str] = None
    style: Optional[str] = None

    @property
    def is_empty(self) -> bool:
        return not self.markup and not self.style
