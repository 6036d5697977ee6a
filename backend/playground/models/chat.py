"""
Chat model definitions.

Models for the send endpoint that drives the generation pipeline.
"""

from typing import Optional

from pydantic import BaseModel, Field

from playground.models.enums import PipelineState, SendStatus
from playground.models.message import Message
from playground.models.session import Session


class SendMessageRequest(BaseModel):
    """Request model for sending a chat message."""

    text: str = Field("", max_length=20000, description="Prompt text")
    image_url: Optional[str] = Field(None, max_length=2000, description="Image reference URL")


class SendOutcome(BaseModel):
    """Result of one run of the generation pipeline."""

    status: SendStatus
    state: PipelineState = Field(PipelineState.IDLE, description="Final state (always IDLE)")
    transitions: list[PipelineState] = Field(default_factory=list)
    user_message: Optional[Message] = None
    assistant_message: Optional[Message] = None
    session: Optional[Session] = Field(None, description="Session after merge, when updated")
    markup_updated: bool = False
    style_updated: bool = False
    error: Optional[str] = None
