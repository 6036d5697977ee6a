"""Pydantic models for the component playground."""

from playground.models.chat import SendMessageRequest, SendOutcome
from playground.models.enums import MessageRole, PipelineState, SendStatus
from playground.models.generation import (
    ContextMessage,
    ExtractedCode,
    GenerationRequest,
    GenerationResult,
)
from playground.models.message import Message, MessageCreate
from playground.models.session import Session, SessionCreate, SessionUpdate

__all__ = [
    "ContextMessage",
    "ExtractedCode",
    "GenerationRequest",
    "GenerationResult",
    "Message",
    "MessageCreate",
    "MessageRole",
    "PipelineState",
    "SendMessageRequest",
    "SendOutcome",
    "SendStatus",
    "Session",
    "SessionCreate",
    "SessionUpdate",
]
