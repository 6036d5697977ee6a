"""
Chat message models.

Messages form an append-only, ordered log scoped to a session.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from playground.models.enums import MessageRole


class MessageBase(BaseModel):
    """Base message fields."""

    role: MessageRole
    content: str = Field("", description="Message content")
    image_url: Optional[str] = Field(None, max_length=2000)


class MessageCreate(MessageBase):
    """Schema for appending a message to a session."""

    session_id: UUID


class Message(MessageBase):
    """Chat message model."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    session_id: UUID
    sequence: int = Field(..., description="Insertion order within the session")
    created_at: datetime
