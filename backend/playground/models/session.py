"""
Playground session model definitions.

A session holds the chat history and the latest generated markup/stylesheet pair.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class SessionBase(BaseModel):
    """Base session fields."""

    name: str = Field(..., min_length=1, max_length=200, description="Session name")
    description: Optional[str] = Field(None, max_length=2000, description="Session description")


class SessionCreate(SessionBase):
    """Schema for creating a new session."""

    pass


class SessionUpdate(BaseModel):
    """
    Schema for updating an existing session.

    Only fields explicitly set are applied; omitted fields keep their value.
    """

    name: Optional[str] = Field(None, min_length=1, max_length=200)
    description: Optional[str] = Field(None, max_length=2000)
    generated_markup: Optional[str] = None
    generated_style: Optional[str] = None


class Session(SessionBase):
    """Complete session model."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    user_id: str = Field(..., description="Owner user ID")
    generated_markup: Optional[str] = None
    generated_style: Optional[str] = None
    created_at: datetime
    updated_at: datetime
