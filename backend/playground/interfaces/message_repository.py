"""
Message repository interface.

Defines the contract for the append-only chat log.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from playground.models.message import Message, MessageCreate


class IMessageRepository(ABC):
    """Abstract interface for message persistence."""

    @abstractmethod
    async def add(self, user_id: str, message: MessageCreate) -> Message:
        """
        Append a message to a session.

        Args:
            user_id: Owner user ID
            message: Message data

        Returns:
            Stored message

        Raises:
            NotFoundError: If the owning session does not exist
        """
        pass

    @abstractmethod
    async def list(
        self,
        user_id: str,
        session_id: UUID,
        limit: Optional[int] = None,
        offset: int = 0,
    ) -> list[Message]:
        """
        List messages for a session in chronological order.

        Args:
            user_id: Owner user ID
            session_id: Session ID
            limit: Max messages, None for all
            offset: Pagination offset

        Returns:
            List of messages
        """
        pass

    @abstractmethod
    async def list_recent(
        self,
        user_id: str,
        session_id: UUID,
        limit: int = 10,
    ) -> list[Message]:
        """
        Get the trailing window of a session's messages.

        Args:
            user_id: Owner user ID
            session_id: Session ID
            limit: Window size

        Returns:
            Most recent messages, oldest first
        """
        pass
