"""
Session repository interface.

Defines the contract for playground session persistence.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from playground.models.session import Session, SessionCreate, SessionUpdate


class ISessionRepository(ABC):
    """Abstract interface for session persistence."""

    @abstractmethod
    async def create(self, user_id: str, session: SessionCreate) -> Session:
        """
        Create a new session with empty artifacts.

        Args:
            user_id: Owner user ID
            session: Session creation data

        Returns:
            Created session
        """
        pass

    @abstractmethod
    async def get(self, user_id: str, session_id: UUID) -> Optional[Session]:
        """
        Get a session by ID.

        Args:
            user_id: Owner user ID
            session_id: Session ID

        Returns:
            Session if found, None otherwise
        """
        pass

    @abstractmethod
    async def list(
        self,
        user_id: str,
        limit: Optional[int] = None,
        offset: int = 0,
    ) -> list[Session]:
        """
        List sessions for a user, most recently updated first.

        Args:
            user_id: Owner user ID
            limit: Max sessions, None for all
            offset: Pagination offset

        Returns:
            List of sessions
        """
        pass

    @abstractmethod
    async def update(
        self,
        user_id: str,
        session_id: UUID,
        update: SessionUpdate,
    ) -> Session:
        """
        Merge the explicitly set fields into a session and bump updated_at.

        Args:
            user_id: Owner user ID
            session_id: Session ID
            update: Fields to update

        Returns:
            Updated session

        Raises:
            NotFoundError: If session not found
        """
        pass
