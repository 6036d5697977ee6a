"""
Session directory.

Listing, search, creation and updates over a user's sessions, plus the
per-user "current session" context the UI works against. Persistence
failures are logged and treated as no-ops; the cached state is kept.
"""

from __future__ import annotations

from typing import Iterable, Optional
from uuid import UUID

from playground.core.logger import logger
from playground.interfaces.session_repository import ISessionRepository
from playground.models.session import Session, SessionCreate, SessionUpdate


def search_sessions(sessions: Iterable[Session], query: Optional[str]) -> list[Session]:
    """Case-insensitive substring filter over session name and description."""
    needle = (query or "").strip().lower()
    if not needle:
        return list(sessions)
    return [
        session
        for session in sessions
        if needle in session.name.lower()
        or (session.description and needle in session.description.lower())
    ]


class SessionDirectory:
    """Per-user session list and active-session context."""

    def __init__(self, session_repo: ISessionRepository):
        self._session_repo = session_repo
        self._sessions: dict[str, list[Session]] = {}
        self._active: dict[str, UUID] = {}

    def cached(self, user_id: str) -> list[Session]:
        """Last known session list for a user."""
        return list(self._sessions.get(user_id, []))

    def get_active(self, user_id: str) -> Optional[Session]:
        """Currently selected session, if any."""
        active_id = self._active.get(user_id)
        if active_id is None:
            return None
        for session in self._sessions.get(user_id, []):
            if session.id == active_id:
                return session
        return None

    def get_active_id(self, user_id: str) -> Optional[UUID]:
        return self._active.get(user_id)

    def select(self, user_id: str, session_id: UUID) -> Optional[Session]:
        """Make a cached session the active one."""
        for session in self._sessions.get(user_id, []):
            if session.id == session_id:
                self._active[user_id] = session_id
                return session
        return None

    async def list(self, user_id: str) -> list[Session]:
        """
        Refresh and return all sessions of a user, most recently updated first.

        The first session becomes active when none is selected yet.
        """
        try:
            sessions = await self._session_repo.list(user_id)
        except Exception as exc:
            logger.warning(f"Error loading sessions for {user_id}: {exc}")
            return self.cached(user_id)

        self._sessions[user_id] = sessions
        if user_id not in self._active and sessions:
            self._active[user_id] = sessions[0].id
        return list(sessions)

    async def create(
        self,
        user_id: str,
        name: str,
        description: Optional[str] = None,
    ) -> Optional[Session]:
        """Create a session with empty artifacts and make it active."""
        name = (name or "").strip()
        if not name:
            return None
        description = (description or "").strip() or None

        try:
            session = await self._session_repo.create(
                user_id, SessionCreate(name=name, description=description)
            )
        except Exception as exc:
            logger.warning(f"Error creating session for {user_id}: {exc}")
            return None

        self._sessions[user_id] = [session] + [
            s for s in self._sessions.get(user_id, []) if s.id != session.id
        ]
        self._active[user_id] = session.id
        return session

    async def update(
        self,
        user_id: str,
        session_id: UUID,
        update: SessionUpdate,
    ) -> Optional[Session]:
        """Merge the given fields into a session; omitted fields are untouched."""
        if "name" in update.model_fields_set and not (update.name or "").strip():
            return None

        try:
            session = await self._session_repo.update(user_id, session_id, update)
        except Exception as exc:
            logger.warning(f"Error updating session {session_id}: {exc}")
            return None

        self.remember(user_id, session)
        return session

    def remember(self, user_id: str, session: Session) -> None:
        """Replace the cached copy of a session (e.g. after a pipeline merge)."""
        cached = self._sessions.get(user_id, [])
        self._sessions[user_id] = [session if s.id == session.id else s for s in cached]
        if not any(s.id == session.id for s in cached):
            self._sessions[user_id].insert(0, session)

    @staticmethod
    def search(sessions: Iterable[Session], query: Optional[str]) -> list[Session]:
        return search_sessions(sessions, query)
