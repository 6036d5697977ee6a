"""
SQLite implementation of Session repository.
"""

from __future__ import annotations

from typing import Optional
from uuid import UUID

from sqlalchemy import and_, select

from playground.core.exceptions import NotFoundError
from playground.infrastructure.local.database import SessionORM, get_session_factory
from playground.interfaces.session_repository import ISessionRepository
from playground.models.session import Session, SessionCreate, SessionUpdate
from playground.utils.datetime_utils import ensure_utc, now_utc


class SqliteSessionRepository(ISessionRepository):
    """SQLite implementation of session repository."""

    def __init__(self, session_factory=None):
        self._session_factory = session_factory or get_session_factory()

    def _orm_to_model(self, orm: SessionORM) -> Session:
        """Convert ORM object to Pydantic model."""
        return Session(
            id=UUID(orm.id),
            user_id=orm.user_id,
            name=orm.name,
            description=orm.description,
            generated_markup=orm.generated_markup,
            generated_style=orm.generated_style,
            created_at=ensure_utc(orm.created_at),
            updated_at=ensure_utc(orm.updated_at),
        )

    async def _get_orm(self, session, user_id: str, session_id: UUID) -> Optional[SessionORM]:
        result = await session.execute(
            select(SessionORM).where(
                and_(SessionORM.id == str(session_id), SessionORM.user_id == user_id)
            )
        )
        return result.scalar_one_or_none()

    async def create(self, user_id: str, session_data: SessionCreate) -> Session:
        """Create a new session."""
        async with self._session_factory() as session:
            timestamp = now_utc()
            orm = SessionORM(
                user_id=user_id,
                name=session_data.name,
                description=session_data.description,
                created_at=timestamp,
                updated_at=timestamp,
            )
            session.add(orm)
            await session.commit()
            await session.refresh(orm)
            return self._orm_to_model(orm)

    async def get(self, user_id: str, session_id: UUID) -> Optional[Session]:
        """Get a session by ID."""
        async with self._session_factory() as session:
            orm = await self._get_orm(session, user_id, session_id)
            return self._orm_to_model(orm) if orm else None

    async def list(
        self,
        user_id: str,
        limit: Optional[int] = None,
        offset: int = 0,
    ) -> list[Session]:
        """List sessions for a user; all of them unless a limit is given."""
        async with self._session_factory() as session:
            query = (
                select(SessionORM)
                .where(SessionORM.user_id == user_id)
                .order_by(SessionORM.updated_at.desc(), SessionORM.created_at.desc())
                .offset(offset)
            )
            if limit is not None:
                query = query.limit(limit)
            result = await session.execute(query)
            return [self._orm_to_model(orm) for orm in result.scalars().all()]

    async def update(
        self,
        user_id: str,
        session_id: UUID,
        update: SessionUpdate,
    ) -> Session:
        """Update an existing session."""
        async with self._session_factory() as session:
            orm = await self._get_orm(session, user_id, session_id)
            if not orm:
                raise NotFoundError(f"Session {session_id} not found")

            update_data = update.model_dump(exclude_unset=True)
            for field, value in update_data.items():
                if field == "name" and not value:
                    continue
                setattr(orm, field, value)

            orm.updated_at = now_utc()
            await session.commit()
            await session.refresh(orm)
            return self._orm_to_model(orm)
