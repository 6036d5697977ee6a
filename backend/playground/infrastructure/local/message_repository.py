"""
SQLite implementation of Message repository.
"""

from __future__ import annotations

from typing import Optional
from uuid import UUID

from sqlalchemy import and_, func, select

from playground.core.exceptions import NotFoundError
from playground.infrastructure.local.database import (
    MessageORM,
    SessionORM,
    get_session_factory,
)
from playground.interfaces.message_repository import IMessageRepository
from playground.models.enums import MessageRole
from playground.models.message import Message, MessageCreate
from playground.utils.datetime_utils import ensure_utc, now_utc


class SqliteMessageRepository(IMessageRepository):
    """SQLite implementation of message repository."""

    def __init__(self, session_factory=None):
        self._session_factory = session_factory or get_session_factory()

    def _orm_to_model(self, orm: MessageORM) -> Message:
        """Convert ORM object to Pydantic model."""
        return Message(
            id=UUID(orm.id),
            session_id=UUID(orm.session_id),
            role=MessageRole(orm.role),
            content=orm.content or "",
            image_url=orm.image_url,
            sequence=orm.sequence,
            created_at=ensure_utc(orm.created_at),
        )

    def _scoped(self, user_id: str, session_id: UUID):
        return and_(
            MessageORM.session_id == str(session_id),
            MessageORM.user_id == user_id,
        )

    async def add(self, user_id: str, message: MessageCreate) -> Message:
        """Append a message; the owning session record is left untouched."""
        async with self._session_factory() as session:
            result = await session.execute(
                select(SessionORM).where(
                    and_(
                        SessionORM.id == str(message.session_id),
                        SessionORM.user_id == user_id,
                    )
                )
            )
            if result.scalar_one_or_none() is None:
                raise NotFoundError(f"Session {message.session_id} not found")

            result = await session.execute(
                select(func.max(MessageORM.sequence)).where(
                    MessageORM.session_id == str(message.session_id)
                )
            )
            last_sequence = result.scalar()
            timestamp = now_utc()

            message_orm = MessageORM(
                session_id=str(message.session_id),
                user_id=user_id,
                role=message.role.value,
                content=message.content or "",
                image_url=message.image_url,
                sequence=(last_sequence or 0) + 1,
                created_at=timestamp,
            )
            session.add(message_orm)

            await session.commit()
            await session.refresh(message_orm)
            return self._orm_to_model(message_orm)

    async def list(
        self,
        user_id: str,
        session_id: UUID,
        limit: Optional[int] = None,
        offset: int = 0,
    ) -> list[Message]:
        """List messages for a session; all of them unless a limit is given."""
        async with self._session_factory() as session:
            query = (
                select(MessageORM)
                .where(self._scoped(user_id, session_id))
                .order_by(MessageORM.created_at.asc(), MessageORM.sequence.asc())
                .offset(offset)
            )
            if limit is not None:
                query = query.limit(limit)
            result = await session.execute(query)
            return [self._orm_to_model(orm) for orm in result.scalars().all()]

    async def list_recent(
        self,
        user_id: str,
        session_id: UUID,
        limit: int = 10,
    ) -> list[Message]:
        """Get the most recent messages, oldest first."""
        if limit <= 0:
            return []
        async with self._session_factory() as session:
            query = (
                select(MessageORM)
                .where(self._scoped(user_id, session_id))
                .order_by(MessageORM.created_at.desc(), MessageORM.sequence.desc())
                .limit(limit)
            )
            result = await session.execute(query)
            messages = [self._orm_to_model(orm) for orm in result.scalars().all()]
            messages.reverse()
            return messages
