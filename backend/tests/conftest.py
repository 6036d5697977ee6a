"""
Shared pytest fixtures.

Repositories run against an in-memory SQLite database; the LLM is replaced
by a scripted provider so no network calls are made.
"""

import os

os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("LLM_PROVIDER", "litellm")

from typing import Any, Optional

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from playground.infrastructure.local.database import Base
from playground.infrastructure.local.message_repository import SqliteMessageRepository
from playground.infrastructure.local.session_repository import SqliteSessionRepository
from playground.interfaces.llm_provider import ILLMProvider


class ScriptedLLMProvider(ILLMProvider):
    """LLM provider that returns queued replies (or raises queued errors)."""

    def __init__(self, replies: Optional[list[Any]] = None):
        self.replies: list[Any] = list(replies or [])
        self.calls: list[dict[str, Any]] = []

    def get_model_name(self) -> str:
        return "Scripted (tests)"

    async def complete(
        self,
        messages: list[dict[str, Any]],
        system_instruction: Optional[str] = None,
        temperature: float = 0.7,
        max_output_tokens: int = 2000,
    ) -> str:
        self.calls.append(
            {
                "messages": messages,
                "system_instruction": system_instruction,
                "temperature": temperature,
                "max_output_tokens": max_output_tokens,
            }
        )
        if not self.replies:
            raise RuntimeError("No scripted reply left")
        reply = self.replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        return reply


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
def test_user_id():
    return "test_user"


@pytest.fixture
def session_repo(session_factory):
    return SqliteSessionRepository(session_factory=session_factory)


@pytest.fixture
def message_repo(session_factory):
    return SqliteMessageRepository(session_factory=session_factory)


@pytest.fixture
def llm_provider():
    return ScriptedLLMProvider()
