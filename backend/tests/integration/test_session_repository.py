"""
Integration tests for the SQLite session repository.
"""

from uuid import uuid4

import pytest

from playground.core.exceptions import NotFoundError
from playground.models.session import SessionCreate, SessionUpdate
from playground.services.session_directory import SessionDirectory


@pytest.mark.asyncio
async def test_create_session(session_repo, test_user_id):
    """Test creating a session with empty artifacts."""
    session = await session_repo.create(
        test_user_id, SessionCreate(name="Button Demo", description="Primary buttons")
    )

    assert session.id is not None
    assert session.user_id == test_user_id
    assert session.name == "Button Demo"
    assert session.description == "Primary buttons"
    assert session.generated_markup is None
    assert session.generated_style is None
    assert session.created_at == session.updated_at
    assert session.created_at.tzinfo is not None


@pytest.mark.asyncio
async def test_get_session_is_scoped_to_owner(session_repo, test_user_id):
    """Test that another user cannot read a session."""
    created = await session_repo.create(test_user_id, SessionCreate(name="Mine"))

    assert (await session_repo.get(test_user_id, created.id)).name == "Mine"
    assert await session_repo.get("someone_else", created.id) is None
    assert await session_repo.get(test_user_id, uuid4()) is None


@pytest.mark.asyncio
async def test_list_orders_by_updated_at_desc(session_repo, test_user_id):
    """Test that the most recently updated session comes first."""
    first = await session_repo.create(test_user_id, SessionCreate(name="First"))
    second = await session_repo.create(test_user_id, SessionCreate(name="Second"))
    await session_repo.create("someone_else", SessionCreate(name="Other"))

    sessions = await session_repo.list(test_user_id)
    assert [s.id for s in sessions] == [second.id, first.id]

    await session_repo.update(test_user_id, first.id, SessionUpdate(description="touched"))

    sessions = await session_repo.list(test_user_id)
    assert [s.id for s in sessions] == [first.id, second.id]


@pytest.mark.asyncio
async def test_update_merges_only_given_fields(session_repo, test_user_id):
    """Test partial update: omitted fields keep their values."""
    created = await session_repo.create(
        test_user_id, SessionCreate(name="Card", description="A card")
    )
    await session_repo.update(
        test_user_id,
        created.id,
        SessionUpdate(generated_markup="A", generated_style="B"),
    )

    updated = await session_repo.update(
        test_user_id, created.id, SessionUpdate(generated_markup="C")
    )

    assert updated.generated_markup == "C"
    assert updated.generated_style == "B"
    assert updated.name == "Card"
    assert updated.description == "A card"
    assert updated.updated_at > created.updated_at
    assert updated.created_at == created.created_at


@pytest.mark.asyncio
async def test_update_unknown_session_raises(session_repo, test_user_id):
    """Test updating a session that does not exist."""
    with pytest.raises(NotFoundError):
        await session_repo.update(test_user_id, uuid4(), SessionUpdate(name="x"))


@pytest.mark.asyncio
async def test_list_returns_every_session_by_default(session_repo, test_user_id):
    """Test that the directory sees and searches all sessions, not a first page."""
    for i in range(105):
        await session_repo.create(test_user_id, SessionCreate(name=f"Session {i}"))

    sessions = await SessionDirectory(session_repo).list(test_user_id)

    assert len(sessions) == 105
    assert [s.name for s in SessionDirectory.search(sessions, "session 0")] == ["Session 0"]


@pytest.mark.asyncio
async def test_list_with_limit_and_offset_pages(session_repo, test_user_id):
    for i in range(5):
        await session_repo.create(test_user_id, SessionCreate(name=f"Session {i}"))

    page = await session_repo.list(test_user_id, limit=2, offset=1)

    assert len(page) == 2
