"""
Unit tests for the session directory.
"""

from datetime import datetime, timedelta, timezone
from unittest.mock import AsyncMock
from uuid import uuid4

import pytest

from playground.models.session import Session, SessionUpdate
from playground.services.session_directory import SessionDirectory, search_sessions

USER_ID = "user_A"


def _session(name, description=None, minutes_ago=0):
    timestamp = datetime(2026, 1, 1, tzinfo=timezone.utc) - timedelta(minutes=minutes_ago)
    return Session(
        id=uuid4(),
        user_id=USER_ID,
        name=name,
        description=description,
        created_at=timestamp,
        updated_at=timestamp,
    )


@pytest.fixture
def repo():
    return AsyncMock()


@pytest.fixture
def directory(repo):
    return SessionDirectory(repo)


class TestSearch:

    def test_case_insensitive_name_match(self):
        sessions = [_session("Button Demo"), _session("Card")]

        result = search_sessions(sessions, "button")

        assert [s.name for s in result] == ["Button Demo"]

    def test_matches_description(self):
        sessions = [_session("A", description="Pricing TABLE"), _session("B")]

        assert [s.name for s in search_sessions(sessions, "table")] == ["A"]

    def test_empty_query_returns_everything(self):
        sessions = [_session("A"), _session("B")]

        assert search_sessions(sessions, "") == sessions
        assert search_sessions(sessions, None) == sessions

    def test_no_match(self):
        assert search_sessions([_session("Card")], "navbar") == []


class TestList:

    @pytest.mark.asyncio
    async def test_list_selects_first_session_when_none_active(self, directory, repo):
        newest, older = _session("New"), _session("Old", minutes_ago=5)
        repo.list.return_value = [newest, older]

        sessions = await directory.list(USER_ID)

        assert sessions == [newest, older]
        assert directory.get_active(USER_ID) == newest

    @pytest.mark.asyncio
    async def test_list_failure_keeps_cached_sessions(self, directory, repo):
        cached = _session("Cached")
        repo.list.return_value = [cached]
        await directory.list(USER_ID)

        repo.list.side_effect = RuntimeError("db down")
        sessions = await directory.list(USER_ID)

        assert sessions == [cached]


class TestCreate:

    @pytest.mark.asyncio
    async def test_create_becomes_active_and_first(self, directory, repo):
        existing = _session("Existing", minutes_ago=5)
        repo.list.return_value = [existing]
        await directory.list(USER_ID)

        created = _session("Hero", description="Landing hero")
        repo.create.return_value = created

        result = await directory.create(USER_ID, "  Hero  ", "  Landing hero  ")

        assert result == created
        data = repo.create.call_args[0][1]
        assert data.name == "Hero"
        assert data.description == "Landing hero"
        assert directory.get_active(USER_ID) == created
        assert directory.cached(USER_ID) == [created, existing]

    @pytest.mark.asyncio
    async def test_blank_name_is_rejected(self, directory, repo):
        assert await directory.create(USER_ID, "   ") is None
        repo.create.assert_not_called()

    @pytest.mark.asyncio
    async def test_blank_description_is_stored_as_absent(self, directory, repo):
        repo.create.return_value = _session("X")

        await directory.create(USER_ID, "X", "   ")

        assert repo.create.call_args[0][1].description is None

    @pytest.mark.asyncio
    async def test_create_failure_is_a_no_op(self, directory, repo):
        repo.create.side_effect = RuntimeError("constraint violation")

        assert await directory.create(USER_ID, "X") is None
        assert directory.cached(USER_ID) == []
        assert directory.get_active(USER_ID) is None


class TestUpdate:

    @pytest.mark.asyncio
    async def test_update_replaces_cached_entry(self, directory, repo):
        original = _session("Old name")
        repo.list.return_value = [original]
        await directory.list(USER_ID)

        renamed = original.model_copy(update={"name": "New name"})
        repo.update.return_value = renamed

        result = await directory.update(USER_ID, original.id, SessionUpdate(name="New name"))

        assert result == renamed
        assert directory.cached(USER_ID) == [renamed]
        assert directory.get_active(USER_ID).name == "New name"

    @pytest.mark.asyncio
    async def test_update_failure_keeps_prior_state(self, directory, repo):
        original = _session("Name")
        repo.list.return_value = [original]
        await directory.list(USER_ID)
        repo.update.side_effect = RuntimeError("db down")

        result = await directory.update(USER_ID, original.id, SessionUpdate(generated_style="x"))

        assert result is None
        assert directory.cached(USER_ID) == [original]

    @pytest.mark.asyncio
    async def test_blank_rename_is_rejected(self, directory, repo):
        assert await directory.update(USER_ID, uuid4(), SessionUpdate(name="  ")) is None
        repo.update.assert_not_called()


def test_select_unknown_session_returns_none(directory):
    assert directory.select(USER_ID, uuid4()) is None
