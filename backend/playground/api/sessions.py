"""
Sessions API endpoints.

Session browser, header rename and code-pane edits, message history and export.
"""

from typing import Optional
from uuid import UUID

from fastapi import APIRouter, HTTPException, Query, Response, status

from playground.api.deps import CurrentUser, Directory, MessageRepo, SessionRepo
from playground.core.exceptions import ValidationError
from playground.models.message import Message
from playground.models.session import Session, SessionCreate, SessionUpdate
from playground.services.export_service import ARCHIVE_FILENAME, build_component_archive

router = APIRouter()


async def _get_session_or_404(user: CurrentUser, repo: SessionRepo, session_id: UUID) -> Session:
    session = await repo.get(user.id, session_id)
    if not session:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Session {session_id} not found",
        )
    return session


@router.get("", response_model=list[Session])
async def list_sessions(
    user: CurrentUser,
    directory: Directory,
    q: Optional[str] = Query(None, description="Case-insensitive filter on name/description"),
):
    """List the user's sessions, most recently updated first."""
    sessions = await directory.list(user.id)
    return directory.search(sessions, q)


@router.post("", response_model=Session, status_code=status.HTTP_201_CREATED)
async def create_session(
    payload: SessionCreate,
    user: CurrentUser,
    directory: Directory,
):
    """Create a session and make it the active one."""
    if not payload.name.strip():
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Session name must not be blank",
        )
    session = await directory.create(user.id, payload.name, payload.description)
    if not session:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Session could not be created",
        )
    return session


@router.get("/active", response_model=Optional[Session])
async def get_active_session(user: CurrentUser, directory: Directory):
    """Get the currently selected session (null when none)."""
    active = directory.get_active(user.id)
    if active is None and directory.get_active_id(user.id) is None:
        await directory.list(user.id)
        active = directory.get_active(user.id)
    return active


@router.post("/{session_id}/select", response_model=Session)
async def select_session(
    session_id: UUID,
    user: CurrentUser,
    repo: SessionRepo,
    directory: Directory,
):
    """Make a session the active one."""
    session = await _get_session_or_404(user, repo, session_id)
    directory.remember(user.id, session)
    directory.select(user.id, session_id)
    return session


@router.get("/{session_id}", response_model=Session)
async def get_session(session_id: UUID, user: CurrentUser, repo: SessionRepo):
    """Get a session by ID."""
    return await _get_session_or_404(user, repo, session_id)


@router.patch("/{session_id}", response_model=Session)
async def update_session(
    session_id: UUID,
    payload: SessionUpdate,
    user: CurrentUser,
    repo: SessionRepo,
    directory: Directory,
):
    """Merge the given fields into a session (rename, description, code-pane edits)."""
    await _get_session_or_404(user, repo, session_id)
    if "name" in payload.model_fields_set and not (payload.name or "").strip():
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Session name must not be blank",
        )
    if payload.name is not None:
        payload.name = payload.name.strip()

    session = await directory.update(user.id, session_id, payload)
    if not session:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Session could not be updated",
        )
    return session


@router.get("/{session_id}/messages", response_model=list[Message])
async def list_messages(
    session_id: UUID,
    user: CurrentUser,
    repo: SessionRepo,
    message_repo: MessageRepo,
    limit: Optional[int] = Query(None, ge=1, description="Page size; full history when omitted"),
    offset: int = Query(0, ge=0),
):
    """Get a session's chat history in order."""
    await _get_session_or_404(user, repo, session_id)
    return await message_repo.list(user.id, session_id, limit=limit, offset=offset)


@router.get("/{session_id}/export")
async def export_session(session_id: UUID, user: CurrentUser, repo: SessionRepo):
    """Download the session's generated code as a zip archive."""
    session = await _get_session_or_404(user, repo, session_id)
    try:
        content = build_component_archive(session.generated_markup, session.generated_style)
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)
    return Response(
        content=content,
        media_type="application/zip",
        headers={"Content-Disposition": f'attachment; filename="{ARCHIVE_FILENAME}"'},
    )
