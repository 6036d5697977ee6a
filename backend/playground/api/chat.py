"""
Chat API endpoint.

Runs the generation pipeline for a message sent from the chat pane.
"""

from uuid import UUID

from fastapi import APIRouter, HTTPException, status

from playground.api.deps import CurrentUser, Directory, Pipeline, SessionRepo
from playground.models.chat import SendMessageRequest, SendOutcome
from playground.models.enums import SendStatus

router = APIRouter()


@router.post("/{session_id}/messages", response_model=SendOutcome)
async def send_message(
    session_id: UUID,
    request: SendMessageRequest,
    user: CurrentUser,
    repo: SessionRepo,
    pipeline: Pipeline,
    directory: Directory,
):
    """
    Send a message to a session and generate a component.

    Generation failures are reported in the outcome (with a fallback assistant
    message), not as HTTP errors.
    """
    session = await repo.get(user.id, session_id)
    if not session:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Session {session_id} not found",
        )

    outcome = await pipeline.handle_send(
        user.id,
        session_id,
        request.text,
        image_url=request.image_url,
    )

    if outcome.status == SendStatus.BUSY:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="A message is already being processed for this session",
        )
    if outcome.session is not None:
        directory.remember(user.id, outcome.session)
    return outcome


@router.get("/{session_id}/loading")
async def get_loading_state(session_id: UUID, _user: CurrentUser, pipeline: Pipeline):
    """Whether a send is in flight for the session (gates the send button)."""
    return {"session_id": str(session_id), "is_loading": pipeline.is_loading(session_id)}
