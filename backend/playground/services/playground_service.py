"""
Generation request pipeline.

One send runs: persist user turn -> generate with recent context ->
persist assistant turn -> extract code blocks -> merge into the session.
Every failure is contained here; handle_send never raises.
"""

from __future__ import annotations

from typing import Optional
from uuid import UUID

from playground.core.config import Settings, get_settings
from playground.core.logger import logger
from playground.interfaces.message_repository import IMessageRepository
from playground.interfaces.session_repository import ISessionRepository
from playground.models.chat import SendOutcome
from playground.models.enums import MessageRole, PipelineState, SendStatus
from playground.models.generation import ContextMessage, ExtractedCode, GenerationRequest
from playground.models.message import Message, MessageCreate
from playground.models.session import Session, SessionUpdate
from playground.services.code_extractor import extract_code_blocks
from playground.services.generation_service import GenerationService

GENERATION_FALLBACK_MESSAGE = (
    "Sorry, I couldn't generate a component right now. Please try again in a moment."
)


def build_merge_update(extracted: ExtractedCode) -> Optional[SessionUpdate]:
    """
    Build the session update for extracted code.

    Only non-empty artifacts are set, so fields without new content keep
    their previous value. Returns None when there is nothing to merge.
    """
    fields: dict[str, str] = {}
    if extracted.markup:
        fields["generated_markup"] = extracted.markup
    if extracted.style:
        fields["generated_style"] = extracted.style
    if not fields:
        return None
    return SessionUpdate(**fields)


class _PipelineRun:
    """Tracks the state transitions of a single send."""

    def __init__(self, session_id: UUID):
        self.session_id = session_id
        self.state = PipelineState.IDLE
        self.transitions: list[PipelineState] = [PipelineState.IDLE]

    def enter(self, state: PipelineState) -> None:
        logger.debug(f"Session {self.session_id}: {self.state.value} -> {state.value}")
        self.state = state
        self.transitions.append(state)


class PlaygroundService:
    """Runs the send pipeline for playground sessions."""

    def __init__(
        self,
        session_repo: ISessionRepository,
        message_repo: IMessageRepository,
        generation_service: GenerationService,
        settings: Optional[Settings] = None,
    ):
        self._session_repo = session_repo
        self._message_repo = message_repo
        self._generation_service = generation_service
        self._settings = settings or get_settings()
        # Sessions with a send in flight. Overlapping sends are rejected, not queued.
        self._in_flight: set[UUID] = set()

    def is_loading(self, session_id: UUID) -> bool:
        """Whether a send is currently running for the session."""
        return session_id in self._in_flight

    async def handle_send(
        self,
        user_id: str,
        session_id: Optional[UUID],
        text: str,
        image_url: Optional[str] = None,
    ) -> SendOutcome:
        """
        Run the pipeline for one user message.

        Args:
            user_id: Owner user ID
            session_id: Currently selected session, None when nothing is selected
            text: Prompt text
            image_url: Optional image reference stored with the user turn

        Returns:
            SendOutcome describing what happened; the final state is always IDLE
        """
        prompt = (text or "").strip()
        if session_id is None or (not prompt and not image_url):
            return SendOutcome(status=SendStatus.REJECTED, transitions=[PipelineState.IDLE])

        if session_id in self._in_flight:
            logger.info(f"Rejecting send for session {session_id}: another send is in flight")
            return SendOutcome(status=SendStatus.BUSY, transitions=[PipelineState.IDLE])

        self._in_flight.add(session_id)
        run = _PipelineRun(session_id)
        try:
            return await self._run(run, user_id, session_id, prompt, image_url)
        finally:
            self._in_flight.discard(session_id)

    async def _run(
        self,
        run: _PipelineRun,
        user_id: str,
        session_id: UUID,
        prompt: str,
        image_url: Optional[str],
    ) -> SendOutcome:
        run.enter(PipelineState.SUBMITTING)
        try:
            user_message = await self._message_repo.add(
                user_id,
                MessageCreate(
                    session_id=session_id,
                    role=MessageRole.USER,
                    content=prompt,
                    image_url=image_url,
                ),
            )
        except Exception as exc:
            logger.warning(f"Failed to save user message for session {session_id}: {exc}")
            run.enter(PipelineState.FAILED)
            run.enter(PipelineState.IDLE)
            return SendOutcome(
                status=SendStatus.SUBMIT_FAILED,
                transitions=run.transitions,
                error=str(exc),
            )

        run.enter(PipelineState.AWAITING_GENERATION)
        try:
            context = await self._load_context(user_id, session_id, user_message)
            result = await self._generation_service.generate(
                GenerationRequest(prompt=prompt or "(image)", messages=context)
            )
        except Exception as exc:
            logger.warning(f"Generation failed for session {session_id}: {exc}")
            fallback = await self._save_assistant_message(
                user_id, session_id, GENERATION_FALLBACK_MESSAGE
            )
            run.enter(PipelineState.IDLE)
            return SendOutcome(
                status=SendStatus.GENERATION_FAILED,
                transitions=run.transitions,
                user_message=user_message,
                assistant_message=fallback,
                error=str(exc),
            )

        run.enter(PipelineState.MERGING)
        assistant_message = await self._save_assistant_message(
            user_id, session_id, result.generated_text
        )
        extracted = extract_code_blocks(result.generated_text)
        update = build_merge_update(extracted)
        session: Optional[Session] = None
        if update is not None:
            session = await self._merge(user_id, session_id, update)
        else:
            logger.info(f"No code blocks found in response for session {session_id}")

        run.enter(PipelineState.IDLE)
        return SendOutcome(
            status=SendStatus.COMPLETED,
            transitions=run.transitions,
            user_message=user_message,
            assistant_message=assistant_message,
            session=session,
            markup_updated=session is not None and update.generated_markup is not None,
            style_updated=session is not None and update.generated_style is not None,
        )

    async def _load_context(
        self,
        user_id: str,
        session_id: UUID,
        user_message: Message,
    ) -> list[ContextMessage]:
        """Trailing window of messages that precede the new user turn."""
        window = self._settings.CONTEXT_WINDOW_SIZE
        if window <= 0:
            return []
        recent = await self._message_repo.list_recent(user_id, session_id, limit=window + 1)
        prior = [message for message in recent if message.id != user_message.id]
        return [
            ContextMessage(role=message.role, content=message.content)
            for message in prior[-window:]
        ]

    async def _save_assistant_message(
        self,
        user_id: str,
        session_id: UUID,
        content: str,
    ) -> Optional[Message]:
        try:
            return await self._message_repo.add(
                user_id,
                MessageCreate(
                    session_id=session_id,
                    role=MessageRole.ASSISTANT,
                    content=content,
                ),
            )
        except Exception as exc:
            logger.warning(f"Failed to save assistant message for session {session_id}: {exc}")
            return None

    async def _merge(
        self,
        user_id: str,
        session_id: UUID,
        update: SessionUpdate,
    ) -> Optional[Session]:
        try:
            return await self._session_repo.update(user_id, session_id, update)
        except Exception as exc:
            logger.warning(f"Failed to merge generated code into session {session_id}: {exc}")
            return None
