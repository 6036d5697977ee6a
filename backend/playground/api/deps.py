"""
Dependency injection for API endpoints.

This module provides FastAPI dependencies that inject the correct
infrastructure implementations based on environment configuration.
"""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends, Header, HTTPException, status

from playground.core.config import get_settings
from playground.core.exceptions import AuthenticationError
from playground.interfaces.auth_provider import IAuthProvider, User
from playground.interfaces.llm_provider import ILLMProvider
from playground.interfaces.message_repository import IMessageRepository
from playground.interfaces.session_repository import ISessionRepository
from playground.services.generation_service import GenerationService
from playground.services.playground_service import PlaygroundService
from playground.services.session_directory import SessionDirectory


# ===========================================
# Repository Dependencies
# ===========================================


@lru_cache()
def get_session_repository() -> ISessionRepository:
    """Get session repository instance."""
    from playground.infrastructure.local.session_repository import SqliteSessionRepository
    return SqliteSessionRepository()


@lru_cache()
def get_message_repository() -> IMessageRepository:
    """Get message repository instance."""
    from playground.infrastructure.local.message_repository import SqliteMessageRepository
    return SqliteMessageRepository()


# ===========================================
# Provider Dependencies
# ===========================================


@lru_cache()
def get_llm_provider() -> ILLMProvider:
    """
    Get LLM provider instance based on LLM_PROVIDER setting.

    Supports:
    - litellm: LiteLLM (OpenAI, Bedrock, etc. with optional custom endpoint)
    - gemini-api: Gemini API (API Key)
    """
    settings = get_settings()

    if settings.LLM_PROVIDER == "litellm":
        from playground.infrastructure.local.litellm_provider import LiteLLMProvider
        return LiteLLMProvider(settings.LITELLM_MODEL)

    elif settings.LLM_PROVIDER == "gemini-api":
        from playground.infrastructure.local.gemini_api_provider import GeminiAPIProvider
        return GeminiAPIProvider(settings.GEMINI_MODEL)

    else:
        raise ValueError(f"Unknown LLM_PROVIDER: {settings.LLM_PROVIDER}")


@lru_cache()
def get_auth_provider() -> IAuthProvider:
    """Get auth provider instance."""
    from playground.infrastructure.local.mock_auth import MockAuthProvider
    return MockAuthProvider()


# ===========================================
# Service Dependencies
# ===========================================


def get_generation_service(
    llm_provider: ILLMProvider = Depends(get_llm_provider),
) -> GenerationService:
    """Get generation service bound to the configured provider."""
    return GenerationService(llm_provider=llm_provider)


@lru_cache()
def get_session_directory() -> SessionDirectory:
    """Get the shared session directory (holds per-user active session)."""
    return SessionDirectory(get_session_repository())


@lru_cache()
def get_playground_service() -> PlaygroundService:
    """
    Get the shared pipeline service.

    A single instance is required so in-flight tracking covers every request.
    """
    return PlaygroundService(
        session_repo=get_session_repository(),
        message_repo=get_message_repository(),
        generation_service=GenerationService(llm_provider=get_llm_provider()),
    )


# ===========================================
# User Authentication
# ===========================================


async def get_current_user(
    authorization: Annotated[str | None, Header()] = None,
    auth_provider: IAuthProvider = Depends(get_auth_provider),
) -> User:
    """
    Get current authenticated user.

    In mock mode the bearer token is the user ID.
    """
    if not authorization:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authorization header required",
        )

    # Extract token from "Bearer <token>"
    try:
        scheme, token = authorization.split()
        if scheme.lower() != "bearer":
            raise ValueError("Invalid scheme")
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid authorization header format",
        )

    try:
        return await auth_provider.verify_token(token)
    except AuthenticationError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e),
        )


# ===========================================
# Type Aliases for Dependency Injection
# ===========================================

SessionRepo = Annotated[ISessionRepository, Depends(get_session_repository)]
MessageRepo = Annotated[IMessageRepository, Depends(get_message_repository)]
LLMProvider = Annotated[ILLMProvider, Depends(get_llm_provider)]
GenerationSvc = Annotated[GenerationService, Depends(get_generation_service)]
Directory = Annotated[SessionDirectory, Depends(get_session_directory)]
Pipeline = Annotated[PlaygroundService, Depends(get_playground_service)]
CurrentUser = Annotated[User, Depends(get_current_user)]
