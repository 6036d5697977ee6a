"""Abstract interfaces for infrastructure abstraction."""

from playground.interfaces.auth_provider import IAuthProvider
from playground.interfaces.llm_provider import ILLMProvider
from playground.interfaces.message_repository import IMessageRepository
from playground.interfaces.session_repository import ISessionRepository

__all__ = [
    "IAuthProvider",
    "ILLMProvider",
    "IMessageRepository",
    "ISessionRepository",
]
