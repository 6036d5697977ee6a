"""API routers."""

from playground.api import chat, generate, sessions

__all__ = [
    "chat",
    "generate",
    "sessions",
]
