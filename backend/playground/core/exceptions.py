"""
Custom exceptions for the application.
"""

from typing import Any, Optional


class PlaygroundError(Exception):
    """Base exception for the component playground."""

    def __init__(self, message: str, details: Optional[Any] = None):
        self.message = message
        self.details = details
        super().__init__(message)


class NotFoundError(PlaygroundError):
    """Resource not found."""

    pass


class ValidationError(PlaygroundError):
    """Validation error."""

    pass


class LLMError(PlaygroundError):
    """LLM-related error."""

    pass


class GenerationError(LLMError):
    """Component generation failed (non-success response or unusable payload)."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message, details={"status_code": status_code})
        self.status_code = status_code


class AuthenticationError(PlaygroundError):
    """Authentication failed."""

    pass
