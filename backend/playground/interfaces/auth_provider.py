"""
Authentication provider interface.
"""

from abc import ABC, abstractmethod

from pydantic import BaseModel


class User(BaseModel):
    """Authenticated user."""

    id: str


class IAuthProvider(ABC):
    """Abstract interface for authentication providers."""

    @abstractmethod
    async def verify_token(self, token: str) -> User:
        """
        Verify a bearer token and return the user it belongs to.

        Raises:
            AuthenticationError: If the token is invalid
        """
        pass
