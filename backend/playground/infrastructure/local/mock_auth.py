"""
Mock authentication provider for local development.
"""

from playground.core.exceptions import AuthenticationError
from playground.interfaces.auth_provider import IAuthProvider, User


class MockAuthProvider(IAuthProvider):
    """Treats the bearer token as the user ID; no credentials are checked."""

    async def verify_token(self, token: str) -> User:
        user_id = (token or "").strip()
        if not user_id:
            raise AuthenticationError("Empty token")
        return User(id=user_id)
