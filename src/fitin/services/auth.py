"""Session lookup against the auth backend."""

from dataclasses import dataclass
from typing import Protocol

from fitin.domain.models import AuthUser


class AuthClient(Protocol):
    """Interface for resolving access tokens to users."""

    def get_user(self, access_token: str) -> AuthUser | None:
        """Return the user owning the token, or None if it is not valid."""


@dataclass
class AuthService:
    """Service for resolving the current user of a request."""

    client: AuthClient

    def current_user(self, access_token: str | None) -> AuthUser | None:
        """Return the signed-in user for an access token."""
        if not access_token:
            return None
        return self.client.get_user(access_token)
