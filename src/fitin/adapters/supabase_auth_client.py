"""Supabase Auth client adapter."""

import logging
from dataclasses import dataclass
from uuid import UUID

from supabase import AuthError, Client

from fitin.domain.models import AuthUser
from fitin.services.auth import AuthClient

_logger = logging.getLogger(__name__)


@dataclass
class SupabaseAuthClient(AuthClient):
    """Resolves Supabase access tokens to users."""

    client: Client

    def get_user(self, access_token: str) -> AuthUser | None:
        """Return the user for an access token, or None when rejected."""
        try:
            response = self.client.auth.get_user(access_token)
        except AuthError as exc:
            _logger.warning("Supabase rejected access token: %s", exc)
            return None
        if response is None or response.user is None:
            return None
        return AuthUser(id=UUID(response.user.id), email=response.user.email)
