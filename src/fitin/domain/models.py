"""Domain models for authenticated users."""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True)
class AuthUser:
    """Represents the user behind a Supabase session."""

    id: UUID
    email: str | None = None


@dataclass(frozen=True)
class AdminStatus:
    """Admin flag for the current user."""

    is_admin: bool
    user_id: UUID | None
