"""Admin role lookup."""

from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from fitin.domain.models import AdminStatus, AuthUser

ADMIN_ROLE = "admin"


class RoleRepository(Protocol):
    """Persistence interface for user roles."""

    def has_role(self, user_id: UUID, role: str) -> bool:
        """Return True when the user holds the role."""


@dataclass
class AdminService:
    """Service for admin checks."""

    role_repository: RoleRepository

    def get_admin_status(self, user: AuthUser | None) -> AdminStatus:
        """Return whether the user is an admin; anonymous users never are."""
        if user is None:
            return AdminStatus(is_admin=False, user_id=None)
        return AdminStatus(
            is_admin=self.role_repository.has_role(user.id, ADMIN_ROLE),
            user_id=user.id,
        )
