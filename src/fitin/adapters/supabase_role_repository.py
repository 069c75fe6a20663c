"""Supabase role lookups."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from fitin.services.admin import RoleRepository


@dataclass
class SupabaseRoleRepository(RoleRepository):
    """Supabase implementation for the user_roles table."""

    client: Client

    def has_role(self, user_id: UUID, role: str) -> bool:
        """Return True when a matching user_roles row exists."""
        response = (
            self.client.table("user_roles")
            .select("role")
            .eq("user_id", str(user_id))
            .eq("role", role)
            .limit(1)
            .execute()
        )
        return bool(response.data)
