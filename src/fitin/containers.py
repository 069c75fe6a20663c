"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from fitin.adapters.supabase_auth_client import SupabaseAuthClient
from fitin.adapters.supabase_role_repository import SupabaseRoleRepository
from fitin.adapters.supabase_user_details_repository import (
    SupabaseUserDetailsRepository,
)
from fitin.config import Settings
from fitin.services.admin import AdminService
from fitin.services.auth import AuthService
from fitin.services.user_details import UserDetailsService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    auth_service: AuthService
    admin_service: AdminService
    user_details_service: UserDetailsService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_key
    )
    return AppContainer(
        settings=resolved_settings,
        auth_service=AuthService(SupabaseAuthClient(supabase_client)),
        admin_service=AdminService(SupabaseRoleRepository(supabase_client)),
        user_details_service=UserDetailsService(
            SupabaseUserDetailsRepository(supabase_client)
        ),
    )
