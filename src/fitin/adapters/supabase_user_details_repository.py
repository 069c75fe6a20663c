"""Supabase-backed user details repository."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from fitin.domain.calories import ActivityLevel, Gender, UserDetails
from fitin.services.user_details import UserDetailsRepository


@dataclass
class SupabaseUserDetailsRepository(UserDetailsRepository):
    """Supabase implementation for user details persistence."""

    client: Client

    def upsert(self, user_id: UUID, details: UserDetails) -> None:
        """Insert or replace the user's details row."""
        self.client.table("user_details").upsert(
            {
                "user_id": str(user_id),
                "height": details.height,
                "weight": details.weight,
                "age": details.age,
                "gender": details.gender.value,
                "activity_level": details.activity_level.value,
            },
            on_conflict="user_id",
        ).execute()

    def get(self, user_id: UUID) -> UserDetails | None:
        """Return the stored details for a user, if present."""
        response = (
            self.client.table("user_details")
            .select("height, weight, age, gender, activity_level")
            .eq("user_id", str(user_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        row = response.data[0]
        return UserDetails(
            height=float(row["height"]),
            weight=float(row["weight"]),
            age=int(row["age"]),
            gender=Gender(row["gender"]),
            activity_level=ActivityLevel(row["activity_level"]),
        )
