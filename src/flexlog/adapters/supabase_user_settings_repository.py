"""Supabase repository for user settings."""

from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import UUID

from supabase import Client

from flexlog.domain.scores import Goal
from flexlog.domain.settings import UserProfile
from flexlog.services.user_settings import UserSettingsRepository


@dataclass
class SupabaseUserSettingsRepository(UserSettingsRepository):
    """Supabase implementation for user settings."""

    client: Client

    def get_profile(self, user_id: UUID) -> UserProfile | None:
        """Return the stored profile for a user."""
        response = (
            self.client.table("user_settings")
            .select("maintenance, goal, timezone")
            .eq("user_id", str(user_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        row = response.data[0]
        return UserProfile(
            maintenance=float(row.get("maintenance") or 2000),
            goal=Goal(str(row.get("goal") or Goal.MAINTENANCE.value)),
            timezone=str(row.get("timezone") or "UTC"),
        )

    def save_profile(self, user_id: UUID, profile: UserProfile) -> None:
        """Upsert the user's profile."""
        self.client.table("user_settings").upsert(
            {
                "user_id": str(user_id),
                "maintenance": profile.maintenance,
                "goal": profile.goal.value,
                "timezone": profile.timezone,
                "updated_at": datetime.now(tz=UTC).isoformat(),
            },
            on_conflict="user_id",
        ).execute()
