"""Supabase repository for earned badges."""

from dataclasses import dataclass
from datetime import date, datetime
from uuid import UUID

from supabase import Client

from flexlog.domain.badges import Badge, BadgeLevel
from flexlog.services.badges import BadgeRepository


@dataclass
class SupabaseBadgeRepository(BadgeRepository):
    """Supabase implementation for badges, unique per user and week."""

    client: Client

    def list_badges(self, user_id: UUID) -> list[Badge]:
        """Return badges in the order they were earned."""
        response = (
            self.client.table("badges")
            .select("name, level, earned_at, week_key, consecutive_weeks")
            .eq("user_id", str(user_id))
            .order("week_key", desc=False)
            .execute()
        )
        return [_parse_row(row) for row in response.data or []]

    def save_badges(self, user_id: UUID, badges: list[Badge]) -> None:
        """Insert badges for weeks that have none; stored weeks are left as is."""
        if not badges:
            return
        self.client.table("badges").upsert(
            [
                {
                    "user_id": str(user_id),
                    "name": badge.name,
                    "level": badge.level.value,
                    "earned_at": badge.earned_date.isoformat(),
                    "week_key": badge.week_key.isoformat(),
                    "consecutive_weeks": badge.consecutive_weeks,
                }
                for badge in badges
            ],
            on_conflict="user_id,week_key",
            ignore_duplicates=True,
        ).execute()


def _parse_row(row: dict[str, object]) -> Badge:
    return Badge(
        name=str(row.get("name") or ""),
        level=BadgeLevel(str(row.get("level") or BadgeLevel.BRONZE.value)),
        earned_date=datetime.fromisoformat(str(row["earned_at"])),
        week_key=date.fromisoformat(str(row["week_key"])),
        consecutive_weeks=int(row.get("consecutive_weeks") or 1),
    )
