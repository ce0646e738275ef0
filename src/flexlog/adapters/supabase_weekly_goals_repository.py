"""Supabase repository for weekly goals."""

from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import UUID

from supabase import Client

from flexlog.domain.goals import WeeklyGoals
from flexlog.services.goals import WeeklyGoalsRepository


@dataclass
class SupabaseWeeklyGoalsRepository(WeeklyGoalsRepository):
    """Supabase implementation for weekly goals, one row per user."""

    client: Client

    def get_goals(self, user_id: UUID) -> WeeklyGoals | None:
        """Return the stored goals for a user."""
        response = (
            self.client.table("weekly_goals")
            .select("workouts, total_reps, protein, calories")
            .eq("user_id", str(user_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        row = response.data[0]
        return WeeklyGoals(
            workouts=int(row.get("workouts") or 0),
            total_reps=int(row.get("total_reps") or 0),
            protein=float(row.get("protein") or 0.0),
            calories=float(row.get("calories") or 0.0),
        )

    def save_goals(self, user_id: UUID, goals: WeeklyGoals) -> None:
        """Upsert the user's goals."""
        self.client.table("weekly_goals").upsert(
            {
                "user_id": str(user_id),
                "workouts": goals.workouts,
                "total_reps": goals.total_reps,
                "protein": goals.protein,
                "calories": goals.calories,
                "updated_at": datetime.now(tz=UTC).isoformat(),
            },
            on_conflict="user_id",
        ).execute()
