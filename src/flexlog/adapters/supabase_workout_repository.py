"""Supabase repository for workout entries."""

from collections import defaultdict
from dataclasses import dataclass
from datetime import UTC, date, datetime
from uuid import UUID

from supabase import Client

from flexlog.domain.goals import WorkoutEntry
from flexlog.services.goals import WorkoutRepository

_COLUMNS = "log_date, exercise, sets, reps, weight, logged_at"


@dataclass
class SupabaseWorkoutRepository(WorkoutRepository):
    """Supabase implementation for workout entries."""

    client: Client

    def add_workout(self, user_id: UUID, log_date: date, entry: WorkoutEntry) -> None:
        """Insert a workout row for a date."""
        response = (
            self.client.table("workouts")
            .insert(
                {
                    "user_id": str(user_id),
                    "log_date": log_date.isoformat(),
                    "exercise": entry.exercise,
                    "sets": entry.sets,
                    "reps": entry.reps,
                    "weight": entry.weight,
                    "logged_at": entry.timestamp.isoformat(),
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create workout entry")

    def list_workouts(self, user_id: UUID) -> dict[date, list[WorkoutEntry]]:
        """Return all workouts grouped by date."""
        response = (
            self.client.table("workouts")
            .select(_COLUMNS)
            .eq("user_id", str(user_id))
            .order("logged_at", desc=False)
            .execute()
        )
        grouped: dict[date, list[WorkoutEntry]] = defaultdict(list)
        for row in response.data or []:
            grouped[date.fromisoformat(str(row["log_date"]))].append(_parse_row(row))
        return dict(grouped)

    def list_workouts_for_date(
        self, user_id: UUID, log_date: date
    ) -> list[WorkoutEntry]:
        """Return workouts logged on one date."""
        response = (
            self.client.table("workouts")
            .select(_COLUMNS)
            .eq("user_id", str(user_id))
            .eq("log_date", log_date.isoformat())
            .order("logged_at", desc=False)
            .execute()
        )
        return [_parse_row(row) for row in response.data or []]


def _parse_row(row: dict[str, object]) -> WorkoutEntry:
    logged_at_raw = row.get("logged_at")
    return WorkoutEntry(
        exercise=str(row.get("exercise") or ""),
        sets=int(row.get("sets") or 0),
        reps=int(row.get("reps") or 0),
        weight=float(row.get("weight") or 0.0),
        timestamp=(
            datetime.fromisoformat(logged_at_raw)
            if isinstance(logged_at_raw, str) and logged_at_raw
            else datetime.min.replace(tzinfo=UTC)
        ),
    )
