"""Supabase repository for nutrition entries."""

from collections import defaultdict
from dataclasses import dataclass
from datetime import UTC, date, datetime
from uuid import UUID

from supabase import Client

from flexlog.domain.goals import NutritionEntry
from flexlog.services.goals import NutritionRepository

_COLUMNS = "log_date, description, protein, calories, logged_at"


@dataclass
class SupabaseNutritionRepository(NutritionRepository):
    """Supabase implementation for nutrition entries."""

    client: Client

    def add_entry(self, user_id: UUID, log_date: date, entry: NutritionEntry) -> None:
        """Insert a nutrition row for a date."""
        response = (
            self.client.table("nutrition_logs")
            .insert(
                {
                    "user_id": str(user_id),
                    "log_date": log_date.isoformat(),
                    "description": entry.description,
                    "protein": entry.protein,
                    "calories": entry.calories,
                    "logged_at": entry.timestamp.isoformat(),
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create nutrition entry")

    def list_entries(self, user_id: UUID) -> dict[date, list[NutritionEntry]]:
        """Return all nutrition entries grouped by date."""
        response = (
            self.client.table("nutrition_logs")
            .select(_COLUMNS)
            .eq("user_id", str(user_id))
            .order("logged_at", desc=False)
            .execute()
        )
        grouped: dict[date, list[NutritionEntry]] = defaultdict(list)
        for row in response.data or []:
            grouped[date.fromisoformat(str(row["log_date"]))].append(_parse_row(row))
        return dict(grouped)

    def list_entries_for_date(
        self, user_id: UUID, log_date: date
    ) -> list[NutritionEntry]:
        """Return nutrition entries logged on one date."""
        response = (
            self.client.table("nutrition_logs")
            .select(_COLUMNS)
            .eq("user_id", str(user_id))
            .eq("log_date", log_date.isoformat())
            .order("logged_at", desc=False)
            .execute()
        )
        return [_parse_row(row) for row in response.data or []]


def _parse_row(row: dict[str, object]) -> NutritionEntry:
    logged_at_raw = row.get("logged_at")
    return NutritionEntry(
        description=str(row.get("description") or ""),
        protein=float(row.get("protein") or 0.0),
        calories=float(row.get("calories") or 0.0),
        timestamp=(
            datetime.fromisoformat(logged_at_raw)
            if isinstance(logged_at_raw, str) and logged_at_raw
            else datetime.min.replace(tzinfo=UTC)
        ),
    )
