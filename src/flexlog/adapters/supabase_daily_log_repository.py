"""Supabase repository for scored daily logs."""

from dataclasses import dataclass
from datetime import date, datetime
from uuid import UUID

from supabase import Client

from flexlog.domain.scores import SECTIONS, DailyLog, ScoreBreakdown, ScoreResult
from flexlog.services.daily_logs import DailyLogRepository
from flexlog.services.scoring import parse_metrics


@dataclass
class SupabaseDailyLogRepository(DailyLogRepository):
    """Supabase implementation storing one JSON record per user and date."""

    client: Client

    def get_log(self, user_id: UUID, log_date: date) -> DailyLog | None:
        """Return the log for a date, if present."""
        response = (
            self.client.table("daily_logs")
            .select("log_date, data")
            .eq("user_id", str(user_id))
            .eq("log_date", log_date.isoformat())
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_row(response.data[0])

    def list_logs(self, user_id: UUID) -> dict[date, DailyLog]:
        """Return all logs for a user keyed by date."""
        response = (
            self.client.table("daily_logs")
            .select("log_date, data")
            .eq("user_id", str(user_id))
            .order("log_date", desc=True)
            .execute()
        )
        logs = {}
        for row in response.data or []:
            log = _parse_row(row)
            logs[log.log_date] = log
        return logs

    def save_log(self, user_id: UUID, log: DailyLog) -> None:
        """Upsert the log for its date."""
        response = (
            self.client.table("daily_logs")
            .upsert(
                {
                    "user_id": str(user_id),
                    "log_date": log.log_date.isoformat(),
                    "data": log.to_record(),
                },
                on_conflict="user_id,log_date",
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to save daily log")


def _parse_row(row: dict[str, object]) -> DailyLog:
    data = row.get("data")
    record = data if isinstance(data, dict) else {}
    timestamp_raw = record.get("timestamp")
    return DailyLog(
        log_date=date.fromisoformat(str(row["log_date"])),
        metrics=parse_metrics(record),
        score_data=_parse_score(record.get("scoreData")),
        timestamp=(
            datetime.fromisoformat(timestamp_raw)
            if isinstance(timestamp_raw, str) and timestamp_raw
            else None
        ),
    )


def _parse_score(raw: object) -> ScoreResult | None:
    """Parse stored score data, accepting sub-scores stored as strings."""
    if not isinstance(raw, dict) or raw.get("score") is None:
        return None
    try:
        score = float(raw["score"])
    except (TypeError, ValueError):
        return None
    breakdown = _parse_breakdown(raw.get("breakdown"))
    if breakdown is None:
        return None
    return ScoreResult(
        score=score,
        breakdown=breakdown,
        raw=_parse_breakdown(raw.get("raw")) or breakdown,
    )


def _parse_breakdown(raw: object) -> ScoreBreakdown | None:
    if not isinstance(raw, dict):
        return None
    try:
        values = {section: float(raw[section]) for section in SECTIONS}
    except (KeyError, TypeError, ValueError):
        return None
    return ScoreBreakdown(**values)
