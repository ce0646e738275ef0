"""Daily log service: scores a day's metrics and keeps the history."""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import UTC, date, datetime, timedelta
from typing import Protocol
from uuid import UUID

from flexlog.domain.scores import DailyLog
from flexlog.domain.trends import MetricComparison, TrendSummary
from flexlog.services.averages import (
    DEFAULT_WINDOW_DAYS,
    SectionAverages,
    all_rolling_averages,
    overall_rolling_average,
    score_color,
)
from flexlog.services.scoring import compute_score, parse_metrics
from flexlog.services.trends import (
    DEFAULT_TREND_WINDOW,
    compare_days,
    summarize_trend,
    trend_series,
)
from flexlog.services.user_settings import UserSettingsService

_logger = logging.getLogger(__name__)


class DailyLogRepository(Protocol):
    """Persistence interface for daily logs, one per date."""

    def get_log(self, user_id: UUID, log_date: date) -> DailyLog | None:
        """Return the log for a date, if present."""

    def list_logs(self, user_id: UUID) -> dict[date, DailyLog]:
        """Return all logs keyed by date."""

    def save_log(self, user_id: UUID, log: DailyLog) -> None:
        """Create or overwrite the log for its date."""


@dataclass
class RollingSummary:
    """Rolling averages of the composite and section scores."""

    days: int
    overall: float
    sections: SectionAverages
    color: str


@dataclass
class DailyLogService:
    """Service for scoring and reading daily logs."""

    repository: DailyLogRepository
    settings_service: UserSettingsService

    def save_log(
        self, user_id: UUID, log_date: date, data: Mapping[str, object]
    ) -> DailyLog:
        """Score the day's metrics and overwrite the stored log."""
        profile = self.settings_service.get_profile(user_id)
        metrics = parse_metrics(
            data,
            default_maintenance=profile.maintenance,
            default_goal=profile.goal,
        )
        log = DailyLog(
            log_date=log_date,
            metrics=metrics,
            score_data=compute_score(metrics),
            timestamp=datetime.now(tz=UTC),
        )
        self.repository.save_log(user_id, log)
        _logger.info(
            "Daily log scored: user=%s date=%s score=%.2f",
            user_id,
            log_date,
            log.score_data.score,
        )
        return log

    def get_log(self, user_id: UUID, log_date: date) -> DailyLog | None:
        """Return the log for a date."""
        return self.repository.get_log(user_id, log_date)

    def list_logs(self, user_id: UUID) -> dict[date, DailyLog]:
        """Return the full log history."""
        return self.repository.list_logs(user_id)

    def get_averages(
        self, user_id: UUID, days: int = DEFAULT_WINDOW_DAYS
    ) -> RollingSummary:
        """Return rolling averages over the most recent logged days."""
        logs = self.repository.list_logs(user_id)
        overall = overall_rolling_average(logs, days)
        return RollingSummary(
            days=days,
            overall=overall,
            sections=all_rolling_averages(logs, days),
            color=score_color(overall),
        )

    def compare_with_previous_day(
        self, user_id: UUID, log_date: date
    ) -> list[MetricComparison] | None:
        """Compare a day's log with the day before, or None if it has no log."""
        today = self.repository.get_log(user_id, log_date)
        if today is None:
            return None
        previous = self.repository.get_log(user_id, log_date - timedelta(days=1))
        return compare_days(today, previous)

    def get_trend(
        self, user_id: UUID, metric: str, window: int = DEFAULT_TREND_WINDOW
    ) -> TrendSummary | None:
        """Summarize a metric's recent trend."""
        points = trend_series(self.repository.list_logs(user_id), metric)
        return summarize_trend(points, window)
