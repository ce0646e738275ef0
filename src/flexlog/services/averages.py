"""Rolling averages over the daily score history."""

import math
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import date

from flexlog.domain.scores import SECTIONS, DailyLog

DEFAULT_WINDOW_DAYS = 7

_COLOR_BANDS = (
    (9, "#4CAF50"),
    (7, "#8BC34A"),
    (5, "#FFC107"),
    (3, "#FF9800"),
)
_LOWEST_COLOR = "#F44336"


@dataclass(frozen=True)
class SectionAverages:
    """Rolling averages of each sub-score on a 0-10 scale."""

    nutrition: float
    energy: float
    activity: float
    recovery: float

    def to_record(self) -> dict[str, float]:
        return {section: getattr(self, section) for section in SECTIONS}


def rolling_average(
    all_logs: Mapping[date, DailyLog], section: str, days: int = DEFAULT_WINDOW_DAYS
) -> float:
    """Average one sub-score over the most recent ``days`` logged dates."""
    values = []
    for log in _recent_logs(all_logs, days):
        if log.score_data is None:
            continue
        value = log.score_data.breakdown.get(section)
        if value is not None:
            values.append(value)
    if not values:
        return 0.0
    return _round_tenth(sum(values) / len(values) * 10)


def all_rolling_averages(
    all_logs: Mapping[date, DailyLog], days: int = DEFAULT_WINDOW_DAYS
) -> SectionAverages:
    """Return rolling averages for all four sections."""
    return SectionAverages(
        nutrition=rolling_average(all_logs, "nutrition", days),
        energy=rolling_average(all_logs, "energy", days),
        activity=rolling_average(all_logs, "activity", days),
        recovery=rolling_average(all_logs, "recovery", days),
    )


def overall_rolling_average(
    all_logs: Mapping[date, DailyLog], days: int = DEFAULT_WINDOW_DAYS
) -> float:
    """Average the composite score over the most recent ``days`` dates."""
    scores = [
        log.score_data.score
        for log in _recent_logs(all_logs, days)
        if log.score_data is not None
    ]
    if not scores:
        return 0.0
    return _round_tenth(sum(scores) / len(scores))


def score_color(score: float) -> str:
    """Map a 0-10 score to its display color band."""
    for threshold, color in _COLOR_BANDS:
        if score >= threshold:
            return color
    return _LOWEST_COLOR


def _recent_logs(all_logs: Mapping[date, DailyLog], days: int) -> list[DailyLog]:
    if days <= 0:
        return []
    recent_dates = sorted(all_logs, reverse=True)[:days]
    return [all_logs[day] for day in recent_dates]


def _round_tenth(value: float) -> float:
    """Round to one decimal, sending exact halves up."""
    return math.floor(value * 10 + 0.5) / 10
