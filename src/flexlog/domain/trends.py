"""Domain models for history trends and day comparisons."""

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class TrendPoint:
    """One dated value of a tracked metric."""

    day: date
    value: float


@dataclass(frozen=True)
class TrendSummary:
    """Statistics over the most recent points of a trend."""

    points: list[TrendPoint]
    latest: float
    average: float
    minimum: float
    maximum: float


@dataclass(frozen=True)
class MetricComparison:
    """A metric for a day next to the previous day's value."""

    metric: str
    today: float | None
    previous: float | None
    change_percent: float | None
