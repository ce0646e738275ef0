"""Day-over-day comparisons and metric trends."""

from collections.abc import Mapping
from datetime import date

from flexlog.domain.scores import DailyLog
from flexlog.domain.trends import MetricComparison, TrendPoint, TrendSummary

COMPARISON_METRICS = ("score", "sleepMinutes", "steps", "protein", "calories")
TREND_METRICS = ("score", "protein", "calories", "steps", "sleepHours", "sleepMinutes")
DEFAULT_TREND_WINDOW = 7


def metric_value(log: DailyLog | None, metric: str) -> float | None:
    """Return a log's value for a metric, or None when it has none."""
    if log is None:
        return None
    if metric == "score":
        return log.score_data.score if log.score_data else None
    value = log.metrics.to_record().get(metric)
    if isinstance(value, bool) or not isinstance(value, int | float):
        return None
    return float(value)


def compare_days(
    today: DailyLog | None, previous: DailyLog | None
) -> list[MetricComparison]:
    """Compare a day's metrics with the previous day's."""
    comparisons = []
    for metric in COMPARISON_METRICS:
        current = metric_value(today, metric)
        before = metric_value(previous, metric)
        comparisons.append(
            MetricComparison(
                metric=metric,
                today=current,
                previous=before,
                change_percent=_percent_change(current, before),
            )
        )
    return comparisons


def trend_series(all_logs: Mapping[date, DailyLog], metric: str) -> list[TrendPoint]:
    """Return dated metric values in ascending order, skipping empty days."""
    points = []
    for day in sorted(all_logs):
        value = metric_value(all_logs[day], metric) or 0.0
        if value > 0:
            points.append(TrendPoint(day=day, value=value))
    return points


def summarize_trend(
    points: list[TrendPoint], window: int = DEFAULT_TREND_WINDOW
) -> TrendSummary | None:
    """Summarize the last ``window`` points of a trend."""
    recent = points[-window:] if window > 0 else []
    if not recent:
        return None
    values = [point.value for point in recent]
    return TrendSummary(
        points=recent,
        latest=values[-1],
        average=sum(values) / len(values),
        minimum=min(values),
        maximum=max(values),
    )


def _percent_change(current: float | None, before: float | None) -> float | None:
    if current is None or not before:
        return None
    return (current - before) / before * 100
