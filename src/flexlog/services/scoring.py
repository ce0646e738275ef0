"""Daily performance score calculation.

The composite score is ``nutrition * energy * activity * recovery * 10``
clamped to the 1-10 range. Every input is coerced to a documented default
when missing or not numeric, so scoring never raises.
"""

import math
from collections.abc import Mapping

from flexlog.domain.scores import DailyMetrics, Goal, ScoreBreakdown, ScoreResult

MIN_SCORE = 1.0
MAX_SCORE = 10.0

DEFAULT_MAINTENANCE = 2000.0
DEFAULT_SLEEP_HOURS = 7.0

_TARGET_WINDOWS: dict[Goal, tuple[float, float]] = {
    Goal.DEFICIT: (0.75, 0.90),
    Goal.MAINTENANCE: (0.95, 1.05),
    Goal.SURPLUS: (1.10, 1.25),
}
_NEAR_TARGET_MARGIN = 0.10

_LOW_STEPS = 5000
_ACTIVE_STEPS = 8000
_HIGH_STEPS = 12000

_SHORT_SLEEP_HOURS = 6
_TARGET_SLEEP_HOURS = 7
_LONG_SLEEP_HOURS = 8

_TRUE_STRINGS = {"true", "1", "yes", "on"}

_GRADES = (
    (9, "Excellent"),
    (8, "Great"),
    (7, "Good"),
    (6, "Fair"),
    (5, "Average"),
)


def compute_nutrition(protein: float, calories: float) -> float:
    """Return protein per calorie scaled by 10, or 0 without calories."""
    if calories <= 0:
        return 0.0
    return protein / calories * 10


def compute_energy(
    calories: float, maintenance: float, goal: Goal = Goal.MAINTENANCE
) -> float:
    """Score calorie intake against the goal's target window."""
    ratio = calories / maintenance if maintenance > 0 else 0.0
    low, high = _TARGET_WINDOWS.get(goal, _TARGET_WINDOWS[Goal.MAINTENANCE])
    if low <= ratio <= high:
        return 1.0
    # Rounded so that e.g. 1.10 - 0.10 compares equal to a ratio of 1.0.
    near_low = round(low - _NEAR_TARGET_MARGIN, 2)
    near_high = round(high + _NEAR_TARGET_MARGIN, 2)
    if near_low <= ratio <= near_high:
        return 0.9
    return 0.8


def compute_activity(
    steps: float, did_lift: bool = False, did_cardio: bool = False
) -> float:
    """Score daily steps, rewarding a workout on higher step counts."""
    has_workout = did_lift or did_cardio
    if steps < _LOW_STEPS:
        return 0.9
    if steps < _ACTIVE_STEPS:
        return 1.0
    if steps < _HIGH_STEPS:
        return 1.1 if has_workout else 1.0
    return 1.2 if has_workout else 1.1


def compute_recovery(sleep_hours: float, high_stress: bool = False) -> float:
    """Score sleep duration, with high stress capping recovery at 0.8."""
    if high_stress or sleep_hours < _SHORT_SLEEP_HOURS:
        return 0.8
    if sleep_hours < _TARGET_SLEEP_HOURS:
        return 0.9
    if sleep_hours <= _LONG_SLEEP_HOURS:
        return 1.0
    return 0.95


def parse_metrics(
    data: Mapping[str, object],
    *,
    default_maintenance: float = DEFAULT_MAINTENANCE,
    default_goal: Goal = Goal.MAINTENANCE,
) -> DailyMetrics:
    """Coerce a raw daily log payload into metrics, applying defaults."""
    return DailyMetrics(
        protein=_coerce_number(data.get("protein"), 0.0),
        calories=_coerce_number(data.get("calories"), 0.0),
        maintenance=_coerce_number(data.get("maintenance"), default_maintenance),
        goal=_coerce_goal(data.get("goal"), default_goal),
        steps=_coerce_number(data.get("steps"), 0.0),
        did_lift=_coerce_flag(data.get("didLift")),
        did_cardio=_coerce_flag(data.get("didCardio")),
        sleep_hours=_sleep_hours(data),
        high_stress=_coerce_flag(data.get("highStress")),
    )


def compute_score(data: Mapping[str, object] | DailyMetrics) -> ScoreResult:
    """Compute the four sub-scores and the clamped composite score."""
    metrics = data if isinstance(data, DailyMetrics) else parse_metrics(data)

    nutrition = compute_nutrition(metrics.protein, metrics.calories)
    energy = compute_energy(metrics.calories, metrics.maintenance, metrics.goal)
    activity = compute_activity(metrics.steps, metrics.did_lift, metrics.did_cardio)
    recovery = compute_recovery(metrics.sleep_hours, metrics.high_stress)

    product = nutrition * energy * activity * recovery * 10
    score = max(MIN_SCORE, min(MAX_SCORE, product))

    return ScoreResult(
        score=score,
        breakdown=ScoreBreakdown(
            nutrition=round(nutrition, 2),
            energy=round(energy, 2),
            activity=round(activity, 2),
            recovery=round(recovery, 2),
        ),
        raw=ScoreBreakdown(
            nutrition=nutrition,
            energy=energy,
            activity=activity,
            recovery=recovery,
        ),
    )


def score_grade(score: float) -> str:
    """Return a word grade for a 0-10 score."""
    for threshold, grade in _GRADES:
        if score >= threshold:
            return grade
    return "Needs Improvement"


def _sleep_hours(data: Mapping[str, object]) -> float:
    hours = _coerce_number(data.get("sleepHours"), None)
    if hours is not None:
        return hours
    minutes = _coerce_number(data.get("sleepMinutes"), None)
    if minutes is not None:
        return minutes / 60
    return DEFAULT_SLEEP_HOURS


def _coerce_number(value: object, default: float | None) -> float | None:
    """Return a finite float for numeric input, otherwise the default."""
    if value is None or isinstance(value, bool):
        return default
    if isinstance(value, int | float):
        number = float(value)
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return default
    else:
        return default
    if not math.isfinite(number):
        return default
    return number


def _coerce_flag(value: object) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value.strip().lower() in _TRUE_STRINGS
    if isinstance(value, int | float):
        return value != 0
    return False


def _coerce_goal(value: object, default: Goal) -> Goal:
    if isinstance(value, Goal):
        return value
    if isinstance(value, str):
        try:
            return Goal(value.strip().lower())
        except ValueError:
            return default
    return default
