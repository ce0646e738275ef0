"""Domain models for daily performance scores."""

from dataclasses import dataclass
from datetime import date, datetime
from enum import StrEnum

SECTIONS = ("nutrition", "energy", "activity", "recovery")


class Goal(StrEnum):
    """Energy balance goal relative to maintenance calories."""

    DEFICIT = "deficit"
    MAINTENANCE = "maintenance"
    SURPLUS = "surplus"


@dataclass(frozen=True)
class DailyMetrics:
    """Raw metrics entered for a single day, after coercion."""

    protein: float = 0
    calories: float = 0
    maintenance: float = 2000
    goal: Goal = Goal.MAINTENANCE
    steps: float = 0
    did_lift: bool = False
    did_cardio: bool = False
    sleep_hours: float = 7
    high_stress: bool = False

    @property
    def sleep_minutes(self) -> float:
        return self.sleep_hours * 60

    def to_record(self) -> dict[str, object]:
        """Return the metrics using storage field names."""
        return {
            "protein": self.protein,
            "calories": self.calories,
            "maintenance": self.maintenance,
            "goal": self.goal.value,
            "steps": self.steps,
            "didLift": self.did_lift,
            "didCardio": self.did_cardio,
            "sleepHours": self.sleep_hours,
            "sleepMinutes": self.sleep_minutes,
            "highStress": self.high_stress,
        }


@dataclass(frozen=True)
class ScoreBreakdown:
    """The four sub-scores that make up a composite score."""

    nutrition: float
    energy: float
    activity: float
    recovery: float

    def get(self, section: str) -> float | None:
        """Return a sub-score by section name."""
        if section not in SECTIONS:
            return None
        return getattr(self, section)

    def to_record(self) -> dict[str, float]:
        return {section: getattr(self, section) for section in SECTIONS}


@dataclass(frozen=True)
class ScoreResult:
    """Composite score with rounded and raw sub-scores."""

    score: float
    breakdown: ScoreBreakdown
    raw: ScoreBreakdown

    def to_record(self) -> dict[str, object]:
        return {
            "score": self.score,
            "breakdown": self.breakdown.to_record(),
            "raw": self.raw.to_record(),
        }


@dataclass(frozen=True)
class DailyLog:
    """A day's metrics with the score computed from them."""

    log_date: date
    metrics: DailyMetrics
    score_data: ScoreResult | None = None
    timestamp: datetime | None = None

    def to_record(self) -> dict[str, object]:
        """Return the stored daily log shape."""
        record = self.metrics.to_record()
        record["scoreData"] = self.score_data.to_record() if self.score_data else None
        record["timestamp"] = self.timestamp.isoformat() if self.timestamp else None
        return record

