"""Domain models for workouts, nutrition entries and weekly goals."""

from dataclasses import dataclass
from datetime import date, datetime


@dataclass(frozen=True)
class WorkoutEntry:
    """A logged exercise with its set and rep counts."""

    exercise: str
    sets: int
    reps: int
    weight: float
    timestamp: datetime

    def to_record(self) -> dict[str, object]:
        return {
            "exercise": self.exercise,
            "sets": self.sets,
            "reps": self.reps,
            "weight": self.weight,
            "timestamp": self.timestamp.isoformat(),
        }


@dataclass(frozen=True)
class NutritionEntry:
    """A logged food or meal with its protein and calories."""

    description: str
    protein: float
    calories: float
    timestamp: datetime

    def to_record(self) -> dict[str, object]:
        return {
            "description": self.description,
            "protein": self.protein,
            "calories": self.calories,
            "timestamp": self.timestamp.isoformat(),
        }


@dataclass(frozen=True)
class WeeklyGoals:
    """Weekly targets. A zero value means the dimension has no goal."""

    workouts: int = 0
    total_reps: int = 0
    protein: float = 0
    calories: float = 0

    def to_record(self) -> dict[str, object]:
        return {
            "workouts": self.workouts,
            "totalReps": self.total_reps,
            "protein": self.protein,
            "calories": self.calories,
        }


@dataclass(frozen=True)
class WeeklyProgress:
    """Accumulated totals for one Monday to Sunday week."""

    workouts: int = 0
    total_reps: int = 0
    protein: int = 0
    calories: int = 0

    def to_record(self) -> dict[str, object]:
        return {
            "workouts": self.workouts,
            "totalReps": self.total_reps,
            "protein": self.protein,
            "calories": self.calories,
        }


@dataclass(frozen=True)
class WeekRange:
    """Inclusive Monday to Sunday date window."""

    start: date
    end: date

    def contains(self, day: date) -> bool:
        return self.start <= day <= self.end

    def to_record(self) -> dict[str, str]:
        return {"start": self.start.isoformat(), "end": self.end.isoformat()}
