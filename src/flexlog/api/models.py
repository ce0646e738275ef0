"""Pydantic models for API request payloads."""

from pydantic import BaseModel, ConfigDict, Field

from flexlog.domain.scores import Goal


class WorkoutPayload(BaseModel):
    """A workout entry to append to a date."""

    exercise: str = Field(min_length=1)
    sets: int = Field(gt=0)
    reps: int = Field(gt=0)
    weight: float = Field(default=0, ge=0)


class NutritionPayload(BaseModel):
    """A nutrition entry to append to a date."""

    description: str = ""
    protein: float = Field(default=0, ge=0)
    calories: float = Field(default=0, ge=0)


class WeeklyGoalsPayload(BaseModel):
    """Weekly targets; zero disables a dimension."""

    model_config = ConfigDict(populate_by_name=True)

    workouts: int = Field(default=0, ge=0)
    total_reps: int = Field(default=0, ge=0, alias="totalReps")
    protein: float = Field(default=0, ge=0)
    calories: float = Field(default=0, ge=0)


class UserSettingsPayload(BaseModel):
    """Scoring defaults and timezone for a user."""

    maintenance: float = Field(default=2000, gt=0)
    goal: Goal = Goal.MAINTENANCE
    timezone: str = "UTC"
