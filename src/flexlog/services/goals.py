"""Weekly goal tracking and goal streaks."""

import logging
import math
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import UTC, date, datetime, timedelta
from typing import Protocol
from uuid import UUID

from flexlog.domain.goals import (
    NutritionEntry,
    WeekRange,
    WeeklyGoals,
    WeeklyProgress,
    WorkoutEntry,
)

MAX_STREAK_WEEKS = 52

_logger = logging.getLogger(__name__)


class WorkoutRepository(Protocol):
    """Persistence interface for workout entries."""

    def add_workout(self, user_id: UUID, log_date: date, entry: WorkoutEntry) -> None:
        """Append a workout entry to a date."""

    def list_workouts(self, user_id: UUID) -> dict[date, list[WorkoutEntry]]:
        """Return all workout entries grouped by date."""

    def list_workouts_for_date(
        self, user_id: UUID, log_date: date
    ) -> list[WorkoutEntry]:
        """Return workout entries for one date."""


class NutritionRepository(Protocol):
    """Persistence interface for nutrition entries."""

    def add_entry(self, user_id: UUID, log_date: date, entry: NutritionEntry) -> None:
        """Append a nutrition entry to a date."""

    def list_entries(self, user_id: UUID) -> dict[date, list[NutritionEntry]]:
        """Return all nutrition entries grouped by date."""

    def list_entries_for_date(
        self, user_id: UUID, log_date: date
    ) -> list[NutritionEntry]:
        """Return nutrition entries for one date."""


class WeeklyGoalsRepository(Protocol):
    """Persistence interface for weekly goals."""

    def get_goals(self, user_id: UUID) -> WeeklyGoals | None:
        """Return the user's weekly goals if set."""

    def save_goals(self, user_id: UUID, goals: WeeklyGoals) -> None:
        """Create or replace the user's weekly goals."""


@dataclass(frozen=True)
class GoalStatus:
    """Weekly goals next to the current week's progress."""

    week: WeekRange
    goals: WeeklyGoals
    progress: WeeklyProgress
    complete: bool
    percentages: dict[str, float]
    consecutive_weeks: int


def current_week_dates(reference: date | None = None) -> WeekRange:
    """Return the Monday to Sunday window containing the reference date."""
    day = reference or date.today()
    start = day - timedelta(days=day.weekday())
    return WeekRange(start=start, end=start + timedelta(days=6))


def weekly_progress(
    workouts_by_date: Mapping[date, list[WorkoutEntry]],
    nutrition_by_date: Mapping[date, list[NutritionEntry]],
    reference: date | None = None,
) -> WeeklyProgress:
    """Sum workouts and nutrition within the week of the reference date."""
    week = current_week_dates(reference)

    workouts = 0
    total_reps = 0
    for day, entries in workouts_by_date.items():
        if not week.contains(day):
            continue
        workouts += len(entries)
        total_reps += sum(entry.sets * entry.reps for entry in entries)

    protein = 0.0
    calories = 0.0
    for day, entries in nutrition_by_date.items():
        if not week.contains(day):
            continue
        protein += sum(entry.protein for entry in entries)
        calories += sum(entry.calories for entry in entries)

    return WeeklyProgress(
        workouts=workouts,
        total_reps=total_reps,
        protein=_round_half_up(protein),
        calories=_round_half_up(calories),
    )


def goals_complete(progress: WeeklyProgress, goals: WeeklyGoals) -> bool:
    """Return True when every configured goal has been reached.

    Goals set to zero are not configured and always pass. With no goal
    configured at all there is nothing to complete, so the result is False.
    """
    if not any((goals.workouts, goals.total_reps, goals.protein, goals.calories)):
        return False
    return all(
        (
            goals.workouts == 0 or progress.workouts >= goals.workouts,
            goals.total_reps == 0 or progress.total_reps >= goals.total_reps,
            goals.protein == 0 or progress.protein >= goals.protein,
            goals.calories == 0 or progress.calories >= goals.calories,
        )
    )


def consecutive_weeks(
    workouts_by_date: Mapping[date, list[WorkoutEntry]],
    nutrition_by_date: Mapping[date, list[NutritionEntry]],
    goals: WeeklyGoals,
    reference: date | None = None,
) -> int:
    """Count completed weeks back from the current one, up to 52."""
    day = reference or date.today()
    progress = weekly_progress(workouts_by_date, nutrition_by_date, day)
    if not goals_complete(progress, goals):
        return 0

    streak = 1
    for _ in range(1, MAX_STREAK_WEEKS):
        day -= timedelta(days=7)
        progress = weekly_progress(workouts_by_date, nutrition_by_date, day)
        if not goals_complete(progress, goals):
            break
        streak += 1
    return streak


def goal_percentage(current: float, goal: float) -> float:
    """Return progress toward a goal as a percentage capped at 100."""
    if goal <= 0:
        return 0.0
    return min(current / goal * 100, 100.0)


def unique_exercise_names(
    workouts_by_date: Mapping[date, list[WorkoutEntry]],
) -> list[str]:
    """Return distinct exercise names for autocomplete, most recent spelling."""
    names: dict[str, str] = {}
    for day in sorted(workouts_by_date):
        for entry in workouts_by_date[day]:
            name = entry.exercise.strip()
            if name:
                names[name.lower()] = name
    return sorted(names.values(), key=str.lower)


@dataclass
class GoalService:
    """Application service for workouts, nutrition entries and weekly goals."""

    workout_repository: WorkoutRepository
    nutrition_repository: NutritionRepository
    goals_repository: WeeklyGoalsRepository

    def add_workout(  # noqa: PLR0913
        self,
        user_id: UUID,
        log_date: date,
        exercise: str,
        sets: int,
        reps: int,
        weight: float = 0,
    ) -> WorkoutEntry:
        """Append a workout to a date and return it."""
        entry = WorkoutEntry(
            exercise=exercise.strip(),
            sets=sets,
            reps=reps,
            weight=weight,
            timestamp=datetime.now(tz=UTC),
        )
        self.workout_repository.add_workout(user_id, log_date, entry)
        _logger.info(
            "Workout logged: user=%s date=%s exercise=%s",
            user_id,
            log_date,
            entry.exercise,
        )
        return entry

    def list_workouts(self, user_id: UUID, log_date: date) -> list[WorkoutEntry]:
        """Return workouts logged on a date."""
        return self.workout_repository.list_workouts_for_date(user_id, log_date)

    def add_nutrition(
        self,
        user_id: UUID,
        log_date: date,
        description: str,
        protein: float,
        calories: float,
    ) -> NutritionEntry:
        """Append a nutrition entry to a date and return it."""
        entry = NutritionEntry(
            description=description.strip(),
            protein=protein,
            calories=calories,
            timestamp=datetime.now(tz=UTC),
        )
        self.nutrition_repository.add_entry(user_id, log_date, entry)
        _logger.info(
            "Nutrition logged: user=%s date=%s protein=%s calories=%s",
            user_id,
            log_date,
            entry.protein,
            entry.calories,
        )
        return entry

    def list_nutrition(self, user_id: UUID, log_date: date) -> list[NutritionEntry]:
        """Return nutrition entries logged on a date."""
        return self.nutrition_repository.list_entries_for_date(user_id, log_date)

    def list_exercise_names(self, user_id: UUID) -> list[str]:
        """Return previously used exercise names."""
        return unique_exercise_names(self.workout_repository.list_workouts(user_id))

    def get_goals(self, user_id: UUID) -> WeeklyGoals:
        """Return the user's weekly goals, or empty goals if unset."""
        return self.goals_repository.get_goals(user_id) or WeeklyGoals()

    def set_goals(self, user_id: UUID, goals: WeeklyGoals) -> WeeklyGoals:
        """Replace the user's weekly goals."""
        self.goals_repository.save_goals(user_id, goals)
        return goals

    def get_status(self, user_id: UUID, today: date) -> GoalStatus:
        """Return this week's progress, completion and streak."""
        goals = self.get_goals(user_id)
        workouts = self.workout_repository.list_workouts(user_id)
        nutrition = self.nutrition_repository.list_entries(user_id)
        progress = weekly_progress(workouts, nutrition, today)
        complete = goals_complete(progress, goals)
        streak = (
            consecutive_weeks(workouts, nutrition, goals, today) if complete else 0
        )
        return GoalStatus(
            week=current_week_dates(today),
            goals=goals,
            progress=progress,
            complete=complete,
            percentages={
                "workouts": goal_percentage(progress.workouts, goals.workouts),
                "totalReps": goal_percentage(progress.total_reps, goals.total_reps),
                "protein": goal_percentage(progress.protein, goals.protein),
                "calories": goal_percentage(progress.calories, goals.calories),
            },
            consecutive_weeks=streak,
        )


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)
