"""Tests for weekly goal tracking and streaks."""

import logging
from datetime import date, timedelta

import pytest

from flexlog.domain.goals import WeeklyGoals, WeeklyProgress
from flexlog.services.goals import (
    consecutive_weeks,
    current_week_dates,
    goal_percentage,
    goals_complete,
    unique_exercise_names,
    weekly_progress,
)
from tests.conftest import meal, workout

MONDAY = date(2024, 3, 4)
SUNDAY = date(2024, 3, 10)


@pytest.mark.parametrize(
    "reference",
    [MONDAY, date(2024, 3, 6), SUNDAY],
)
def test_current_week_runs_monday_to_sunday(reference: date) -> None:
    week = current_week_dates(reference)

    assert week.start == MONDAY
    assert week.end == SUNDAY
    assert week.to_record() == {"start": "2024-03-04", "end": "2024-03-10"}


def test_sunday_belongs_to_previous_monday() -> None:
    week = current_week_dates(date(2024, 3, 17))

    assert week.start == date(2024, 3, 11)


def test_week_crosses_month_and_year_boundaries() -> None:
    week = current_week_dates(date(2025, 1, 1))

    assert week.start == date(2024, 12, 30)
    assert week.end == date(2025, 1, 5)


def test_weekly_progress_sums_entries_in_week() -> None:
    workouts = {
        MONDAY: [workout(sets=3, reps=10), workout(sets=5, reps=5)],
        SUNDAY: [workout(sets=2, reps=8)],
        MONDAY - timedelta(days=1): [workout(sets=10, reps=10)],
        SUNDAY + timedelta(days=1): [workout(sets=10, reps=10)],
    }
    nutrition = {
        MONDAY: [meal(protein=30.4, calories=500.2), meal(protein=40, calories=700)],
        date(2024, 3, 7): [meal(protein=0.2, calories=0.4)],
        date(2024, 2, 1): [meal(protein=999, calories=9999)],
    }

    progress = weekly_progress(workouts, nutrition, date(2024, 3, 6))

    assert progress == WeeklyProgress(
        workouts=3, total_reps=71, protein=71, calories=1201
    )


def test_weekly_progress_rounds_half_up() -> None:
    nutrition = {MONDAY: [meal(protein=10.5, calories=100.5)]}

    progress = weekly_progress({}, nutrition, MONDAY)

    assert progress.protein == 11
    assert progress.calories == 101


def test_goals_complete_false_without_goals() -> None:
    progress = WeeklyProgress(workouts=10, total_reps=500, protein=900, calories=9000)

    assert goals_complete(progress, WeeklyGoals()) is False


def test_goals_complete_ignores_zero_goals() -> None:
    goals = WeeklyGoals(workouts=3, protein=500)

    assert goals_complete(WeeklyProgress(workouts=3, protein=500), goals) is True
    assert goals_complete(WeeklyProgress(workouts=3, protein=499), goals) is False
    assert goals_complete(WeeklyProgress(workouts=2, protein=900), goals) is False


def test_goals_complete_requires_every_dimension() -> None:
    goals = WeeklyGoals(workouts=1, total_reps=10, protein=10, calories=10)

    assert goals_complete(
        WeeklyProgress(workouts=1, total_reps=10, protein=10, calories=10), goals
    )
    assert not goals_complete(
        WeeklyProgress(workouts=1, total_reps=10, protein=10, calories=9), goals
    )


def _weeks_of_workouts(weeks: int, reference: date) -> dict:
    return {
        reference - timedelta(weeks=offset): [workout()] for offset in range(weeks)
    }


def test_consecutive_weeks_zero_when_current_week_incomplete() -> None:
    goals = WeeklyGoals(workouts=1)
    workouts = _weeks_of_workouts(5, MONDAY - timedelta(weeks=1))

    assert consecutive_weeks(workouts, {}, goals, MONDAY) == 0


def test_consecutive_weeks_counts_until_streak_breaks() -> None:
    goals = WeeklyGoals(workouts=1)
    workouts = _weeks_of_workouts(3, date(2024, 3, 8))
    workouts[date(2024, 1, 1)] = [workout()]

    assert consecutive_weeks(workouts, {}, goals, date(2024, 3, 8)) == 3


def test_consecutive_weeks_walks_back_from_sunday() -> None:
    goals = WeeklyGoals(workouts=1)
    workouts = {MONDAY: [workout()], date(2024, 2, 26): [workout()]}

    assert consecutive_weeks(workouts, {}, goals, SUNDAY) == 2


def test_consecutive_weeks_capped_at_fifty_two() -> None:
    goals = WeeklyGoals(workouts=1)
    workouts = _weeks_of_workouts(60, MONDAY)

    assert consecutive_weeks(workouts, {}, goals, MONDAY) == 52


def test_consecutive_weeks_uses_nutrition_goals() -> None:
    goals = WeeklyGoals(protein=100)
    nutrition = {
        MONDAY: [meal(protein=100)],
        MONDAY - timedelta(weeks=1): [meal(protein=60), meal(protein=40)],
        MONDAY - timedelta(weeks=2): [meal(protein=99)],
    }

    assert consecutive_weeks({}, nutrition, goals, MONDAY) == 2


def test_goal_percentage() -> None:
    assert goal_percentage(3, 0) == 0
    assert goal_percentage(2, 4) == 50
    assert goal_percentage(9, 4) == 100


def test_unique_exercise_names() -> None:
    workouts = {
        date(2024, 3, 1): [workout("bench press"), workout("Squat")],
        date(2024, 3, 2): [workout("Bench Press"), workout("  "), workout("deadlift")],
    }

    assert unique_exercise_names(workouts) == ["Bench Press", "deadlift", "Squat"]


def test_goal_service_logs_each_entry_kind(
    goal_service, user_id, caplog: pytest.LogCaptureFixture
) -> None:
    logger = logging.getLogger("flexlog.services.goals")
    logger.addHandler(caplog.handler)
    caplog.handler.setLevel(logging.INFO)
    previous_level = logger.level
    logger.setLevel(logging.INFO)
    try:
        goal_service.add_workout(user_id, MONDAY, "Squat", sets=3, reps=5)
        goal_service.add_nutrition(
            user_id, MONDAY, description="Oats", protein=12, calories=350
        )
    finally:
        logger.removeHandler(caplog.handler)
        logger.setLevel(previous_level)

    messages = [record.getMessage() for record in caplog.records]
    assert any(message.startswith("Workout logged") for message in messages)
    assert any(
        message.startswith("Nutrition logged") and "calories=350" in message
        for message in messages
    )
