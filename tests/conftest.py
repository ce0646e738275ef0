"""Shared test fixtures."""

from collections import defaultdict
from dataclasses import dataclass, field
from datetime import UTC, date, datetime
from uuid import UUID, uuid4

import pytest

from flexlog.config import Settings
from flexlog.containers import AppContainer
from flexlog.domain.badges import Badge
from flexlog.domain.goals import NutritionEntry, WeeklyGoals, WorkoutEntry
from flexlog.domain.scores import DailyLog
from flexlog.domain.settings import UserProfile
from flexlog.services.badges import BadgeRepository, BadgeService
from flexlog.services.daily_logs import DailyLogRepository, DailyLogService
from flexlog.services.goals import (
    GoalService,
    NutritionRepository,
    WeeklyGoalsRepository,
    WorkoutRepository,
)
from flexlog.services.user_settings import (
    UserSettingsRepository,
    UserSettingsService,
)


@dataclass
class InMemoryDailyLogRepository(DailyLogRepository):
    """In-memory daily log repository for tests."""

    logs: dict[UUID, dict[date, DailyLog]] = field(
        default_factory=lambda: defaultdict(dict)
    )

    def get_log(self, user_id: UUID, log_date: date) -> DailyLog | None:
        return self.logs[user_id].get(log_date)

    def list_logs(self, user_id: UUID) -> dict[date, DailyLog]:
        return dict(self.logs[user_id])

    def save_log(self, user_id: UUID, log: DailyLog) -> None:
        self.logs[user_id][log.log_date] = log


@dataclass
class InMemoryWorkoutRepository(WorkoutRepository):
    """In-memory workout repository for tests."""

    workouts: dict[UUID, dict[date, list[WorkoutEntry]]] = field(
        default_factory=lambda: defaultdict(lambda: defaultdict(list))
    )

    def add_workout(self, user_id: UUID, log_date: date, entry: WorkoutEntry) -> None:
        self.workouts[user_id][log_date].append(entry)

    def list_workouts(self, user_id: UUID) -> dict[date, list[WorkoutEntry]]:
        return {day: list(entries) for day, entries in self.workouts[user_id].items()}

    def list_workouts_for_date(
        self, user_id: UUID, log_date: date
    ) -> list[WorkoutEntry]:
        return list(self.workouts[user_id].get(log_date, []))


@dataclass
class InMemoryNutritionRepository(NutritionRepository):
    """In-memory nutrition repository for tests."""

    entries: dict[UUID, dict[date, list[NutritionEntry]]] = field(
        default_factory=lambda: defaultdict(lambda: defaultdict(list))
    )

    def add_entry(self, user_id: UUID, log_date: date, entry: NutritionEntry) -> None:
        self.entries[user_id][log_date].append(entry)

    def list_entries(self, user_id: UUID) -> dict[date, list[NutritionEntry]]:
        return {day: list(entries) for day, entries in self.entries[user_id].items()}

    def list_entries_for_date(
        self, user_id: UUID, log_date: date
    ) -> list[NutritionEntry]:
        return list(self.entries[user_id].get(log_date, []))


@dataclass
class InMemoryWeeklyGoalsRepository(WeeklyGoalsRepository):
    """In-memory weekly goals repository for tests."""

    goals: dict[UUID, WeeklyGoals] = field(default_factory=dict)

    def get_goals(self, user_id: UUID) -> WeeklyGoals | None:
        return self.goals.get(user_id)

    def save_goals(self, user_id: UUID, goals: WeeklyGoals) -> None:
        self.goals[user_id] = goals


@dataclass
class InMemoryBadgeRepository(BadgeRepository):
    """In-memory badge repository that records every save."""

    badges: dict[UUID, list[Badge]] = field(default_factory=dict)
    saves: int = 0

    def list_badges(self, user_id: UUID) -> list[Badge]:
        return list(self.badges.get(user_id, []))

    def save_badges(self, user_id: UUID, badges: list[Badge]) -> None:
        self.saves += 1
        self.badges[user_id] = list(badges)


@dataclass
class InMemoryUserSettingsRepository(UserSettingsRepository):
    """In-memory user settings repository for tests."""

    profiles: dict[UUID, UserProfile] = field(default_factory=dict)

    def get_profile(self, user_id: UUID) -> UserProfile | None:
        return self.profiles.get(user_id)

    def save_profile(self, user_id: UUID, profile: UserProfile) -> None:
        self.profiles[user_id] = profile


def workout(exercise: str = "Squat", sets: int = 3, reps: int = 10) -> WorkoutEntry:
    return WorkoutEntry(
        exercise=exercise,
        sets=sets,
        reps=reps,
        weight=60,
        timestamp=datetime(2024, 1, 1, tzinfo=UTC),
    )


def meal(protein: float = 30, calories: float = 500) -> NutritionEntry:
    return NutritionEntry(
        description="Chicken and rice",
        protein=protein,
        calories=calories,
        timestamp=datetime(2024, 1, 1, tzinfo=UTC),
    )


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key="header.payload.signature",
        api_token="api-token",
    )


@pytest.fixture
def user_id() -> UUID:
    return uuid4()


@pytest.fixture
def user_settings_service() -> UserSettingsService:
    return UserSettingsService(InMemoryUserSettingsRepository())


@pytest.fixture
def goal_service() -> GoalService:
    return GoalService(
        workout_repository=InMemoryWorkoutRepository(),
        nutrition_repository=InMemoryNutritionRepository(),
        goals_repository=InMemoryWeeklyGoalsRepository(),
    )


@pytest.fixture
def container(
    settings: Settings,
    user_settings_service: UserSettingsService,
    goal_service: GoalService,
) -> AppContainer:
    return AppContainer(
        settings=settings,
        user_settings_service=user_settings_service,
        daily_log_service=DailyLogService(
            repository=InMemoryDailyLogRepository(),
            settings_service=user_settings_service,
        ),
        goal_service=goal_service,
        badge_service=BadgeService(
            repository=InMemoryBadgeRepository(),
            goal_service=goal_service,
        ),
    )
