"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from flexlog.adapters.supabase_badge_repository import SupabaseBadgeRepository
from flexlog.adapters.supabase_daily_log_repository import SupabaseDailyLogRepository
from flexlog.adapters.supabase_nutrition_repository import (
    SupabaseNutritionRepository,
)
from flexlog.adapters.supabase_user_settings_repository import (
    SupabaseUserSettingsRepository,
)
from flexlog.adapters.supabase_weekly_goals_repository import (
    SupabaseWeeklyGoalsRepository,
)
from flexlog.adapters.supabase_workout_repository import SupabaseWorkoutRepository
from flexlog.config import Settings
from flexlog.services.badges import BadgeService
from flexlog.services.daily_logs import DailyLogService
from flexlog.services.goals import GoalService
from flexlog.services.user_settings import UserSettingsService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    user_settings_service: UserSettingsService
    daily_log_service: DailyLogService
    goal_service: GoalService
    badge_service: BadgeService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    user_settings_service = UserSettingsService(
        SupabaseUserSettingsRepository(supabase_client),
        default_maintenance=resolved_settings.default_maintenance,
        default_goal=resolved_settings.default_goal,
        default_timezone=resolved_settings.default_timezone,
    )
    daily_log_service = DailyLogService(
        repository=SupabaseDailyLogRepository(supabase_client),
        settings_service=user_settings_service,
    )
    goal_service = GoalService(
        workout_repository=SupabaseWorkoutRepository(supabase_client),
        nutrition_repository=SupabaseNutritionRepository(supabase_client),
        goals_repository=SupabaseWeeklyGoalsRepository(supabase_client),
    )
    badge_service = BadgeService(
        repository=SupabaseBadgeRepository(supabase_client),
        goal_service=goal_service,
    )
    return AppContainer(
        settings=resolved_settings,
        user_settings_service=user_settings_service,
        daily_log_service=daily_log_service,
        goal_service=goal_service,
        badge_service=badge_service,
    )
