"""User settings service."""

import logging
from dataclasses import dataclass
from datetime import date, datetime
from typing import Protocol
from uuid import UUID
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from flexlog.domain.scores import Goal
from flexlog.domain.settings import UserProfile

_logger = logging.getLogger(__name__)


class UserSettingsRepository(Protocol):
    """Persistence interface for user settings."""

    def get_profile(self, user_id: UUID) -> UserProfile | None:
        """Return the user's saved profile if set."""

    def save_profile(self, user_id: UUID, profile: UserProfile) -> None:
        """Create or replace the user's profile."""


@dataclass
class UserSettingsService:
    """Service for user settings."""

    repository: UserSettingsRepository
    default_maintenance: float = 2000
    default_goal: Goal = Goal.MAINTENANCE
    default_timezone: str = "UTC"

    def get_profile(self, user_id: UUID) -> UserProfile:
        """Return the saved profile or the configured defaults."""
        return self.repository.get_profile(user_id) or UserProfile(
            maintenance=self.default_maintenance,
            goal=self.default_goal,
            timezone=self.default_timezone,
        )

    def save_profile(self, user_id: UUID, profile: UserProfile) -> UserProfile:
        """Persist a user's profile."""
        self.repository.save_profile(user_id, profile)
        return profile

    def now(self, user_id: UUID) -> datetime:
        """Return the current time in the user's timezone."""
        timezone_name = self.get_profile(user_id).timezone
        try:
            tz = ZoneInfo(timezone_name)
        except (ZoneInfoNotFoundError, ValueError):
            _logger.warning(
                "Unknown timezone %s for user %s, using %s",
                timezone_name,
                user_id,
                self.default_timezone,
            )
            tz = ZoneInfo(self.default_timezone)
        return datetime.now(tz=tz)

    def today(self, user_id: UUID) -> date:
        """Return the current date in the user's timezone."""
        return self.now(user_id).date()


def is_valid_timezone(value: str) -> bool:
    """Return True when the value names a known IANA timezone."""
    try:
        ZoneInfo(value)
    except (ZoneInfoNotFoundError, ValueError):
        return False
    return True
