"""Streak badge awarding."""

import logging
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Protocol
from uuid import UUID

from flexlog.domain.badges import Badge, BadgeLevel
from flexlog.services.goals import GoalService, current_week_dates

_LEVEL_THRESHOLDS = (
    (12, BadgeLevel.DIAMOND),
    (8, BadgeLevel.PLATINUM),
    (4, BadgeLevel.GOLD),
    (2, BadgeLevel.SILVER),
)

_logger = logging.getLogger(__name__)


class BadgeRepository(Protocol):
    """Persistence interface for earned badges."""

    def list_badges(self, user_id: UUID) -> list[Badge]:
        """Return the user's badges in the order they were earned."""

    def save_badges(self, user_id: UUID, badges: list[Badge]) -> None:
        """Persist a badge collection, keeping already stored weeks as they are."""


def badge_level(consecutive_weeks: int) -> BadgeLevel:
    """Return the badge tier earned for a streak length."""
    for threshold, level in _LEVEL_THRESHOLDS:
        if consecutive_weeks >= threshold:
            return level
    return BadgeLevel.BRONZE


def award_if_eligible(
    badges: list[Badge], consecutive_weeks: int, now: datetime | None = None
) -> list[Badge]:
    """Append this week's badge unless one was already awarded.

    The week is identified by its Monday. When a badge with that key exists
    the given list is returned unchanged, otherwise a new list is returned.
    """
    earned_at = now or datetime.now(tz=UTC)
    week_key = current_week_dates(earned_at.date()).start
    if week_key in {badge.week_key for badge in badges}:
        return badges
    badge = Badge(
        name=f"Week {consecutive_weeks} Goals",
        level=badge_level(consecutive_weeks),
        earned_date=earned_at,
        week_key=week_key,
        consecutive_weeks=consecutive_weeks,
    )
    return [*badges, badge]


@dataclass
class BadgeService:
    """Awards badges when the current week's goals are complete."""

    repository: BadgeRepository
    goal_service: GoalService

    def list_badges(self, user_id: UUID) -> list[Badge]:
        """Return earned badges."""
        return self.repository.list_badges(user_id)

    def check_and_award(self, user_id: UUID, now: datetime) -> list[Badge]:
        """Award a badge for the week of ``now`` if its goals are complete."""
        badges = self.repository.list_badges(user_id)
        status = self.goal_service.get_status(user_id, now.date())
        if not status.complete:
            return badges

        updated = award_if_eligible(badges, status.consecutive_weeks, now)
        if len(updated) > len(badges):
            self.repository.save_badges(user_id, updated)
            awarded = updated[-1]
            _logger.info(
                "Badge awarded: user=%s week=%s level=%s streak=%s",
                user_id,
                awarded.week_key,
                awarded.level,
                awarded.consecutive_weeks,
            )
        return updated
