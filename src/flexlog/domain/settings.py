"""Domain models for user settings."""

from dataclasses import dataclass

from flexlog.domain.scores import Goal


@dataclass(frozen=True)
class UserProfile:
    """Per-user defaults applied when scoring a day."""

    maintenance: float
    goal: Goal
    timezone: str
