"""Domain models for streak badges."""

from dataclasses import dataclass
from datetime import date, datetime
from enum import StrEnum

_DISPLAY = {
    "BRONZE": ("Bronze", "\N{THIRD PLACE MEDAL}", "#CD7F32"),
    "SILVER": ("Silver", "\N{SECOND PLACE MEDAL}", "#C0C0C0"),
    "GOLD": ("Gold", "\N{FIRST PLACE MEDAL}", "#FFD700"),
    "PLATINUM": ("Platinum", "\N{GEM STONE}", "#E5E4E2"),
    "DIAMOND": ("Diamond", "\N{DIAMOND SHAPE WITH A DOT INSIDE}", "#B9F2FF"),
}


class BadgeLevel(StrEnum):
    """Badge tiers ordered from lowest to highest."""

    BRONZE = "BRONZE"
    SILVER = "SILVER"
    GOLD = "GOLD"
    PLATINUM = "PLATINUM"
    DIAMOND = "DIAMOND"

    @property
    def display_name(self) -> str:
        return _DISPLAY[self.value][0]

    @property
    def icon(self) -> str:
        return _DISPLAY[self.value][1]

    @property
    def color(self) -> str:
        return _DISPLAY[self.value][2]


@dataclass(frozen=True)
class Badge:
    """A badge earned for completing a week's goals."""

    name: str
    level: BadgeLevel
    earned_date: datetime
    week_key: date
    consecutive_weeks: int

    def to_record(self) -> dict[str, object]:
        return {
            "name": self.name,
            "level": self.level.value,
            "earnedDate": self.earned_date.isoformat(),
            "weekKey": self.week_key.isoformat(),
            "consecutiveWeeks": self.consecutive_weeks,
        }
