"""Data models for Streak Card."""

from streak_card.models.contribution import (
    ContributionCalendar,
    ContributionDay,
    ContributionWeek,
    StreakResult,
)

__all__ = [
    "ContributionDay",
    "ContributionWeek",
    "ContributionCalendar",
    "StreakResult",
]
