"""Contribution calendar and streak models."""

from datetime import date
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ContributionDay(BaseModel):
    """Single day in contribution calendar."""

    model_config = ConfigDict(frozen=True)

    date: date
    count: int = Field(default=0, ge=0)

    @classmethod
    def from_graphql(cls, data: dict[str, Any]) -> "ContributionDay":
        """Create from GraphQL response."""
        return cls(
            date=date.fromisoformat(data["date"]),
            count=data["contributionCount"],
        )


class ContributionWeek(BaseModel):
    """Week of contributions."""

    model_config = ConfigDict(frozen=True)

    days: list[ContributionDay] = Field(default_factory=list)

    @classmethod
    def from_graphql(cls, data: dict[str, Any]) -> "ContributionWeek":
        """Create from GraphQL response."""
        days = [ContributionDay.from_graphql(day) for day in data["contributionDays"]]
        return cls(days=days)


class ContributionCalendar(BaseModel):
    """Full contribution calendar (the green squares mosaic)."""

    model_config = ConfigDict(frozen=True)

    weeks: list[ContributionWeek] = Field(default_factory=list)

    @classmethod
    def from_graphql(cls, data: dict[str, Any]) -> "ContributionCalendar":
        """Create from GraphQL contributionCalendar response."""
        weeks = [ContributionWeek.from_graphql(week) for week in data["weeks"]]
        return cls(weeks=weeks)

    @property
    def days(self) -> list[ContributionDay]:
        """All days across weeks, oldest first.

        The sort is stable and duplicate dates are kept as returned.
        """
        all_days = [day for week in self.weeks for day in week.days]
        return sorted(all_days, key=lambda day: day.date)

    @property
    def total_contributions(self) -> int:
        """Sum of contributions over the calendar."""
        return sum(day.count for week in self.weeks for day in week.days)


class StreakResult(BaseModel):
    """Current and longest contribution streaks, in days."""

    model_config = ConfigDict(frozen=True)

    current: int = Field(default=0, ge=0)
    longest: int = Field(default=0, ge=0)
