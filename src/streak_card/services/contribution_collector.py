"""Contribution calendar collector service."""

import logging
from datetime import datetime

from pydantic import ValidationError

from streak_card.exceptions import ParseError, StreakCardError
from streak_card.models.contribution import ContributionCalendar, ContributionDay
from streak_card.services.github_graphql_client import GitHubGraphQLClient

logger = logging.getLogger(__name__)


class ContributionCollector:
    """Collects the contribution calendar via GraphQL."""

    def __init__(self, graphql_client: GitHubGraphQLClient):
        self.graphql_client = graphql_client

    async def collect_calendar(
        self,
        username: str,
        from_dt: datetime | None = None,
        to_dt: datetime | None = None,
    ) -> ContributionCalendar:
        """Collect the contribution calendar for a user.

        Args:
            username: GitHub username
            from_dt: Start of the window (defaults to one year ago)
            to_dt: End of the window (defaults to now)

        Returns:
            ContributionCalendar with the weeks returned by the API
        """
        logger.debug("Fetching contribution calendar for %s", username)

        try:
            data = await self.graphql_client.get_contributions(username, from_dt, to_dt)
        except StreakCardError as e:
            logger.debug("Failed to fetch contributions: %s", e)
            raise

        try:
            calendar = ContributionCalendar.from_graphql(data)
        except (KeyError, TypeError, ValueError, ValidationError) as e:
            raise ParseError(f"Malformed contribution calendar for {username}: {e}") from e

        logger.debug(
            "Found %d weeks, %d contributions",
            len(calendar.weeks),
            calendar.total_contributions,
        )
        return calendar

    async def collect_days(
        self,
        username: str,
        from_dt: datetime | None = None,
        to_dt: datetime | None = None,
    ) -> list[ContributionDay]:
        """Collect the calendar flattened into days, oldest first."""
        calendar = await self.collect_calendar(username, from_dt, to_dt)
        return calendar.days
