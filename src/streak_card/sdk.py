"""Streak Card SDK - fetch, compute and render a contribution streak card."""

import logging
from dataclasses import dataclass
from datetime import date, datetime, timezone
from pathlib import Path

import httpx

from streak_card.config import Config
from streak_card.exceptions import StreakCardError
from streak_card.models.contribution import ContributionDay, StreakResult
from streak_card.output.svg_renderer import render_svg, write_svg
from streak_card.services.contribution_collector import ContributionCollector
from streak_card.services.github_graphql_client import (
    GitHubGraphQLClient,
    one_year_window,
)
from streak_card.services.streak_calculator import compute_streak

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StreakReport:
    """Outcome of a successful run."""

    username: str
    result: StreakResult
    output_path: Path
    as_of: date

    @property
    def summary(self) -> str:
        """One-line summary, e.g. ``streak.svg -> current=3, longest=10``."""
        return (
            f"{self.output_path.name} -> "
            f"current={self.result.current}, longest={self.result.longest}"
        )


class StreakCard:
    """Builds a streak card from a user's GitHub contribution calendar.

    Example usage:
        ```python
        from streak_card import Config, StreakCard

        async with StreakCard(Config(github_token="ghp_xxx")) as card:
            report = await card.generate("octocat")
            print(report.summary)
        ```

    Args:
        config: Configuration; must carry a GitHub token.
        transport: Optional httpx transport, used in place of the network.

    Raises:
        ConfigurationError: On entering the context when no token is set.
    """

    def __init__(
        self,
        config: Config,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._config = config
        self._transport = transport
        self._graphql_client: GitHubGraphQLClient | None = None
        self._initialized = False

    async def __aenter__(self) -> "StreakCard":
        """Async context manager entry."""
        await self._initialize()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit."""
        await self.close()

    async def _initialize(self) -> None:
        """Initialize the GraphQL client."""
        if self._initialized:
            return

        # Fail before any request is attempted
        self._config.require_token()

        self._graphql_client = GitHubGraphQLClient(
            config=self._config,
            transport=self._transport,
        )
        self._initialized = True
        logger.debug("StreakCard initialized for %s", self._config.github_graphql_url)

    async def close(self) -> None:
        """Close the HTTP connection."""
        if self._graphql_client:
            await self._graphql_client.close()
        self._initialized = False
        logger.debug("StreakCard closed")

    def _ensure_initialized(self) -> None:
        """Ensure the client is initialized."""
        if not self._initialized:
            raise StreakCardError(
                "Client not initialized. Use 'async with StreakCard(...) as card:'"
            )

    async def fetch_days(
        self,
        username: str | None = None,
        now: datetime | None = None,
    ) -> list[ContributionDay]:
        """Fetch one year of contribution days ending at ``now``.

        Args:
            username: GitHub username (defaults to the configured one)
            now: End of the window (defaults to the current UTC time)

        Returns:
            Contribution days, oldest first
        """
        self._ensure_initialized()
        username = username or self._config.username
        if now is None:
            now = datetime.now(timezone.utc)

        from_dt, to_dt = one_year_window(now)
        logger.info("Fetching contributions for %s", username)

        collector = ContributionCollector(self._graphql_client)
        return await collector.collect_days(username, from_dt, to_dt)

    async def generate(
        self,
        username: str | None = None,
        output_path: Path | None = None,
        now: datetime | None = None,
    ) -> StreakReport:
        """Fetch contributions, compute streaks and write the SVG card.

        The file is written only after the fetch succeeds; on any error
        nothing is written.

        Args:
            username: GitHub username (defaults to the configured one)
            output_path: Destination file (defaults to the configured one)
            now: Reference time for the window and the "Updated" date

        Returns:
            StreakReport describing the written card
        """
        username = username or self._config.username
        output_path = output_path or self._config.output_path
        if now is None:
            now = datetime.now(timezone.utc)

        days = await self.fetch_days(username, now=now)
        result = compute_streak(days)
        logger.debug("Computed streaks over %d days: %s", len(days), result)

        as_of = now.astimezone(timezone.utc).date() if now.tzinfo else now.date()
        written = write_svg(render_svg(result, as_of), output_path)

        report = StreakReport(
            username=username,
            result=result,
            output_path=written,
            as_of=as_of,
        )
        logger.info(report.summary)
        return report
