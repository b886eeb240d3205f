"""GitHub GraphQL API client for contribution data."""

import logging
from datetime import datetime, timezone
from typing import Any, Optional

import httpx

from streak_card.config import Config
from streak_card.exceptions import ParseError, RemoteError, TransportError

logger = logging.getLogger(__name__)

# GraphQL query for the contribution calendar
CONTRIBUTIONS_QUERY = """
query($login: String!, $from: DateTime!, $to: DateTime!) {
  user(login: $login) {
    contributionsCollection(from: $from, to: $to) {
      contributionCalendar {
        weeks {
          contributionDays {
            date
            contributionCount
          }
        }
      }
    }
  }
}
"""


def one_year_window(now: datetime) -> tuple[datetime, datetime]:
    """Return the ``(from, to)`` window covering one calendar year up to ``now``.

    February 29th has no counterpart in the previous year and rolls forward
    to March 1st.
    """
    try:
        start = now.replace(year=now.year - 1)
    except ValueError:
        start = now.replace(year=now.year - 1, month=3, day=1)
    return start, now


def format_timestamp(value: datetime) -> str:
    """Format a datetime as an ISO-8601 UTC instant, e.g. 2024-01-15T10:00:00.000Z."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)
    return value.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class GitHubGraphQLClient:
    """Async client for GitHub GraphQL API."""

    def __init__(
        self,
        config: Config,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.config = config
        self.transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    def _get_headers(self) -> dict[str, str]:
        """Get headers for API requests."""
        token = self.config.require_token()

        return {
            "Authorization": f"bearer {token}",
            "Content-Type": "application/json",
            "User-Agent": self.config.user_agent,
        }

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                headers=self._get_headers(),
                timeout=self.config.request_timeout,
                transport=self.transport,
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()

    async def __aenter__(self) -> "GitHubGraphQLClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def execute(
        self,
        query: str,
        variables: Optional[dict[str, Any]] = None,
    ) -> dict[str, Any]:
        """Execute a GraphQL query.

        Exactly one request is sent; failures are not retried.

        Args:
            query: GraphQL query string
            variables: Query variables

        Returns:
            Query result data

        Raises:
            ConfigurationError: If no token is configured
            TransportError: If the request could not be completed
            ParseError: If the response body is not a JSON object
            RemoteError: If the API reports errors
        """
        client = await self._get_client()
        payload: dict[str, Any] = {"query": query}
        if variables:
            payload["variables"] = variables

        try:
            response = await client.post(self.config.github_graphql_url, json=payload)
        except httpx.TransportError as e:
            raise TransportError(f"GraphQL request failed: {e}") from e

        try:
            result = response.json()
        except ValueError as e:
            raise ParseError(
                f"GraphQL response is not valid JSON (status {response.status_code})"
            ) from e

        if not isinstance(result, dict):
            raise ParseError(
                f"GraphQL response must be a JSON object, got {type(result).__name__}"
            )

        # Check for GraphQL errors
        if result.get("errors"):
            errors = result["errors"]
            error_messages = [
                e.get("message", "Unknown error") if isinstance(e, dict) else str(e)
                for e in errors
            ]
            raise RemoteError(
                f"GraphQL errors: {'; '.join(error_messages)}",
                errors=errors,
                status_code=response.status_code,
            )

        if not response.is_success:
            raise RemoteError(
                f"GraphQL request failed with status {response.status_code}: "
                f"{result.get('message', response.text)}",
                errors=[result],
                status_code=response.status_code,
            )

        data = result.get("data")
        if not isinstance(data, dict):
            raise ParseError("GraphQL response has no data object")

        return data

    async def get_contributions(
        self,
        username: str,
        from_dt: Optional[datetime] = None,
        to_dt: Optional[datetime] = None,
    ) -> dict[str, Any]:
        """Get user's contribution calendar.

        Args:
            username: GitHub username
            from_dt: Start of the window (defaults to one year before ``to_dt``)
            to_dt: End of the window (defaults to now, UTC)

        Returns:
            The ``contributionCalendar`` object of the response
        """
        if to_dt is None:
            to_dt = datetime.now(timezone.utc)
        if from_dt is None:
            from_dt, _ = one_year_window(to_dt)

        variables = {
            "login": username,
            "from": format_timestamp(from_dt),
            "to": format_timestamp(to_dt),
        }
        logger.debug(
            "Requesting contributions for %s from %s to %s",
            username,
            variables["from"],
            variables["to"],
        )

        result = await self.execute(CONTRIBUTIONS_QUERY, variables)

        try:
            return result["user"]["contributionsCollection"]["contributionCalendar"]
        except (KeyError, TypeError) as e:
            raise ParseError(
                f"Unexpected GraphQL response shape for user {username}"
            ) from e
