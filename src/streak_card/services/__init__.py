"""Services for contribution data collection and streak calculation."""

from streak_card.services.contribution_collector import ContributionCollector
from streak_card.services.github_graphql_client import GitHubGraphQLClient
from streak_card.services.streak_calculator import compute_streak

__all__ = [
    "GitHubGraphQLClient",
    "ContributionCollector",
    "compute_streak",
]
