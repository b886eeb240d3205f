"""Configuration management for Streak Card."""

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from streak_card.exceptions import ConfigurationError

DEFAULT_USERNAME = "farhanchowdhury738"
DEFAULT_GRAPHQL_URL = "https://api.github.com/graphql"
DEFAULT_OUTPUT_PATH = Path("streak.svg")


@dataclass
class Config:
    """Application configuration."""

    github_token: str | None
    username: str = DEFAULT_USERNAME
    github_graphql_url: str = DEFAULT_GRAPHQL_URL
    output_path: Path = DEFAULT_OUTPUT_PATH
    user_agent: str = "streak-card"

    # None disables the client-side timeout
    request_timeout: float | None = None

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables."""
        # override=False ensures environment variables take precedence over .env
        load_dotenv(override=False)

        # Support both STREAK_CARD_TOKEN (preferred) and GITHUB_TOKEN (fallback)
        token = os.getenv("STREAK_CARD_TOKEN") or os.getenv("GITHUB_TOKEN")
        username = os.getenv("STREAK_CARD_USERNAME") or os.getenv(
            "USERNAME", DEFAULT_USERNAME
        )

        return cls(
            github_token=token,
            username=username,
            github_graphql_url=os.getenv("GITHUB_GRAPHQL_URL", DEFAULT_GRAPHQL_URL),
            output_path=Path(os.getenv("STREAK_CARD_OUTPUT", str(DEFAULT_OUTPUT_PATH))),
        )

    @property
    def is_authenticated(self) -> bool:
        """Check if a GitHub token is configured."""
        return bool(self.github_token)

    def require_token(self) -> str:
        """Return the token, or raise ConfigurationError if none is configured."""
        if not self.github_token:
            raise ConfigurationError(
                "GITHUB_TOKEN is missing. "
                "Set STREAK_CARD_TOKEN or GITHUB_TOKEN environment variable."
            )
        return self.github_token
