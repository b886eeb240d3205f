"""Streak Card - Render GitHub contribution streaks as an SVG card.

Fetches one year of a user's contribution calendar from the GitHub GraphQL
API, computes the current and longest streaks, and writes them to a small
SVG image.

Example usage:
    ```python
    from streak_card import Config, StreakCard

    async with StreakCard(Config.from_env()) as card:
        report = await card.generate()
        print(report.summary)
    ```
"""

from streak_card.config import Config
from streak_card.exceptions import (
    ConfigurationError,
    ParseError,
    RemoteError,
    StreakCardError,
    TransportError,
)
from streak_card.models import (
    ContributionCalendar,
    ContributionDay,
    ContributionWeek,
    StreakResult,
)
from streak_card.output import render_svg
from streak_card.sdk import StreakCard, StreakReport
from streak_card.services import compute_streak

__version__ = "0.1.0"

__all__ = [
    # Main SDK class
    "StreakCard",
    "StreakReport",
    # Configuration
    "Config",
    # Exceptions
    "StreakCardError",
    "ConfigurationError",
    "TransportError",
    "ParseError",
    "RemoteError",
    # Models
    "ContributionDay",
    "ContributionWeek",
    "ContributionCalendar",
    "StreakResult",
    # Pipeline functions
    "compute_streak",
    "render_svg",
]
