"""Streak calculation over a contribution calendar."""

from collections.abc import Sequence

from streak_card.models.contribution import ContributionDay, StreakResult


def compute_streak(days: Sequence[ContributionDay]) -> StreakResult:
    """Calculate the current and longest contribution streaks.

    ``days`` must be ordered oldest first. The current streak ends at the
    last entry of the sequence, which is not necessarily today's date.
    """
    longest = 0
    run = 0
    for day in days:
        run = run + 1 if day.count > 0 else 0
        longest = max(longest, run)

    current = 0
    for day in reversed(days):
        if day.count > 0:
            current += 1
        else:
            # Stop at first day without contributions
            break

    return StreakResult(current=current, longest=longest)
