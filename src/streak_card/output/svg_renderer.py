"""SVG rendering for the streak card."""

from datetime import date
from pathlib import Path

from streak_card.models.contribution import StreakResult

WIDTH = 420
HEIGHT = 120
FONT_FAMILY = "Inter,Segoe UI,Arial"

# Palette (GitHub dark)
BACKGROUND = "#0d1117"
BORDER = "#30363d"
FOREGROUND = "#e6edf3"
CURRENT_COLOR = "#58a6ff"
LONGEST_COLOR = "#a5d6ff"
MUTED_COLOR = "#8b949e"

SVG_TEMPLATE = """<?xml version="1.0" encoding="UTF-8"?>
<svg width="{width}" height="{height}" viewBox="0 0 {width} {height}" xmlns="http://www.w3.org/2000/svg" role="img" aria-label="GitHub Streak">
  <rect x="0" y="0" rx="12" ry="12" width="{width}" height="{height}" fill="{background}" stroke="{border}"/>
  <g font-family="{font_family}" fill="{foreground}">
    <text x="20" y="36" font-size="20" font-weight="600">GitHub Streak</text>
    <text x="20" y="66" font-size="16" fill="{current_color}">Current: {current}</text>
    <text x="220" y="66" font-size="16" fill="{longest_color}">Longest: {longest}</text>
    <text x="20" y="94" font-size="12" fill="{muted_color}">Updated: {updated}</text>
  </g>
</svg>"""


def format_days(count: int) -> str:
    """Format a day count with the right suffix ("1 day", "3 days")."""
    return f"{count} day{'' if count == 1 else 's'}"


def render_svg(result: StreakResult, as_of: date) -> str:
    """Render the streak card.

    Args:
        result: Computed streaks
        as_of: Date shown in the "Updated" line

    Returns:
        SVG markup
    """
    return SVG_TEMPLATE.format(
        width=WIDTH,
        height=HEIGHT,
        background=BACKGROUND,
        border=BORDER,
        font_family=FONT_FAMILY,
        foreground=FOREGROUND,
        current_color=CURRENT_COLOR,
        longest_color=LONGEST_COLOR,
        muted_color=MUTED_COLOR,
        current=format_days(result.current),
        longest=format_days(result.longest),
        updated=as_of.isoformat(),
    )


def write_svg(svg: str, output_path: Path) -> Path:
    """Write SVG markup to a file, replacing any previous content.

    Args:
        svg: SVG markup
        output_path: Destination file

    Returns:
        Path to the written file
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(svg, encoding="utf-8")
    return output_path
