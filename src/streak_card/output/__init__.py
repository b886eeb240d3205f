"""Output handlers for Streak Card."""

from streak_card.output.svg_renderer import format_days, render_svg, write_svg

__all__ = [
    "format_days",
    "render_svg",
    "write_svg",
]
