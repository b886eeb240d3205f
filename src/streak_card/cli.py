"""CLI interface for Streak Card."""

import asyncio
import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from streak_card import __version__
from streak_card.config import Config
from streak_card.exceptions import ConfigurationError, StreakCardError
from streak_card.output.console import Console as OutputConsole
from streak_card.sdk import StreakCard, StreakReport

app = typer.Typer(
    name="streak-card",
    help="Render GitHub contribution streaks as an SVG card",
    add_completion=False,
)

console = Console()


def version_callback(value: bool):
    """Print version and exit."""
    if value:
        console.print(f"streak-card version {__version__}")
        raise typer.Exit()


def configure_logging(verbose: bool) -> None:
    """Send log records to stderr through rich."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@app.callback()
def main(
    version: bool = typer.Option(
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
):
    """Streak Card - Render GitHub contribution streaks as an SVG card."""
    pass


@app.command()
def generate(
    username: Optional[str] = typer.Option(
        None,
        "--user",
        "-u",
        help="GitHub username (defaults to STREAK_CARD_USERNAME or USERNAME)",
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Output SVG file path (defaults to streak.svg)",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Verbose output",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Minimal output",
    ),
):
    """Fetch the last year of contributions and write the streak card.

    Requires a GitHub token in STREAK_CARD_TOKEN or GITHUB_TOKEN.

    Examples:
        streak-card generate
        streak-card generate --user octocat --output assets/streak.svg
    """
    configure_logging(verbose)
    output_console = OutputConsole(verbose=verbose, quiet=quiet)
    config = Config.from_env()

    try:
        config.require_token()
    except ConfigurationError as e:
        output_console.print_error(str(e))
        raise typer.Exit(1)

    username = username or config.username
    output_console.print_header(username)
    output_console.print_verbose(f"[dim]Generating streak card for {username}[/dim]")

    try:
        report = asyncio.run(
            _run_generate(config=config, username=username, output_path=output)
        )
    except KeyboardInterrupt:
        output_console.print_warning("Generation cancelled")
        raise typer.Exit(1)
    except (StreakCardError, OSError) as e:
        output_console.print_error(str(e))
        if verbose:
            output_console.error_console.print_exception()
        raise typer.Exit(1)

    output_console.print_streak_table(report)
    output_console.print_summary(report)


async def _run_generate(
    config: Config,
    username: str,
    output_path: Optional[Path],
) -> StreakReport:
    """Run the pipeline asynchronously."""
    async with StreakCard(config) as card:
        return await card.generate(username, output_path=output_path)


@app.command()
def check_token():
    """Check GitHub token configuration."""
    config = Config.from_env()

    if config.is_authenticated:
        console.print("[green]GitHub token is configured[/green]")
        console.print(f"User: {config.username}")
        console.print(f"GraphQL API: {config.github_graphql_url}")
    else:
        console.print("[yellow]No GitHub token configured[/yellow]")
        console.print()
        console.print("To configure a token:")
        console.print("  export GITHUB_TOKEN=your_token_here")
        console.print()
        console.print("Create a token at: https://github.com/settings/tokens")
        console.print("No special scopes needed for public contribution data.")
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
