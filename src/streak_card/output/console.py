"""Rich console output for the CLI."""

from rich.console import Console as RichConsole
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from streak_card.output.svg_renderer import format_days
from streak_card.sdk import StreakReport


class Console:
    """Wrapper for rich console output.

    Regular output goes to stdout; errors and warnings go to stderr.
    """

    def __init__(self, verbose: bool = False, quiet: bool = False):
        self.console = RichConsole()
        self.error_console = RichConsole(stderr=True)
        self.verbose = verbose
        self.quiet = quiet

    def print(self, *args, **kwargs):
        """Print to console (respects quiet mode)."""
        if not self.quiet:
            self.console.print(*args, **kwargs)

    def print_verbose(self, *args, **kwargs):
        """Print only in verbose mode."""
        if self.verbose and not self.quiet:
            self.console.print(*args, **kwargs)

    def print_error(self, message: str):
        """Print error message."""
        self.error_console.print(f"[red]Error:[/red] {escape(message)}", highlight=False)

    def print_warning(self, message: str):
        """Print warning message."""
        self.error_console.print(f"[yellow]Warning:[/yellow] {escape(message)}", highlight=False)

    def print_header(self, username: str):
        """Print run header."""
        self.print(
            Panel(
                f"[bold blue]GitHub Streak Card[/bold blue]\n[dim]User: {username}[/dim]",
                expand=False,
            )
        )

    def print_streak_table(self, report: StreakReport):
        """Print the computed streaks as a table (verbose mode)."""
        if not self.verbose or self.quiet:
            return

        table = Table(title="Streaks", show_header=False, expand=False)
        table.add_column("Metric", style="dim")
        table.add_column("Value")

        table.add_row("Current Streak", format_days(report.result.current))
        table.add_row("Longest Streak", format_days(report.result.longest))
        table.add_row("As Of", report.as_of.isoformat())

        self.console.print(table)

    def print_summary(self, report: StreakReport):
        """Print the one-line run summary."""
        if not self.quiet:
            self.console.print(report.summary, highlight=False, markup=False)
