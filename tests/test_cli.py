"""Tests for the command line interface."""

from datetime import date
from pathlib import Path
from unittest.mock import AsyncMock, patch

from typer.testing import CliRunner

from streak_card import __version__
from streak_card.cli import app
from streak_card.exceptions import ParseError
from streak_card.models.contribution import StreakResult
from streak_card.sdk import StreakReport

runner = CliRunner()


def make_report(current: int = 3, longest: int = 10) -> StreakReport:
    return StreakReport(
        username="octocat",
        result=StreakResult(current=current, longest=longest),
        output_path=Path("streak.svg"),
        as_of=date(2024, 1, 5),
    )


class TestVersion:
    """Tests for --version."""

    def test_version(self):
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert __version__ in result.output


class TestGenerate:
    """Tests for the generate command."""

    def test_missing_token_exits_without_request(self):
        """Test a missing token exits non-zero before any network call."""
        with patch("streak_card.cli.StreakCard") as MockCard:
            result = runner.invoke(app, ["generate"])

        assert result.exit_code == 1
        assert "GITHUB_TOKEN is missing" in result.output
        MockCard.assert_not_called()

    def test_success_prints_summary(self, monkeypatch):
        """Test a successful run prints the one-line summary."""
        monkeypatch.setenv("GITHUB_TOKEN", "ghp_test")

        with patch(
            "streak_card.cli._run_generate",
            new=AsyncMock(return_value=make_report()),
        ) as mock_run:
            result = runner.invoke(app, ["generate", "--user", "octocat", "-o", "out.svg"])

        assert result.exit_code == 0
        assert "streak.svg -> current=3, longest=10" in result.output
        kwargs = mock_run.call_args.kwargs
        assert kwargs["username"] == "octocat"
        assert kwargs["output_path"] == Path("out.svg")
        assert kwargs["config"].github_token == "ghp_test"

    def test_default_username_from_env(self, monkeypatch):
        """Test the username falls back to the environment."""
        monkeypatch.setenv("GITHUB_TOKEN", "ghp_test")
        monkeypatch.setenv("USERNAME", "torvalds")

        with patch(
            "streak_card.cli._run_generate",
            new=AsyncMock(return_value=make_report()),
        ) as mock_run:
            result = runner.invoke(app, ["generate"])

        assert result.exit_code == 0
        assert mock_run.call_args.kwargs["username"] == "torvalds"
        assert mock_run.call_args.kwargs["output_path"] is None

    def test_quiet_suppresses_summary(self, monkeypatch):
        """Test --quiet prints nothing on success."""
        monkeypatch.setenv("GITHUB_TOKEN", "ghp_test")

        with patch(
            "streak_card.cli._run_generate",
            new=AsyncMock(return_value=make_report()),
        ):
            result = runner.invoke(app, ["generate", "--quiet"])

        assert result.exit_code == 0
        assert "current=" not in result.output
        assert "GitHub Streak Card" not in result.output

    def test_pipeline_error_exits_non_zero(self, monkeypatch):
        """Test a pipeline error is reported and exits non-zero."""
        monkeypatch.setenv("GITHUB_TOKEN", "ghp_test")

        with patch(
            "streak_card.cli._run_generate",
            new=AsyncMock(side_effect=ParseError("GraphQL response is not valid JSON")),
        ):
            result = runner.invoke(app, ["generate"])

        assert result.exit_code == 1
        assert "not valid JSON" in result.output

    def test_header_shows_user(self, monkeypatch):
        """Test the header panel names the user being rendered."""
        monkeypatch.setenv("GITHUB_TOKEN", "ghp_test")

        with patch(
            "streak_card.cli._run_generate",
            new=AsyncMock(return_value=make_report()),
        ):
            result = runner.invoke(app, ["generate", "--user", "octocat"])

        assert result.exit_code == 0
        assert "GitHub Streak Card" in result.output
        assert "User: octocat" in result.output

    def test_unwritable_output_exits_non_zero(self, monkeypatch):
        """Test a failure writing the card is reported as a one-line error."""
        monkeypatch.setenv("GITHUB_TOKEN", "ghp_test")

        with patch(
            "streak_card.cli._run_generate",
            new=AsyncMock(side_effect=IsADirectoryError(21, "Is a directory", "streak.svg")),
        ):
            result = runner.invoke(app, ["generate"])

        assert result.exit_code == 1
        assert "Error:" in result.output
        assert "Is a directory" in result.output
        assert "Traceback" not in result.output


class TestCheckToken:
    """Tests for the check-token command."""

    def test_configured(self, monkeypatch):
        monkeypatch.setenv("GITHUB_TOKEN", "ghp_test")

        result = runner.invoke(app, ["check-token"])

        assert result.exit_code == 0
        assert "GitHub token is configured" in result.output

    def test_missing(self):
        result = runner.invoke(app, ["check-token"])

        assert result.exit_code == 1
        assert "No GitHub token configured" in result.output
