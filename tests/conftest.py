"""Pytest configuration and fixtures."""

import json
from datetime import date, timedelta
from typing import Any, Callable

import httpx
import pytest

from streak_card.config import Config


@pytest.fixture(autouse=True)
def isolate_env(monkeypatch):
    """Keep the developer's environment and .env file out of the tests."""
    for name in (
        "STREAK_CARD_TOKEN",
        "GITHUB_TOKEN",
        "STREAK_CARD_USERNAME",
        "USERNAME",
        "GITHUB_GRAPHQL_URL",
        "STREAK_CARD_OUTPUT",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr("streak_card.config.load_dotenv", lambda **kwargs: False)
    yield


@pytest.fixture
def test_config(tmp_path):
    """Create a test configuration."""
    return Config(
        github_token="test_token",
        username="octocat",
        github_graphql_url="https://api.github.com/graphql",
        output_path=tmp_path / "streak.svg",
    )


def build_calendar_response(counts: list[int], start: date = date(2024, 1, 1)) -> dict[str, Any]:
    """Build a GraphQL response body with one day per count, split into weeks."""
    days = [
        {"date": (start + timedelta(days=i)).isoformat(), "contributionCount": count}
        for i, count in enumerate(counts)
    ]
    weeks = [{"contributionDays": days[i : i + 7]} for i in range(0, len(days), 7)]
    return {
        "data": {
            "user": {
                "contributionsCollection": {
                    "contributionCalendar": {"weeks": weeks},
                }
            }
        }
    }


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it receives."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]):
        self.requests: list[httpx.Request] = []

        def recording_handler(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(recording_handler)

    @property
    def call_count(self) -> int:
        return len(self.requests)

    def last_json(self) -> dict[str, Any]:
        return json.loads(self.requests[-1].content)


@pytest.fixture
def json_transport():
    """Factory for a transport that answers every request with a JSON body."""

    def factory(body: Any, status_code: int = 200) -> RecordingTransport:
        return RecordingTransport(lambda request: httpx.Response(status_code, json=body))

    return factory


@pytest.fixture
def calendar_response():
    """Factory for a contribution calendar response body."""
    return build_calendar_response


@pytest.fixture
def handler_transport():
    """Factory for a recording transport driven by a request handler."""
    return RecordingTransport
