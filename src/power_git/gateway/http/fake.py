"""Fake HttpClient implementation for testing."""

from dataclasses import dataclass
from typing import Any

from power_git.gateway.http.abc import HttpClient, HttpError


@dataclass(frozen=True)
class HttpRequestRecord:
    """Record of a post_json call."""

    url: str
    headers: dict[str, str]
    payload: dict[str, Any]


class FakeHttpClient(HttpClient):
    """In-memory fake implementation for testing.

    Constructor Injection: canned responses and errors keyed by URL.
    Mutation Tracking: every request is recorded for test assertions.
    """

    def __init__(
        self,
        *,
        responses: dict[str, dict[str, Any]] | None = None,
        errors: dict[str, HttpError] | None = None,
    ) -> None:
        """Create FakeHttpClient with pre-configured responses.

        Args:
            responses: Mapping of url -> decoded response body
            errors: Mapping of url -> error to raise instead of responding.
                URLs in neither mapping answer with an empty object.
        """
        self._responses = responses if responses is not None else {}
        self._errors = errors if errors is not None else {}
        self._requests: list[HttpRequestRecord] = []

    @property
    def requests(self) -> list[HttpRequestRecord]:
        """Read-only access to issued requests for test assertions."""
        return list(self._requests)

    def post_json(
        self,
        url: str,
        *,
        headers: dict[str, str],
        payload: dict[str, Any],
    ) -> dict[str, Any]:
        self._requests.append(HttpRequestRecord(url=url, headers=dict(headers), payload=payload))
        if url in self._errors:
            raise self._errors[url]
        return self._responses.get(url, {})
