"""Abstract interface for outbound JSON-over-HTTP calls."""

from abc import ABC, abstractmethod
from typing import Any


class HttpError(Exception):
    """Error response (or no response at all) from an HTTP endpoint."""

    def __init__(self, *, status_code: int | None, message: str) -> None:
        if status_code is None:
            super().__init__(f"HTTP request failed: {message}")
        else:
            super().__init__(f"HTTP error ({status_code}): {message}")
        self.status_code = status_code
        self.message = message


class HttpClient(ABC):
    """Abstract interface for the HTTP calls provider clients make.

    All implementations (real, fake) must implement this interface.
    """

    @abstractmethod
    def post_json(
        self,
        url: str,
        *,
        headers: dict[str, str],
        payload: dict[str, Any],
    ) -> dict[str, Any]:
        """POST `payload` as JSON and decode the JSON response body.

        Args:
            url: Absolute endpoint URL
            headers: Extra request headers (auth, API version)
            payload: Request body

        Returns:
            Decoded response object (empty dict for an empty body)

        Raises:
            HttpError: On a non-2xx response or when the host cannot be reached.
                `message` holds the response body verbatim when there is one.
        """
        ...
