"""Real HttpClient implementation using urllib."""

import json
import logging
import urllib.error
import urllib.request
from email.message import Message
from typing import Any

from power_git.gateway.http.abc import HttpClient, HttpError

logger = logging.getLogger(__name__)

USER_AGENT = "power-git"


def _decode_body(raw: bytes, headers: Message | None) -> str:
    """Decode a response body, replacing bytes the charset cannot represent."""
    charset = headers.get_content_charset() if headers is not None else None
    try:
        return raw.decode(charset or "utf-8", errors="replace")
    except LookupError:
        return raw.decode("utf-8", errors="replace")


class RealHttpClient(HttpClient):
    """Production implementation making blocking requests with urllib.

    There is no timeout: a hung server hangs the command.
    """

    def post_json(
        self,
        url: str,
        *,
        headers: dict[str, str],
        payload: dict[str, Any],
    ) -> dict[str, Any]:
        request = urllib.request.Request(
            url,
            data=json.dumps(payload).encode("utf-8"),
            headers={
                "Content-Type": "application/json",
                "Accept": "application/json",
                "User-Agent": USER_AGENT,
                **headers,
            },
            method="POST",
        )
        logger.debug("POST %s", url)

        try:
            with urllib.request.urlopen(request) as response:
                body = _decode_body(response.read(), response.headers)
        except urllib.error.HTTPError as e:
            body = _decode_body(e.read(), e.headers) if e.fp else ""
            message = body if body else str(e.reason)
            raise HttpError(status_code=e.code, message=message) from e
        except urllib.error.URLError as e:
            raise HttpError(status_code=None, message=str(e.reason)) from e

        if not body.strip():
            return {}
        try:
            data = json.loads(body)
        except json.JSONDecodeError as e:
            raise HttpError(status_code=None, message=f"response is not JSON: {body}") from e
        if not isinstance(data, dict):
            return {"data": data}
        return data
