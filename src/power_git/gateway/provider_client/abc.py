"""Abstract interface shared by the git hosting provider clients."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any
from urllib.parse import urlsplit

from power_git.core.errors import AuthConfigInvalidError, RemoteRejectedError
from power_git.core.platform import Platform
from power_git.gateway.http.abc import HttpError


@dataclass(frozen=True)
class CreatedRepository:
    """Confirmation that a provider created a repository.

    `raw_data` is the provider's response as returned by its API; its shape
    differs per provider and callers should not depend on it.
    """

    platform: Platform
    name: str
    web_url: str
    raw_data: dict[str, Any]


class ProviderClient(ABC):
    """A client able to create remote repositories on one provider.

    Command code holds a ProviderClient and calls create_repository(); every
    provider-specific request detail stays inside the implementation.
    """

    @property
    @abstractmethod
    def platform(self) -> Platform:
        """Provider this client talks to."""
        ...

    @abstractmethod
    def create_repository(self, name: str) -> CreatedRepository:
        """Create a private repository called `name`.

        Not retried: repository creation is not safe to repeat blindly.

        Raises:
            RemoteRejectedError: If the provider declines the request
        """
        ...

    def check_repository_name(self, name: str) -> None:
        """Reject a name this provider cannot create before anything else runs.

        Raises:
            ArgumentError: If the provider cannot address a repository by `name`
        """


def validated_base_url(platform: Platform, url: str, *, default: str | None) -> str:
    """Validate a configured base URL, falling back to `default` when empty.

    Returns:
        The URL without a trailing slash

    Raises:
        AuthConfigInvalidError: If the URL is empty with no default, or is not
            an absolute http(s) URL
    """
    candidate = url.strip() if url.strip() else default
    if candidate is None:
        raise AuthConfigInvalidError(
            f"No url configured for {platform.value}; "
            f"run 'power-git set url <url> --platform {platform.value}'"
        )
    parts = urlsplit(candidate)
    if parts.scheme not in ("http", "https") or not parts.netloc:
        raise AuthConfigInvalidError(f"Invalid url for {platform.value}: '{candidate}'")
    return candidate.rstrip("/")


def validated_token(platform: Platform, token: str) -> str:
    """Reject an empty token.

    Raises:
        AuthConfigInvalidError: If no token has been configured
    """
    if not token.strip():
        raise AuthConfigInvalidError(
            f"No token configured for {platform.value}; "
            f"run 'power-git set token <token> --platform {platform.value}'"
        )
    return token.strip()


def remote_rejected(platform: Platform, error: HttpError) -> RemoteRejectedError:
    """Translate an HttpError into the user-facing RemoteRejectedError."""
    return RemoteRejectedError(
        platform=platform.value, status_code=error.status_code, message=error.message
    )
