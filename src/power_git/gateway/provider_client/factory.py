"""Single dispatch point from a Platform to its ProviderClient."""

from collections.abc import Callable

from power_git.core.errors import UnsupportedPlatformError
from power_git.core.platform import Platform
from power_git.gateway.config_store.types import ProviderRecord
from power_git.gateway.http.abc import HttpClient
from power_git.gateway.provider_client.abc import ProviderClient
from power_git.gateway.provider_client.bitbucket import BitbucketClient
from power_git.gateway.provider_client.github import GitHubClient
from power_git.gateway.provider_client.gitlab import GitLabClient

_CLIENT_TYPES: dict[Platform, Callable[..., ProviderClient]] = {
    Platform.GITHUB: GitHubClient,
    Platform.GITLAB: GitLabClient,
    Platform.BITBUCKET: BitbucketClient,
}


def create_provider_client(
    platform: Platform,
    record: ProviderRecord,
    http: HttpClient,
) -> ProviderClient:
    """Build the client for `platform` from its stored credentials.

    Args:
        platform: Resolved platform
        record: Stored url/token for that platform
        http: HTTP gateway the client sends requests through

    Raises:
        UnsupportedPlatformError: If platform is Platform.UNSUPPORTED
        AuthConfigInvalidError: If the url/token pair is unusable
    """
    client_type = _CLIENT_TYPES.get(platform)
    if client_type is None:
        raise UnsupportedPlatformError(value=platform.value)
    return client_type(base_url=record.url, token=record.token, http=http)
