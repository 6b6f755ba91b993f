"""GitHub provider client (REST API v3)."""

import logging

from power_git.core.platform import Platform
from power_git.gateway.http.abc import HttpClient, HttpError
from power_git.gateway.provider_client.abc import (
    CreatedRepository,
    ProviderClient,
    remote_rejected,
    validated_base_url,
    validated_token,
)

logger = logging.getLogger(__name__)

GITHUB_API_URL = "https://api.github.com"
GITHUB_API_VERSION = "2022-11-28"


class GitHubClient(ProviderClient):
    """Creates repositories owned by the authenticated GitHub user.

    For GitHub Enterprise, configure the url as the instance's API root
    (e.g. https://github.example.com/api/v3).
    """

    def __init__(self, *, base_url: str, token: str, http: HttpClient) -> None:
        self._base_url = validated_base_url(Platform.GITHUB, base_url, default=GITHUB_API_URL)
        self._token = validated_token(Platform.GITHUB, token)
        self._http = http

    @property
    def platform(self) -> Platform:
        return Platform.GITHUB

    def create_repository(self, name: str) -> CreatedRepository:
        logger.debug("Creating GitHub repository %s via %s", name, self._base_url)
        try:
            data = self._http.post_json(
                f"{self._base_url}/user/repos",
                headers={
                    "Authorization": f"Bearer {self._token}",
                    "Accept": "application/vnd.github+json",
                    "X-GitHub-Api-Version": GITHUB_API_VERSION,
                },
                payload={"name": name, "private": True, "auto_init": False},
            )
        except HttpError as e:
            raise remote_rejected(self.platform, e) from e

        return CreatedRepository(
            platform=self.platform,
            name=name,
            web_url=str(data.get("html_url", "")),
            raw_data=data,
        )
