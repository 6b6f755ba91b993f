"""GitLab provider client (API v4)."""

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

GITLAB_URL = "https://gitlab.com"


class GitLabClient(ProviderClient):
    """Creates private projects in the token owner's namespace.

    The url is the instance URL (https://gitlab.com or a self-managed host);
    the /api/v4 prefix is added here.
    """

    def __init__(self, *, base_url: str, token: str, http: HttpClient) -> None:
        self._base_url = validated_base_url(Platform.GITLAB, base_url, default=GITLAB_URL)
        self._token = validated_token(Platform.GITLAB, token)
        self._http = http

    @property
    def platform(self) -> Platform:
        return Platform.GITLAB

    def create_repository(self, name: str) -> CreatedRepository:
        logger.debug("Creating GitLab project %s on %s", name, self._base_url)
        try:
            data = self._http.post_json(
                f"{self._base_url}/api/v4/projects",
                headers={"PRIVATE-TOKEN": self._token},
                payload={"name": name, "visibility": "private", "default_branch": "main"},
            )
        except HttpError as e:
            raise remote_rejected(self.platform, e) from e

        return CreatedRepository(
            platform=self.platform,
            name=name,
            web_url=str(data.get("web_url", "")),
            raw_data=data,
        )
