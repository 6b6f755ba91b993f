"""Bitbucket Cloud provider client (API 2.0)."""

import logging
import re
from urllib.parse import urlsplit

from power_git.core.errors import ArgumentError, AuthConfigInvalidError
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

BITBUCKET_API_HOST = "api.bitbucket.org"
_BITBUCKET_HOSTS = ("bitbucket.org", "www.bitbucket.org", BITBUCKET_API_HOST)


def repository_slug(name: str) -> str:
    """Turn a repository name into the slug Bitbucket addresses it by."""
    slug = re.sub(r"[^a-z0-9._-]+", "-", name.strip().lower())
    return slug.strip("-")


class BitbucketClient(ProviderClient):
    """Creates private git repositories inside a Bitbucket workspace.

    Bitbucket scopes every repository to a workspace, so the configured url
    must end with one, e.g. https://bitbucket.org/my-workspace.
    """

    def __init__(self, *, base_url: str, token: str, http: HttpClient) -> None:
        url = validated_base_url(Platform.BITBUCKET, base_url, default=None)
        self._api_root, self._workspace = _split_workspace_url(url)
        self._token = validated_token(Platform.BITBUCKET, token)
        self._http = http

    @property
    def platform(self) -> Platform:
        return Platform.BITBUCKET

    @property
    def workspace(self) -> str:
        return self._workspace

    def check_repository_name(self, name: str) -> None:
        if not repository_slug(name):
            raise ArgumentError(f"Cannot derive a Bitbucket slug from '{name}'")

    def create_repository(self, name: str) -> CreatedRepository:
        self.check_repository_name(name)
        slug = repository_slug(name)

        logger.debug("Creating Bitbucket repository %s/%s", self._workspace, slug)
        try:
            data = self._http.post_json(
                f"{self._api_root}/repositories/{self._workspace}/{slug}",
                headers={"Authorization": f"Bearer {self._token}"},
                payload={"scm": "git", "is_private": True, "name": name},
            )
        except HttpError as e:
            raise remote_rejected(self.platform, e) from e

        links = data.get("links", {})
        html = links.get("html", {}) if isinstance(links, dict) else {}
        web_url = html.get("href", "") if isinstance(html, dict) else ""
        return CreatedRepository(
            platform=self.platform,
            name=name,
            web_url=str(web_url),
            raw_data=data,
        )


def _split_workspace_url(url: str) -> tuple[str, str]:
    """Split a workspace URL into (API root, workspace).

    bitbucket.org and api.bitbucket.org both map to the public 2.0 API;
    other hosts are assumed to serve the same API under /2.0.
    """
    parts = urlsplit(url)
    segments = [segment for segment in parts.path.split("/") if segment and segment != "2.0"]
    if not segments:
        raise AuthConfigInvalidError(
            f"Bitbucket url '{url}' must name a workspace, e.g. https://bitbucket.org/<workspace>"
        )
    host = BITBUCKET_API_HOST if parts.netloc.lower() in _BITBUCKET_HOSTS else parts.netloc
    return f"{parts.scheme}://{host}/2.0", segments[-1]
