"""Tests for BitbucketClient."""

import pytest

from power_git.core.errors import ArgumentError, AuthConfigInvalidError, RemoteRejectedError
from power_git.gateway.http.abc import HttpError
from power_git.gateway.http.fake import FakeHttpClient
from power_git.gateway.provider_client.bitbucket import BitbucketClient, repository_slug


@pytest.mark.parametrize(
    ("name", "slug"),
    [
        ("demo", "demo"),
        ("My Repo", "my-repo"),
        ("  spaced  out ", "spaced-out"),
        ("keep.dots_and-dashes", "keep.dots_and-dashes"),
    ],
)
def test_repository_slug(name: str, slug: str) -> None:
    assert repository_slug(name) == slug


@pytest.mark.parametrize(
    "url",
    [
        "https://bitbucket.org/acme",
        "https://bitbucket.org/acme/",
        "https://api.bitbucket.org/2.0/workspaces/acme",
    ],
)
def test_workspace_is_taken_from_url(url: str) -> None:
    client = BitbucketClient(base_url=url, token="t", http=FakeHttpClient())

    assert client.workspace == "acme"


def test_create_repository_posts_to_workspace() -> None:
    url = "https://api.bitbucket.org/2.0/repositories/acme/my-repo"
    http = FakeHttpClient(
        responses={url: {"links": {"html": {"href": "https://bitbucket.org/acme/my-repo"}}}}
    )
    client = BitbucketClient(base_url="https://bitbucket.org/acme", token="bb-token", http=http)

    created = client.create_repository("My Repo")

    assert created.name == "My Repo"
    assert created.web_url == "https://bitbucket.org/acme/my-repo"
    [request] = http.requests
    assert request.url == url
    assert request.headers == {"Authorization": "Bearer bb-token"}
    assert request.payload == {"scm": "git", "is_private": True, "name": "My Repo"}


def test_missing_links_give_empty_web_url() -> None:
    client = BitbucketClient(
        base_url="https://bitbucket.org/acme", token="t", http=FakeHttpClient()
    )

    assert client.create_repository("demo").web_url == ""


def test_url_without_workspace_is_rejected() -> None:
    with pytest.raises(AuthConfigInvalidError, match="must name a workspace"):
        BitbucketClient(base_url="https://bitbucket.org", token="t", http=FakeHttpClient())


def test_empty_url_is_rejected() -> None:
    with pytest.raises(AuthConfigInvalidError, match="No url configured for bitbucket"):
        BitbucketClient(base_url="", token="t", http=FakeHttpClient())


def test_name_without_slug_characters_is_rejected() -> None:
    http = FakeHttpClient()
    client = BitbucketClient(base_url="https://bitbucket.org/acme", token="t", http=http)

    with pytest.raises(ArgumentError, match="Cannot derive a Bitbucket slug"):
        client.create_repository("!!!")
    assert http.requests == []


def test_rejection_is_not_retried() -> None:
    url = "https://api.bitbucket.org/2.0/repositories/acme/demo"
    http = FakeHttpClient(errors={url: HttpError(status_code=403, message="forbidden")})
    client = BitbucketClient(base_url="https://bitbucket.org/acme", token="t", http=http)

    with pytest.raises(RemoteRejectedError, match="forbidden"):
        client.create_repository("demo")
    assert len(http.requests) == 1


def test_check_repository_name_accepts_sluggable_name() -> None:
    client = BitbucketClient(
        base_url="https://bitbucket.org/acme", token="t", http=FakeHttpClient()
    )

    client.check_repository_name("My Repo")
