"""Tests for ConfigDocument and ProviderRecord."""

from dataclasses import replace
from pathlib import Path

import pytest

from power_git.core.errors import ConfigCorruptError
from power_git.gateway.config_store.types import (
    ConfigDocument,
    ProviderRecord,
    default_document,
)

PATH = Path("/fake/config.json")


def test_default_document_has_three_unconfigured_providers() -> None:
    document = default_document()

    assert [record.name for record in document.records] == ["github", "gitlab", "bitbucket"]
    for record in document.records:
        assert record.url == ""
        assert record.token == ""
        assert record.is_default is False


def test_default_document_json_shape() -> None:
    data = default_document().to_json_data()

    assert data[0] == {"name": "github", "cfg": {"url": "", "token": "", "default": False}}
    assert len(data) == 3


def test_find_returns_none_for_unknown_name() -> None:
    assert default_document().find("gitea") is None


def test_with_record_replaces_only_matching_record() -> None:
    document = default_document()
    gitlab = document.find("gitlab")
    assert gitlab is not None

    updated = document.with_record(replace(gitlab, url="https://gitlab.example.com"))

    assert updated.find("gitlab") == replace(gitlab, url="https://gitlab.example.com")
    assert updated.find("github") == document.find("github")
    assert updated.find("bitbucket") == document.find("bitbucket")
    # Original snapshot untouched
    assert document.find("gitlab") == gitlab


def test_with_default_true_clears_other_defaults() -> None:
    document = default_document().with_default("github", is_default=True)

    updated = document.with_default("bitbucket", is_default=True)

    assert updated.default_record() == ProviderRecord(
        name="bitbucket", url="", token="", is_default=True
    )
    assert [record.is_default for record in updated.records] == [False, False, True]


def test_with_default_false_only_touches_named_record() -> None:
    document = default_document().with_default("github", is_default=True)

    updated = document.with_default("gitlab", is_default=False)

    assert updated.default_record() is not None
    assert updated.default_record().name == "github"


def test_from_json_data_parses_records() -> None:
    data = [
        {"name": "github", "cfg": {"url": "u", "token": "t", "default": True}},
        {"name": "gitlab", "cfg": {"url": "", "token": "", "default": False}},
    ]

    document = ConfigDocument.from_json_data(data, path=PATH)

    assert document.records == (
        ProviderRecord(name="github", url="u", token="t", is_default=True),
        ProviderRecord(name="gitlab", url="", token="", is_default=False),
    )


def test_from_json_data_tolerates_missing_provider() -> None:
    data = [{"name": "github", "cfg": {"url": "", "token": "", "default": False}}]

    document = ConfigDocument.from_json_data(data, path=PATH)

    assert document.find("gitlab") is None


@pytest.mark.parametrize(
    "data",
    [
        {"name": "github"},
        ["github"],
        [{"name": "github"}],
        [{"name": 1, "cfg": {"url": "", "token": "", "default": False}}],
        [{"name": "github", "cfg": {"url": None, "token": "", "default": False}}],
        [{"name": "github", "cfg": {"url": "", "token": "", "default": "yes"}}],
        [{"name": "github", "cfg": {"url": "", "token": ""}}],
    ],
)
def test_from_json_data_rejects_wrong_shape(data: object) -> None:
    with pytest.raises(ConfigCorruptError) as exc_info:
        ConfigDocument.from_json_data(data, path=PATH)

    assert str(PATH) in str(exc_info.value)


def test_from_json_data_rejects_duplicate_names() -> None:
    entry = {"name": "github", "cfg": {"url": "", "token": "", "default": False}}

    with pytest.raises(ConfigCorruptError, match="more than once"):
        ConfigDocument.from_json_data([entry, entry], path=PATH)
