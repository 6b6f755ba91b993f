"""Tests for RealConfigStore against a temporary directory."""

import json
import os
from pathlib import Path

import pytest

from power_git.core.errors import ConfigCorruptError, ConfigIOError, ConfigNotFoundError
from power_git.core.paths import resolve_config_paths
from power_git.gateway.config_store.real import RealConfigStore
from power_git.gateway.config_store.types import (
    ConfigDocument,
    ProviderRecord,
    default_document,
)


def _store(tmp_path: Path) -> RealConfigStore:
    return RealConfigStore(resolve_config_paths(tmp_path / "nested" / "power_git"))


def test_load_raises_not_found_before_initialization(tmp_path: Path) -> None:
    store = _store(tmp_path)

    with pytest.raises(ConfigNotFoundError):
        store.load()
    assert not store.exists()


def test_ensure_initialized_creates_directory_and_default_document(tmp_path: Path) -> None:
    store = _store(tmp_path)

    path = store.ensure_initialized()

    assert path == store.config_path()
    assert path.exists()
    assert store.load() == default_document()
    data = json.loads(path.read_text(encoding="utf-8"))
    assert data == [
        {"name": "github", "cfg": {"url": "", "token": "", "default": False}},
        {"name": "gitlab", "cfg": {"url": "", "token": "", "default": False}},
        {"name": "bitbucket", "cfg": {"url": "", "token": "", "default": False}},
    ]


def test_ensure_initialized_is_idempotent(tmp_path: Path) -> None:
    store = _store(tmp_path)

    store.ensure_initialized()
    first = store.config_path().read_bytes()
    store.ensure_initialized()

    assert store.config_path().read_bytes() == first


def test_ensure_initialized_keeps_existing_document(tmp_path: Path) -> None:
    store = _store(tmp_path)
    store.ensure_initialized()
    configured = default_document().with_default("gitlab", is_default=True)
    store.replace_all(configured)

    store.ensure_initialized()

    assert store.load() == configured


@pytest.mark.parametrize(
    "record",
    [
        ProviderRecord(name="github", url="", token="", is_default=False),
        ProviderRecord(name="github", url="https://api.github.com", token="", is_default=True),
        ProviderRecord(name="github", url="", token="ghp_abc", is_default=False),
        ProviderRecord(name="github", url="https://x", token="ghp_abc", is_default=True),
    ],
)
def test_replace_all_then_load_round_trips(tmp_path: Path, record: ProviderRecord) -> None:
    store = _store(tmp_path)
    store.ensure_initialized()
    document = default_document().with_record(record)

    store.replace_all(document)

    assert store.load() == document


def test_replace_all_leaves_no_temporary_files(tmp_path: Path) -> None:
    store = _store(tmp_path)
    store.ensure_initialized()

    store.replace_all(default_document().with_default("github", is_default=True))

    assert os.listdir(store.config_path().parent) == ["config.json"]


def test_load_rejects_invalid_json(tmp_path: Path) -> None:
    store = _store(tmp_path)
    store.ensure_initialized()
    store.config_path().write_text("[{not json", encoding="utf-8")

    with pytest.raises(ConfigCorruptError, match="invalid JSON"):
        store.load()


def test_load_rejects_non_utf8_content(tmp_path: Path) -> None:
    store = _store(tmp_path)
    store.ensure_initialized()
    store.config_path().write_bytes(b"\xff\xfe[]")

    with pytest.raises(ConfigCorruptError, match="not valid UTF-8"):
        store.load()


def test_load_rejects_wrong_shape(tmp_path: Path) -> None:
    store = _store(tmp_path)
    store.ensure_initialized()
    store.config_path().write_text('{"github": {}}', encoding="utf-8")

    with pytest.raises(ConfigCorruptError):
        store.load()


def test_replace_all_into_missing_directory_reports_path(tmp_path: Path) -> None:
    store = _store(tmp_path)

    with pytest.raises(ConfigIOError) as exc_info:
        store.replace_all(ConfigDocument(records=()))

    assert exc_info.value.path == store.config_path()
    assert str(store.config_path()) in str(exc_info.value)


def test_ensure_initialized_reports_unwritable_directory(tmp_path: Path) -> None:
    # A regular file where the config directory should be
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")
    store = RealConfigStore(resolve_config_paths(blocker / "power_git"))

    with pytest.raises(ConfigIOError) as exc_info:
        store.ensure_initialized()

    assert str(blocker / "power_git") in str(exc_info.value)
