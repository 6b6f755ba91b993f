"""Tests for FakeConfigStore."""

import pytest

from power_git.core.errors import ConfigNotFoundError
from power_git.gateway.config_store.fake import FakeConfigStore
from power_git.gateway.config_store.types import default_document


def test_load_without_document_raises_not_found() -> None:
    store = FakeConfigStore()

    with pytest.raises(ConfigNotFoundError):
        store.load()


def test_ensure_initialized_records_default_document_once() -> None:
    store = FakeConfigStore()

    store.ensure_initialized()
    store.ensure_initialized()

    assert store.replaced_documents == [default_document()]
    assert store.load() == default_document()


def test_ensure_initialized_does_not_write_existing_document() -> None:
    document = default_document().with_default("github", is_default=True)
    store = FakeConfigStore(document=document)

    store.ensure_initialized()

    assert store.replaced_documents == []
    assert store.current_document == document


def test_find_by_name_uses_document_lookup() -> None:
    store = FakeConfigStore(document=default_document())

    record = store.find_by_name(store.load(), "gitlab")

    assert record is not None
    assert record.name == "gitlab"
    assert store.find_by_name(store.load(), "gitea") is None
    assert store.load_count == 2
