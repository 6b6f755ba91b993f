"""Fake ConfigStore implementation for testing.

FakeConfigStore is an in-memory implementation that enables fast and
deterministic tests without touching the filesystem.
"""

from pathlib import Path

from power_git.core.errors import ConfigNotFoundError
from power_git.gateway.config_store.abc import ConfigStore
from power_git.gateway.config_store.types import ConfigDocument, default_document


class FakeConfigStore(ConfigStore):
    """In-memory fake implementation that tracks mutations.

    This class has NO public setup methods beyond constructor.
    All state is provided via constructor or captured during execution.
    """

    def __init__(
        self,
        *,
        document: ConfigDocument | None = None,
        config_path: Path | None = None,
    ) -> None:
        """Create FakeConfigStore with optional initial state.

        Args:
            document: Initial document (None = config file doesn't exist yet)
            config_path: Path reported in messages (defaults to /fake/power_git/config.json)
        """
        self._document = document
        self._config_path = (
            config_path if config_path is not None else Path("/fake/power_git/config.json")
        )
        self._replaced_documents: list[ConfigDocument] = []
        self._load_count = 0

    # --- Test assertions ---

    @property
    def replaced_documents(self) -> list[ConfigDocument]:
        """Documents passed to replace_all(), including the first-run default.

        Returns a copy to prevent external mutation.
        This property is for test assertions only.
        """
        return list(self._replaced_documents)

    @property
    def current_document(self) -> ConfigDocument | None:
        """Current document state.

        This property is for test assertions only.
        """
        return self._document

    @property
    def load_count(self) -> int:
        """Number of load() calls. This property is for test assertions only."""
        return self._load_count

    # --- ConfigStore ---

    def config_path(self) -> Path:
        return self._config_path

    def exists(self) -> bool:
        return self._document is not None

    def load(self) -> ConfigDocument:
        self._load_count += 1
        if self._document is None:
            raise ConfigNotFoundError(path=self._config_path)
        return self._document

    def ensure_initialized(self) -> Path:
        if self._document is None:
            self.replace_all(default_document())
        return self._config_path

    def replace_all(self, document: ConfigDocument) -> None:
        self._document = document
        self._replaced_documents.append(document)
