"""Abstract interface for the provider credential store."""

from abc import ABC, abstractmethod
from pathlib import Path

from power_git.gateway.config_store.types import ConfigDocument, ProviderRecord


class ConfigStore(ABC):
    """Abstract interface for reading and replacing the config document.

    The store has no partial-update primitive: callers load a snapshot,
    derive a new ConfigDocument and hand the whole thing back to replace_all().
    All implementations (real, fake) must implement this interface.
    """

    @abstractmethod
    def config_path(self) -> Path:
        """Path of the config file, used in messages."""
        ...

    @abstractmethod
    def exists(self) -> bool:
        """Check whether a config document has been written."""
        ...

    @abstractmethod
    def load(self) -> ConfigDocument:
        """Read the full document.

        Raises:
            ConfigNotFoundError: If no document exists yet
            ConfigCorruptError: If the document does not parse
            ConfigIOError: If the file cannot be read
        """
        ...

    @abstractmethod
    def ensure_initialized(self) -> Path:
        """Write the default document if none exists.

        Idempotent: an existing document is left untouched.

        Returns:
            Path of the (now existing) config file

        Raises:
            ConfigIOError: If the directory or file cannot be created
        """
        ...

    @abstractmethod
    def replace_all(self, document: ConfigDocument) -> None:
        """Overwrite the persisted document with `document`.

        Raises:
            ConfigIOError: If the document cannot be written
        """
        ...

    def find_by_name(self, document: ConfigDocument, name: str) -> ProviderRecord | None:
        """Look up the record for `name`, or None when there is none."""
        return document.find(name)
