"""Real ConfigStore implementation backed by a JSON file."""

import json
import logging
import os
import tempfile
from pathlib import Path

from power_git.core.errors import ConfigCorruptError, ConfigIOError, ConfigNotFoundError
from power_git.core.paths import ConfigPaths
from power_git.gateway.config_store.abc import ConfigStore
from power_git.gateway.config_store.types import ConfigDocument, default_document

logger = logging.getLogger(__name__)


class RealConfigStore(ConfigStore):
    """Production implementation that reads/writes the config.json file."""

    def __init__(self, paths: ConfigPaths) -> None:
        self._paths = paths

    def config_path(self) -> Path:
        return self._paths.file

    def exists(self) -> bool:
        return self._paths.file.exists()

    def load(self) -> ConfigDocument:
        path = self._paths.file
        try:
            content = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            raise ConfigNotFoundError(path=path) from None
        except UnicodeDecodeError as e:
            raise ConfigCorruptError(path=path, reason="not valid UTF-8") from e
        except OSError as e:
            raise ConfigIOError(path=path, action="read", cause=e) from e

        try:
            data = json.loads(content)
        except json.JSONDecodeError as e:
            raise ConfigCorruptError(path=path, reason=f"invalid JSON ({e.msg})") from e
        return ConfigDocument.from_json_data(data, path=path)

    def ensure_initialized(self) -> Path:
        path = self._paths.file
        if path.exists():
            return path

        logger.debug("Creating default config at %s", path)
        try:
            self._paths.directory.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise ConfigIOError(
                path=self._paths.directory, action="create directory for", cause=e
            ) from e
        self.replace_all(default_document())
        return path

    def replace_all(self, document: ConfigDocument) -> None:
        """Write `document` next to the config file and rename it into place.

        A reader never observes a partially written file: os.replace() swaps
        the complete temporary file in a single step.
        """
        path = self._paths.file
        content = json.dumps(document.to_json_data(), indent=2) + "\n"

        tmp_name: str | None = None
        try:
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                dir=self._paths.directory,
                prefix=f".{path.name}.",
                suffix=".tmp",
                delete=False,
            ) as tmp:
                tmp_name = tmp.name
                tmp.write(content)
                tmp.flush()
                os.fsync(tmp.fileno())
            os.replace(tmp_name, path)
        except OSError as e:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise ConfigIOError(path=path, action="write", cause=e) from e
        logger.debug("Wrote %d provider records to %s", len(document.records), path)
