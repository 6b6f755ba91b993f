"""Config location resolution.

Path.home() is consulted here and nowhere else; the resolved paths are
injected into RealConfigStore.
"""

from dataclasses import dataclass
from pathlib import Path

CONFIG_DIR_ENV_VAR = "POWER_GIT_CONFIG_DIR"
CONFIG_FILE_NAME = "config.json"


@dataclass(frozen=True)
class ConfigPaths:
    """Directory holding the config file and the file itself."""

    directory: Path
    file: Path


def default_config_dir() -> Path:
    """Return ~/.config/power_git.

    Not cached so tests can monkeypatch Path.home().
    """
    return Path.home() / ".config" / "power_git"


def resolve_config_paths(override: Path | None) -> ConfigPaths:
    """Resolve where the config document lives.

    Args:
        override: Directory to use instead of the default (from --config-dir,
            POWER_GIT_CONFIG_DIR, or a test)

    Returns:
        ConfigPaths for the directory and config.json inside it
    """
    directory = override.expanduser() if override is not None else default_config_dir()
    return ConfigPaths(directory=directory, file=directory / CONFIG_FILE_NAME)
