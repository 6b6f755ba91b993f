"""Error taxonomy for power-git.

Every error a command can end with derives from PowerGitError. The CLI group
renders them as a single "Error: ..." line on stderr and exits 1.
"""

from pathlib import Path


class PowerGitError(Exception):
    """Base class for all user-facing power-git errors."""


class ArgumentError(PowerGitError):
    """Missing or invalid command arguments."""


class UnsupportedPlatformError(PowerGitError):
    """The requested platform is not one of the supported providers."""

    def __init__(self, *, value: str | None) -> None:
        shown = value if value else "<none>"
        super().__init__(
            f"Unsupported platform '{shown}', please use one of the following: "
            "github, gitlab, bitbucket"
        )
        self.value = value


class ConfigIOError(PowerGitError):
    """The config file or its directory could not be read or written."""

    def __init__(self, *, path: Path, action: str, cause: OSError) -> None:
        super().__init__(f"Failed to {action} config file {path}: {cause.strerror or cause}")
        self.path = path


class ConfigNotFoundError(PowerGitError):
    """The config file does not exist yet."""

    def __init__(self, *, path: Path) -> None:
        super().__init__(f"Config file not found at {path}")
        self.path = path


class ConfigCorruptError(PowerGitError):
    """The config file exists but does not have the expected shape."""

    def __init__(self, *, path: Path, reason: str) -> None:
        super().__init__(f"Config file {path} is corrupt: {reason}")
        self.path = path
        self.reason = reason


class ConfigMissingError(PowerGitError):
    """The config document has no record for a platform that needs one."""

    def __init__(self, *, platform: str, path: Path) -> None:
        super().__init__(f"No configuration for {platform} in {path}")
        self.platform = platform


class AuthConfigInvalidError(PowerGitError):
    """The stored url/token pair cannot be used to build a provider client."""


class RemoteRejectedError(PowerGitError):
    """The provider API declined to create the repository."""

    def __init__(self, *, platform: str, status_code: int | None, message: str) -> None:
        if status_code is None:
            super().__init__(f"{platform} request failed: {message}")
        else:
            super().__init__(f"{platform} rejected the request ({status_code}): {message}")
        self.platform = platform
        self.status_code = status_code
        self.upstream_message = message


class LocalGitError(PowerGitError):
    """The local git binary could not be run."""
