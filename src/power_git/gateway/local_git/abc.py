"""Abstract interface for local git operations."""

from abc import ABC, abstractmethod
from pathlib import Path


class LocalGit(ABC):
    """Abstract interface for the local git binary.

    All implementations (real, fake) must implement this interface.
    """

    @abstractmethod
    def init(self, cwd: Path) -> int:
        """Run `git init` in `cwd`.

        The exit status is reported, not enforced: a non-zero status is
        returned to the caller rather than raised.

        Args:
            cwd: Directory to initialize

        Returns:
            Exit status of `git init`

        Raises:
            LocalGitError: If the git binary cannot be executed at all
        """
        ...
