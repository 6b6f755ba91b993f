"""Fake LocalGit implementation for testing."""

from pathlib import Path

from power_git.gateway.local_git.abc import LocalGit


class FakeLocalGit(LocalGit):
    """In-memory fake implementation for testing.

    Constructor Injection: the exit status to report.
    Mutation Tracking: directories init() was called for.
    """

    def __init__(self, *, exit_code: int = 0) -> None:
        self._exit_code = exit_code
        self._init_calls: list[Path] = []

    @property
    def init_calls(self) -> list[Path]:
        """Read-only access to initialized directories for test assertions."""
        return list(self._init_calls)

    def init(self, cwd: Path) -> int:
        self._init_calls.append(cwd)
        return self._exit_code
