"""Application context with dependency injection."""

from dataclasses import dataclass
from pathlib import Path

from power_git.core.paths import resolve_config_paths
from power_git.gateway.config_store.abc import ConfigStore
from power_git.gateway.config_store.real import RealConfigStore
from power_git.gateway.http.abc import HttpClient
from power_git.gateway.http.real import RealHttpClient
from power_git.gateway.local_git.abc import LocalGit
from power_git.gateway.local_git.real import RealLocalGit


@dataclass(frozen=True)
class PowerGitContext:
    """Immutable context holding all dependencies for power-git commands.

    Created at CLI entry point and threaded through the application.
    Frozen to prevent accidental modification at runtime.
    """

    config_store: ConfigStore
    http: HttpClient
    local_git: LocalGit
    cwd: Path  # Current working directory at CLI invocation

    @staticmethod
    def for_test(
        config_store: ConfigStore | None = None,
        http: HttpClient | None = None,
        local_git: LocalGit | None = None,
        cwd: Path | None = None,
    ) -> "PowerGitContext":
        """Create a context backed by fakes unless real gateways are passed in.

        Args:
            config_store: Defaults to an empty FakeConfigStore (no config file yet)
            http: Defaults to a FakeHttpClient answering every request with {}
            local_git: Defaults to a FakeLocalGit reporting exit status 0
            cwd: Defaults to Path("/test/default/cwd") to prevent accidental use
                of the real Path.cwd() in tests

        Returns:
            Frozen PowerGitContext for use in tests
        """
        from power_git.gateway.config_store.fake import FakeConfigStore
        from power_git.gateway.http.fake import FakeHttpClient
        from power_git.gateway.local_git.fake import FakeLocalGit

        return PowerGitContext(
            config_store=config_store if config_store is not None else FakeConfigStore(),
            http=http if http is not None else FakeHttpClient(),
            local_git=local_git if local_git is not None else FakeLocalGit(),
            cwd=cwd if cwd is not None else Path("/test/default/cwd"),
        )


def create_context(*, config_dir: Path | None) -> PowerGitContext:
    """Create production context with real implementations.

    Called once at CLI entry point to create the context for the entire
    command execution.

    Args:
        config_dir: Directory overriding ~/.config/power_git, or None

    Returns:
        PowerGitContext with real gateways
    """
    return PowerGitContext(
        config_store=RealConfigStore(resolve_config_paths(config_dir)),
        http=RealHttpClient(),
        local_git=RealLocalGit(),
        cwd=Path.cwd(),
    )
