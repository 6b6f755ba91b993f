"""Real LocalGit implementation using subprocess."""

import logging
import subprocess
from pathlib import Path

from power_git.core.errors import LocalGitError
from power_git.gateway.local_git.abc import LocalGit

logger = logging.getLogger(__name__)


class RealLocalGit(LocalGit):
    """Real implementation running the `git` binary found on PATH."""

    def init(self, cwd: Path) -> int:
        try:
            result = subprocess.run(
                ["git", "init"],
                cwd=cwd,
                capture_output=True,
                text=True,
                check=False,
            )
        except OSError as e:
            raise LocalGitError(f"Failed to execute git init in {cwd}: {e}") from e

        logger.debug("git init in %s exited with %d", cwd, result.returncode)
        if result.returncode != 0:
            logger.debug("git init stderr: %s", result.stderr.strip())
        return result.returncode
