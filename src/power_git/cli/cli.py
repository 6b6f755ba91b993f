import logging
from pathlib import Path

import click

from power_git.cli.commands.init_cmd import init_cmd
from power_git.cli.commands.set_cmd import set_cmd
from power_git.cli.commands.show_cmd import show_cmd
from power_git.cli.output import error_output
from power_git.core.context import create_context
from power_git.core.errors import PowerGitError
from power_git.core.paths import CONFIG_DIR_ENV_VAR

# Command and option names are matched case-insensitively
CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"], token_normalize_func=str.lower)


class PowerGitGroup(click.Group):
    """Group that renders PowerGitError as a one-line error with exit code 1."""

    def invoke(self, ctx: click.Context) -> object:
        try:
            return super().invoke(ctx)
        except PowerGitError as e:
            error_output(str(e))
            raise SystemExit(1) from None


@click.group(cls=PowerGitGroup, context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="power-git")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.option(
    "--config-dir",
    type=click.Path(file_okay=False, path_type=Path),
    envvar=CONFIG_DIR_ENV_VAR,
    default=None,
    help="Directory holding config.json (default: ~/.config/power_git)",
)
@click.pass_context
def cli(ctx: click.Context, debug: bool, config_dir: Path | None) -> None:
    """Manage git hosting credentials and create repositories with them."""
    if debug:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s - %(levelname)s - %(message)s")

    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        ctx.obj = create_context(config_dir=config_dir)


cli.add_command(set_cmd)
cli.add_command(show_cmd)
cli.add_command(init_cmd)


def main() -> None:
    """CLI entry point used by the `power-git` console script."""
    cli()
