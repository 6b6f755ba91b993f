"""Initialize a local repository and, when named, a remote one."""

import logging

import click

from power_git.cli.commands.common import (
    load_document,
    platform_option,
    platform_or_default,
    resolve_explicit_platform,
)
from power_git.cli.output import error_output, machine_output, user_output
from power_git.core.context import PowerGitContext
from power_git.core.errors import ArgumentError, ConfigMissingError, UnsupportedPlatformError
from power_git.gateway.provider_client.abc import CreatedRepository
from power_git.gateway.provider_client.factory import create_provider_client

logger = logging.getLogger(__name__)


def init_repository(
    ctx: PowerGitContext,
    *,
    name: str | None,
    platform_name: str | None,
) -> CreatedRepository | None:
    """Run `git init` in ctx.cwd and create the remote repository `name`.

    Order matters: credentials are validated before anything is created
    locally, and the remote call happens last, exactly once.

    Returns:
        The created remote repository, or None when no name was given

    Raises:
        UnsupportedPlatformError: If the platform is not supported
        ConfigMissingError: If the config has no record for the platform
        ArgumentError: If the name is empty or the provider cannot use it
        AuthConfigInvalidError: If the stored url/token are unusable
        RemoteRejectedError: If the provider refuses to create the repository
    """
    if name is not None and not name.strip():
        raise ArgumentError("Repository name must not be empty")

    explicit = resolve_explicit_platform(platform_name)
    document = load_document(ctx)
    platform = platform_or_default(explicit, document)

    record = ctx.config_store.find_by_name(document, platform.value)
    if record is None:
        raise ConfigMissingError(platform=platform.value, path=ctx.config_store.config_path())

    client = create_provider_client(platform, record, ctx.http) if name is not None else None
    if client is not None and name is not None:
        client.check_repository_name(name)

    user_output("Initializing repository in current directory...")
    status = ctx.local_git.init(ctx.cwd)
    user_output(f"git init exited with status {status}")

    if client is None or name is None:
        return None

    user_output(f"Initializing remote repository '{name}' on {platform.value}...")
    created = client.create_repository(name)
    logger.debug("Created %s repository %s", platform.value, created.web_url)
    return created


@click.command("init")
@click.argument("name", required=False)
@platform_option
@click.pass_obj
def init_cmd(ctx: PowerGitContext, name: str | None, platform_name: str | None) -> None:
    """Run git init here and create remote repository NAME.

    Without NAME only the local repository is initialized.
    """
    try:
        created = init_repository(ctx, name=name, platform_name=platform_name)
    except UnsupportedPlatformError as e:
        error_output(str(e))
        return

    if created is not None:
        machine_output(created.web_url if created.web_url else created.name)
