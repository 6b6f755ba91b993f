"""Platform selection shared by the set and init commands."""

from collections.abc import Callable
from typing import TypeVar

import click

from power_git.core.context import PowerGitContext
from power_git.core.errors import ArgumentError, UnsupportedPlatformError
from power_git.core.platform import Platform, resolve_platform
from power_git.gateway.config_store.types import ConfigDocument

F = TypeVar("F", bound=Callable[..., object])


def platform_option(fn: F) -> F:
    """Add the --platform/-p option, stored as `platform_name`."""
    return click.option(
        "--platform",
        "-p",
        "platform_name",
        default=None,
        metavar="NAME",
        help="github, gitlab or bitbucket (defaults to the platform marked as default)",
    )(fn)


def resolve_explicit_platform(platform_name: str | None) -> Platform | None:
    """Resolve a --platform value given on the command line.

    Returns:
        The platform, or None when --platform was omitted

    Raises:
        UnsupportedPlatformError: If the value names no supported platform
    """
    if platform_name is None:
        return None
    platform = resolve_platform(platform_name)
    if not platform.is_supported:
        raise UnsupportedPlatformError(value=platform_name)
    return platform


def load_document(ctx: PowerGitContext) -> ConfigDocument:
    """Create the config file on first run, then read it."""
    ctx.config_store.ensure_initialized()
    return ctx.config_store.load()


def platform_or_default(platform: Platform | None, document: ConfigDocument) -> Platform:
    """Fall back to the default platform when none was given explicitly.

    Raises:
        ArgumentError: If --platform was omitted and no platform is the default
        UnsupportedPlatformError: If the default record names an unknown platform
    """
    if platform is not None:
        return platform
    record = document.default_record()
    if record is None:
        raise ArgumentError(
            "No --platform given and no default platform is set; "
            "pass --platform or run 'power-git set default true --platform <name>'"
        )
    resolved = resolve_platform(record.name)
    if not resolved.is_supported:
        raise UnsupportedPlatformError(value=record.name)
    return resolved
