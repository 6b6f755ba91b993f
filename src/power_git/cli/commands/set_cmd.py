"""Store a credential field for one platform."""

import logging
from dataclasses import replace
from enum import Enum

import click

from power_git.cli.commands.common import (
    load_document,
    platform_option,
    platform_or_default,
    resolve_explicit_platform,
)
from power_git.cli.output import user_output
from power_git.core.context import PowerGitContext
from power_git.core.errors import ArgumentError
from power_git.core.platform import Platform

logger = logging.getLogger(__name__)


class SetField(Enum):
    """Fields of a provider record that `set` can change."""

    URL = "url"
    TOKEN = "token"
    DEFAULT = "default"


def parse_set_field(value: str) -> SetField | None:
    """Case-insensitive lookup of a field selector; None when unknown."""
    normalized = value.strip().lower()
    for field in SetField:
        if field.value == normalized:
            return field
    return None


def _parse_bool(value: str) -> bool:
    normalized = value.strip().lower()
    if normalized not in ("true", "false"):
        raise ArgumentError(f"Invalid value for default: '{value}' (expected true or false)")
    return normalized == "true"


def apply_set(ctx: PowerGitContext, *, platform: Platform, field: SetField, value: str) -> bool:
    """Write `value` into `field` of the platform's record.

    Only the targeted field changes; the whole document is then replaced.

    Returns:
        True if the document was rewritten, False if the document holds no
        record for the platform (nothing is written in that case)
    """
    is_default = _parse_bool(value) if field is SetField.DEFAULT else False

    document = load_document(ctx)
    record = ctx.config_store.find_by_name(document, platform.value)
    if record is None:
        logger.debug("No record for %s in %s", platform.value, ctx.config_store.config_path())
        return False

    if field is SetField.URL:
        updated = document.with_record(replace(record, url=value))
    elif field is SetField.TOKEN:
        updated = document.with_record(replace(record, token=value))
    else:
        updated = document.with_default(platform.value, is_default=is_default)

    ctx.config_store.replace_all(updated)
    return True


def _success_message(platform: Platform, field: SetField, value: str) -> str:
    if field is SetField.DEFAULT:
        verb = "set" if _parse_bool(value) else "cleared"
        return f"Default {verb} for {platform.value}"
    return f"{field.value.capitalize()} set for {platform.value}"


@click.command("set")
@click.argument("field_name", metavar="FIELD")
@click.argument("value", metavar="VALUE")
@platform_option
@click.pass_obj
def set_cmd(ctx: PowerGitContext, field_name: str, value: str, platform_name: str | None) -> None:
    """Store VALUE in FIELD for a platform.

    FIELD is one of url, token or default. For default, VALUE is true or
    false; marking one platform as default unmarks the others.
    """
    explicit = resolve_explicit_platform(platform_name)

    field = parse_set_field(field_name)
    if field is None:
        user_output("Please provide a valid argument: url, token or default")
        return
    if field is SetField.DEFAULT:
        _parse_bool(value)

    if explicit is None:
        platform = platform_or_default(None, load_document(ctx))
    else:
        platform = explicit

    if apply_set(ctx, platform=platform, field=field, value=value):
        user_output(_success_message(platform, field, value))
