"""Print stored configuration."""

import click

from power_git.cli.commands.common import load_document
from power_git.cli.output import machine_output, user_output
from power_git.core.context import PowerGitContext
from power_git.gateway.config_store.types import ProviderRecord


def format_record(record: ProviderRecord) -> str:
    """Format one record as `name: url -- token`."""
    line = f"{record.name}: {record.url} -- {record.token}"
    if record.is_default:
        line += " (default)"
    return line


@click.command("show")
@click.argument("selector", metavar="WHAT")
@click.pass_obj
def show_cmd(ctx: PowerGitContext, selector: str) -> None:
    """Show stored data. WHAT is `config`."""
    if selector.strip().lower() != "config":
        user_output("Please provide a valid show argument: config")
        return

    document = load_document(ctx)
    for record in document.records:
        machine_output(format_record(record))
