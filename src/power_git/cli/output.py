"""Output helpers separating human messages from machine-readable output.

user_output() goes to stderr so stdout stays clean for values a script
might capture (config listings, created repository URLs).
"""

import click


def user_output(message: str = "") -> None:
    """Print a status or error message for the user (stderr)."""
    click.echo(message, err=True)


def machine_output(message: str = "") -> None:
    """Print a result value (stdout)."""
    click.echo(message)


def error_output(message: str) -> None:
    """Print a red-prefixed error message (stderr)."""
    user_output(click.style("Error: ", fg="red") + message)
