"""Output helpers shared by commands and gateways.

`user_output` is for human-facing messages and goes to stderr.
`machine_output` is for the captured output of external tools and goes to stdout.
"""

import click


def user_output(message: str = "", *, nl: bool = True) -> None:
    """Write a message meant for the user to stderr."""
    click.echo(message, err=True, nl=nl)


def machine_output(message: str = "", *, nl: bool = True) -> None:
    """Write tool output to stdout so it can be piped."""
    click.echo(message, nl=nl)
