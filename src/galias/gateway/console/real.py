"""Real console implementation using click.prompt."""

import click

from galias.gateway.console.abc import Console


class RealConsole(Console):
    """Reads a line from stdin via click, printing the prompt to stderr."""

    def prompt(self, message: str) -> str:
        return click.prompt(
            message,
            default="",
            show_default=False,
            prompt_suffix="\n",
            err=True,
        )
