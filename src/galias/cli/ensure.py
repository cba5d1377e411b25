"""Precondition checks that end the invocation with a user-facing message.

Every galias error the user can cause (a missing argument, an unknown alias,
a missing tool) is raised as a UserFacingCliError. Click renders it on stderr
and exits with status 0, matching the neutral exit status the tool has always
used for these paths.
"""

from typing import IO, Any

import click

from galias.output import user_output


class UserFacingCliError(click.ClickException):
    """Error with a message intended for the user rather than a traceback."""

    exit_code = 0

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def show(self, file: IO[Any] | None = None) -> None:
        user_output(click.style("Error: ", fg="red") + self.message)


class MissingArgumentError(UserFacingCliError):
    """A handler was invoked without one of its required options."""

    def __init__(self, item: str) -> None:
        self.item = item
        super().__init__(f"Required argument {item} not supplied.")


class UnresolvedAliasError(UserFacingCliError):
    """The command token does not belong to any known command."""


class MissingToolError(UserFacingCliError):
    """A required external tool is not on PATH."""


class Ensure:
    """Static helpers that raise UserFacingCliError when a check fails."""

    @staticmethod
    def invariant(condition: bool, message: str) -> None:
        if not condition:
            raise UserFacingCliError(message)

    @staticmethod
    def argument(value: str | None, item: str) -> str:
        """Require a non-blank option value.

        Args:
            value: The option as given, or None when absent
            item: Name of the missing item, used in the error message

        Returns:
            The value, unchanged
        """
        if value is None or not value.strip():
            raise MissingArgumentError(item)
        return value

    @staticmethod
    def arguments(values: tuple[str, ...], item: str) -> tuple[str, ...]:
        """Require at least one option value."""
        if not values:
            raise MissingArgumentError(item)
        return values
