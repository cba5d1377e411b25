"""Alias table and resolver.

Each canonical command owns a fixed tuple of short aliases. The table is
immutable and is checked for duplicate aliases when this module is imported.
"""

import logging
from collections.abc import Mapping
from enum import Enum
from types import MappingProxyType

logger = logging.getLogger(__name__)


class Command(Enum):
    """Canonical commands; the value is the name shown to users."""

    HELP = "help"
    MY_BRANCHES = "my-branches"
    PULL_REQUEST = "pull-request"
    STASH_LIST = "stash-list"
    STASH_NAMED = "stash-named"
    STASH_POP = "stash-pop"
    CHERRY_PICK = "cherry-pick"
    CHECKOUT = "checkout"
    STATUS = "status"
    COMMIT = "commit"
    MERGE = "merge"
    PULL = "pull"
    PUSH = "push"
    ADD_ALL = "add-all"
    ADD = "add"
    CLEAN = "clean"
    RESET = "reset"
    HARD_RESET = "hard-reset"


def _validate_aliases(table: Mapping[Command, tuple[str, ...]]) -> None:
    """Raise ValueError if an alias is empty or claimed by two commands."""
    owners: dict[str, Command] = {}
    for command, aliases in table.items():
        if not aliases:
            raise ValueError(f"Command '{command.value}' has no aliases")
        for alias in aliases:
            if not alias:
                raise ValueError(f"Command '{command.value}' has an empty alias")
            if alias in owners:
                raise ValueError(
                    f"Alias '{alias}' is used by both '{owners[alias].value}' "
                    f"and '{command.value}'"
                )
            owners[alias] = command


def _build_alias_table(table: dict[Command, tuple[str, ...]]) -> Mapping[Command, tuple[str, ...]]:
    _validate_aliases(table)
    return MappingProxyType(table)


# Order here is the order of the listing shown for unknown aliases.
ALIASES: Mapping[Command, tuple[str, ...]] = _build_alias_table(
    {
        Command.HELP: ("h",),
        Command.MY_BRANCHES: ("mb", "mbr", "mybr"),
        Command.PULL_REQUEST: ("pr",),
        Command.STASH_LIST: ("sl", "stl"),
        Command.STASH_NAMED: ("st", "stn"),
        Command.STASH_POP: ("sp", "stp"),
        Command.CHERRY_PICK: ("cp",),
        Command.CHECKOUT: ("co",),
        Command.STATUS: ("s",),
        Command.COMMIT: ("c",),
        Command.MERGE: ("m",),
        Command.PULL: ("pl",),
        Command.PUSH: ("ps",),
        Command.ADD_ALL: ("aa",),
        Command.ADD: ("a",),
        Command.CLEAN: ("cl",),
        Command.RESET: ("r",),
        Command.HARD_RESET: ("hr",),
    }
)


def resolve_alias(token: str | None) -> Command | None:
    """Find the command owning `token`.

    Matching is exact and case-sensitive. Returns None for unknown or
    missing tokens.
    """
    if token is None:
        return None
    for command, aliases in ALIASES.items():
        if token in aliases:
            logger.debug("Resolved alias '%s' to '%s'", token, command.value)
            return command
    logger.debug("No command owns alias '%s'", token)
    return None


def format_alias_listing() -> str:
    """Render every command with its aliases, one per line."""
    return "\n".join(
        f"{command.value}: {' | '.join(aliases)}" for command, aliases in ALIASES.items()
    )
