"""Lookup table from each Command to the function that handles it."""

from collections.abc import Callable, Mapping
from types import MappingProxyType

from galias.cli.aliases import Command
from galias.cli.commands.branch import (
    checkout_cmd,
    cherry_pick_cmd,
    merge_cmd,
    my_branches_cmd,
    pull_cmd,
    push_cmd,
)
from galias.cli.commands.help_cmd import help_cmd
from galias.cli.commands.pr import pull_request_cmd
from galias.cli.commands.stash import stash_list_cmd, stash_named_cmd, stash_pop_cmd
from galias.cli.commands.working_tree import (
    add_all_cmd,
    add_cmd,
    clean_cmd,
    commit_cmd,
    hard_reset_cmd,
    reset_cmd,
    status_cmd,
)
from galias.core.context import GaliasContext

CommandHandler = Callable[[GaliasContext, tuple[str, ...]], str | None]

HANDLERS: Mapping[Command, CommandHandler] = MappingProxyType(
    {
        Command.HELP: help_cmd,
        Command.MY_BRANCHES: my_branches_cmd,
        Command.PULL_REQUEST: pull_request_cmd,
        Command.STASH_LIST: stash_list_cmd,
        Command.STASH_NAMED: stash_named_cmd,
        Command.STASH_POP: stash_pop_cmd,
        Command.CHERRY_PICK: cherry_pick_cmd,
        Command.CHECKOUT: checkout_cmd,
        Command.STATUS: status_cmd,
        Command.COMMIT: commit_cmd,
        Command.MERGE: merge_cmd,
        Command.PULL: pull_cmd,
        Command.PUSH: push_cmd,
        Command.ADD_ALL: add_all_cmd,
        Command.ADD: add_cmd,
        Command.CLEAN: clean_cmd,
        Command.RESET: reset_cmd,
        Command.HARD_RESET: hard_reset_cmd,
    }
)

_unhandled = set(Command) - set(HANDLERS)
if _unhandled:
    raise RuntimeError(f"Commands without handlers: {sorted(c.value for c in _unhandled)}")
