"""Stash commands.

Named stashes are pushed with a message and later popped by matching that
message together with the branch the stash was created on.
"""

import logging

from galias.cli.commands.git_helpers import get_current_branch
from galias.cli.ensure import Ensure
from galias.core.context import GaliasContext
from galias.core.stash_list import find_named_stash, parse_stash_list
from galias.output import user_output

logger = logging.getLogger(__name__)

STASH_LIST_CMD = ("git", "--no-pager", "stash", "list")


def read_stash_list(ctx: GaliasContext, *, echo: bool) -> str:
    """Return the raw `git stash list` text, optionally printing it."""
    return ctx.process.query(STASH_LIST_CMD, operation_context="list stashes", echo=echo)


def stash_list_cmd(ctx: GaliasContext, opts: tuple[str, ...]) -> str:
    """Print the stash list and return its raw text."""
    return read_stash_list(ctx, echo=True)


def stash_named_cmd(ctx: GaliasContext, opts: tuple[str, ...]) -> None:
    """Stash all changes, including untracked files, under a name."""
    name = Ensure.argument(opts[0] if opts else None, "stash name").strip()
    ctx.process.run(
        ["git", "stash", "push", "-u", "-m", name],
        operation_context=f"stash changes as '{name}'",
        echo=True,
    )


def stash_pop_cmd(ctx: GaliasContext, opts: tuple[str, ...]) -> None:
    """Pop the latest stash, or the stash with the given name on the current branch."""
    name = (opts[0] if opts else "").strip()
    if not name:
        ctx.process.run(
            ["git", "stash", "pop", "0"],
            operation_context="pop latest stash",
            echo=True,
        )
        return

    stash_text = read_stash_list(ctx, echo=False)
    current = get_current_branch(ctx)
    entry = find_named_stash(parse_stash_list(stash_text), branch=current, name=name)
    if entry is None:
        user_output(f"No stash named '{name}' found for branch '{current}'.")
        return

    logger.debug("Popping stash@{%d} (%s on %s)", entry.index, entry.message, entry.branch)
    ctx.process.run(
        ["git", "stash", "pop", str(entry.index)],
        operation_context=f"pop stash '{name}'",
        echo=True,
    )
