"""Branch-level commands: listing, switching, merging and syncing."""

from galias.cli.commands.git_helpers import (
    get_current_branch,
    local_branch_exists,
    require_current_branch,
)
from galias.cli.ensure import Ensure, MissingArgumentError
from galias.core.context import GaliasContext

MY_BRANCHES_FORMAT = (
    "--format=%(HEAD) %(color:yellow)%(refname:short)%(color:reset) %(authorname) "
    "(%(color:green)%(committerdate:relative)%(color:reset))"
)


def my_branches_cmd(ctx: GaliasContext, opts: tuple[str, ...]) -> None:
    """List local branches, oldest commit first."""
    ctx.process.query(
        [
            "git",
            "for-each-ref",
            "--sort=committerdate",
            "refs/heads/",
            MY_BRANCHES_FORMAT,
            "--color",
        ],
        operation_context="list local branches",
        echo=True,
    )


def checkout_cmd(ctx: GaliasContext, opts: tuple[str, ...]) -> None:
    """Switch to a branch, creating it from the current branch if it does not exist.

    A literal `-b` is accepted for muscle memory and ignored; the last other
    option names the branch.
    """
    candidates = [opt for opt in opts if opt.strip() != "-b"]
    if not candidates or not candidates[-1].strip():
        raise MissingArgumentError("branch or reference(s)")
    branch = candidates[-1]

    current = get_current_branch(ctx)
    if local_branch_exists(ctx, branch):
        cmd = ["git", "checkout", branch]
        operation_context = f"checkout branch '{branch}'"
    else:
        cmd = ["git", "checkout", "-b", branch, current]
        operation_context = f"create branch '{branch}' from '{current}'"

    ctx.process.run(cmd, operation_context=operation_context, echo=True)


def cherry_pick_cmd(ctx: GaliasContext, opts: tuple[str, ...]) -> None:
    commits = Ensure.arguments(opts, "commit reference(s)")
    ctx.process.run(
        ["git", "cherry-pick", *commits],
        operation_context=f"cherry-pick {len(commits)} commit(s)",
        echo=True,
    )


def merge_cmd(ctx: GaliasContext, opts: tuple[str, ...]) -> None:
    source = Ensure.argument(opts[0] if opts else None, "merge source")
    ctx.process.run(
        ["git", "merge", source],
        operation_context=f"merge '{source}'",
        echo=True,
    )


def pull_cmd(ctx: GaliasContext, opts: tuple[str, ...]) -> None:
    ctx.process.run(["git", "pull"], operation_context="pull current branch", echo=True)


def push_cmd(ctx: GaliasContext, opts: tuple[str, ...]) -> None:
    """Push the current branch and set its upstream."""
    current = require_current_branch(ctx)
    remote = ctx.config.remote
    ctx.process.run(
        ["git", "push", "-u", remote, current],
        operation_context=f"push '{current}' to '{remote}'",
        echo=True,
    )
