"""Commands that stage, commit, inspect or discard working-tree changes."""

from galias.cli.commands.git_helpers import require_current_branch
from galias.cli.ensure import Ensure
from galias.core.context import GaliasContext
from galias.output import user_output


def status_cmd(ctx: GaliasContext, opts: tuple[str, ...]) -> None:
    ctx.process.query(["git", "status"], operation_context="show status", echo=True)


def add_cmd(ctx: GaliasContext, opts: tuple[str, ...]) -> None:
    """Stage the given paths or globs."""
    paths = Ensure.arguments(opts, "path(s) or glob(s)")
    ctx.process.run(["git", "add", *paths], operation_context="stage paths", echo=True)


def add_all_cmd(ctx: GaliasContext, opts: tuple[str, ...]) -> None:
    ctx.process.run(["git", "add", "-A"], operation_context="stage all changes", echo=True)


def commit_cmd(ctx: GaliasContext, opts: tuple[str, ...]) -> None:
    message = Ensure.argument(opts[0] if opts else None, "commit message")
    ctx.process.run(
        ["git", "commit", "-m", message],
        operation_context="commit staged changes",
        echo=True,
    )


def reset_cmd(ctx: GaliasContext, opts: tuple[str, ...]) -> None:
    """Unstage everything, keeping working-tree changes."""
    ctx.process.run(["git", "reset"], operation_context="reset index", echo=True)


def clean_cmd(ctx: GaliasContext, opts: tuple[str, ...]) -> None:
    ctx.process.run(
        ["git", "clean", "-fd"],
        operation_context="remove untracked files and directories",
        echo=True,
    )


def hard_reset_cmd(ctx: GaliasContext, opts: tuple[str, ...]) -> None:
    """Discard all local state and match the remote-tracking branch.

    Asks for confirmation first; anything but "y" (either case) aborts before
    any destructive command runs.
    """
    current = require_current_branch(ctx)
    answer = ctx.console.prompt(
        f"Are you sure you want to hard reset the branch {current}? (y/n)"
    )
    if answer.lower() != "y":
        user_output("Aborted.")
        return

    remote_ref = f"{ctx.config.remote}/{current}"
    steps: list[tuple[list[str], str]] = [
        (["git", "reset"], "reset index"),
        (["git", "checkout", "."], "discard working-tree changes"),
        (["git", "clean", "-fd"], "remove untracked files and directories"),
        (["git", "fetch"], "fetch from remote"),
        (["git", "reset", "--hard", remote_ref], f"hard reset to '{remote_ref}'"),
    ]
    for cmd, operation_context in steps:
        ctx.process.run(cmd, operation_context=operation_context, echo=True)
