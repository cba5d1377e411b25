"""Read-only git lookups shared by several command handlers."""

from galias.cli.ensure import Ensure
from galias.core.context import GaliasContext

DETACHED_HEAD = "HEAD"


def get_current_branch(ctx: GaliasContext) -> str:
    """Return the checked-out branch name, or "HEAD" when detached."""
    output = ctx.process.query(
        ["git", "rev-parse", "--abbrev-ref", "HEAD"],
        operation_context="determine current branch",
        echo=False,
    )
    return output.strip()


def require_current_branch(ctx: GaliasContext) -> str:
    """Return the checked-out branch, failing on a detached HEAD."""
    branch = get_current_branch(ctx)
    Ensure.invariant(
        bool(branch) and branch != DETACHED_HEAD,
        "Not currently on a branch (detached HEAD)",
    )
    return branch


def local_branch_exists(ctx: GaliasContext, branch: str) -> bool:
    output = ctx.process.query(
        ["git", "branch", "--list", branch],
        operation_context=f"check if branch '{branch}' exists",
        echo=False,
    )
    return bool(output.strip())
