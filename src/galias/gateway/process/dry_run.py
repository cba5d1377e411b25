"""No-op ProcessRunner wrapper for dry-run mode."""

import shlex
from collections.abc import Sequence

from galias.gateway.process.abc import ProcessRunner
from galias.output import user_output


class DryRunProcessRunner(ProcessRunner):
    """Wrapper that prints mutating commands instead of executing them.

    Queries are delegated so that handlers can still look up the current
    branch or the stash list and build the exact command they would run.

    Usage:
        runner = DryRunProcessRunner(RealProcessRunner())

        # Prints "[DRY RUN] Would run: git push -u origin main"
        runner.run(["git", "push", "-u", "origin", "main"], operation_context="push", echo=True)
    """

    def __init__(self, wrapped: ProcessRunner) -> None:
        """Create a dry-run wrapper around a ProcessRunner implementation.

        Args:
            wrapped: The runner to delegate queries to (usually RealProcessRunner)
        """
        self._wrapped = wrapped

    def run(self, cmd: Sequence[str], *, operation_context: str, echo: bool) -> str:
        """Print dry-run message instead of executing the command."""
        user_output(f"[DRY RUN] Would run: {shlex.join(cmd)}")
        return ""

    def query(self, cmd: Sequence[str], *, operation_context: str, echo: bool) -> str:
        return self._wrapped.query(cmd, operation_context=operation_context, echo=echo)
