"""Abstract base class for running external commands.

Every git and hub invocation made by a command handler goes through this
gateway, so handlers only build argument vectors and never touch subprocess
directly.
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence


class ProcessFailedError(RuntimeError):
    """An external command exited non-zero or could not be started.

    Attributes:
        cmd: The argument vector that was executed
        operation_context: Human-readable description of what was attempted
        returncode: Exit status, or None if the process never started
        stderr: Captured standard error (or the spawn error message)
    """

    def __init__(
        self,
        *,
        cmd: Sequence[str],
        operation_context: str,
        returncode: int | None,
        stderr: str,
    ) -> None:
        self.cmd = tuple(cmd)
        self.operation_context = operation_context
        self.returncode = returncode
        self.stderr = stderr
        super().__init__(self._format())

    def _format(self) -> str:
        if self.returncode is None:
            status = "could not be started"
        else:
            status = f"exited with status {self.returncode}"
        lines = [f"Failed to {self.operation_context}: `{' '.join(self.cmd)}` {status}"]
        detail = self.stderr.strip()
        if detail:
            lines.append(detail)
        return "\n".join(lines)


class ProcessRunner(ABC):
    """Abstract interface for executing external commands.

    `run` is for commands that change repository state or whose output is the
    point of the command. `query` is for read-only lookups made on the way to
    building another command. The distinction only matters for dry-run mode,
    where queries still execute and runs are only printed.
    """

    @abstractmethod
    def run(self, cmd: Sequence[str], *, operation_context: str, echo: bool) -> str:
        """Execute a command and return its standard output.

        Args:
            cmd: Argument vector; no shell expansion is performed
            operation_context: Description used in logs and error messages
            echo: Whether to print the captured output to stdout

        Returns:
            Captured standard output

        Raises:
            ProcessFailedError: If the command exits non-zero or cannot be spawned
        """
        ...

    @abstractmethod
    def query(self, cmd: Sequence[str], *, operation_context: str, echo: bool) -> str:
        """Execute a read-only command and return its standard output.

        Same contract as `run`, but never suppressed by dry-run mode.
        """
        ...
