"""Fake ProcessRunner for testing.

FakeProcessRunner is an in-memory implementation that returns pre-configured
output per argument vector and records every command it receives.
"""

from collections.abc import Sequence

from galias.gateway.process.abc import ProcessFailedError, ProcessRunner
from galias.output import machine_output


class FakeProcessRunner(ProcessRunner):
    """In-memory fake implementation of command execution.

    Constructor Injection:
    ---------------------
    All canned behavior is provided via constructor. Commands not present in
    `outputs` succeed with empty output.

    Mutation Tracking:
    -----------------
    - executed_commands: commands passed to run(), in order
    - queried_commands: commands passed to query(), in order

    Examples:
    ---------
        runner = FakeProcessRunner(
            outputs={("git", "rev-parse", "--abbrev-ref", "HEAD"): "main\\n"},
        )
        runner.run(["git", "status"], operation_context="show status", echo=True)
        assert runner.executed_commands == [("git", "status")]
    """

    def __init__(
        self,
        *,
        outputs: dict[tuple[str, ...], str] | None = None,
        failures: dict[tuple[str, ...], int] | None = None,
    ) -> None:
        """Create FakeProcessRunner with canned results.

        Args:
            outputs: Mapping of argument vector to the stdout it produces
            failures: Mapping of argument vector to the non-zero exit status
                it fails with
        """
        self._outputs = outputs if outputs is not None else {}
        self._failures = failures if failures is not None else {}
        self._executed: list[tuple[str, ...]] = []
        self._queried: list[tuple[str, ...]] = []

    @property
    def executed_commands(self) -> list[tuple[str, ...]]:
        return list(self._executed)

    @property
    def queried_commands(self) -> list[tuple[str, ...]]:
        return list(self._queried)

    def run(self, cmd: Sequence[str], *, operation_context: str, echo: bool) -> str:
        key = tuple(cmd)
        self._executed.append(key)
        return self._respond(key, operation_context=operation_context, echo=echo)

    def query(self, cmd: Sequence[str], *, operation_context: str, echo: bool) -> str:
        key = tuple(cmd)
        self._queried.append(key)
        return self._respond(key, operation_context=operation_context, echo=echo)

    def _respond(self, key: tuple[str, ...], *, operation_context: str, echo: bool) -> str:
        if key in self._failures:
            raise ProcessFailedError(
                cmd=key,
                operation_context=operation_context,
                returncode=self._failures[key],
                stderr=f"fatal: {key[0]} failed",
            )
        stdout = self._outputs.get(key, "")
        if echo and stdout.rstrip("\n"):
            machine_output(stdout.rstrip("\n"))
        return stdout
