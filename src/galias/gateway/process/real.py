"""Production implementation of ProcessRunner using subprocess."""

import logging
import subprocess
from collections.abc import Sequence
from pathlib import Path

from galias.gateway.process.abc import ProcessFailedError, ProcessRunner
from galias.output import machine_output

logger = logging.getLogger(__name__)


class RealProcessRunner(ProcessRunner):
    """Runs commands with subprocess.run, capturing stdout and stderr."""

    def __init__(self, cwd: Path | None = None) -> None:
        """Create a runner.

        Args:
            cwd: Working directory for child processes. Defaults to the
                current directory of this process.
        """
        self._cwd = cwd

    def run(self, cmd: Sequence[str], *, operation_context: str, echo: bool) -> str:
        return self._execute(cmd, operation_context=operation_context, echo=echo)

    def query(self, cmd: Sequence[str], *, operation_context: str, echo: bool) -> str:
        return self._execute(cmd, operation_context=operation_context, echo=echo)

    def _execute(self, cmd: Sequence[str], *, operation_context: str, echo: bool) -> str:
        argv = list(cmd)
        logger.debug("Running %s (%s)", argv, operation_context)
        try:
            result = subprocess.run(
                argv,
                cwd=self._cwd,
                capture_output=True,
                text=True,
                check=False,
            )
        except OSError as e:
            raise ProcessFailedError(
                cmd=argv,
                operation_context=operation_context,
                returncode=None,
                stderr=str(e),
            ) from e

        logger.debug("Command %s exited with %d", argv[0], result.returncode)
        if result.returncode != 0:
            raise ProcessFailedError(
                cmd=argv,
                operation_context=operation_context,
                returncode=result.returncode,
                stderr=result.stderr,
            )

        if echo:
            text = result.stdout.rstrip("\n")
            if text:
                machine_output(text)

        return result.stdout
