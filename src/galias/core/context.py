"""Application context with dependency injection."""

from dataclasses import dataclass
from pathlib import Path

from galias.core.config import GaliasConfig, default_config_dir, load_config
from galias.gateway.console import Console, FakeConsole, RealConsole
from galias.gateway.process import (
    DryRunProcessRunner,
    FakeProcessRunner,
    ProcessRunner,
    RealProcessRunner,
)
from galias.gateway.shell import FakeShell, RealShell, Shell


@dataclass(frozen=True)
class GaliasContext:
    """Immutable context holding all dependencies for galias operations.

    Created at CLI entry point and threaded through to the command handler.
    Frozen to prevent accidental modification at runtime.
    """

    process: ProcessRunner
    shell: Shell
    console: Console
    config: GaliasConfig
    cwd: Path  # Current working directory at CLI invocation
    dry_run: bool

    @staticmethod
    def for_test(
        *,
        process: ProcessRunner | None = None,
        shell: Shell | None = None,
        console: Console | None = None,
        config: GaliasConfig | None = None,
        cwd: Path | None = None,
        dry_run: bool = False,
    ) -> "GaliasContext":
        """Create a context wired with fakes for any dependency not supplied.

        The default FakeShell reports both git and hub as installed so the
        preflight passes unless a test says otherwise.
        """
        if shell is None:
            shell = FakeShell(
                installed_tools={"git": "/usr/bin/git", "hub": "/usr/local/bin/hub"}
            )
        return GaliasContext(
            process=process if process is not None else FakeProcessRunner(),
            shell=shell,
            console=console if console is not None else FakeConsole(),
            config=config if config is not None else GaliasConfig.defaults(),
            cwd=cwd if cwd is not None else Path("/fake/repo"),
            dry_run=dry_run,
        )


def create_context(*, dry_run: bool) -> GaliasContext:
    """Create the production context.

    Args:
        dry_run: If True, wrap the process runner so mutating commands are
            printed instead of executed
    """
    cwd = Path.cwd()
    process: ProcessRunner = RealProcessRunner(cwd)
    if dry_run:
        process = DryRunProcessRunner(process)

    return GaliasContext(
        process=process,
        shell=RealShell(),
        console=RealConsole(),
        config=load_config(default_config_dir()),
        cwd=cwd,
        dry_run=dry_run,
    )
