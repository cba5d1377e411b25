"""Checks that the external tools galias drives are installed."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass

import click

from galias.cli.ensure import MissingToolError
from galias.gateway.shell import Shell
from galias.output import user_output

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ToolDescriptor:
    """An external executable galias depends on.

    Attributes:
        name: Executable name looked up on PATH
        help: Install instructions shown when the tool is missing
        required: Whether a missing tool stops execution or only warns
    """

    name: str
    help: str
    required: bool


TOOLS: tuple[ToolDescriptor, ...] = (
    ToolDescriptor(name="git", help="https://git-scm.com/downloads", required=True),
    ToolDescriptor(name="hub", help="https://github.com/github/hub", required=True),
)


def _not_found_message(tool: ToolDescriptor) -> str:
    return (
        f"{tool.name} is not installed or is not in your environment's PATH.\n"
        f"Install from: {tool.help}"
    )


def run_preflight(shell: Shell, tools: Sequence[ToolDescriptor] = TOOLS) -> None:
    """Verify each tool resolves on PATH, in declaration order.

    Raises:
        MissingToolError: On the first missing required tool
    """
    for tool in tools:
        path = shell.get_installed_tool_path(tool.name)
        if path is not None:
            logger.debug("Found %s at %s", tool.name, path)
            continue
        if tool.required:
            raise MissingToolError(_not_found_message(tool))
        user_output(click.style("Warning: ", fg="yellow") + _not_found_message(tool))
