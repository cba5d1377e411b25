"""Tests for the external tool preflight."""

import pytest

from galias.cli.ensure import MissingToolError
from galias.cli.preflight import TOOLS, ToolDescriptor, run_preflight
from galias.gateway.shell import FakeShell


def test_passes_when_all_tools_installed() -> None:
    shell = FakeShell(installed_tools={"git": "/usr/bin/git", "hub": "/usr/bin/hub"})

    run_preflight(shell)

    assert shell.lookups == ["git", "hub"]


def test_declares_git_and_hub_as_required() -> None:
    assert [(tool.name, tool.required) for tool in TOOLS] == [("git", True), ("hub", True)]


def test_missing_required_tool_raises_with_install_hint() -> None:
    shell = FakeShell(installed_tools={"git": "/usr/bin/git"})

    with pytest.raises(MissingToolError) as exc_info:
        run_preflight(shell)

    assert "hub is not installed or is not in your environment's PATH." in exc_info.value.message
    assert "https://github.com/github/hub" in exc_info.value.message


def test_stops_at_first_missing_required_tool() -> None:
    shell = FakeShell(installed_tools={})

    with pytest.raises(MissingToolError) as exc_info:
        run_preflight(shell)

    assert exc_info.value.message.startswith("git is not installed")
    assert shell.lookups == ["git"]


def test_missing_optional_tool_only_warns(capsys: pytest.CaptureFixture[str]) -> None:
    tools = (
        ToolDescriptor(name="fzf", help="https://github.com/junegunn/fzf", required=False),
        ToolDescriptor(name="git", help="https://git-scm.com/downloads", required=True),
    )
    shell = FakeShell(installed_tools={"git": "/usr/bin/git"})

    run_preflight(shell, tools)

    captured = capsys.readouterr()
    assert "Warning: fzf is not installed" in captured.err
    assert shell.lookups == ["fzf", "git"]
