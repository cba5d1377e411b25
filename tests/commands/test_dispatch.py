"""Tests for preflight, alias resolution and error handling at the CLI entry point."""

from click.testing import CliRunner

from galias.cli.aliases import format_alias_listing
from galias.cli.cli import cli
from galias.core.context import GaliasContext
from galias.gateway.process import FakeProcessRunner
from galias.gateway.shell import FakeShell
from tests.test_utils.context_builders import build_context, invoke


def test_unknown_alias_lists_all_aliases() -> None:
    ctx, process, _ = build_context()

    result = invoke(ctx, ["nope", "x"])

    assert result.exit_code == 0
    assert "Command alias not found, available aliases:" in result.output
    assert format_alias_listing() in result.output
    assert process.executed_commands == []
    assert process.queried_commands == []


def test_no_arguments_lists_all_aliases() -> None:
    ctx, process, _ = build_context()

    result = invoke(ctx, [])

    assert result.exit_code == 0
    assert "hard-reset: hr" in result.output
    assert process.executed_commands == []


def test_canonical_name_is_not_an_alias() -> None:
    ctx, process, _ = build_context()

    result = invoke(ctx, ["status"])

    assert "Command alias not found" in result.output
    assert process.executed_commands == []


def test_missing_required_tool_stops_before_any_command() -> None:
    process = FakeProcessRunner()
    shell = FakeShell(installed_tools={"git": "/usr/bin/git"})
    ctx = GaliasContext.for_test(process=process, shell=shell)

    result = CliRunner().invoke(cli, ["s"], obj=ctx)

    assert result.exit_code == 0
    assert "hub is not installed or is not in your environment's PATH." in result.output
    assert process.executed_commands == []


def test_preflight_runs_before_alias_resolution() -> None:
    shell = FakeShell(installed_tools={})
    ctx = GaliasContext.for_test(shell=shell)

    result = CliRunner().invoke(cli, ["nope"], obj=ctx)

    assert "git is not installed" in result.output
    assert "Command alias not found" not in result.output


def test_process_failure_exits_non_zero() -> None:
    ctx, process, _ = build_context(failures={("git", "pull"): 1})

    result = invoke(ctx, ["pl"])

    assert result.exit_code == 1
    assert "Failed to pull current branch" in result.output
    assert process.executed_commands == [("git", "pull")]


def test_help_alias_prints_usage() -> None:
    ctx, process, _ = build_context()

    result = invoke(ctx, ["h"])

    assert result.exit_code == 0
    assert "Requirements and installation instructions:" in result.output
    assert "https://github.com/github/hub" in result.output
    assert process.executed_commands == []


def test_help_flag_is_handled_by_click() -> None:
    ctx, _, _ = build_context()

    result = invoke(ctx, ["--help"])

    assert result.exit_code == 0
    assert "Short aliases for everyday git and hub commands." in result.output


def test_flag_like_tokens_after_alias_are_passed_through() -> None:
    ctx, process, _ = build_context()

    result = invoke(ctx, ["c", "--help"])

    assert result.exit_code == 0
    assert process.executed_commands == [("git", "commit", "-m", "--help")]
