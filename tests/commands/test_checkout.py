"""Tests for the checkout command (alias `co`)."""

from tests.test_utils.context_builders import build_context, invoke


def test_creates_missing_branch_from_current_branch() -> None:
    ctx, process, _ = build_context(current_branch="develop")

    result = invoke(ctx, ["co", "feature-x"])

    assert result.exit_code == 0, result.output
    assert ("git", "branch", "--list", "feature-x") in process.queried_commands
    assert process.executed_commands == [("git", "checkout", "-b", "feature-x", "develop")]


def test_switches_to_existing_branch() -> None:
    ctx, process, _ = build_context(
        outputs={("git", "branch", "--list", "feature-x"): "  feature-x\n"},
    )

    result = invoke(ctx, ["co", "feature-x"])

    assert result.exit_code == 0, result.output
    assert process.executed_commands == [("git", "checkout", "feature-x")]


def test_literal_b_flag_is_ignored() -> None:
    ctx, process, _ = build_context(current_branch="main")

    result = invoke(ctx, ["co", "-b", "feature-y"])

    assert result.exit_code == 0, result.output
    assert process.executed_commands == [("git", "checkout", "-b", "feature-y", "main")]


def test_b_flag_after_branch_is_ignored() -> None:
    ctx, process, _ = build_context(
        outputs={("git", "branch", "--list", "main"): "* main\n"},
    )

    invoke(ctx, ["co", "main", "-b"])

    assert process.executed_commands == [("git", "checkout", "main")]


def test_missing_branch_argument() -> None:
    ctx, process, _ = build_context()

    result = invoke(ctx, ["co", "-b"])

    assert result.exit_code == 0
    assert "Required argument branch or reference(s) not supplied." in result.output
    assert process.executed_commands == []
    assert process.queried_commands == []
