"""Tests for CLI Ensure utility class."""

import pytest

from galias.cli.ensure import Ensure, MissingArgumentError, UserFacingCliError


class TestEnsureInvariant:
    def test_passes_when_true(self) -> None:
        Ensure.invariant(True, "never shown")

    def test_raises_when_false(self) -> None:
        with pytest.raises(UserFacingCliError) as exc_info:
            Ensure.invariant(False, "Not currently on a branch")

        assert exc_info.value.message == "Not currently on a branch"


class TestEnsureArgument:
    def test_returns_value_unchanged(self) -> None:
        assert Ensure.argument(" wip ", "stash name") == " wip "

    def test_none_is_missing(self) -> None:
        with pytest.raises(MissingArgumentError) as exc_info:
            Ensure.argument(None, "commit message")

        assert exc_info.value.item == "commit message"
        assert exc_info.value.message == "Required argument commit message not supplied."

    def test_blank_is_missing(self) -> None:
        with pytest.raises(MissingArgumentError):
            Ensure.argument("   ", "merge source")


class TestEnsureArguments:
    def test_returns_values(self) -> None:
        assert Ensure.arguments(("a.py", "b.py"), "path(s)") == ("a.py", "b.py")

    def test_empty_is_missing(self) -> None:
        with pytest.raises(MissingArgumentError):
            Ensure.arguments((), "path(s) or glob(s)")


def test_user_facing_errors_exit_neutrally() -> None:
    assert UserFacingCliError("x").exit_code == 0
    assert MissingArgumentError("x").exit_code == 0
