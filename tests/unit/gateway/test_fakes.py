"""Tests for the fake gateways used throughout the command tests."""

import pytest

from galias.gateway.console import FakeConsole
from galias.gateway.process import FakeProcessRunner, ProcessFailedError


def test_fake_runner_records_runs_and_queries_separately() -> None:
    runner = FakeProcessRunner(outputs={("git", "status"): "clean\n"})

    assert runner.run(["git", "status"], operation_context="status", echo=False) == "clean\n"
    assert runner.query(["git", "fetch"], operation_context="fetch", echo=False) == ""

    assert runner.executed_commands == [("git", "status")]
    assert runner.queried_commands == [("git", "fetch")]


def test_fake_runner_configured_failure() -> None:
    runner = FakeProcessRunner(failures={("git", "pull"): 1})

    with pytest.raises(ProcessFailedError) as exc_info:
        runner.run(["git", "pull"], operation_context="pull", echo=True)

    assert exc_info.value.returncode == 1
    assert runner.executed_commands == [("git", "pull")]


def test_fake_console_answers_in_order() -> None:
    console = FakeConsole(responses=["n", "y"])

    assert console.prompt("first?") == "n"
    assert console.prompt("second?") == "y"
    assert console.prompts == ["first?", "second?"]


def test_fake_console_without_response_fails_loudly() -> None:
    console = FakeConsole()

    with pytest.raises(AssertionError, match="no response configured"):
        console.prompt("continue?")
