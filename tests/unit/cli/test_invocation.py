from galias.cli.invocation import Invocation, parse_invocation


def test_splits_command_and_opts() -> None:
    assert parse_invocation(["co", "-b", "feature"]) == Invocation(
        command="co", opts=("-b", "feature")
    )


def test_preserves_option_order() -> None:
    result = parse_invocation(["cp", "c3", "a1", "b2"])
    assert result.opts == ("c3", "a1", "b2")


def test_command_without_opts() -> None:
    assert parse_invocation(["s"]) == Invocation(command="s", opts=())


def test_empty_args_have_no_command() -> None:
    assert parse_invocation([]) == Invocation(command=None, opts=())


def test_opts_are_kept_verbatim() -> None:
    result = parse_invocation(["pr", "  Fix bug ", "main", ""])
    assert result.opts == ("  Fix bug ", "main", "")
