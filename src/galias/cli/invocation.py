from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class Invocation:
    """The command token and its options, taken verbatim from argv.

    Attributes:
        command: First argument, or None when no arguments were given
        opts: Remaining arguments in their original order
    """

    command: str | None
    opts: tuple[str, ...]


def parse_invocation(args: Sequence[str]) -> Invocation:
    """Split raw arguments into the command token and its options.

    No flag parsing happens here; handlers interpret their own options.
    """
    if not args:
        return Invocation(command=None, opts=())
    return Invocation(command=args[0], opts=tuple(args[1:]))
