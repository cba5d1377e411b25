"""Parsing of `git stash list` output.

Only stashes created with an explicit message are recognized. Their lines
look like:

    stash@{1}: On feature: wip2

Auto-generated entries (`stash@{0}: WIP on main: abc1234 subject`) and
anything else that does not match are skipped.
"""

import re
from dataclasses import dataclass

_NAMED_STASH_RE = re.compile(r"^stash@\{(\d+)\}: On ([^:]+): (.*)$")


@dataclass(frozen=True)
class StashEntry:
    """A named stash recovered from one line of `git stash list`.

    Attributes:
        index: Stash index N from `stash@{N}`
        branch: Branch the stash was created on
        message: Message given when the stash was pushed
    """

    index: int
    branch: str
    message: str


def parse_stash_line(line: str) -> StashEntry | None:
    """Parse a single stash-list line, returning None if it is not a named stash."""
    match = _NAMED_STASH_RE.match(line.rstrip("\r"))
    if match is None:
        return None
    index, branch, message = match.groups()
    return StashEntry(index=int(index), branch=branch, message=message)


def parse_stash_list(text: str) -> list[StashEntry]:
    """Parse full `git stash list` output into entries, preserving order."""
    entries = []
    for line in text.splitlines():
        entry = parse_stash_line(line)
        if entry is not None:
            entries.append(entry)
    return entries


def find_named_stash(entries: list[StashEntry], *, branch: str, name: str) -> StashEntry | None:
    """Return the first stash created on `branch` with message `name`."""
    for entry in entries:
        if entry.branch == branch and entry.message == name:
            return entry
    return None
