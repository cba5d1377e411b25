"""Fake Console implementation for testing."""

from galias.gateway.console.abc import Console


class FakeConsole(Console):
    """In-memory fake that answers prompts from a queue of responses.

    Prompts shown are recorded in `prompts` for assertions.
    """

    def __init__(self, *, responses: list[str] | None = None) -> None:
        """Create FakeConsole.

        Args:
            responses: Answers returned by successive prompt() calls
        """
        self._responses = list(responses) if responses is not None else []
        self._prompts: list[str] = []

    @property
    def prompts(self) -> list[str]:
        return list(self._prompts)

    def prompt(self, message: str) -> str:
        self._prompts.append(message)
        if not self._responses:
            raise AssertionError(f"FakeConsole has no response configured for prompt: {message}")
        return self._responses.pop(0)
