"""Abstract interface for reading interactive input.

Commands that need confirmation read through this gateway so tests can
answer prompts deterministically without a terminal.
"""

from abc import ABC, abstractmethod


class Console(ABC):
    """Abstract source of interactive user input."""

    @abstractmethod
    def prompt(self, message: str) -> str:
        """Show a message and block until the user enters a line.

        Args:
            message: Prompt text shown to the user

        Returns:
            The entered line without its trailing newline (may be empty)
        """
        ...
