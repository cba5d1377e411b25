"""Abstract interface for inspecting the invoking shell's environment."""

from abc import ABC, abstractmethod


class Shell(ABC):
    """Abstract shell operations for dependency injection."""

    @abstractmethod
    def get_installed_tool_path(self, tool_name: str) -> str | None:
        """Resolve a tool on the active search path.

        Args:
            tool_name: Executable name, e.g. "git"

        Returns:
            Absolute path to the executable, or None if it is not on PATH
        """
        ...
