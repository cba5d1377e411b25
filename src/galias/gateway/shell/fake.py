"""Fake Shell implementation for testing."""

from galias.gateway.shell.abc import Shell


class FakeShell(Shell):
    """In-memory fake that reports configured tool paths.

    This class has NO public setup methods. All state is provided via constructor.
    """

    def __init__(self, *, installed_tools: dict[str, str] | None = None) -> None:
        """Create FakeShell.

        Args:
            installed_tools: Mapping of tool name to the path it resolves to.
                Tools not in the mapping are reported as missing.
        """
        self._installed_tools = installed_tools if installed_tools is not None else {}
        self._lookups: list[str] = []

    @property
    def lookups(self) -> list[str]:
        """Tool names looked up so far, in order."""
        return list(self._lookups)

    def get_installed_tool_path(self, tool_name: str) -> str | None:
        self._lookups.append(tool_name)
        return self._installed_tools.get(tool_name)
