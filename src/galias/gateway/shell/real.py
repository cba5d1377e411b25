"""Real shell implementation using shutil.which."""

import shutil

from galias.gateway.shell.abc import Shell


class RealShell(Shell):
    """Production implementation backed by the PATH of this process."""

    def get_installed_tool_path(self, tool_name: str) -> str | None:
        return shutil.which(tool_name)
