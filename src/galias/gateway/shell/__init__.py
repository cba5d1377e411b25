"""Tool availability lookups."""

from galias.gateway.shell.abc import Shell as Shell
from galias.gateway.shell.fake import FakeShell as FakeShell
from galias.gateway.shell.real import RealShell as RealShell
