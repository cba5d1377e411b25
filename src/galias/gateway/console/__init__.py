"""Interactive input gateway."""

from galias.gateway.console.abc import Console as Console
from galias.gateway.console.fake import FakeConsole as FakeConsole
from galias.gateway.console.real import RealConsole as RealConsole
