"""Subprocess execution gateway."""

from galias.gateway.process.abc import ProcessFailedError as ProcessFailedError
from galias.gateway.process.abc import ProcessRunner as ProcessRunner
from galias.gateway.process.dry_run import DryRunProcessRunner as DryRunProcessRunner
from galias.gateway.process.fake import FakeProcessRunner as FakeProcessRunner
from galias.gateway.process.real import RealProcessRunner as RealProcessRunner
