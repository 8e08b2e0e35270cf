"""flowlog: pluggable log sinks and an active-state file for input-sharing apps.

Sinks (console, system log, rotating file, discard) are composed in a
:class:`LogDispatcher`. A :class:`SystemLoggerGuard` redirects dispatcher
traffic into the OS system log for a scope, and a :class:`StateFileWriter`
records whether the local instance currently holds input control.
"""

from __future__ import annotations

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("flowlog")
except PackageNotFoundError:
    __version__ = "0.0.0"

from flowlog.config import FlowLogConfig, default_state_file, load_config
from flowlog.dispatcher import LogDispatcher
from flowlog.exceptions import ConfigValidationError, FlowLogError, GuardStateError
from flowlog.facility import LoggingFacility, SyslogFacility, SystemLogFacility, default_facility
from flowlog.factory import attach_logging, build_dispatcher, build_sink, system_logger
from flowlog.guard import SystemLoggerGuard
from flowlog.handler import DispatcherHandler
from flowlog.levels import LogLevel
from flowlog.rotation import LOG_FILE_SIZE_LIMIT, RotationPolicy
from flowlog.sinks import (
    ConsoleSink,
    DiscardSink,
    LogSink,
    RotatingFileSink,
    SinkRegistry,
    SystemSink,
)
from flowlog.state import StateFileWriter, write_state
from flowlog.types import FileWriteOutcome, GuardState, StateWriteResult

__all__ = [
    "LOG_FILE_SIZE_LIMIT",
    "ConfigValidationError",
    "ConsoleSink",
    "DiscardSink",
    "DispatcherHandler",
    "FileWriteOutcome",
    "FlowLogConfig",
    "FlowLogError",
    "GuardState",
    "GuardStateError",
    "LogDispatcher",
    "LogLevel",
    "LogSink",
    "LoggingFacility",
    "RotatingFileSink",
    "RotationPolicy",
    "SinkRegistry",
    "StateFileWriter",
    "StateWriteResult",
    "SyslogFacility",
    "SystemLogFacility",
    "SystemLoggerGuard",
    "SystemSink",
    "__version__",
    "attach_logging",
    "build_dispatcher",
    "build_sink",
    "default_facility",
    "default_state_file",
    "load_config",
    "system_logger",
    "write_state",
]
