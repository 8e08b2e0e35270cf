"""OS-native system log facilities.

A facility is the injected capability behind
:class:`~flowlog.sinks.system.SystemSink`. On POSIX systems it wraps the
stdlib ``syslog`` module. Elsewhere the messages are forwarded to a stdlib
``logging`` logger named after the title, so that the host application's
logging configuration decides where they land.
"""

from __future__ import annotations

import logging
import sys
from abc import ABC, abstractmethod

from flowlog.levels import LogLevel

logger = logging.getLogger("flowlog")


class SystemLogFacility(ABC):
    """Open/write/close primitives of an OS logging service."""

    @abstractmethod
    def open_log(self, title: str) -> None:
        """Start a logging session identified by *title*."""

    @abstractmethod
    def write_log(self, level: LogLevel, text: str) -> None:
        """Record one message. Failures are not reported."""

    @abstractmethod
    def close_log(self) -> None:
        """End the logging session."""


class SyslogFacility(SystemLogFacility):
    """POSIX ``syslog`` facility.

    Args:
        facility: syslog facility code. ``None`` selects ``LOG_DAEMON``.
    """

    def __init__(self, facility: int | None = None) -> None:
        import syslog

        self._syslog = syslog
        self._facility = syslog.LOG_DAEMON if facility is None else facility
        self._priorities: dict[LogLevel, int] = {
            LogLevel.FATAL: syslog.LOG_ERR,
            LogLevel.ERROR: syslog.LOG_ERR,
            LogLevel.WARNING: syslog.LOG_WARNING,
            LogLevel.PRINT: syslog.LOG_INFO,
            LogLevel.NOTE: syslog.LOG_NOTICE,
            LogLevel.INFO: syslog.LOG_INFO,
        }

    def priority(self, level: LogLevel) -> int:
        """Return the syslog priority for *level* (``LOG_DEBUG`` for debug levels)."""
        return self._priorities.get(level, self._syslog.LOG_DEBUG)

    def open_log(self, title: str) -> None:
        self._syslog.openlog(title, self._syslog.LOG_PID, self._facility)

    def write_log(self, level: LogLevel, text: str) -> None:
        self._syslog.syslog(self.priority(level), text)

    def close_log(self) -> None:
        self._syslog.closelog()


class LoggingFacility(SystemLogFacility):
    """Forwards to the stdlib logger named by the title passed to ``open_log``.

    Used on platforms without ``syslog``. Messages written before
    ``open_log`` go to the ``"flowlog.system"`` logger.
    """

    def __init__(self) -> None:
        self._target = logging.getLogger("flowlog.system")

    def open_log(self, title: str) -> None:
        self._target = logging.getLogger(title or "flowlog.system")

    def write_log(self, level: LogLevel, text: str) -> None:
        self._target.log(level.to_logging(), "%s", text)

    def close_log(self) -> None:
        self._target = logging.getLogger("flowlog.system")


def default_facility() -> SystemLogFacility:
    """Return the native facility for the running platform."""
    if sys.platform == "win32":
        logger.debug("syslog unavailable on %s, forwarding system log to logging", sys.platform)
        return LoggingFacility()
    return SyslogFacility()
