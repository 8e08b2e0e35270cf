"""Ordered severity levels shared by the dispatcher and every sink.

Lower values are more severe. ``FATAL``, ``ERROR`` and ``WARNING`` form the
error band that the console sink routes to ``stderr``.
"""

from __future__ import annotations

import logging
from enum import IntEnum

from flowlog.exceptions import ConfigValidationError

_ALIASES: dict[str, str] = {
    "WARN": "WARNING",
    "ERR": "ERROR",
    "CRITICAL": "FATAL",
}


class LogLevel(IntEnum):
    """Severity of a log message, ordered from most to least severe."""

    FATAL = 0
    ERROR = 1
    WARNING = 2
    PRINT = 3
    NOTE = 4
    INFO = 5
    DEBUG = 6
    DEBUG1 = 7
    DEBUG2 = 8

    @property
    def is_error_band(self) -> bool:
        """Whether the level falls in the closed range ``[FATAL, WARNING]``."""
        return LogLevel.FATAL <= self <= LogLevel.WARNING

    @classmethod
    def parse(cls, name: str | LogLevel) -> LogLevel:
        """Resolve a case-insensitive level name.

        Args:
            name: Level name (``"info"``, ``"Warn"``, ...) or a LogLevel.

        Returns:
            The matching LogLevel.

        Raises:
            ConfigValidationError: If *name* is not a known level.
        """
        if isinstance(name, LogLevel):
            return name
        key = str(name).strip().upper()
        key = _ALIASES.get(key, key)
        try:
            return cls[key]
        except KeyError:
            available = ", ".join(level.name for level in cls)
            raise ConfigValidationError(
                f"Unknown log level: {name!r}. Available: {available}"
            ) from None

    def to_logging(self) -> int:
        """Return the closest stdlib ``logging`` level number."""
        return _TO_LOGGING[self]

    @classmethod
    def from_logging(cls, levelno: int) -> LogLevel:
        """Map a stdlib ``logging`` level number onto a LogLevel.

        Numbers between the standard levels round towards the more
        severe neighbour, so custom levels are never demoted.
        """
        if levelno >= logging.CRITICAL:
            return cls.FATAL
        if levelno >= logging.ERROR:
            return cls.ERROR
        if levelno >= logging.WARNING:
            return cls.WARNING
        if levelno >= logging.INFO:
            return cls.INFO
        return cls.DEBUG


_TO_LOGGING: dict[LogLevel, int] = {
    LogLevel.FATAL: logging.CRITICAL,
    LogLevel.ERROR: logging.ERROR,
    LogLevel.WARNING: logging.WARNING,
    LogLevel.PRINT: logging.INFO,
    LogLevel.NOTE: logging.INFO,
    LogLevel.INFO: logging.INFO,
    LogLevel.DEBUG: logging.DEBUG,
    LogLevel.DEBUG1: logging.DEBUG,
    LogLevel.DEBUG2: logging.DEBUG,
}
