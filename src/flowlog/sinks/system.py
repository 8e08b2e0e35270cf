"""Sink delegating to the OS-native system log."""

from __future__ import annotations

from typing import TYPE_CHECKING

from flowlog.facility import default_facility
from flowlog.sinks.base import LogSink
from flowlog.sinks.registry import register_sink

if TYPE_CHECKING:
    from flowlog.facility import SystemLogFacility
    from flowlog.levels import LogLevel


@register_sink("system")
class SystemSink(LogSink):
    """Hands every message to a :class:`~flowlog.facility.SystemLogFacility`.

    The facility is trusted to surface its own errors, so ``write()``
    always reports the message as accepted.

    Args:
        facility: Facility to delegate to. ``None`` selects
            :func:`~flowlog.facility.default_facility`.
    """

    def __init__(self, facility: SystemLogFacility | None = None) -> None:
        self._facility = facility if facility is not None else default_facility()

    @property
    def name(self) -> str:
        """Return ``'system'``."""
        return "system"

    @property
    def facility(self) -> SystemLogFacility:
        return self._facility

    def open(self, title: str) -> None:
        self._facility.open_log(title)

    def close(self) -> None:
        self._facility.close_log()

    def write(self, level: LogLevel, text: str) -> bool:
        self._facility.write_log(level, text)
        return True
