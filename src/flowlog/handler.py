"""Bridge from the stdlib ``logging`` module into a LogDispatcher."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from flowlog.levels import LogLevel

if TYPE_CHECKING:
    from flowlog.dispatcher import LogDispatcher


class DispatcherHandler(logging.Handler):
    """Formats stdlib records and offers them to a dispatcher.

    Records emitted while the handler is already delivering (for example a
    file sink logging its own write failure on a logger routed here) are
    dropped instead of recursing.

    Args:
        dispatcher: Destination for formatted records.
        level: Minimum stdlib level handled.
    """

    def __init__(self, dispatcher: LogDispatcher, level: int = logging.NOTSET) -> None:
        super().__init__(level)
        self._dispatcher = dispatcher
        self._emitting = False

    @property
    def dispatcher(self) -> LogDispatcher:
        return self._dispatcher

    def emit(self, record: logging.LogRecord) -> None:
        if self._emitting:
            return
        self._emitting = True
        try:
            text = self.format(record)
            self._dispatcher.output(LogLevel.from_logging(record.levelno), text)
        except Exception:
            self.handleError(record)
        finally:
            self._emitting = False
