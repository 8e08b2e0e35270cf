"""Scoped redirection of dispatcher traffic into the OS system log.

While a :class:`SystemLoggerGuard` is active every message delivered
through the dispatcher reaches the system log first. With
``block_console=True`` a discard sink sits directly below the system sink,
so the chain stops there and nothing inserted earlier (the console sink in
particular) sees dispatcher traffic until the guard is closed. Writes made
straight to ``sys.stdout``/``sys.stderr`` are not affected.

Usage::

    with SystemLoggerGuard("flowlog-server", block_console=True, dispatcher=log):
        run_daemon()
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from flowlog.exceptions import GuardStateError
from flowlog.sinks.discard import DiscardSink
from flowlog.sinks.system import SystemSink
from flowlog.types import GuardState

if TYPE_CHECKING:
    from types import TracebackType

    from flowlog.dispatcher import LogDispatcher
    from flowlog.facility import SystemLogFacility

logger = logging.getLogger("flowlog")


class SystemLoggerGuard:
    """Owns a system sink (and optionally a discard sink) for its lifetime.

    Construction inserts the sinks, :meth:`close` removes and closes them.
    ``close()`` is idempotent and also runs when a ``with`` block exits,
    including on exceptions.

    Args:
        title: Identifier passed to the system log.
        block_console: Whether to stop dispatcher traffic before it reaches
            sinks inserted earlier, such as the console.
        dispatcher: Dispatcher to register with.
        facility: System log facility for the system sink. ``None`` selects
            the platform default.
    """

    def __init__(
        self,
        title: str,
        block_console: bool,
        dispatcher: LogDispatcher,
        facility: SystemLogFacility | None = None,
    ) -> None:
        self._title = title
        self._dispatcher = dispatcher
        self._state = GuardState.UNINITIALIZED
        self._discard: DiscardSink | None = None

        # Nothing is inserted until the system log is open, so a failing
        # facility leaves the dispatcher untouched.
        self._system = SystemSink(facility)
        self._system.open(title)

        if block_console:
            self._discard = DiscardSink()
            dispatcher.insert(self._discard)
        dispatcher.insert(self._system)

        self._state = GuardState.ACTIVE
        logger.debug("System logger %r active (block_console=%s)", title, block_console)

    @property
    def state(self) -> GuardState:
        return self._state

    @property
    def title(self) -> str:
        return self._title

    @property
    def blocks_console(self) -> bool:
        return self._discard is not None

    @property
    def system_sink(self) -> SystemSink:
        return self._system

    def close(self) -> None:
        """Remove and close the owned sinks. Safe to call more than once."""
        if self._state is GuardState.CLOSED:
            return

        self._dispatcher.remove(self._system)
        self._system.close()
        if self._discard is not None:
            self._dispatcher.remove(self._discard)
            self._discard.close()
            self._discard = None

        self._state = GuardState.CLOSED
        logger.debug("System logger %r closed", self._title)

    def __enter__(self) -> SystemLoggerGuard:
        if self._state is not GuardState.ACTIVE:
            raise GuardStateError(f"System logger {self._title!r} is {self._state.value}")
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
