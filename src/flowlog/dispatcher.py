"""Ordered collection of sinks that every formatted message is offered to.

The most recently inserted sink sees a message first. Delivery walks the
chain and stops at the first sink that rejects the message, which is how
a :class:`~flowlog.sinks.discard.DiscardSink` inserted on top of the
console sink keeps messages off the console. Sinks inserted with
``always=True`` receive every message regardless of rejections.

Not thread-safe: callers that write from several threads must serialise
access themselves.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from flowlog.levels import LogLevel
from flowlog.sinks.console import ConsoleSink

if TYPE_CHECKING:
    from flowlog.sinks.base import LogSink

logger = logging.getLogger("flowlog")


class LogDispatcher:
    """Delivers ``(level, text)`` pairs to registered sinks.

    Args:
        threshold: Least severe level still delivered. Messages with a
            higher (less severe) level are dropped.
        title: Title the default console sink is opened with.
        console: Whether to create and own a default :class:`ConsoleSink`.
    """

    def __init__(
        self,
        threshold: LogLevel | str = LogLevel.INFO,
        *,
        title: str = "flowlog",
        console: bool = True,
    ) -> None:
        self._threshold = LogLevel.parse(threshold)
        self._title = title
        self._sinks: list[LogSink] = []
        self._always: list[LogSink] = []
        self._owned: list[LogSink] = []

        if console:
            default = ConsoleSink()
            default.open(title)
            self._owned.append(default)
            self.insert(default)

    @property
    def threshold(self) -> LogLevel:
        return self._threshold

    @threshold.setter
    def threshold(self, level: LogLevel | str) -> None:
        self._threshold = LogLevel.parse(level)

    @property
    def title(self) -> str:
        return self._title

    @property
    def sinks(self) -> list[LogSink]:
        """Ordinary sinks in delivery order (a copy)."""
        return list(self._sinks)

    @property
    def always_sinks(self) -> list[LogSink]:
        """Sinks that receive every message, in delivery order (a copy)."""
        return list(self._always)

    def __contains__(self, sink: object) -> bool:
        return any(s is sink for s in self._sinks) or any(s is sink for s in self._always)

    def insert(self, sink: LogSink, *, always: bool = False) -> None:
        """Put *sink* at the head of its chain.

        The sink is not opened here; the owner opens it before inserting.
        """
        target = self._always if always else self._sinks
        target.insert(0, sink)
        logger.debug("Inserted %s sink (always=%s)", sink.name, always)

    def remove(self, sink: LogSink) -> None:
        """Drop *sink* from both chains. Unknown sinks are ignored.

        The sink is not closed: that is left to whoever inserted it.
        """
        self._sinks = [s for s in self._sinks if s is not sink]
        self._always = [s for s in self._always if s is not sink]

    def output(self, level: LogLevel, text: str) -> bool:
        """Offer one message to the sinks.

        Returns:
            ``True`` if every ordinary sink accepted the message, ``False``
            if it was filtered out or a sink stopped the chain.
        """
        if level > self._threshold:
            return False

        for sink in list(self._always):
            self._deliver(sink, level, text)

        for sink in list(self._sinks):
            if not self._deliver(sink, level, text):
                return False
        return True

    def flush(self) -> None:
        for sink in self._always + self._sinks:
            sink.flush()

    def close(self) -> None:
        """Remove and close the sinks this dispatcher created itself."""
        for sink in self._owned:
            self.remove(sink)
            sink.close()
        self._owned.clear()

    def _deliver(self, sink: LogSink, level: LogLevel, text: str) -> bool:
        try:
            return sink.write(level, text)
        except Exception:  # Intentional: one broken sink must not break logging
            logger.warning("Log sink %r raised while writing", sink.name, exc_info=True)
            return False
