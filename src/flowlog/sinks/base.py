"""Abstract base class for all log sinks.

Every destination a dispatcher can deliver to (the console, the OS system
log, a rotating file, or the discard sink used to silence the rest of the
chain) implements this interface. Subclasses must implement ``name``,
``open()``, ``close()`` and ``write()``. ``flush()`` defaults to a no-op.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from flowlog.levels import LogLevel


class LogSink(ABC):
    """Abstract base for all log sinks.

    Sinks share no mutable state with one another. The component that
    inserts a sink into a dispatcher owns it and is responsible for
    removing and closing it.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable sink identifier (e.g., ``'console'``, ``'file'``)."""

    @abstractmethod
    def open(self, title: str) -> None:
        """Prepare the sink for output.

        Args:
            title: Application title, used by sinks that label their output.
        """

    @abstractmethod
    def close(self) -> None:
        """Release whatever ``open()`` acquired."""

    @abstractmethod
    def write(self, level: LogLevel, text: str) -> bool:
        """Deliver one formatted message.

        Args:
            level: Severity of the message.
            text: Fully formatted message text, without a line terminator.

        Returns:
            ``True`` if the message was accepted. A dispatcher stops walking
            its sink chain at the first sink that returns ``False``.
        """

    def flush(self) -> None:
        """Flush buffered output. No-op unless a sink buffers."""

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name!r}>"
