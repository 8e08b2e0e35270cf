"""Sink that accepts nothing.

Inserted at the head of a dispatcher chain, it stops delivery to every
sink inserted before it. :class:`~flowlog.guard.SystemLoggerGuard` uses
it to keep dispatcher traffic off the console.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from flowlog.sinks.base import LogSink
from flowlog.sinks.registry import register_sink

if TYPE_CHECKING:
    from flowlog.levels import LogLevel


@register_sink("discard")
class DiscardSink(LogSink):
    """Rejects every message without producing output."""

    @property
    def name(self) -> str:
        """Return ``'discard'``."""
        return "discard"

    def open(self, title: str) -> None:
        """No-op."""

    def close(self) -> None:
        """No-op."""

    def write(self, level: LogLevel, text: str) -> bool:
        """Always returns ``False``, whatever the level or text."""
        return False
