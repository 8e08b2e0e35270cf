"""Console sink writing to the standard streams."""

from __future__ import annotations

import sys
from typing import TextIO

from flowlog.levels import LogLevel
from flowlog.sinks.base import LogSink
from flowlog.sinks.registry import register_sink


@register_sink("console")
class ConsoleSink(LogSink):
    """Writes each message as one line on ``stdout`` or ``stderr``.

    Levels in ``[FATAL, WARNING]`` go to the error stream, everything else
    to standard output. Standard output is flushed after every write.

    Args:
        stdout: Stream for ordinary output. ``None`` means ``sys.stdout``
            looked up at write time.
        stderr: Stream for the error band. ``None`` means ``sys.stderr``
            looked up at write time.
    """

    def __init__(self, stdout: TextIO | None = None, stderr: TextIO | None = None) -> None:
        self._stdout = stdout
        self._stderr = stderr

    @property
    def name(self) -> str:
        """Return ``'console'``."""
        return "console"

    def open(self, title: str) -> None:
        """No-op."""

    def close(self) -> None:
        """No-op."""

    def write(self, level: LogLevel, text: str) -> bool:
        out = self._stdout if self._stdout is not None else sys.stdout
        err = self._stderr if self._stderr is not None else sys.stderr

        stream = err if LogLevel.FATAL <= level <= LogLevel.WARNING else out
        stream.write(text + "\n")
        if stream is err:
            err.flush()
        out.flush()
        return True

    def flush(self) -> None:
        """No-op: every write already flushes."""
