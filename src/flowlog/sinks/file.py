"""Rotating file sink.

No file handle is kept between writes: every message opens the file in
append mode, writes one line and closes it again, so the path can be
redirected at runtime with :meth:`RotatingFileSink.set_log_filename`.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from flowlog.rotation import RotationPolicy
from flowlog.sinks.base import LogSink
from flowlog.sinks.registry import register_sink
from flowlog.types import FileWriteOutcome

if TYPE_CHECKING:
    import os

    from flowlog.levels import LogLevel

logger = logging.getLogger("flowlog")

DEFAULT_LOG_FILE = "flowlog.log"
"""File name used under the home directory when no path is configured."""


def default_log_path() -> str:
    """Return ``~/flowlog.log``, or ``""`` if the home directory is unknown."""
    try:
        home = Path.home()
    except (RuntimeError, KeyError):
        return ""
    return str(home / DEFAULT_LOG_FILE)


@register_sink("file")
class RotatingFileSink(LogSink):
    """Appends each message as one line to a file, rotating by size.

    Args:
        log_file: Target path. Blank values fall back to
            :func:`default_log_path`.
        policy: Rotation rule. Defaults to a 1 MiB limit with one backup.
    """

    def __init__(
        self,
        log_file: str | os.PathLike[str] = "",
        policy: RotationPolicy | None = None,
    ) -> None:
        self._path: str | None = None
        self._policy = policy if policy is not None else RotationPolicy()
        self._last_outcome: FileWriteOutcome | None = None
        self.set_log_filename(log_file)

    @property
    def name(self) -> str:
        """Return ``'file'``."""
        return "file"

    @property
    def path(self) -> str | None:
        """The resolved target path, or ``None`` if none could be resolved."""
        return self._path

    @property
    def policy(self) -> RotationPolicy:
        return self._policy

    @property
    def last_outcome(self) -> FileWriteOutcome | None:
        """Outcome of the most recent ``write()``, ``None`` before the first."""
        return self._last_outcome

    def set_log_filename(self, log_file: str | os.PathLike[str]) -> None:
        """Resolve and apply a new target path.

        Whitespace is trimmed and a blank value falls back to the default
        file in the home directory. If no path can be resolved at all, a
        warning is logged and the current path is kept.
        """
        file_name = str(log_file).strip()
        if not file_name:
            file_name = default_log_path()

        if not file_name:
            logger.warning("RotatingFileSink: empty log filename specified")
            return

        self._path = file_name

    def open(self, title: str) -> None:
        """No-op: the file is opened per write."""

    def close(self) -> None:
        """No-op: no handle outlives a write."""

    def write(self, level: LogLevel, text: str) -> bool:
        if not self._path:
            self._last_outcome = FileWriteOutcome.NO_PATH
            return False

        path = Path(self._path)
        parent = path.absolute().parent
        if not parent.exists():
            try:
                parent.mkdir(parents=True, exist_ok=True)
            except OSError as exc:
                # The open below reports the failure.
                logger.error("Failed to create log directory %s: %s", parent, exc)

        try:
            # Lone surrogates are written as backslash escapes.
            with open(
                path, "a", encoding="utf-8", errors="backslashreplace", newline="\n"
            ) as fh:
                fh.write(text + "\n")
        except OSError as exc:
            logger.error("Failed to open log file %s: %s", path, exc)
            self._last_outcome = FileWriteOutcome.OPEN_FAILED
            return False

        if self._policy.maybe_rotate(path):
            self._last_outcome = FileWriteOutcome.ROTATED
        else:
            self._last_outcome = FileWriteOutcome.WRITTEN
        return True
