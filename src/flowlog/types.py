"""Result kinds returned next to the log-only failure reporting."""

from __future__ import annotations

from enum import Enum


class FileWriteOutcome(str, Enum):
    """Outcome of the latest :meth:`RotatingFileSink.write` call."""

    WRITTEN = "written"
    ROTATED = "rotated"
    NO_PATH = "no_path"
    OPEN_FAILED = "open_failed"

    @property
    def accepted(self) -> bool:
        """Whether the line reached the file."""
        return self in (FileWriteOutcome.WRITTEN, FileWriteOutcome.ROTATED)


class StateWriteResult(str, Enum):
    """Outcome of a state file write.

    Callers that only care about the side effect can ignore it; every
    failure kind has already been logged by the time it is returned.
    """

    WRITTEN = "written"
    DISABLED = "disabled"
    EMPTY_PATH = "empty_path"
    DIRECTORY_FAILED = "directory_failed"
    OPEN_FAILED = "open_failed"
    CONFIG_INVALID = "config_invalid"

    @property
    def ok(self) -> bool:
        return self is StateWriteResult.WRITTEN


class GuardState(str, Enum):
    """Lifecycle of a :class:`SystemLoggerGuard`."""

    UNINITIALIZED = "uninitialized"
    ACTIVE = "active"
    CLOSED = "closed"
