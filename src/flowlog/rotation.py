"""Size-based rotation for append-only log files.

One backup generation is kept: when the active file grows past the limit
it is renamed onto ``<path>.1``, replacing any earlier backup, and the
next write starts a fresh active file.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger("flowlog")

LOG_FILE_SIZE_LIMIT = 1024 * 1024
"""Size in bytes above which a log file is rotated (1 MiB)."""


@dataclass(frozen=True, slots=True)
class RotationPolicy:
    """Rotate a file once it is strictly larger than ``max_bytes``.

    Attributes:
        max_bytes: Size threshold in bytes.
        backup_suffix: Suffix appended to the active path to name the backup.
    """

    max_bytes: int = LOG_FILE_SIZE_LIMIT
    backup_suffix: str = ".1"

    def backup_path(self, path: str | os.PathLike[str]) -> Path:
        """Return the backup location for *path*."""
        return Path(f"{os.fspath(path)}{self.backup_suffix}")

    def should_rotate(self, size: int) -> bool:
        return size > self.max_bytes

    def rotate(self, path: str | os.PathLike[str]) -> bool:
        """Move *path* onto its backup, overwriting the previous backup.

        Args:
            path: Active log file.

        Returns:
            ``True`` if the file was moved. Failures are logged, not raised;
            the active file is left in place when the move fails.
        """
        backup = self.backup_path(path)
        try:
            os.replace(path, backup)
        except OSError as exc:
            logger.error("Failed to rotate log file %s to %s: %s", path, backup, exc)
            return False
        logger.debug("Rotated log file %s to %s", path, backup)
        return True

    def maybe_rotate(self, path: str | os.PathLike[str]) -> bool:
        """Rotate *path* if its current size exceeds the limit.

        Returns:
            ``True`` only if a rotation happened.
        """
        try:
            size = os.stat(path).st_size
        except OSError:
            return False
        if not self.should_rotate(size):
            return False
        return self.rotate(path)
