"""Active/inactive state file.

The state file is a one-line text file that contains ``1`` while the
local instance holds input control and ``0`` otherwise. It is rewritten in
full on every state change so that external tools (status bars, scripts)
can poll it.

Failures never raise: they are logged on the ``"flowlog"`` logger and
reported as a :class:`~flowlog.types.StateWriteResult` for callers that
want to inspect them.

The file is truncated before the new value is written, so a crash in
between can leave it empty.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Union

from pydantic import ValidationError

from flowlog.config import FlowLogConfig, load_config
from flowlog.exceptions import ConfigValidationError
from flowlog.types import StateWriteResult

if TYPE_CHECKING:
    import os
    from collections.abc import Callable

    ConfigSource = Union[FlowLogConfig, Callable[[], FlowLogConfig], None]

logger = logging.getLogger("flowlog")


class StateFileWriter:
    """Writes the active state to the configured state file.

    Args:
        config: Where settings come from. A :class:`FlowLogConfig` is used
            as-is, a callable is invoked on every write, and ``None`` reads
            a fresh config (environment and ``.env``) per write through
            :func:`~flowlog.config.load_config`.
    """

    def __init__(self, config: ConfigSource = None) -> None:
        self._config = config

    def _current_config(self) -> FlowLogConfig:
        if self._config is None:
            return load_config()
        if isinstance(self._config, FlowLogConfig):
            return self._config
        return self._config()

    def write_state(self, active: bool) -> StateWriteResult:
        """Write ``1`` or ``0`` to the configured file if the feature is enabled.

        Args:
            active: Whether this instance currently holds input control.

        Returns:
            ``DISABLED`` when state writing is switched off,
            ``CONFIG_INVALID`` when the settings fail validation, otherwise
            the result of :meth:`write_to_file`.
        """
        try:
            config = self._current_config()
        except (ConfigValidationError, ValidationError) as exc:
            logger.error("invalid configuration, state file not written: %s", exc)
            return StateWriteResult.CONFIG_INVALID

        if not config.state_to_file:
            logger.debug("state file writing is disabled")
            return StateWriteResult.DISABLED

        path = config.resolved_state_file()
        logger.debug("writing state '%d' to file: %s", 1 if active else 0, path)
        return self.write_to_file(path, active)

    @staticmethod
    def write_to_file(path: str | os.PathLike[str], active: bool) -> StateWriteResult:
        """Replace the content of *path* with ``"1\\n"`` or ``"0\\n"``.

        Missing parent directories are created.
        """
        if not str(path):
            logger.error("state file path is empty, cannot write")
            return StateWriteResult.EMPTY_PATH

        target = Path(path)
        directory = target.absolute().parent
        if not directory.exists():
            logger.debug("creating directory for state file: %s", directory)
            try:
                directory.mkdir(parents=True, exist_ok=True)
            except OSError as exc:
                logger.error("failed to create directory for state file: %s (%s)", directory, exc)
                return StateWriteResult.DIRECTORY_FAILED

        try:
            with open(target, "w", encoding="utf-8", newline="\n") as fh:
                fh.write("1\n" if active else "0\n")
        except OSError as exc:
            logger.error("failed to open state file for writing: %s (%s)", target, exc)
            return StateWriteResult.OPEN_FAILED

        logger.debug("state file written successfully: %s", target)
        return StateWriteResult.WRITTEN


def write_state(active: bool, config: ConfigSource = None) -> StateWriteResult:
    """Shorthand for ``StateFileWriter(config).write_state(active)``."""
    return StateFileWriter(config).write_state(active)
