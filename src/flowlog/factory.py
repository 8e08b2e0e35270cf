"""Composition root: build dispatchers, sinks and guards from configuration."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from flowlog.config import FlowLogConfig
from flowlog.dispatcher import LogDispatcher
from flowlog.guard import SystemLoggerGuard
from flowlog.handler import DispatcherHandler
from flowlog.sinks.file import RotatingFileSink
from flowlog.sinks.registry import SinkRegistry

if TYPE_CHECKING:
    from flowlog.facility import SystemLogFacility
    from flowlog.sinks.base import LogSink

logger = logging.getLogger("flowlog")


def build_sink(name: str, **kwargs: Any) -> LogSink:
    """Instantiate the sink registered under *name*.

    Args:
        name: Registry key (``'console'``, ``'discard'``, ``'file'``,
            ``'system'`` or a plugin name).
        **kwargs: Passed to the sink constructor.

    Raises:
        KeyError: If no sink is registered under *name*.
    """
    return SinkRegistry.create(name, **kwargs)


def build_dispatcher(config: FlowLogConfig | None = None) -> LogDispatcher:
    """Create a dispatcher with the console sink and, if enabled, a file sink.

    The file sink is opened with the configured title and inserted on top
    of the console sink, so it sees messages first.
    """
    if config is None:
        config = FlowLogConfig()

    dispatcher = LogDispatcher(config.level, title=config.log_title)
    if config.log_to_file:
        file_sink = RotatingFileSink(config.log_file)
        file_sink.open(config.log_title)
        dispatcher.insert(file_sink)
        logger.debug("Logging to file %s", file_sink.path)
    return dispatcher


def system_logger(
    dispatcher: LogDispatcher,
    config: FlowLogConfig | None = None,
    facility: SystemLogFacility | None = None,
) -> SystemLoggerGuard:
    """Open a :class:`SystemLoggerGuard` using the configured title and console policy."""
    if config is None:
        config = FlowLogConfig()
    return SystemLoggerGuard(config.log_title, config.block_console, dispatcher, facility)


def attach_logging(
    dispatcher: LogDispatcher,
    logger_name: str = "flowlog",
    fmt: str = "[%(levelname)s] %(message)s",
) -> DispatcherHandler:
    """Route a stdlib logger into *dispatcher*.

    Returns:
        The installed handler, so callers can remove it again.
    """
    handler = DispatcherHandler(dispatcher)
    handler.setFormatter(logging.Formatter(fmt))
    logging.getLogger(logger_name).addHandler(handler)
    return handler
