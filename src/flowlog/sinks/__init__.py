"""Log sink subsystem for flowlog.

Re-exports the ABC, registry, and all built-in sink implementations
for convenient access::

    from flowlog.sinks import LogSink, SinkRegistry
    from flowlog.sinks import ConsoleSink, RotatingFileSink
"""

from flowlog.sinks.base import LogSink
from flowlog.sinks.console import ConsoleSink
from flowlog.sinks.discard import DiscardSink
from flowlog.sinks.file import DEFAULT_LOG_FILE, RotatingFileSink, default_log_path
from flowlog.sinks.registry import SinkRegistry, register_sink
from flowlog.sinks.system import SystemSink

__all__ = [
    "DEFAULT_LOG_FILE",
    "ConsoleSink",
    "DiscardSink",
    "LogSink",
    "RotatingFileSink",
    "SinkRegistry",
    "SystemSink",
    "default_log_path",
    "register_sink",
]
