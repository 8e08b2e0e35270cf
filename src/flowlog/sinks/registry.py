"""Name-based lookup of sink classes.

The built-in sinks register themselves with ``@register_sink`` when their
modules are imported. Packages that ship extra sinks advertise them in the
``flowlog.sinks`` entry-point group; those are imported the first time a
name is missing from the built-in table. Only :class:`LogSink` subclasses
are accepted from either source.
"""

from __future__ import annotations

import importlib.metadata
import logging
from typing import TYPE_CHECKING, Any, ClassVar

from flowlog.sinks.base import LogSink

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger("flowlog")

_ENTRY_POINT_GROUP = "flowlog.sinks"


def _is_sink_class(obj: object) -> bool:
    return isinstance(obj, type) and issubclass(obj, LogSink)


class SinkRegistry:
    """Maps sink names (``'console'``, ``'file'``...) to sink classes."""

    _registry: ClassVar[dict[str, type[LogSink]]] = {}
    _entry_points_loaded: ClassVar[bool] = False

    @classmethod
    def register(cls, name: str) -> Callable[[type[LogSink]], type[LogSink]]:
        """Class decorator that files a sink class under *name*.

        Raises:
            TypeError: The decorated object is not a :class:`LogSink` subclass.
            ValueError: *name* already belongs to a different class.
        """

        def decorator(sink_cls: type[LogSink]) -> type[LogSink]:
            if not _is_sink_class(sink_cls):
                raise TypeError(f"{sink_cls!r} is not a LogSink subclass")
            current = cls._registry.get(name)
            if current is not None and current is not sink_cls:
                raise ValueError(f"Log sink name {name!r} is taken by {current.__name__}")
            cls._registry[name] = sink_cls
            return sink_cls

        return decorator

    @classmethod
    def get(cls, name: str) -> type[LogSink]:
        """Return the sink class registered under *name*.

        Raises:
            KeyError: No built-in or plugin sink has that name.
        """
        if name not in cls._registry and not cls._entry_points_loaded:
            cls._load_entry_points()
        try:
            return cls._registry[name]
        except KeyError:
            available = ", ".join(sorted(cls._registry)) or "(none)"
            raise KeyError(f"Unknown log sink: {name!r}. Available: {available}") from None

    @classmethod
    def create(cls, name: str, **kwargs: Any) -> LogSink:
        """Instantiate the sink registered under *name* with *kwargs*.

        The sink is not opened; that is left to whoever inserts it.
        """
        return cls.get(name)(**kwargs)

    @classmethod
    def list_available(cls) -> list[str]:
        if not cls._entry_points_loaded:
            cls._load_entry_points()
        return sorted(cls._registry)

    @classmethod
    def _load_entry_points(cls) -> None:
        # A broken or foreign plugin is logged and skipped; the remaining
        # plugins and the built-ins stay usable.
        cls._entry_points_loaded = True
        try:
            eps = importlib.metadata.entry_points(group=_ENTRY_POINT_GROUP)
        except Exception:
            logger.warning("Failed to read entry points for %s", _ENTRY_POINT_GROUP, exc_info=True)
            return

        for ep in eps:
            if ep.name in cls._registry:
                continue
            try:
                obj = ep.load()
            except Exception:
                logger.warning(
                    "Failed to load log sink plugin %r (%s)", ep.name, ep.value, exc_info=True
                )
                continue
            if not _is_sink_class(obj):
                logger.warning(
                    "Ignoring log sink plugin %r: %s is not a LogSink subclass", ep.name, ep.value
                )
                continue
            cls._registry[ep.name] = obj
            logger.debug("Loaded log sink %r from %s", ep.name, ep.value)

    @classmethod
    def _reset(cls) -> None:
        """Forget every registration. Test helper."""
        cls._registry.clear()
        cls._entry_points_loaded = False


register_sink = SinkRegistry.register
