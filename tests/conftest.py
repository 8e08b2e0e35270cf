"""Shared pytest fixtures for flowlog tests.

Provides a recording system log facility, configuration objects that
ignore the developer's environment, and a clean ``FLOWLOG_*`` environment
for every test.
"""

from __future__ import annotations

import os

import pytest

from flowlog.config import FlowLogConfig
from flowlog.dispatcher import LogDispatcher
from flowlog.facility import SystemLogFacility
from flowlog.levels import LogLevel


class RecordingFacility(SystemLogFacility):
    """Test double: records every facility call in order."""

    def __init__(self) -> None:
        self.calls: list[tuple] = []

    def open_log(self, title: str) -> None:
        self.calls.append(("open", title))

    def write_log(self, level: LogLevel, text: str) -> None:
        self.calls.append(("write", level, text))

    def close_log(self) -> None:
        self.calls.append(("close",))

    @property
    def writes(self) -> list[tuple]:
        return [c for c in self.calls if c[0] == "write"]


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path_factory: pytest.TempPathFactory) -> None:
    """Drop FLOWLOG_* variables and run from an empty directory (no .env)."""
    for key in list(os.environ):
        if key.startswith("FLOWLOG_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path_factory.mktemp("cwd"))


@pytest.fixture
def facility() -> RecordingFacility:
    return RecordingFacility()


@pytest.fixture
def dispatcher() -> LogDispatcher:
    """Dispatcher with the default console sink, delivering everything."""
    return LogDispatcher(LogLevel.DEBUG2)


@pytest.fixture
def default_config() -> FlowLogConfig:
    """Return a FlowLogConfig with all default values."""
    return FlowLogConfig(_env_file=None)  # type: ignore[call-arg]


@pytest.fixture
def state_config(tmp_path) -> FlowLogConfig:
    """Config with state writing enabled, targeting a missing directory."""
    return FlowLogConfig(
        _env_file=None,
        state_to_file=True,
        state_file=str(tmp_path / "run" / "flowlog" / "state"),  # type: ignore[call-arg]
    )
