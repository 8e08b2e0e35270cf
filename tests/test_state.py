"""Tests for StateFileWriter."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from flowlog.config import FlowLogConfig
from flowlog.state import StateFileWriter, write_state
from flowlog.types import StateWriteResult


def _config(**overrides: object) -> FlowLogConfig:
    return FlowLogConfig(_env_file=None, **overrides)  # type: ignore[call-arg]


class TestWriteState:
    @pytest.mark.parametrize(("active", "content"), [(True, "1\n"), (False, "0\n")])
    def test_enabled_fresh_path(self, state_config: FlowLogConfig, active: bool, content: str) -> None:
        result = StateFileWriter(state_config).write_state(active)
        assert result is StateWriteResult.WRITTEN
        assert Path(state_config.state_file).read_bytes() == content.encode()

    def test_disabled_touches_nothing(self, tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
        target = tmp_path / "sub" / "state"
        writer = StateFileWriter(_config(state_to_file=False, state_file=str(target)))
        with caplog.at_level(logging.DEBUG, logger="flowlog"):
            assert writer.write_state(True) is StateWriteResult.DISABLED
        assert not target.parent.exists()
        assert "disabled" in caplog.text

    def test_disabled_leaves_existing_file_unchanged(self, tmp_path: Path) -> None:
        target = tmp_path / "state"
        target.write_text("0\n", encoding="utf-8")
        before = target.stat().st_mtime_ns
        StateFileWriter(_config(state_file=str(target))).write_state(True)
        assert target.read_text(encoding="utf-8") == "0\n"
        assert target.stat().st_mtime_ns == before

    def test_overwrites_previous_state(self, state_config: FlowLogConfig) -> None:
        writer = StateFileWriter(state_config)
        writer.write_state(True)
        writer.write_state(False)
        assert Path(state_config.state_file).read_text(encoding="utf-8") == "0\n"

    def test_blank_path_uses_default(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        default = tmp_path / "default" / "flowlog.state"
        monkeypatch.setattr("flowlog.config.default_state_file", lambda: str(default))
        writer = StateFileWriter(_config(state_to_file=True, state_file="   "))
        assert writer.write_state(True) is StateWriteResult.WRITTEN
        assert default.read_text(encoding="utf-8") == "1\n"

    def test_path_is_trimmed(self, tmp_path: Path) -> None:
        target = tmp_path / "state"
        writer = StateFileWriter(_config(state_to_file=True, state_file=f"  {target}  "))
        writer.write_state(False)
        assert target.read_text(encoding="utf-8") == "0\n"

    def test_reads_environment_per_call(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        target = tmp_path / "state"
        monkeypatch.setenv("FLOWLOG_STATE_FILE", str(target))
        writer = StateFileWriter()

        assert writer.write_state(True) is StateWriteResult.DISABLED
        monkeypatch.setenv("FLOWLOG_STATE_TO_FILE", "true")
        assert writer.write_state(True) is StateWriteResult.WRITTEN
        assert target.read_text(encoding="utf-8") == "1\n"

    @pytest.mark.parametrize(
        ("variable", "value"),
        [("FLOWLOG_STATE_TO_FILE", "maybe"), ("FLOWLOG_LOG_LEVEL", "verbose")],
    )
    def test_invalid_environment_logs_and_returns(
        self,
        monkeypatch: pytest.MonkeyPatch,
        tmp_path: Path,
        caplog: pytest.LogCaptureFixture,
        variable: str,
        value: str,
    ) -> None:
        target = tmp_path / "sub" / "state"
        monkeypatch.setenv("FLOWLOG_STATE_FILE", str(target))
        monkeypatch.setenv(variable, value)
        with caplog.at_level(logging.ERROR, logger="flowlog"):
            result = StateFileWriter().write_state(True)
        assert result is StateWriteResult.CONFIG_INVALID
        assert not result.ok
        assert not target.parent.exists()
        assert "invalid configuration" in caplog.text

    def test_callable_config_source(self, state_config: FlowLogConfig) -> None:
        calls: list[int] = []

        def _source() -> FlowLogConfig:
            calls.append(1)
            return state_config

        writer = StateFileWriter(_source)
        writer.write_state(True)
        writer.write_state(False)
        assert len(calls) == 2

    def test_module_shorthand(self, state_config: FlowLogConfig) -> None:
        assert write_state(True, state_config) is StateWriteResult.WRITTEN
        assert Path(state_config.state_file).read_text(encoding="utf-8") == "1\n"


class TestWriteToFile:
    def test_empty_path_logs_error(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.ERROR, logger="flowlog"):
            assert StateFileWriter.write_to_file("", True) is StateWriteResult.EMPTY_PATH
        assert "path is empty" in caplog.text

    def test_creates_directories(self, tmp_path: Path) -> None:
        target = tmp_path / "a" / "b" / "state"
        assert StateFileWriter.write_to_file(target, True) is StateWriteResult.WRITTEN
        assert target.read_text(encoding="utf-8") == "1\n"

    def test_directory_failure_logs_and_returns(
        self, tmp_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        blocker = tmp_path / "blocker"
        blocker.write_text("", encoding="utf-8")
        with caplog.at_level(logging.ERROR, logger="flowlog"):
            result = StateFileWriter.write_to_file(blocker / "sub" / "state", True)
        assert result is StateWriteResult.DIRECTORY_FAILED
        assert "failed to create directory" in caplog.text

    def test_open_failure_logs_and_returns(
        self, tmp_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        target = tmp_path / "state"
        target.mkdir()
        with caplog.at_level(logging.ERROR, logger="flowlog"):
            result = StateFileWriter.write_to_file(target, False)
        assert result is StateWriteResult.OPEN_FAILED
        assert not result.ok
        assert "failed to open state file" in caplog.text

    def test_truncates_longer_content(self, tmp_path: Path) -> None:
        target = tmp_path / "state"
        target.write_text("garbage that is much longer\n", encoding="utf-8")
        StateFileWriter.write_to_file(target, True)
        assert target.read_bytes() == b"1\n"
