"""Configuration system for flowlog.

Uses pydantic-settings for declarative, layered configuration:
init kwargs -> environment variables (FLOWLOG_*) -> .env file -> field defaults.

Settings are read fresh wherever a component needs the current values:
:class:`~flowlog.state.StateFileWriter` builds a new config per call unless
it was given one.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from flowlog.exceptions import ConfigValidationError
from flowlog.levels import LogLevel

DEFAULT_STATE_FILE_NAME = "flowlog.state"


def default_state_file() -> str:
    """Return the documented default state file location.

    ``~/.config/flowlog/flowlog.state``, or a path relative to the working
    directory when the home directory cannot be determined.
    """
    try:
        base = Path.home() / ".config" / "flowlog"
    except (RuntimeError, KeyError):
        base = Path(".flowlog")
    return str(base / DEFAULT_STATE_FILE_NAME)


class FlowLogConfig(BaseSettings):
    """Configuration for flowlog.

    Resolution order: init kwargs -> env vars (FLOWLOG_*) -> .env file -> defaults.
    """

    model_config = SettingsConfigDict(
        env_prefix="FLOWLOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # --- State file ---

    state_to_file: bool = Field(
        default=False,
        description="Write the active/inactive state to a file",
    )
    state_file: str = Field(
        default_factory=default_state_file,
        description="State file path (blank = documented default)",
    )

    # --- Log output ---

    log_level: str = Field(
        default="INFO",
        description="Least severe level delivered by the dispatcher",
    )
    log_to_file: bool = Field(
        default=False,
        description="Add a rotating file sink to the dispatcher",
    )
    log_file: str = Field(
        default="",
        description="Log file path (blank = ~/flowlog.log)",
    )
    log_title: str = Field(
        default="flowlog",
        description="Title passed to sinks and the system log",
    )
    block_console: bool = Field(
        default=False,
        description="Keep dispatcher traffic off the console while logging to the system log",
    )

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        return LogLevel.parse(value).name

    @property
    def level(self) -> LogLevel:
        return LogLevel[self.log_level]

    def resolved_state_file(self) -> str:
        """Return ``state_file`` trimmed, or the default when blank."""
        path = self.state_file.strip()
        return path or default_state_file()


def load_config(**overrides: object) -> FlowLogConfig:
    """Build a config, converting validation failures to ConfigValidationError.

    Args:
        **overrides: Field values taking precedence over the environment.

    Raises:
        ConfigValidationError: If a value cannot be validated.
    """
    try:
        return FlowLogConfig(**overrides)  # type: ignore[arg-type]
    except ValidationError as exc:
        raise ConfigValidationError(str(exc)) from exc
