"""Runtime settings for the awg_interface package."""

import os
from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .logging import setup_logging

ENV_PREFIX = "AWG_"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
_TRUTHY = ("1", "true", "yes", "on")


class LoggingConfig(BaseModel):
    """Pydantic configuration for package logging."""

    model_config = ConfigDict(
        str_strip_whitespace=True, validate_assignment=True, extra="forbid"
    )

    level: str = Field(default="INFO", description="Root logging level")
    json_format: bool = Field(default=False, description="Render logs as JSON")
    log_file: str | None = Field(
        default=None, min_length=1, description="Optional log file path"
    )

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Normalize and validate the logging level name."""
        level = v.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"Log level must be one of {', '.join(_LOG_LEVELS)}")
        return level

    @classmethod
    def from_env(cls, env: Mapping[str, str] | None = None) -> "LoggingConfig":
        """Build settings from ``AWG_LOG_*`` environment variables.

        Args:
            env: Mapping to read from (defaults to ``os.environ``)

        Returns:
            LoggingConfig with unset variables left at their defaults
        """
        env = os.environ if env is None else env
        values: dict[str, object] = {}

        level = env.get(f"{ENV_PREFIX}LOG_LEVEL")
        if level:
            values["level"] = level

        json_format = env.get(f"{ENV_PREFIX}LOG_JSON")
        if json_format:
            values["json_format"] = json_format.strip().lower() in _TRUTHY

        log_file = env.get(f"{ENV_PREFIX}LOG_FILE")
        if log_file:
            values["log_file"] = log_file

        return cls(**values)

    def apply(self) -> None:
        """Configure structlog and stdlib logging from these settings."""
        setup_logging(
            level=self.level, json_format=self.json_format, log_file=self.log_file
        )
