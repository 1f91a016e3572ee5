# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: odinerr
"""
Levels and settings for the loggers that report classified errors.

Read from ``ODINERR_LOGGING_*`` environment variables.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LogLevel(str, Enum):
    """Levels an error report can be emitted at."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"

    def to_stdlib_level(self) -> int:
        return logging.getLevelName(self.value)

    @classmethod
    def from_string(cls, value: str) -> LogLevel:
        """Look up a level by name, ignoring case.

        Raises:
            ValueError: If the name is not a level
        """
        try:
            return cls(value.upper())
        except ValueError:
            raise ValueError(f"Invalid log level: {value}") from None


class LoggingSettings(BaseSettings):
    """How ``get_logger`` configures error-reporting loggers."""

    model_config = SettingsConfigDict(
        env_prefix="ODINERR_LOGGING_",
        extra="ignore",
        case_sensitive=False,
    )

    level: LogLevel = Field(default=LogLevel.INFO)
    json_format: bool = Field(default=False, description="Emit one JSON object per line")
    include_timestamp: bool = Field(default=True)
    console_enabled: bool = Field(default=True, description="Attach a stdout handler")

    @field_validator("level", mode="before")
    @classmethod
    def _level_by_name(cls, v: Any) -> LogLevel:
        if isinstance(v, LogLevel):
            return v
        if not isinstance(v, str):
            raise ValueError(f"Log level must be a string, got {type(v).__name__}")
        return LogLevel.from_string(v)

    @classmethod
    def load(cls) -> LoggingSettings:
        return cls()
