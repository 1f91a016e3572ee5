# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: odinerr
"""
Logger setup for odinerr.

Builds on Python's standard logging module, adding a formatter that appends
record extras as structured context.
"""

from __future__ import annotations

import json
import logging
import sys
from enum import Enum
from typing import Any

from odinerr.logging.config import LoggingSettings, LogLevel

# Attributes every LogRecord carries; anything else came in through ``extra``
RESERVED_RECORD_ATTRS = frozenset(
    logging.LogRecord("", logging.INFO, "", 0, "", (), None).__dict__
) | {"message", "asctime"}


class StructuredFormatter(logging.Formatter):
    """Formatter that appends record extras as context."""

    def __init__(
        self,
        json_format: bool = False,
        include_timestamp: bool = True,
    ) -> None:
        """Initialize a structured formatter.

        Args:
            json_format: Whether to format logs as JSON
            include_timestamp: Whether to include timestamps in logs
        """
        self.json_format = json_format
        self.include_timestamp = include_timestamp

        fmt = "%(message)s"
        if include_timestamp:
            fmt = "%(asctime)s " + fmt
        if not json_format:
            fmt = fmt + " [%(levelname)s]"

        super().__init__(fmt=fmt, datefmt="%Y-%m-%d %H:%M:%S")

    def format(self, record: logging.LogRecord) -> str:
        extra = {
            key: value
            for key, value in record.__dict__.items()
            if key not in RESERVED_RECORD_ATTRS
        }

        if self.json_format:
            return self._format_json(record, extra)
        return self._format_text(super().format(record), extra)

    def _format_json(self, record: logging.LogRecord, extra: dict[str, Any]) -> str:
        log_data: dict[str, Any] = {
            "message": record.getMessage(),
            "level": record.levelname,
            "logger": record.name,
        }
        if self.include_timestamp:
            log_data["timestamp"] = self.formatTime(record, self.datefmt)
        log_data.update({k: self._format_value(v) for k, v in extra.items()})

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data)

    def _format_text(self, message: str, extra: dict[str, Any]) -> str:
        if not extra:
            return message

        ctx_str = " ".join(
            f"{k}={self._quote(self._format_value(v))}" for k, v in extra.items()
        )
        return f"{message} {ctx_str}"

    @staticmethod
    def _format_value(value: Any) -> Any:
        if value is None or isinstance(value, (bool, int, float, str)):
            return value
        if isinstance(value, Enum):
            return value.value
        return str(value)

    @staticmethod
    def _quote(value: Any) -> str:
        if isinstance(value, str):
            # Quote strings that contain whitespace
            if any(ch.isspace() for ch in value):
                return json.dumps(value)
            return value
        return json.dumps(value)


def get_logger(
    name: str,
    level: LogLevel | str | None = None,
    settings: LoggingSettings | None = None,
) -> logging.Logger:
    """Get a configured logger for the specified name.

    Any handlers already on the logger are replaced, so repeated calls do not
    duplicate output.

    Args:
        name: Logger name (typically __name__)
        level: Optional log level override
        settings: Optional settings (loads from environment if None)

    Returns:
        Configured standard library logger
    """
    settings = settings or LoggingSettings.load()
    logger = logging.getLogger(name)

    if level is None:
        level = settings.level
    if isinstance(level, str):
        level = LogLevel.from_string(level)
    logger.setLevel(level.to_stdlib_level())

    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    if settings.console_enabled:
        console = logging.StreamHandler(sys.stdout)
        console.setFormatter(
            StructuredFormatter(
                json_format=settings.json_format,
                include_timestamp=settings.include_timestamp,
            )
        )
        logger.addHandler(console)

    logger.propagate = False
    return logger
