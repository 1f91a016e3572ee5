# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: odinerr
"""
Error logging for classified errors.

Renders errors with ``sprint_error`` and attaches their code, message and
source location to the log record as structured context.
"""

from __future__ import annotations

import asyncio
import functools
import logging
from typing import Any

from odinerr.base import sprint_error
from odinerr.logging.config import LogLevel
from odinerr.logging.logger import RESERVED_RECORD_ATTRS, get_logger
from odinerr.protocols import ErrorProtocol


class ErrorLogger:
    """Logger specifically designed for error reporting."""

    def __init__(self, name_or_logger: str | logging.Logger = "odinerr.errors") -> None:
        """Initialize an error logger with the given name or logger.

        Args:
            name_or_logger: Either a name for a configured logger or an
                existing logger instance to use directly
        """
        if isinstance(name_or_logger, str):
            self.logger = get_logger(name_or_logger)
        else:
            self.logger = name_or_logger

    @staticmethod
    def format_error(error: BaseException) -> str:
        """Render an error as a log message.

        Classified errors are rendered with ``sprint_error``, with their
        creation site as the extra line when it is known.
        """
        if isinstance(error, ErrorProtocol):
            extra = ""
            source_file = getattr(error, "source_file", "")
            if source_file:
                extra = f"at {source_file}:{getattr(error, 'source_line', 0)}"
            return sprint_error(error.code, error.message, extra, error.orig_err)
        return f"{type(error).__name__}: {error}"

    @staticmethod
    def error_context(error: BaseException) -> dict[str, Any]:
        """Build the structured context attached to the log record."""
        if isinstance(error, ErrorProtocol):
            context: dict[str, Any] = {
                "error_code": error.code,
                "error_message": error.message,
            }
            source_file = getattr(error, "source_file", "")
            if source_file:
                context["source_file"] = source_file
                context["source_line"] = getattr(error, "source_line", 0)
            if error.orig_err is not None:
                context["caused_by"] = type(error.orig_err).__name__
            return context
        return {"error_type": type(error).__name__}

    def log_error(
        self,
        error: BaseException,
        level: LogLevel | str = LogLevel.ERROR,
        additional_context: dict[str, Any] | None = None,
    ) -> None:
        """Log an error.

        Args:
            error: The error to log
            level: The level to log at
            additional_context: Any additional context to include in the log
        """
        if isinstance(level, str):
            try:
                level = LogLevel.from_string(level)
            except ValueError:
                level = LogLevel.ERROR

        context = self.error_context(error)
        if additional_context:
            context.update(additional_context)

        # LogRecord refuses extras that shadow its own attributes
        context = {
            (f"ctx_{key}" if key in RESERVED_RECORD_ATTRS else key): value
            for key, value in context.items()
        }

        self.logger.log(level.to_stdlib_level(), self.format_error(error), extra=context)

    async def alog_error(
        self,
        error: BaseException,
        level: LogLevel | str = LogLevel.ERROR,
        additional_context: dict[str, Any] | None = None,
    ) -> None:
        """Log an error from async code without blocking the event loop."""
        loop = asyncio.get_running_loop()
        await loop.run_in_executor(
            None,
            functools.partial(self.log_error, error, level, additional_context),
        )


def get_error_logger(name: str = "odinerr.errors") -> ErrorLogger:
    return ErrorLogger(name)
