# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: odinerr

"""
Public API for odinerr logging.

Classified errors never log on their own; these helpers are for application
code that wants to report them.
"""

from __future__ import annotations

from odinerr.logging.config import LoggingSettings, LogLevel
from odinerr.logging.error_logger import ErrorLogger, get_error_logger
from odinerr.logging.logger import StructuredFormatter, get_logger

__all__ = [
    "LogLevel",
    "LoggingSettings",
    "StructuredFormatter",
    "ErrorLogger",
    "get_logger",
    "get_error_logger",
]
