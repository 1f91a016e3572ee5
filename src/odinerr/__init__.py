# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: odinerr

"""
Classified errors: a code, a message, an optional original error and the
location where the error was created.
"""

from __future__ import annotations

from odinerr.base import ClassifiedError, new, sprint_error
from odinerr.config import ErrorSettings, get_settings
from odinerr.location import SourceLocation, caller_location
from odinerr.protocols import ErrorProtocol

__all__ = [
    # Errors
    "ClassifiedError",
    "ErrorProtocol",
    "new",
    "sprint_error",
    # Location
    "SourceLocation",
    "caller_location",
    # Settings
    "ErrorSettings",
    "get_settings",
]
