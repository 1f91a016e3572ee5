# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: odinerr
"""Configuration for classified error construction.

Settings are loaded from ``ODINERR_*`` environment variables.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ErrorSettings(BaseSettings):
    """Settings controlling how ``new()`` builds errors."""

    model_config = SettingsConfigDict(
        env_prefix="ODINERR_",
        extra="ignore",
        case_sensitive=False,
        frozen=True,
    )

    capture_location: bool = Field(
        default=True,
        description=(
            "Record the caller's file and line on new errors. When disabled "
            "every error renders the unknown location (:0)."
        ),
    )

    @classmethod
    def load(cls) -> ErrorSettings:
        """Load settings from environment variables or defaults."""
        return cls()


@lru_cache(maxsize=1)
def get_settings() -> ErrorSettings:
    """Get the process-wide settings, loaded once.

    Call ``get_settings.cache_clear()`` to pick up environment changes.

    Raises:
        pydantic.ValidationError: If an ``ODINERR_*`` variable is malformed
    """
    return ErrorSettings.load()
