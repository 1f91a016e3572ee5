# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: odinerr

"""
Capability interface for classified errors.

Any error exposing a classification code, a detail message and an optional
original error satisfies this protocol, whether or not it derives from
``ClassifiedError``.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class ErrorProtocol(Protocol):
    """Protocol for errors that carry a code, a message and a cause."""

    @property
    def code(self) -> str:
        """Short phrase depicting the classification of the error."""
        ...

    @property
    def message(self) -> str:
        """Error details message."""
        ...

    @property
    def orig_err(self) -> BaseException | None:
        """The original error, or None if not set."""
        ...

    def __str__(self) -> str: ...
