# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: odinerr
"""
Base classified error and formatting helpers.

This module provides the error value that wraps lower level errors with a
classification code, a message, an original error and the location where it
was created.
"""

from __future__ import annotations

from typing import Any

from pydantic import ValidationError

from odinerr.config import ErrorSettings, get_settings
from odinerr.location import SourceLocation, caller_location

_FIELDS = frozenset({"_code", "_message", "_orig_err", "_location"})


def sprint_error(
    code: str,
    message: str,
    extra: str = "",
    orig_err: BaseException | None = None,
) -> str:
    """Format an error code and message as a string.

    Both extra and orig_err are optional. If they are included their lines
    are added, otherwise they are left out.

    Args:
        code: Classification of the error
        message: Error details message
        extra: Optional extra line, indented with a tab
        orig_err: Optional original error, added as a "caused by" line

    Returns:
        The formatted error string
    """
    msg = f"{code}: {message}"
    if extra != "":
        msg = f"{msg}\n\t{extra}"
    if orig_err is not None:
        msg = f"{msg}\ncaused by: {orig_err}"
    return msg


class ClassifiedError(Exception):
    """
    An error carrying a classification code, a message and an optional
    original error, along with the location where it was created.

    Attributes are read-only once the error is built. Use ``new()`` to
    create one with the caller's location filled in.

    ``args`` and the interpreter-managed slots (``__traceback__``,
    ``__context__``, ``__cause__``, ``__notes__``) remain writable as on any
    exception; they do not affect the rendered error.
    """

    def __init__(
        self,
        code: str,
        message: str,
        orig_err: BaseException | None = None,
        location: SourceLocation | None = None,
    ) -> None:
        """Initialize a classified error.

        Args:
            code: Short, no whitespace phrase depicting the classification
            message: Free flow string with detailed information
            orig_err: Optional original error that caused this one
            location: Where the error was created; unknown if omitted

        Raises:
            AttributeError: If called again on an already built error
        """
        if "_code" in self.__dict__:
            raise AttributeError(f"{type(self).__name__} cannot be re-initialized")

        super().__init__(code, message, orig_err)
        self._code = code
        self._message = message
        self._orig_err = orig_err
        self._location = location if location is not None else SourceLocation()

        if isinstance(orig_err, BaseException):
            self.__cause__ = orig_err

    @property
    def code(self) -> str:
        """Short phrase depicting the classification of the error."""
        return self._code

    @property
    def message(self) -> str:
        """Error details message."""
        return self._message

    @property
    def orig_err(self) -> BaseException | None:
        """The original error, or None if not set."""
        return self._orig_err

    @property
    def location(self) -> SourceLocation:
        return self._location

    @property
    def source_file(self) -> str:
        return self._location.file

    @property
    def source_line(self) -> int:
        return self._location.line

    def __str__(self) -> str:
        """Get string representation of the error.

        Returns:
            String in format '(file:line) (code:...) (msg:...) (err:...)'
        """
        cause = "" if self._orig_err is None else str(self._orig_err)
        return (
            f"({self._location.file}:{self._location.line}) "
            f"(code:{self._code}) (msg:{self._message}) (err:{cause})"
        )

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(code={self._code!r}, message={self._message!r}, "
            f"orig_err={self._orig_err!r}, location={self._location!r})"
        )

    def __reduce__(self) -> tuple[Any, ...]:
        # Tracebacks are not picklable and are dropped; notes are kept
        state = {k: v for k, v in self.__dict__.items() if k not in _FIELDS}
        return (
            type(self),
            (self._code, self._message, self._orig_err, self._location),
            state or None,
        )


def new(
    code: str,
    message: str,
    orig_err: BaseException | None = None,
    *,
    location: SourceLocation | None = None,
    stacklevel: int = 1,
) -> ClassifiedError:
    """Create a classified error described by the code, message and orig_err.

    The location of the caller is recorded on the error unless an explicit
    ``location`` is given or location capture is disabled in the settings.

    Args:
        code: Short, no whitespace phrase depicting the classification
        message: Free flow string with detailed information
        orig_err: Optional original error that caused this one
        location: Explicit source location, used as-is
        stacklevel: Frames above ``new`` to attribute the error to; 1 is
            the direct caller, and smaller values are treated as 1

    Returns:
        A new ClassifiedError
    """
    if location is None:
        if _capture_location_enabled():
            location = caller_location(stacklevel)
        else:
            location = SourceLocation()

    return ClassifiedError(code, message, orig_err, location)


def _capture_location_enabled() -> bool:
    try:
        return get_settings().capture_location
    except ValidationError:
        # new() must not fail; a malformed setting falls back to the default
        return ErrorSettings.model_fields["capture_location"].default
