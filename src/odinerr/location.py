# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: odinerr
"""
Call-site location capture.

Provides the source location value stored on classified errors and the
frame-walking helper used to discover it at construction time.
"""

from __future__ import annotations

import inspect
import os
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """File base name and line number of a call site.

    The default value (empty file, line 0) is the unknown location.
    """

    file: str = ""
    line: int = 0

    def __str__(self) -> str:
        return f"{self.file}:{self.line}"


def caller_location(stacklevel: int = 1) -> SourceLocation:
    """Get the location of a frame above the function calling this one.

    Args:
        stacklevel: How many frames to walk up from the function that calls
            ``caller_location``. 1 is that function's caller; smaller
            values are treated as 1.

    Returns:
        The location of the requested frame, or the unknown location if the
        interpreter exposes no frame or the stack is not deep enough.
    """
    frame = inspect.currentframe()
    try:
        if frame is None:
            return SourceLocation()

        # Skip our own frame, then the requested number of callers
        frame = frame.f_back
        for _ in range(max(stacklevel, 1)):
            if frame is None:
                break
            frame = frame.f_back

        if frame is None:
            return SourceLocation()

        return SourceLocation(
            file=os.path.basename(frame.f_code.co_filename),
            line=frame.f_lineno or 0,
        )
    finally:
        # Break the reference cycle between this frame and the walked frames
        del frame
