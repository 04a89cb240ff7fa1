from __future__ import annotations

"""
Call-Site Metadata.

Resolves the (file, function, line) triple attached to every log record.
Values supplied explicitly by the caller win; missing ones are captured from
the calling frame, counting frames the same way logging.Logger.log counts
its `stacklevel` argument.
"""

import sys
from dataclasses import dataclass
from typing import Optional

UNKNOWN_FILE = "<unknown>"
UNKNOWN_FUNCTION = "<unknown>"


@dataclass(frozen=True)
class SourceLocation:
    """
    Origin of a log call.

    Attributes:
        file: Source file identifier (usually a path).
        function: Function or site name.
        line: Line number within the file.
    """
    file: str
    function: str
    line: int

    @classmethod
    def capture(cls, depth: int = 1) -> SourceLocation:
        """
        Capture the location of a frame above the caller.

        Args:
            depth: 1 is the caller of the function that invokes capture().

        Returns:
            SourceLocation: Captured metadata, or placeholders when the
            stack is shallower than requested.
        """
        try:
            frame = sys._getframe(depth + 1)
        except ValueError:
            return cls(UNKNOWN_FILE, UNKNOWN_FUNCTION, 0)
        return cls(frame.f_code.co_filename, frame.f_code.co_name, frame.f_lineno)


def resolve_location(
    file: Optional[str],
    function: Optional[str],
    line: Optional[int],
    stacklevel: int = 1,
) -> SourceLocation:
    """
    Merge explicit call-site values with the captured caller frame.

    Args:
        file: Explicit file identifier, or None to capture.
        function: Explicit function name, or None to capture.
        line: Explicit line number, or None to capture.
        stacklevel: Frames above the public logging call (1 = its caller).

    Returns:
        SourceLocation: Fully populated location.
    """
    if file is not None and function is not None and line is not None:
        return SourceLocation(file, function, int(line))

    # +1 skips the public entry point that called us
    captured = SourceLocation.capture(stacklevel + 1)
    return SourceLocation(
        file=captured.file if file is None else file,
        function=captured.function if function is None else function,
        line=captured.line if line is None else int(line),
    )
