from __future__ import annotations

"""
Assertion Facility.

Logs an assertion failure at error level and, when configured to, raises
an AssertionFailure whose message is exactly the logged line.
"""

from typing import Any, Optional

from debugkit.core import dispatch
from debugkit.core.formatter import Params
from debugkit.domain.config import get_assert_configuration
from debugkit.domain.tags import Level


class AssertionFailure(AssertionError):
    """
    Fatal failure raised by assertion_failure().

    Attributes:
        log: The canonical log line that was emitted before raising.
    """

    def __init__(self, log: str):
        super().__init__(log)
        self.log = log


def assertion_failure(
    message: Any,
    *,
    params: Optional[Params] = None,
    file: Optional[str] = None,
    function: Optional[str] = None,
    line: Optional[int] = None,
    stacklevel: int = 1,
) -> str:
    """
    Log an error-level record, then raise if assertion failures are enabled.

    Args:
        message: Any value describing the failure.
        params: Optional structured parameters.
        file: Source file identifier (captured if None).
        function: Function name (captured if None).
        line: Line number (captured if None).
        stacklevel: Frames above this call to attribute the record to.

    Returns:
        str: The logged canonical line (only when not raising).

    Raises:
        AssertionFailure: If AssertConfiguration.throw_assertion_failures is set.
    """
    entry = dispatch.log_at(
        Level.ERROR, message, params=params,
        file=file, function=function, line=line, stacklevel=stacklevel + 1,
    )

    if get_assert_configuration().throw_assertion_failures:
        raise AssertionFailure(entry)
    return entry
