from __future__ import annotations

"""
Log Record Formatter.

Renders a transient log record into its display strings. Every function in
this module is pure: the same record always produces byte-identical output
and formatting never raises, whatever the message or parameter values are.

Renderings:
    console:   <level><scope-part><message>[ <params>] ->  <file>.<function> [<line>]
    platform:  <level> <message>[ <params>] ->  <file>.<function> [<line>]
    canonical: <level> <message> -> <file>.<function> [<line>]
"""

import ntpath
import posixpath
from dataclasses import dataclass
from typing import Any, Dict, Mapping, NamedTuple, Optional

from debugkit.core.location import SourceLocation
from debugkit.domain.tags import Level, Scope

NIL_TOKEN = "nil"
UNREPRESENTABLE = "<unrepresentable value>"

Params = Mapping[str, Any]


# -----------------------------------------------------------------------------
# Data Models
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class LogRecord:
    """
    Transient record built for a single log call.

    Attributes:
        level: Severity tag.
        message: Raw message value; stringified only while formatting.
        location: Call-site metadata.
        scope: Optional functional-area tag.
        params: Optional structured parameters.
    """
    level: Level
    message: Any
    location: SourceLocation
    scope: Optional[Scope] = None
    params: Optional[Params] = None


class LogEntry(NamedTuple):
    """Payload delivered to the registered callback."""
    message: str
    params: Optional[Params]


# =============================================================================
# Stringification
# =============================================================================

def describe(value: Any) -> str:
    """
    Convert any value to its human-readable string form.

    Args:
        value: Arbitrary value, including None.

    Returns:
        str: The display string, "nil" for None, or a placeholder when the
        value cannot be stringified.
    """
    if value is None:
        return NIL_TOKEN
    if isinstance(value, str):
        return value
    try:
        return str(value)
    except Exception:
        return UNREPRESENTABLE


def describe_error(err: BaseException) -> str:
    """
    Human-readable description of an exception.

    Falls back to the exception class name when its message is empty.
    """
    text = describe(err)
    if text == "" or text == UNREPRESENTABLE:
        return type(err).__name__
    return text


def format_params(params: Optional[Params]) -> str:
    """
    Render parameters as a mapping literal with stringified values.

    Args:
        params: Mapping of keys to optional values, or None.

    Returns:
        str: "" when no parameters were supplied, otherwise e.g.
        "{'user': 'bob', 'token': 'nil'}".
    """
    if params is None:
        return ""
    try:
        rendered: Dict[str, str] = {
            describe(key): describe(value) for key, value in params.items()
        }
        return repr(rendered)
    except Exception:
        return UNREPRESENTABLE


def display_file_name(file: str) -> str:
    """
    Reduce a file identifier to its last path component without extension.

    Handles both POSIX and Windows separators.
    """
    name = posixpath.basename(ntpath.basename(file or ""))
    stem, _ = posixpath.splitext(name)
    return stem or name


# =============================================================================
# Renderings
# =============================================================================

def format_console(record: LogRecord) -> str:
    """Render the console line, including scope and parameters."""
    scope = f" {record.scope.symbol} " if record.scope is not None else " "
    return (
        f"{record.level.symbol}{scope}{describe(record.message)}"
        f"{_params_suffix(record.params)} ->  {_location_suffix(record.location)}"
    )


def format_platform(record: LogRecord) -> str:
    """Render the platform-log line. Scope is omitted."""
    return (
        f"{record.level.symbol} {describe(record.message)}"
        f"{_params_suffix(record.params)} ->  {_location_suffix(record.location)}"
    )


def format_canonical(record: LogRecord) -> str:
    """Render the sink-independent string returned to callers and the callback."""
    return (
        f"{record.level.symbol} {describe(record.message)}"
        f" -> {_location_suffix(record.location)}"
    )


# -----------------------------------------------------------------------------
# Private Helpers
# -----------------------------------------------------------------------------

def _params_suffix(params: Optional[Params]) -> str:
    if params is None:
        return ""
    return " " + format_params(params)


def _location_suffix(location: SourceLocation) -> str:
    return f"{display_file_name(location.file)}.{location.function} [{location.line}]"
