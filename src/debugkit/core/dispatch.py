from __future__ import annotations

"""
Log Dispatch Pipeline.

Entry points of the logging facility. Every variant converges on a single
emission routine which:

1. Reads the configuration snapshot once and returns "" if logs are blocked.
2. Formats the record (console, platform and canonical renderings).
3. Writes to the console sink, then to the platform sink, when enabled.
4. Invokes the registered callback with (level, LogEntry(canonical, params)).
5. Returns the canonical string.

All work happens synchronously on the calling thread. Log calls never raise.
"""

import logging
from typing import Any, Callable, Optional

from debugkit.core.formatter import (
    UNREPRESENTABLE,
    LogEntry,
    LogRecord,
    Params,
    describe_error,
    format_canonical,
    format_console,
    format_platform,
)
from debugkit.core.location import resolve_location
from debugkit.domain.config import LogConfiguration, get_log_configuration
from debugkit.domain.tags import Level, Scope
from debugkit.infra import sinks

logger = logging.getLogger(__name__)

LogCallback = Callable[[Level, LogEntry], None]

# -----------------------------------------------------------------------------
# Callback Slot
# -----------------------------------------------------------------------------
_callback: Optional[LogCallback] = None


def set_callback(callback: Optional[LogCallback]) -> None:
    """
    Register the process-wide log callback. Last registration wins.

    Args:
        callback: Callable receiving (level, LogEntry), or None to unregister.
    """
    global _callback
    _callback = callback


def get_callback() -> Optional[LogCallback]:
    return _callback


def clear_callback() -> None:
    set_callback(None)


# =============================================================================
# Public API
# =============================================================================

def log_at(
    level: Level,
    message: Any,
    *,
    scope: Optional[Scope] = None,
    params: Optional[Params] = None,
    file: Optional[str] = None,
    function: Optional[str] = None,
    line: Optional[int] = None,
    stacklevel: int = 1,
) -> str:
    """
    Log a message at an explicit level.

    Args:
        level: Severity tag (well-known or custom).
        message: Any value; stringified for display.
        scope: Optional functional-area tag.
        params: Optional structured parameters.
        file: Source file identifier (captured from the caller if None).
        function: Function name (captured from the caller if None).
        line: Line number (captured from the caller if None).
        stacklevel: Frames above this call to attribute the record to.

    Returns:
        str: Canonical log string, or "" when logging is blocked.
    """
    cfg = get_log_configuration()
    if cfg.block_all_logs:
        return ""

    location = resolve_location(file, function, line, stacklevel)
    return _emit(cfg, LogRecord(level, message, location, scope, params))


def log(
    message: Any,
    *,
    level: Level = Level.STANDARD,
    scope: Optional[Scope] = None,
    params: Optional[Params] = None,
    file: Optional[str] = None,
    function: Optional[str] = None,
    line: Optional[int] = None,
    stacklevel: int = 1,
) -> str:
    """
    Log a message, at standard level unless another level is given.

    Example:
        >>> debugkit.log("Hello, World")
        >>> debugkit.log("Booting", scope=Scope.STARTUP)
    """
    return log_at(
        level, message, scope=scope, params=params,
        file=file, function=function, line=line, stacklevel=stacklevel + 1,
    )


def info(message: Any, *, scope: Optional[Scope] = None, params: Optional[Params] = None,
         file: Optional[str] = None, function: Optional[str] = None,
         line: Optional[int] = None, stacklevel: int = 1) -> str:
    return log_at(Level.INFO, message, scope=scope, params=params,
                  file=file, function=function, line=line, stacklevel=stacklevel + 1)


def debug(message: Any, *, scope: Optional[Scope] = None, params: Optional[Params] = None,
          file: Optional[str] = None, function: Optional[str] = None,
          line: Optional[int] = None, stacklevel: int = 1) -> str:
    return log_at(Level.STANDARD, message, scope=scope, params=params,
                  file=file, function=function, line=line, stacklevel=stacklevel + 1)


def warning(message: Any, *, scope: Optional[Scope] = None, params: Optional[Params] = None,
            file: Optional[str] = None, function: Optional[str] = None,
            line: Optional[int] = None, stacklevel: int = 1) -> str:
    return log_at(Level.WARNING, message, scope=scope, params=params,
                  file=file, function=function, line=line, stacklevel=stacklevel + 1)


def error(message: Any, *, scope: Optional[Scope] = None, params: Optional[Params] = None,
          file: Optional[str] = None, function: Optional[str] = None,
          line: Optional[int] = None, stacklevel: int = 1) -> str:
    return log_at(Level.ERROR, message, scope=scope, params=params,
                  file=file, function=function, line=line, stacklevel=stacklevel + 1)


def log_lazy(
    producer: Callable[[], Any],
    *,
    level: Level = Level.STANDARD,
    scope: Optional[Scope] = None,
    params: Optional[Params] = None,
    file: Optional[str] = None,
    function: Optional[str] = None,
    line: Optional[int] = None,
    stacklevel: int = 1,
) -> str:
    """
    Log the value returned by a zero-argument producer.

    The producer is only called when logging is not blocked, so expensive
    diagnostics cost nothing while logs are disabled. If the producer raises,
    the record is logged with the unrepresentable-value placeholder.

    Example:
        >>> debugkit.log_lazy(lambda: fib(1000))
    """
    cfg = get_log_configuration()
    if cfg.block_all_logs:
        return ""

    location = resolve_location(file, function, line, stacklevel)
    try:
        message = producer()
    except Exception:
        logger.warning("Dispatch: Deferred message producer raised an exception.", exc_info=True)
        message = UNREPRESENTABLE
    return _emit(cfg, LogRecord(level, message, location, scope, params))


def log_error(
    err: Optional[BaseException],
    *,
    scope: Optional[Scope] = None,
    file: Optional[str] = None,
    function: Optional[str] = None,
    line: Optional[int] = None,
    stacklevel: int = 1,
) -> str:
    """
    Log an exception's description at error level.

    Args:
        err: Exception to log. None performs no work.

    Returns:
        str: Canonical log string, or "" when err is None or logs are blocked.
    """
    if err is None:
        return ""
    return log_lazy(
        lambda: describe_error(err),
        level=Level.ERROR, scope=scope,
        file=file, function=function, line=line, stacklevel=stacklevel + 1,
    )


# -----------------------------------------------------------------------------
# Emission
# -----------------------------------------------------------------------------

def _emit(cfg: LogConfiguration, record: LogRecord) -> str:
    """Fan a record out to the enabled sinks and the callback."""
    canonical = format_canonical(record)

    if cfg.print_to_console:
        console_sink = sinks.get_console_sink()
        if console_sink is not None:
            try:
                console_sink(format_console(record))
            except Exception:
                logger.warning("Dispatch: Console sink raised an exception.", exc_info=True)

    if cfg.print_to_platform_log:
        platform_sink = sinks.get_platform_sink()
        if platform_sink is not None:
            try:
                platform_sink(
                    format_platform(record),
                    record.level.platform_severity,
                    record.location.file,
                    cfg.platform_subsystem,
                )
            except Exception:
                logger.warning("Dispatch: Platform sink raised an exception.", exc_info=True)

    callback = _callback
    if callback is not None:
        try:
            callback(record.level, LogEntry(canonical, record.params))
        except Exception:
            logger.warning("Dispatch: Log callback raised an exception.", exc_info=True)

    return canonical
