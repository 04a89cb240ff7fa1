from __future__ import annotations

"""
Output Sinks.

The console sink writes one formatted line to stdout. The platform sink
forwards a line to the stdlib logging system under the configured subsystem
logger, tagging each record with its category (the source file identifier).

Both sinks live in replaceable process-wide slots so embedding applications
and tests can redirect them. A slot holding None disables that sink
silently, which is how an unavailable platform log is modelled.
"""

import logging
from typing import Callable, Optional

ConsoleSink = Callable[[str], None]
PlatformSink = Callable[[str, int, str, str], None]


# =============================================================================
# Default Sinks
# =============================================================================

def write_console(text: str) -> None:
    """Print a single line to stdout."""
    print(text, flush=True)


def write_platform_log(text: str, severity: int, category: str, subsystem: str) -> None:
    """
    Emit a line through the stdlib logging system.

    Args:
        text: Platform rendering of the record.
        severity: Numeric logging level.
        category: Category attached to the record (source file identifier).
        subsystem: Name of the logger to emit on.
    """
    logging.getLogger(subsystem).log(
        severity,
        text,
        extra={"category": category, "subsystem": subsystem},
    )


# -----------------------------------------------------------------------------
# Sink Slots
# -----------------------------------------------------------------------------
_console_sink: Optional[ConsoleSink] = write_console
_platform_sink: Optional[PlatformSink] = write_platform_log


def get_console_sink() -> Optional[ConsoleSink]:
    return _console_sink


def set_console_sink(sink: Optional[ConsoleSink]) -> None:
    """Replace the console sink. None disables console output."""
    global _console_sink
    _console_sink = sink


def get_platform_sink() -> Optional[PlatformSink]:
    return _platform_sink


def set_platform_sink(sink: Optional[PlatformSink]) -> None:
    """Replace the platform sink. None marks the platform log as unavailable."""
    global _platform_sink
    _platform_sink = sink


def reset_sinks() -> None:
    """Restore the default stdout and stdlib logging sinks."""
    set_console_sink(write_console)
    set_platform_sink(write_platform_log)
