from __future__ import annotations

"""
Platform Logging Configuration Models.

Defines the settings used to attach output handlers to the subsystem logger
that the platform sink writes to, plus the severity name mapping.
"""

import logging
from dataclasses import dataclass
from typing import Dict

# Mapping of string identifiers to native logging constants
_LEVEL_MAP: Dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


@dataclass(frozen=True)
class PlatformLoggingConfig:
    """
    Immutable specification for the platform log handlers.

    Attributes:
        level: Minimum severity level forwarded by the subsystem logger.
        console: Flag to enable stderr stream output.
        fmt: Record format. `category` is set on every platform record.
        datefmt: Chronological format for timestamp generation.
        propagate: Let records continue to ancestor (root) handlers.
    """
    level: str = "DEBUG"
    console: bool = True

    fmt: str = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
    datefmt: str = "%Y-%m-%d %H:%M:%S"
    propagate: bool = False
