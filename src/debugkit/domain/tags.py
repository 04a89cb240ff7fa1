from __future__ import annotations

"""
Log Tag Taxonomy.

Defines the Level (severity) and Scope (functional area) tags attached to
every log record. Both are open enumerations: the well-known constants below
cover the common cases, but call sites may construct any custom tag from a
display symbol. Equality and hashing depend on the symbol only.
"""

import logging
from dataclasses import dataclass
from typing import ClassVar, Dict


# -----------------------------------------------------------------------------
# Platform Severity Lookup
# -----------------------------------------------------------------------------
DEFAULT_PLATFORM_SEVERITY: int = logging.DEBUG

# Keyed by symbol so that custom Level instances can be registered later
_PLATFORM_SEVERITY: Dict[str, int] = {}


# =============================================================================
# Tag Models
# =============================================================================

@dataclass(frozen=True)
class Level:
    """
    Severity tag for a log record.

    Attributes:
        symbol: Display symbol printed at the head of every log line.
    """
    symbol: str

    INFO: ClassVar[Level]
    STANDARD: ClassVar[Level]
    WARNING: ClassVar[Level]
    ERROR: ClassVar[Level]

    @property
    def platform_severity(self) -> int:
        """
        Resolve the stdlib logging severity used by the platform sink.

        Unregistered symbols fall back to DEBUG.
        """
        return _PLATFORM_SEVERITY.get(self.symbol, DEFAULT_PLATFORM_SEVERITY)

    def __str__(self) -> str:
        return self.symbol


@dataclass(frozen=True)
class Scope:
    """
    Functional-area tag for a log record (database, auth, ...).

    Purely annotative: only affects the console rendering.
    """
    symbol: str

    DATABASE: ClassVar[Scope]
    AUTH: ClassVar[Scope]
    CONNECTION: ClassVar[Scope]
    GPS: ClassVar[Scope]
    STARTUP: ClassVar[Scope]
    KEYCHAIN: ClassVar[Scope]
    PAYMENT: ClassVar[Scope]
    ONE: ClassVar[Scope]
    TWO: ClassVar[Scope]
    THREE: ClassVar[Scope]

    def __str__(self) -> str:
        return self.symbol


# -----------------------------------------------------------------------------
# Well-Known Constants
# -----------------------------------------------------------------------------
Level.INFO = Level("⚪️")
Level.STANDARD = Level("🔵")
Level.WARNING = Level("⚠️")
Level.ERROR = Level("❌")

Scope.DATABASE = Scope("💾")
Scope.AUTH = Scope("🔒")
Scope.CONNECTION = Scope("🌎")
Scope.GPS = Scope("🗺")
Scope.STARTUP = Scope("🎬")
Scope.KEYCHAIN = Scope("🔑")
Scope.PAYMENT = Scope("💳")

# Numbered scopes are only meant for ad-hoc debugging sessions
Scope.ONE = Scope("1️⃣")
Scope.TWO = Scope("2️⃣")
Scope.THREE = Scope("3️⃣")


def register_platform_severity(level: Level, severity: int) -> None:
    """
    Add or override the platform severity used for a Level.

    Args:
        level: Well-known or custom Level.
        severity: Numeric stdlib logging level (e.g. logging.WARNING).
    """
    _PLATFORM_SEVERITY[level.symbol] = int(severity)


register_platform_severity(Level.INFO, logging.INFO)
register_platform_severity(Level.STANDARD, logging.DEBUG)
register_platform_severity(Level.WARNING, logging.WARNING)
register_platform_severity(Level.ERROR, logging.ERROR)
