from __future__ import annotations

from .config import PlatformLoggingConfig
from .core import configure_platform_logging, shutdown_platform_logging

__all__ = [
    "PlatformLoggingConfig",
    "configure_platform_logging",
    "shutdown_platform_logging",
]
