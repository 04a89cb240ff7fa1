from __future__ import annotations

"""
debugkit: taggable logging and assertions for application code.

Example:
    >>> import debugkit
    >>> from debugkit import Level, Scope
    >>> debugkit.error("disk full", params={"path": "/var"})
    >>> debugkit.log("Signed in", scope=Scope.AUTH)
    >>> debugkit.set_callback(lambda level, entry: remote.ship(entry.message))
"""

from debugkit.core.assertion import AssertionFailure, assertion_failure
from debugkit.core.dispatch import (
    LogCallback,
    clear_callback,
    debug,
    error,
    get_callback,
    info,
    log,
    log_at,
    log_error,
    log_lazy,
    set_callback,
    warning,
)
from debugkit.core.formatter import LogEntry, LogRecord
from debugkit.core.history import LoggableHistory, loggable_history
from debugkit.core.location import SourceLocation
from debugkit.core.loggable import Loggable
from debugkit.domain.config import (
    AssertConfiguration,
    LogConfiguration,
    configuration_from_env,
    configuration_from_mapping,
    get_assert_configuration,
    get_log_configuration,
    set_assert_configuration,
    set_log_configuration,
)
from debugkit.domain.tags import Level, Scope, register_platform_severity
from debugkit.infra.logging import (
    PlatformLoggingConfig,
    configure_platform_logging,
    shutdown_platform_logging,
)

__version__ = "0.1.0"

__all__ = [
    "AssertConfiguration",
    "AssertionFailure",
    "Level",
    "LogCallback",
    "LogConfiguration",
    "LogEntry",
    "LogRecord",
    "Loggable",
    "LoggableHistory",
    "PlatformLoggingConfig",
    "Scope",
    "SourceLocation",
    "assertion_failure",
    "clear_callback",
    "configuration_from_env",
    "configuration_from_mapping",
    "configure_platform_logging",
    "debug",
    "error",
    "get_assert_configuration",
    "get_callback",
    "get_log_configuration",
    "info",
    "log",
    "log_at",
    "log_error",
    "log_lazy",
    "loggable_history",
    "register_platform_severity",
    "set_assert_configuration",
    "set_callback",
    "set_log_configuration",
    "shutdown_platform_logging",
    "warning",
]
