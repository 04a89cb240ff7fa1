from __future__ import annotations

"""
Configuration Domain Management.

Holds the process-wide configuration snapshots of the logging pipeline and
the assertion facility. Snapshots are immutable; a new configuration takes
effect by replacing the whole slot, which is a single reference assignment
and therefore never observed half-applied by readers.

Also provides lenient/strict loaders that build a snapshot from a plain
mapping (settings file) or from environment variables.
"""

import logging
import os
from dataclasses import dataclass, fields
from typing import Any, Dict, List, Mapping, Optional, Tuple

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Constants & Defaults
# -----------------------------------------------------------------------------
DEFAULT_HISTORY_LIMIT = 50
DEFAULT_SUBSYSTEM = "debugkit"
ENV_PREFIX = "DEBUGKIT_"

_TRUE_STRINGS = {"1", "true", "yes", "on"}
_FALSE_STRINGS = {"0", "false", "no", "off"}


# =============================================================================
# Configuration Models
# =============================================================================

@dataclass(frozen=True)
class LogConfiguration:
    """
    Immutable snapshot of the logging pipeline settings.

    Attributes:
        print_to_console: Write the console rendering to stdout.
        print_to_platform_log: Forward records to the platform (stdlib) log.
        block_all_logs: Global kill switch. Suppresses every sink and the callback.
        loggable_history_enabled: Store Loggable lines in the history buffer.
        loggable_history_limit: Maximum lines retained per Loggable key.
        platform_subsystem: Logger name used by the platform sink.
    """
    print_to_console: bool = True
    print_to_platform_log: bool = False
    block_all_logs: bool = False
    loggable_history_enabled: bool = True
    loggable_history_limit: int = DEFAULT_HISTORY_LIMIT
    platform_subsystem: str = DEFAULT_SUBSYSTEM


@dataclass(frozen=True)
class AssertConfiguration:
    """
    Immutable snapshot of the assertion facility settings.

    Attributes:
        throw_assertion_failures: Raise AssertionFailure after logging.
    """
    throw_assertion_failures: bool = True


# -----------------------------------------------------------------------------
# Global Slots
# -----------------------------------------------------------------------------
_log_configuration: LogConfiguration = LogConfiguration()
_assert_configuration: AssertConfiguration = AssertConfiguration()


def get_log_configuration() -> LogConfiguration:
    """Return the current logging configuration snapshot."""
    return _log_configuration


def set_log_configuration(cfg: LogConfiguration) -> None:
    """
    Replace the logging configuration for all subsequent calls.

    Args:
        cfg: New snapshot.

    Raises:
        TypeError: If cfg is not a LogConfiguration.
    """
    global _log_configuration
    if not isinstance(cfg, LogConfiguration):
        raise TypeError(f"Expected LogConfiguration, got {type(cfg).__name__}.")
    _log_configuration = cfg


def get_assert_configuration() -> AssertConfiguration:
    """Return the current assertion configuration snapshot."""
    return _assert_configuration


def set_assert_configuration(cfg: AssertConfiguration) -> None:
    """
    Replace the assertion configuration for all subsequent calls.

    Raises:
        TypeError: If cfg is not an AssertConfiguration.
    """
    global _assert_configuration
    if not isinstance(cfg, AssertConfiguration):
        raise TypeError(f"Expected AssertConfiguration, got {type(cfg).__name__}.")
    _assert_configuration = cfg


# =============================================================================
# Loaders
# =============================================================================

def configuration_from_mapping(
    data: Any,
    *,
    strict: bool = False,
) -> Tuple[LogConfiguration, List[str]]:
    """
    Validate and normalize a plain mapping into a LogConfiguration.

    strict=False:
      - invalid values fall back to their defaults and add a warning.
      - a non-mapping input falls back to the default snapshot.

    strict=True:
      - type/value errors raise TypeError/ValueError.

    Args:
        data: Mapping of field names to values (e.g. parsed from JSON).
        strict: Raise instead of correcting.

    Returns:
        Tuple[LogConfiguration, List[str]]: Normalized snapshot and warnings.
    """
    warnings: List[str] = []
    defaults = LogConfiguration()

    if not isinstance(data, Mapping):
        msg = f"Invalid configuration: expected mapping, got {type(data).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(msg + " Using defaults.")
        logger.warning(f"Config: {msg}")
        return defaults, warnings

    known = {f.name for f in fields(LogConfiguration)}
    for key in data:
        if key not in known:
            msg = f"Unknown configuration key '{key}' ignored."
            warnings.append(msg)
            logger.warning(f"Config: {msg}")

    values: Dict[str, Any] = {}
    for name in (
        "print_to_console",
        "print_to_platform_log",
        "block_all_logs",
        "loggable_history_enabled",
    ):
        values[name] = _as_bool(data.get(name), getattr(defaults, name), name, warnings, strict)

    values["loggable_history_limit"] = _as_limit(
        data.get("loggable_history_limit"),
        defaults.loggable_history_limit,
        warnings,
        strict,
    )
    values["platform_subsystem"] = _as_str(
        data.get("platform_subsystem"),
        defaults.platform_subsystem,
        "platform_subsystem",
        warnings,
        strict,
    )

    return LogConfiguration(**values), warnings


def configuration_from_env(
    environ: Optional[Mapping[str, str]] = None,
    *,
    prefix: str = ENV_PREFIX,
) -> LogConfiguration:
    """
    Build a LogConfiguration from prefixed environment variables.

    Example: DEBUGKIT_BLOCK_ALL_LOGS=1 -> block_all_logs=True.
    Invalid values keep their defaults and are reported as warnings.

    Args:
        environ: Source mapping (defaults to os.environ).
        prefix: Variable name prefix.

    Returns:
        LogConfiguration: Resulting snapshot.
    """
    env = os.environ if environ is None else environ
    data: Dict[str, Any] = {}
    for f in fields(LogConfiguration):
        raw = env.get(prefix + f.name.upper())
        if raw is not None:
            data[f.name] = raw

    cfg, _ = configuration_from_mapping(data, strict=False)
    return cfg


# -----------------------------------------------------------------------------
# Private Normalizers
# -----------------------------------------------------------------------------

def _as_bool(value: Any, default: bool, name: str, warnings: List[str], strict: bool) -> bool:
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in _TRUE_STRINGS:
            return True
        if lowered in _FALSE_STRINGS:
            return False
    msg = f"'{name}' must be a boolean, got {value!r}."
    if strict:
        raise TypeError(msg)
    warnings.append(msg + f" Using default {default}.")
    logger.warning(f"Config: {msg}")
    return default


def _as_limit(value: Any, default: int, warnings: List[str], strict: bool) -> int:
    if value is None:
        return default

    parsed: Optional[int] = None
    if isinstance(value, int) and not isinstance(value, bool):
        parsed = value
    elif isinstance(value, str):
        try:
            parsed = int(value.strip())
        except ValueError:
            parsed = None

    if parsed is None:
        msg = f"'loggable_history_limit' must be an integer, got {value!r}."
        if strict:
            raise TypeError(msg)
        warnings.append(msg + f" Using default {default}.")
        logger.warning(f"Config: {msg}")
        return default

    if parsed < 0:
        msg = f"'loggable_history_limit' must be >= 0, got {parsed}."
        if strict:
            raise ValueError(msg)
        warnings.append(msg + f" Using default {default}.")
        logger.warning(f"Config: {msg}")
        return default

    return parsed


def _as_str(value: Any, default: str, name: str, warnings: List[str], strict: bool) -> str:
    if value is None:
        return default
    if isinstance(value, str) and value.strip():
        return value.strip()
    msg = f"'{name}' must be a non-empty string, got {value!r}."
    if strict:
        raise TypeError(msg)
    warnings.append(msg + f" Using default '{default}'.")
    logger.warning(f"Config: {msg}")
    return default
