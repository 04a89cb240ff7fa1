from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. An autouse fixture restoring every process-wide slot (configurations,
   callback, sinks, history) so tests never leak state into each other.
3. Capture fixtures for the console sink, platform sink and callback.
"""

import os
import sys
from typing import Any, Dict, Generator, List, Tuple

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from debugkit.core import dispatch  # noqa: E402
from debugkit.core.history import loggable_history  # noqa: E402
from debugkit.domain.config import (  # noqa: E402
    AssertConfiguration,
    LogConfiguration,
    set_assert_configuration,
    set_log_configuration,
)
from debugkit.infra import sinks  # noqa: E402


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture(autouse=True)
def reset_global_state() -> Generator[None, None, None]:
    """Restore default configuration, sinks, callback and history around each test."""
    set_log_configuration(LogConfiguration())
    set_assert_configuration(AssertConfiguration())
    dispatch.clear_callback()
    sinks.reset_sinks()
    loggable_history.clear()
    yield
    set_log_configuration(LogConfiguration())
    set_assert_configuration(AssertConfiguration())
    dispatch.clear_callback()
    sinks.reset_sinks()
    loggable_history.clear()


@pytest.fixture
def console_lines() -> List[str]:
    """Redirect the console sink into a list."""
    lines: List[str] = []
    sinks.set_console_sink(lines.append)
    return lines


@pytest.fixture
def platform_calls() -> List[Tuple[str, int, str, str]]:
    """Redirect the platform sink into a list of (text, severity, category, subsystem)."""
    calls: List[Tuple[str, int, str, str]] = []
    sinks.set_platform_sink(lambda text, sev, cat, sub: calls.append((text, sev, cat, sub)))
    return calls


@pytest.fixture
def callback_calls() -> List[Tuple[Any, Any]]:
    """Register a callback recording (level, entry) pairs."""
    calls: List[Tuple[Any, Any]] = []
    dispatch.set_callback(lambda level, entry: calls.append((level, entry)))
    return calls


@pytest.fixture
def location() -> Dict[str, Any]:
    """Explicit call-site metadata used by formatting assertions."""
    return {"file": "/app/Sources/Storage.swift", "function": "save", "line": 42}
