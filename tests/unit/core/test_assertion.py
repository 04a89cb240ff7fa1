from __future__ import annotations

"""
Unit tests for the Assertion Facility.

Verifies:
1. Exactly one error record is logged per assertion.
2. Raising is controlled by AssertConfiguration.
3. The raised message equals the logged canonical line.
"""

from typing import Any, Dict, List

import pytest

from debugkit.core.assertion import AssertionFailure, assertion_failure
from debugkit.domain.config import (
    AssertConfiguration,
    LogConfiguration,
    set_assert_configuration,
    set_log_configuration,
)
from debugkit.domain.tags import Level


def test_non_throwing_logs_once(location: Dict[str, Any], callback_calls: List[Any]) -> None:
    set_assert_configuration(AssertConfiguration(throw_assertion_failures=False))

    result = assertion_failure("invariant broken", params={"id": 3}, **location)

    assert result == "❌ invariant broken -> Storage.save [42]"
    assert len(callback_calls) == 1
    level, entry = callback_calls[0]
    assert level == Level.ERROR
    assert entry.params == {"id": 3}


def test_throwing_raises_with_logged_line(location: Dict[str, Any], callback_calls: List[Any]) -> None:
    with pytest.raises(AssertionFailure) as exc_info:
        assertion_failure("invariant broken", **location)

    logged = callback_calls[0][1].message
    assert len(callback_calls) == 1
    assert str(exc_info.value) == logged == "❌ invariant broken -> Storage.save [42]"
    assert exc_info.value.log == logged


def test_failure_is_assertion_error(location: Dict[str, Any]) -> None:
    with pytest.raises(AssertionError):
        assertion_failure("x", **location)


def test_blocked_logs_still_raise_with_empty_message(callback_calls: List[Any]) -> None:
    """The failure carries whatever was logged, which is nothing while blocked."""
    set_log_configuration(LogConfiguration(block_all_logs=True))

    with pytest.raises(AssertionFailure) as exc_info:
        assertion_failure("hidden")

    assert exc_info.value.log == ""
    assert callback_calls == []


def test_location_captured_from_caller(callback_calls: List[Any]) -> None:
    set_assert_configuration(AssertConfiguration(throw_assertion_failures=False))

    assertion_failure("here")

    assert ".test_location_captured_from_caller [" in callback_calls[0][1].message
    assert callback_calls[0][1].message.startswith("❌ here -> test_assertion.")
