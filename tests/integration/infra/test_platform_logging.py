from __future__ import annotations

"""
Integration tests for the platform logging bootstrap.

Verifies the QueueListener architecture, idempotency of configuration and
end-to-end delivery of platform records to attached handlers.
"""

import logging
from typing import Generator, List

import pytest

import debugkit
from debugkit.infra.logging import (
    PlatformLoggingConfig,
    configure_platform_logging,
    shutdown_platform_logging,
)
from debugkit.infra.logging.core import _CONFIGURED_FLAG_ATTR, _QUEUE_LISTENER_ATTR
from debugkit.infra.logging.handlers import _HANDLER_TAG_ATTR

SUBSYSTEM = "debugkit-tests"


class _ListHandler(logging.Handler):
    def __init__(self) -> None:
        super().__init__()
        self.records: List[logging.LogRecord] = []

    def emit(self, record: logging.LogRecord) -> None:
        self.records.append(record)


@pytest.fixture(autouse=True)
def reset_subsystem_logger() -> Generator[None, None, None]:
    """Detach our handlers from the test subsystem logger before and after each test."""
    shutdown_platform_logging(SUBSYSTEM)
    yield
    shutdown_platform_logging(SUBSYSTEM)


def test_configuration_is_idempotent() -> None:
    """TC-01: Multiple config calls do not duplicate handlers."""
    cfg = PlatformLoggingConfig(console=True)

    target = configure_platform_logging(cfg, subsystem=SUBSYSTEM)
    initial_handler_count = len(target.handlers)

    configure_platform_logging(cfg, subsystem=SUBSYSTEM)
    assert len(target.handlers) == initial_handler_count == 1


def test_force_reconfigures_without_leaking() -> None:
    target = configure_platform_logging(subsystem=SUBSYSTEM)
    first_listener = getattr(target, _QUEUE_LISTENER_ATTR)

    configure_platform_logging(subsystem=SUBSYSTEM, force=True)

    assert len(target.handlers) == 1
    assert getattr(target, _QUEUE_LISTENER_ATTR) is not first_listener


def test_queue_listener_architecture() -> None:
    """TC-03: The subsystem logger uses a tagged QueueHandler."""
    target = configure_platform_logging(subsystem=SUBSYSTEM)

    queue_handlers = [h for h in target.handlers if getattr(h, _HANDLER_TAG_ATTR, False)]
    assert len(queue_handlers) == 1
    assert getattr(target, _QUEUE_LISTENER_ATTR) is not None
    assert target.propagate is False


def test_foreign_handlers_survive_reconfiguration() -> None:
    target = logging.getLogger(SUBSYSTEM)
    foreign = logging.NullHandler()
    target.addHandler(foreign)
    try:
        configure_platform_logging(subsystem=SUBSYSTEM)
        configure_platform_logging(subsystem=SUBSYSTEM, force=True)
        assert foreign in target.handlers
    finally:
        target.removeHandler(foreign)


def test_records_reach_attached_handlers() -> None:
    """End-to-end: debugkit call -> platform sink -> queue -> handler."""
    sink = _ListHandler()
    configure_platform_logging(
        PlatformLoggingConfig(console=False, level="INFO"),
        subsystem=SUBSYSTEM,
        handlers=[sink],
    )
    debugkit.set_log_configuration(
        debugkit.LogConfiguration(
            print_to_console=False,
            print_to_platform_log=True,
            platform_subsystem=SUBSYSTEM,
        )
    )

    debugkit.debug("filtered out", file="Job.py", function="run", line=1)
    debugkit.warning("kept", scope=debugkit.Scope.STARTUP, file="Job.py", function="run", line=2)

    # Stopping the listener drains the queue
    shutdown_platform_logging(SUBSYSTEM)

    assert [r.getMessage() for r in sink.records] == ["⚠️ kept ->  Job.run [2]"]
    assert sink.records[0].levelno == logging.WARNING
    assert sink.records[0].category == "Job.py"


def test_shutdown_resets_state() -> None:
    target = configure_platform_logging(subsystem=SUBSYSTEM)

    shutdown_platform_logging(SUBSYSTEM)

    assert target.handlers == []
    assert target.propagate is True
    assert not hasattr(target, _CONFIGURED_FLAG_ATTR)


def test_bootstrap_exported_from_package() -> None:
    assert debugkit.configure_platform_logging is configure_platform_logging
    assert debugkit.shutdown_platform_logging is shutdown_platform_logging
    assert debugkit.PlatformLoggingConfig is PlatformLoggingConfig
