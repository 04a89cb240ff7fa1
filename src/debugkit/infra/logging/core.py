from __future__ import annotations

"""
Platform Logging Bootstrap.

Maintains the idempotent lifecycle of the handlers attached to the subsystem
logger used by the platform sink. Implements a non-blocking Queue
architecture so that handler I/O does not run on the thread that logs.
"""

import atexit
import logging
import queue
from logging.handlers import QueueHandler, QueueListener
from typing import List, Optional, Sequence

from debugkit.domain.config import get_log_configuration
from debugkit.infra.logging.config import _LEVEL_MAP, PlatformLoggingConfig
from debugkit.infra.logging.handlers import (
    _create_stream_handler,
    _is_our_handler,
    _tag_handler,
)

# Internal state flags for idempotency and lifecycle tracking
_CONFIGURED_FLAG_ATTR: str = "_debugkit_configured"
_QUEUE_LISTENER_ATTR: str = "_debugkit_queue_listener"


# ==============================================================================
# PUBLIC API
# ==============================================================================

def configure_platform_logging(
    cfg: Optional[PlatformLoggingConfig] = None,
    *,
    subsystem: Optional[str] = None,
    handlers: Sequence[logging.Handler] = (),
    force: bool = False,
) -> logging.Logger:
    """
    Attach queue-backed output handlers to the platform subsystem logger.

    Idempotent: a second call is a no-op unless `force` is set, in which
    case previously installed handlers are detached first. Handlers owned by
    the embedding application are never touched.

    Args:
        cfg: Handler settings (defaults to PlatformLoggingConfig()).
        subsystem: Logger name (defaults to the configured platform_subsystem).
        handlers: Extra handlers to drive from the queue listener.
        force: Re-initialize even if already configured.

    Returns:
        logging.Logger: The subsystem logger.
    """
    cfg = cfg or PlatformLoggingConfig()
    name = subsystem or get_log_configuration().platform_subsystem
    target = logging.getLogger(name)

    already_configured = bool(getattr(target, _CONFIGURED_FLAG_ATTR, False))
    if already_configured and not force:
        return target

    level_int = _parse_level(cfg.level)
    target.setLevel(level_int)
    target.propagate = cfg.propagate

    _remove_our_handlers(target)
    _stop_existing_listener(target)

    handlers_list: List[logging.Handler] = list(handlers)
    if cfg.console:
        formatter = logging.Formatter(cfg.fmt, datefmt=cfg.datefmt)
        handlers_list.append(_create_stream_handler(level_int, formatter))

    if not handlers_list:
        setattr(target, _CONFIGURED_FLAG_ATTR, True)
        return target

    log_queue: queue.Queue[logging.LogRecord] = queue.Queue(-1)

    queue_handler = QueueHandler(log_queue)
    _tag_handler(queue_handler)

    listener = QueueListener(log_queue, *handlers_list, respect_handler_level=True)
    listener.start()

    target.addHandler(queue_handler)

    setattr(target, _QUEUE_LISTENER_ATTR, listener)
    setattr(target, _CONFIGURED_FLAG_ATTR, True)

    # Flush pending records on interpreter shutdown
    atexit.register(_safe_stop_listener, listener)

    return target


def shutdown_platform_logging(subsystem: Optional[str] = None) -> None:
    """
    Drain the queue, stop the listener and detach our handlers.

    Args:
        subsystem: Logger name (defaults to the configured platform_subsystem).
    """
    name = subsystem or get_log_configuration().platform_subsystem
    target = logging.getLogger(name)

    _stop_existing_listener(target)
    _remove_our_handlers(target)
    target.setLevel(logging.NOTSET)
    target.propagate = True
    if hasattr(target, _CONFIGURED_FLAG_ATTR):
        delattr(target, _CONFIGURED_FLAG_ATTR)


# ==============================================================================
# PRIVATE HELPERS
# ==============================================================================

def _parse_level(level: str) -> int:
    """Convert a string-based logging level to its numeric constant."""
    if not level:
        return logging.DEBUG
    return _LEVEL_MAP.get(str(level).strip().upper(), logging.DEBUG)


def _remove_our_handlers(target: logging.Logger) -> None:
    """Detach all internally-managed handlers from the logger."""
    for h in list(target.handlers):
        if _is_our_handler(h):
            target.removeHandler(h)
            h.close()


def _stop_existing_listener(target: logging.Logger) -> None:
    """Terminate and release the existing QueueListener to reset state."""
    listener = getattr(target, _QUEUE_LISTENER_ATTR, None)
    if listener:
        _safe_stop_listener(listener)
        setattr(target, _QUEUE_LISTENER_ATTR, None)


def _safe_stop_listener(listener: Optional[QueueListener]) -> None:
    """
    Stop a QueueListener, tolerating double-stop calls.

    The listener thread is None once stopped (atexit after an explicit
    shutdown, test resets).
    """
    if not listener:
        return

    if getattr(listener, "_thread", None) is not None:
        listener.stop()
