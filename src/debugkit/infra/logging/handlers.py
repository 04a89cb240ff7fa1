from __future__ import annotations

"""
Logging Handlers and Low-Level Utilities.

Provides handler factories and the tagging mechanism that lets the
bootstrap distinguish its own handlers from those installed by the
embedding application.
"""

import logging
import sys

# Internal attribute used to tag and identify our own handlers
_HANDLER_TAG_ATTR: str = "_debugkit_handler"


def _tag_handler(handler: logging.Handler) -> None:
    """
    Mark a handler as managed by debugkit.

    Args:
        handler: The logging handler instance to tag.
    """
    setattr(handler, _HANDLER_TAG_ATTR, True)


def _is_our_handler(handler: logging.Handler) -> bool:
    """
    Verify if a handler was installed by this module.

    Returns:
        bool: True if the handler carries our internal tag.
    """
    return bool(getattr(handler, _HANDLER_TAG_ATTR, False))


def _create_stream_handler(level_int: int, formatter: logging.Formatter) -> logging.StreamHandler:
    """
    Build a tagged stderr handler.

    Args:
        level_int: Numeric logging level.
        formatter: Pre-configured logging formatter.

    Returns:
        logging.StreamHandler: Configured handler.
    """
    sh = logging.StreamHandler(sys.stderr)
    sh.setLevel(level_int)
    sh.setFormatter(formatter)
    _tag_handler(sh)
    return sh
