from __future__ import annotations

"""
Loggable History Buffer.

Keeps a bounded, per-key trail of formatted log lines for objects that want
to inspect their own recent history (see debugkit.core.loggable). Each key
holds at most `loggable_history_limit` lines; the oldest are evicted first.
"""

import threading
from collections import deque
from typing import Deque, Dict, List, Optional

from debugkit.domain.config import LogConfiguration, get_log_configuration


class LoggableHistory:
    """
    Thread-safe mapping of integer keys to FIFO-trimmed line sequences.

    A single lock serializes append-and-trim so the length invariant holds
    under concurrent appends to the same key.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._entries: Dict[int, Deque[str]] = {}

    def append(self, key: int, entry: str, config: Optional[LogConfiguration] = None) -> None:
        """
        Record a line for a key.

        No-op when history is disabled in the configuration.

        Args:
            key: Stable identity of the owning object.
            entry: Formatted log line.
            config: Snapshot to honor (defaults to the current global one).
        """
        cfg = config or get_log_configuration()
        if not cfg.loggable_history_enabled:
            return

        limit = max(0, cfg.loggable_history_limit)
        with self._lock:
            lines = self._entries.setdefault(key, deque())
            lines.append(entry)
            while len(lines) > limit:
                lines.popleft()

    def entries(self, key: int) -> List[str]:
        """
        Return a copy of the lines stored for a key, oldest first.

        Returns:
            List[str]: Empty list for unknown keys.
        """
        with self._lock:
            return list(self._entries.get(key, ()))

    def keys(self) -> List[int]:
        with self._lock:
            return list(self._entries)

    def clear(self, key: Optional[int] = None) -> None:
        """Drop the history of one key, or of every key when key is None."""
        with self._lock:
            if key is None:
                self._entries.clear()
            else:
                self._entries.pop(key, None)


# Process-wide buffer shared by every Loggable
loggable_history = LoggableHistory()
