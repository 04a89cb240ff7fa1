from __future__ import annotations

"""
Loggable Objects.

Mixin for objects that keep a trailing history of their own log lines in
the shared history buffer, keyed by their identity.
"""

from typing import Any, List, Optional

from debugkit.core import dispatch
from debugkit.core.formatter import Params
from debugkit.core.history import LoggableHistory, loggable_history
from debugkit.domain.tags import Level, Scope


class Loggable:
    """
    Adds `log()` and `log_history` to any class.

    Subclasses may override `loggable_key` to provide a stable identifier;
    the default is id(self), which is only unique while the object is alive.
    """

    _history: LoggableHistory = loggable_history

    @property
    def loggable_key(self) -> int:
        return id(self)

    @property
    def log_history(self) -> List[str]:
        """Lines logged by this object, oldest first."""
        return self._history.entries(self.loggable_key)

    def log(
        self,
        message: Any,
        *,
        level: Level = Level.STANDARD,
        scope: Optional[Scope] = None,
        params: Optional[Params] = None,
        file: Optional[str] = None,
        function: Optional[str] = None,
        line: Optional[int] = None,
        stacklevel: int = 1,
    ) -> str:
        """
        Dispatch a log line and record it in this object's history.

        Returns:
            str: Canonical log string, or "" when logs are blocked.
        """
        entry = dispatch.log_at(
            level, message, scope=scope, params=params,
            file=file, function=function, line=line, stacklevel=stacklevel + 1,
        )
        if entry:
            self._history.append(self.loggable_key, entry)
        return entry
