"""Reusable Log record pool"""

from __future__ import annotations

import threading
from typing import TYPE_CHECKING, List, Optional

from dispatchlog.core.log_entry import Log
from dispatchlog.core.log_level import Level

if TYPE_CHECKING:
    from dispatchlog.core.logger import Logger


class LogPool:
    """
    Per-logger cache of idle Log records.

    The pool is a pure reuse cache: it gives no count or ordering
    guarantees. A record is handed to at most one caller between an
    acquire and the matching release.

    Thread Safety:
        acquire/release are guarded by an internal lock.
    """

    def __init__(self, owner: Optional["Logger"] = None, max_idle: int = 64):
        """
        Initialize log pool.

        Args:
            owner: Logger stamped on every record created by this pool
            max_idle: Idle records kept around, surplus is dropped
        """
        self.owner = owner
        self.max_idle = max_idle
        self._idle: List[Log] = []
        self._lock = threading.Lock()

    def acquire(self, level: Level, message: str, newline: bool) -> Log:
        """
        Get a record with every field overwritten for this call.

        Args:
            level: Level of the print call
            message: Formatted message text
            newline: Whether the call asked for a trailing newline

        Returns:
            Log record owned by the caller until release()
        """
        with self._lock:
            log = self._idle.pop() if self._idle else None
        if log is None:
            log = Log(logger=self.owner)
        return log.reset(level, message, newline)

    def release(self, log: Log) -> None:
        """Return a record to the idle set."""
        with self._lock:
            if len(self._idle) < self.max_idle:
                self._idle.append(log)

    def idle_count(self) -> int:
        """Number of idle records (introspection only)."""
        with self._lock:
            return len(self._idle)
