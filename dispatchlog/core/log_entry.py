"""
Log record data structure

A Log is one emission attempt. Instances are pooled and recycled by
their logger, so handlers must not keep a reference to one after the
handler returns.
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Any, Dict, Optional

from dispatchlog.core.log_level import Level

if TYPE_CHECKING:
    from dispatchlog.core.logger import Logger


class Log:
    """
    Log record.

    Holds the owning logger, the level of the print call, the already
    formatted message, the creation time and whether the call asked for
    a trailing newline.
    """

    __slots__ = ("logger", "level", "message", "time", "newline")

    def __init__(
        self,
        logger: Optional["Logger"] = None,
        level: Level = Level.DISABLE,
        message: str = "",
        time: Optional[datetime] = None,
        newline: bool = False,
    ):
        self.logger = logger
        self.level = level
        self.message = message
        self.time = time or datetime.now()
        self.newline = newline

    def reset(self, level: Level, message: str, newline: bool) -> "Log":
        """Overwrite every per-call field. Used by the pool on acquire."""
        self.level = level
        self.message = message
        self.time = datetime.now()
        self.newline = newline
        return self

    def format_time(self, time_format: Optional[str] = None) -> str:
        """
        Render the creation time.

        Args:
            time_format: strftime format; None uses the owning logger's

        Returns:
            Formatted time, or an empty string when timestamps are off
        """
        if time_format is None:
            if self.logger is None:
                return ""
            time_format = self.logger.time_format
        if not time_format:
            return ""
        return self.time.strftime(time_format)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert log record to dictionary.

        Returns:
            Dictionary representation (a copy, safe to keep)
        """
        return {
            "level": str(self.level),
            "message": self.message,
            "time": self.time.isoformat(),
            "newline": self.newline,
        }

    def __repr__(self) -> str:
        return f"Log(level={self.level!s}, message={self.message!r})"
