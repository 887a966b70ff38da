"""
Text formatter

Renders ``<prefix><TAG> <time> <message>``.
"""

from dispatchlog.core.log_entry import Log
from dispatchlog.core.log_level import text_for
from dispatchlog.formatters.base_formatter import BaseFormatter


class TextFormatter(BaseFormatter):
    """
    Format log records as a single text line.

    The level tag is left out for level-less records and the timestamp
    is left out when the time format is empty; exactly one space sits
    between the fields that remain. The prefix is written as-is, so any
    separator must already be part of it.

    Example:
        formatter = TextFormatter()
        formatter.format(log, prefix=b"svc: ")  # b"svc: INFO ready"
    """

    def __init__(self, encoding: str = "utf-8"):
        """
        Initialize text formatter.

        Args:
            encoding: Encoding used for the message text
        """
        self.encoding = encoding

    def format(
        self,
        log: Log,
        prefix: bytes = b"",
        time_format: str = "",
        colored: bool = False,
    ) -> bytes:
        """
        Format log record as text.

        Args:
            log: Log record to format
            prefix: Raw prefix bytes
            time_format: strftime format, empty for no timestamp
            colored: Use ANSI colors for the level tag

        Returns:
            Encoded line
        """
        parts = []

        tag = text_for(log.level, colored)
        if tag:
            parts.append(tag)

        formatted_time = log.format_time(time_format)
        if formatted_time:
            parts.append(formatted_time)

        if log.message:
            parts.append(log.message)

        line = " ".join(parts).encode(self.encoding, errors="replace")
        if prefix:
            return bytes(prefix) + line
        return line

    def __repr__(self) -> str:
        """String representation."""
        return f"TextFormatter(encoding='{self.encoding}')"
