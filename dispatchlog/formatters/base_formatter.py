"""
Base formatter interface

Formatters turn a Log record into the bytes handed to the printer.
"""

from abc import ABC, abstractmethod

from dispatchlog.core.log_entry import Log


class BaseFormatter(ABC):
    """
    Abstract base class for log formatters.

    A formatter is pure with respect to the record and the two logger
    fields it is given; it never reads the logger itself.
    """

    @abstractmethod
    def format(
        self,
        log: Log,
        prefix: bytes = b"",
        time_format: str = "",
        colored: bool = False,
    ) -> bytes:
        """
        Format a log record into a line.

        Args:
            log: The log record to format
            prefix: Raw prefix bytes written before anything else
            time_format: strftime format, empty disables the timestamp
            colored: Use the colored level tag

        Returns:
            Rendered line without a trailing newline
        """
        pass

    def __call__(self, log: Log, **kwargs) -> bytes:
        """Allow formatters to be callable."""
        return self.format(log, **kwargs)
