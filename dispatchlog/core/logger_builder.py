"""Logger builder pattern"""

from typing import Any, List, Optional, Union

from dispatchlog.core.log_level import Level
from dispatchlog.core.logger import Logger
from dispatchlog.core.logger_config import LoggerConfig
from dispatchlog.handlers.handler_chain import Handler
from dispatchlog.writers.printer import Hijacker, Printer


class LoggerBuilder:
    """Builder pattern for logger construction."""

    def __init__(self, config: Optional[LoggerConfig] = None):
        self._config = config or LoggerConfig()
        self._outputs: List[Any] = []
        self._handlers: List[Handler] = []
        self._hijackers: List[Hijacker] = []

    def with_level(self, level: Union[Level, str]) -> "LoggerBuilder":
        """Set level threshold (Level or name)."""
        if isinstance(level, str):
            level = Level.from_string(level)
        self._config.level = Level(level)
        return self

    def with_prefix(self, prefix: str) -> "LoggerBuilder":
        """Set line prefix."""
        self._config.prefix = prefix
        return self

    def with_time_format(self, time_format: str) -> "LoggerBuilder":
        """Set timestamp format, empty disables timestamps."""
        self._config.time_format = time_format or ""
        return self

    def with_colors(self, enabled: bool = True) -> "LoggerBuilder":
        """Enable/disable colored level tags on terminals."""
        self._config.colored_output = enabled
        return self

    def with_pool_size(self, size: int) -> "LoggerBuilder":
        """Set the number of idle records kept for reuse."""
        if size < 0:
            raise ValueError("pool_size cannot be negative")
        self._config.pool_size = size
        return self

    def with_output(self, writer: Any) -> "LoggerBuilder":
        """Replace outputs with a single writer."""
        self._outputs = [writer]
        return self

    def add_output(self, *writers: Any) -> "LoggerBuilder":
        """
        Add output writers.

        Args:
            writers: Objects with a write() method

        Returns:
            Self for method chaining
        """
        self._outputs.extend(writers)
        return self

    def with_handler(self, handler: Handler) -> "LoggerBuilder":
        """
        Add a log handler.

        Example:
            def errors_to_pager(log):
                if log.level == Level.ERROR:
                    pager.send(log.message)
                    return True
                return False

            logger = LoggerBuilder().with_handler(errors_to_pager).build()
        """
        if not callable(handler):
            raise TypeError("handler must be callable")
        self._handlers.append(handler)
        return self

    def with_hijacker(self, hijacker: Hijacker) -> "LoggerBuilder":
        """Add a low-level printer hijacker."""
        if not callable(hijacker):
            raise TypeError("hijacker must be callable")
        self._hijackers.append(hijacker)
        return self

    def build(self) -> Logger:
        """Build and return configured logger."""
        printer = Printer(*self._outputs, colored=self._config.colored_output)
        logger = Logger(self._config, printer=printer)

        for hijacker in self._hijackers:
            logger.hijack(hijacker)

        for handler in self._handlers:
            logger.handle(handler)

        return logger
