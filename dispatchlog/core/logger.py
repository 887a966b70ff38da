"""
Main Logger class

Filters by level, offers each record to the handler chain and prints
whatever no handler consumed.
"""

from __future__ import annotations

import threading
from datetime import datetime
from typing import Any, Optional, Tuple, Union

from dispatchlog.core.child_registry import ChildRegistry
from dispatchlog.core.log_entry import Log
from dispatchlog.core.log_level import Level
from dispatchlog.core.log_pool import LogPool
from dispatchlog.core.logger_config import LoggerConfig
from dispatchlog.formatters.base_formatter import BaseFormatter
from dispatchlog.formatters.text_formatter import TextFormatter
from dispatchlog.handlers.handler_chain import Handler, HandlerChain, dispatch
from dispatchlog.handlers.integrations import (
    ExternalLogger,
    StdLogger,
    integrate_external_logger,
    integrate_std_logger,
)
from dispatchlog.writers.printer import (
    Hijacker,
    MarshalNotResponsible,
    PrintContext,
    Printer,
)
from dispatchlog.writers.scanner import ScanHandle


def log_hijacker(ctx: PrintContext) -> None:
    """Render Log values with their owning logger's formatter."""
    log = ctx.value
    if isinstance(log, Log) and log.logger is not None:
        owner = log.logger
        prefix, time_format = owner.format_fields()
        ctx.store(owner.formatter.format(
            log,
            prefix=prefix,
            time_format=time_format,
            colored=ctx.printer.use_color,
        ))
    ctx.next()


class ScannedLine:
    """A line read by Logger.scan, tagged with the scanning logger."""

    __slots__ = ("logger", "data")

    def __init__(self, logger: "Logger", data: Union[str, bytes]):
        self.logger = logger
        self.data = data

    def __repr__(self) -> str:
        return f"ScannedLine({self.data!r})"


class Logger:
    """
    Logger with level filtering and an interception chain.

    Prefix, level, time format and handlers are guarded by one lock;
    the printer and the record pool are thread-safe on their own.

    Example:
        log = Logger()
        log.set_prefix("api: ")
        log.set_level("debug")
        log.infof("listening on %s", addr)
    """

    def __init__(
        self,
        config: Optional[LoggerConfig] = None,
        printer: Optional[Printer] = None,
        output: Any = None,
    ):
        """
        Initialize logger.

        Args:
            config: Logger configuration (default: LoggerConfig.default())
            printer: Printer to write into, shared as-is
            output: Output for a new printer (default: sys.stdout)
        """
        self._config = config or LoggerConfig.default()
        self._mu = threading.Lock()
        self._prefix = _to_bytes(self._config.prefix)
        self._level = Level(self._config.level)
        self._time_format = self._config.time_format
        self._handlers = HandlerChain()
        self._scan_installed = False
        self._pool = LogPool(self, max_idle=self._config.pool_size)
        self._children = ChildRegistry()
        self.formatter: BaseFormatter = TextFormatter()

        if printer is None:
            outputs = () if output is None else (output,)
            printer = Printer(*outputs, colored=self._config.colored_output)
        if not printer.has_hijacker(log_hijacker):
            printer.hijack(log_hijacker)
        self.printer = printer

    # Configuration

    @property
    def prefix(self) -> bytes:
        with self._mu:
            return self._prefix

    @property
    def level(self) -> Level:
        with self._mu:
            return self._level

    @property
    def time_format(self) -> str:
        with self._mu:
            return self._time_format

    def format_fields(self) -> Tuple[bytes, str]:
        """Consistent (prefix, time_format) snapshot for formatting."""
        with self._mu:
            return self._prefix, self._time_format

    def set_prefix(self, prefix: Union[str, bytes]) -> "Logger":
        """
        Set the prefix written in front of every line.

        The prefix is written as-is, include any separator yourself.

        Returns:
            Self for method chaining
        """
        prefix = _to_bytes(prefix)
        with self._mu:
            self._prefix = prefix
        return self

    def set_time_format(self, time_format: str) -> None:
        """Set the strftime format for timestamps, empty turns them off."""
        with self._mu:
            self._time_format = time_format or ""

    def set_level(self, level: Union[Level, str]) -> None:
        """
        Set the level threshold.

        Args:
            level: Level, or one of "disable", "error", "warn", "info",
                   "debug" (case-insensitive, unknown names mean "info")
        """
        if isinstance(level, str) or level is None:
            level = Level.from_string(level)
        else:
            level = Level(level)
        with self._mu:
            self._level = level

    # Handlers and output

    def handle(self, handler: Handler) -> None:
        """
        Add a log handler.

        Handlers run in registration order before the default output.
        The first one returning True handles the record and nothing is
        printed. A handler must not keep the record after returning.
        """
        with self._mu:
            self._handlers.register(handler)

    def install(self, logger: ExternalLogger) -> None:
        """Forward every record to a leveled logger (e.g. logging.Logger)."""
        self.handle(integrate_external_logger(logger))

    def install_std(self, logger: StdLogger) -> None:
        """Forward every record's message to a line writer."""
        self.handle(integrate_std_logger(logger))

    @property
    def handlers(self) -> Tuple[Handler, ...]:
        with self._mu:
            return self._handlers.snapshot()

    def hijack(self, hijacker: Hijacker) -> None:
        """Add a low-level hijacker to the printer."""
        self.printer.hijack(hijacker)

    def set_output(self, writer: Any) -> None:
        """Replace the printer's outputs with ``writer``."""
        self.printer.set_output(writer)

    def add_output(self, *writers: Any) -> None:
        """Add one or more outputs to the printer."""
        self.printer.add_output(*writers)

    def flush(self) -> None:
        """Flush the printer's outputs."""
        self.printer.flush()

    # Printing

    def _print(self, level: Level, msg: str, newline: bool) -> None:
        with self._mu:
            threshold = self._level
            handlers = self._handlers.snapshot()
        if threshold < level:
            return

        log = self._pool.acquire(level, msg, newline)
        try:
            if not dispatch(handlers, log):
                if newline:
                    self.printer.println(log)
                else:
                    self.printer.print(log)
        finally:
            self._pool.release(log)

    def print(self, *args: Any) -> None:
        """Print a message without level and without a newline."""
        self._print(Level.DISABLE, _sprint(args), False)

    def println(self, *args: Any) -> None:
        """Print a message without level, followed by a newline."""
        self._print(Level.DISABLE, _sprint(args), True)

    def log(self, level: Level, *args: Any) -> None:
        """Print a leveled message. Useful for levels chosen at runtime."""
        self._print(level, _sprint(args), True)

    def logf(self, level: Level, fmt: str, *args: Any) -> None:
        """Print a leveled %-formatted message."""
        self._print(level, _sprintf(fmt, args), True)

    def error(self, *args: Any) -> None:
        """Log error message."""
        self.log(Level.ERROR, *args)

    def errorf(self, fmt: str, *args: Any) -> None:
        self.logf(Level.ERROR, fmt, *args)

    def warn(self, *args: Any) -> None:
        """Log warning message."""
        self.log(Level.WARN, *args)

    def warnf(self, fmt: str, *args: Any) -> None:
        self.logf(Level.WARN, fmt, *args)

    def info(self, *args: Any) -> None:
        """Log info message."""
        self.log(Level.INFO, *args)

    def infof(self, fmt: str, *args: Any) -> None:
        self.logf(Level.INFO, fmt, *args)

    def debug(self, *args: Any) -> None:
        """Log debug message."""
        self.log(Level.DEBUG, *args)

    def debugf(self, fmt: str, *args: Any) -> None:
        self.logf(Level.DEBUG, fmt, *args)

    # Scanning

    def scan(self, stream: Any) -> ScanHandle:
        """
        Print every line of ``stream`` until EOF or until cancelled.

        Lines are level-less and time-stamped with this logger's time
        format. Call the returned handle to stop scanning.

        The printer is shared with clones and children, so each line is
        printed as a ScannedLine tagged with this logger; only this
        logger's marshaler stamps it, and plain str/bytes printed
        elsewhere on the printer are left alone.
        """
        with self._mu:
            install = not self._scan_installed
            self._scan_installed = True
        if install:
            self.printer.marshal_func(self._scan_marshal)
        return self.printer.scan(
            stream, newline=True, wrap=lambda line: ScannedLine(self, line))

    def _scan_marshal(self, value: Any) -> bytes:
        if not isinstance(value, ScannedLine) or value.logger is not self:
            raise MarshalNotResponsible()

        data = value.data
        if isinstance(data, (bytes, bytearray)):
            line = bytes(data)
        else:
            line = str(data).encode(self.printer.encoding, errors="replace")
        if not line:
            return line

        time_format = self.time_format
        if time_format:
            formatted_time = datetime.now().strftime(time_format)
            if formatted_time:
                line = formatted_time.encode() + b" " + line
        return line

    # Derived loggers

    def clone(self) -> "Logger":
        """
        Copy this logger.

        The copy shares the printer and formatter, takes an independent
        copy of the handler chain, and gets its own lock, pool and
        children.
        """
        clone = Logger(self._config, printer=self.printer)
        with self._mu:
            prefix = self._prefix
            level = self._level
            time_format = self._time_format
            handlers = self._handlers.copy()
        with clone._mu:
            clone._prefix = prefix
            clone._level = level
            clone._time_format = time_format
            clone._handlers = handlers
        clone.formatter = self.formatter
        return clone

    def child(self, name: str) -> "Logger":
        """
        Get (creating on first use) the child logger called ``name``.

        Children are clones whose prefix is ``name + ": "``. Repeated
        calls with the same name return the same logger.
        """
        return self._children.get_or_add(name, self)

    @property
    def children(self) -> ChildRegistry:
        return self._children

    def __repr__(self) -> str:
        return f"Logger(prefix={self.prefix!r}, level={self.level!s})"


def _to_bytes(value: Union[str, bytes, None]) -> bytes:
    if not value:
        return b""
    if isinstance(value, str):
        return value.encode("utf-8")
    return bytes(value)


def _sprint(args: Tuple[Any, ...]) -> str:
    return " ".join(str(arg) for arg in args)


def _sprintf(fmt: str, args: Tuple[Any, ...]) -> str:
    if not args:
        return fmt
    try:
        return fmt % args
    except (TypeError, ValueError) as e:
        return f"[FORMAT ERROR: {e}] {fmt}"
