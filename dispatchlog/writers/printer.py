"""
Printer - the output sink loggers write into

Fans each rendered line out to one or more outputs, lets hijackers
intercept or rewrite a value before it is written, and serializes
concurrent writes so lines never interleave.
"""

from __future__ import annotations

import io
import sys
import threading
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Callable, List, Optional, Tuple

from dispatchlog.writers.scanner import ScanHandle


class MarshalNotResponsible(Exception):
    """Raised by a marshaler that does not handle the given value."""


@dataclass
class PrinterStats:
    """
    Statistics for printer monitoring.

    Tracks written lines, skipped values and output failures.
    """

    lines_written: int = 0
    bytes_written: int = 0
    lines_skipped: int = 0
    write_errors: int = 0
    last_error: Optional[str] = None
    last_error_time: Optional[datetime] = None

    def record_write(self, bytes_count: int) -> None:
        """Record a line written to the outputs."""
        self.lines_written += 1
        self.bytes_written += bytes_count

    def record_skip(self) -> None:
        """Record a value skipped by a hijacker."""
        self.lines_skipped += 1

    def record_failure(self, error: str) -> None:
        """Record a failed write to one output."""
        self.write_errors += 1
        self.last_error = error
        self.last_error_time = datetime.now()

    def to_dict(self) -> dict:
        """Convert stats to dictionary for serialization."""
        return {
            "lines_written": self.lines_written,
            "bytes_written": self.bytes_written,
            "lines_skipped": self.lines_skipped,
            "write_errors": self.write_errors,
            "last_error": self.last_error,
            "last_error_time": (
                self.last_error_time.isoformat()
                if self.last_error_time
                else None
            ),
        }


class PrintContext:
    """
    Value passed to every hijacker.

    A hijacker may store() the bytes to write, skip() the write
    entirely, and must call next() to let the following hijacker run.
    """

    __slots__ = ("printer", "value", "result", "_continue", "_skipped")

    def __init__(self, printer: "Printer", value: Any):
        self.printer = printer
        self.value = value
        self.result: Optional[bytes] = None
        self._continue = False
        self._skipped = False

    def store(self, data: bytes) -> None:
        """Set the bytes that will be written for this value."""
        self.result = bytes(data)

    def next(self) -> None:
        """Pass the value on to the next hijacker."""
        self._continue = True

    def skip(self) -> None:
        """Drop this value; nothing is written."""
        self._skipped = True

    @property
    def skipped(self) -> bool:
        return self._skipped


Hijacker = Callable[[PrintContext], None]
Marshaler = Callable[[Any], bytes]


class NopOutput:
    """Output that discards everything written to it."""

    def write(self, data: Any) -> int:
        return len(data)

    def isatty(self) -> bool:
        return False


def text_marshal(value: Any, encoding: str = "utf-8") -> bytes:
    """Default marshaler: bytes as-is, anything else through str()."""
    if isinstance(value, (bytes, bytearray)):
        return bytes(value)
    if not isinstance(value, str):
        value = str(value)
    return value.encode(encoding, errors="replace")


class Printer:
    """
    Thread-safe output sink.

    Thread Safety:
        All public methods are thread-safe. A whole line, newline
        included, is written to every output before the next line
        starts.

    Example:
        printer = Printer(sys.stdout)
        printer.add_output(open("app.log", "a"))
        printer.println("ready")
    """

    def __init__(
        self,
        *outputs: Any,
        colored: bool = True,
        encoding: str = "utf-8",
        name: str = "printer",
    ):
        """
        Initialize printer.

        Args:
            outputs: Objects with a write() method (default: sys.stdout)
            colored: Allow ANSI colors when every output is a terminal
            encoding: Encoding used for text outputs
            name: Name used for scan threads
        """
        self.colored = colored
        self.encoding = encoding
        self.name = name
        self.stats = PrinterStats()
        self._lock = threading.RLock()
        self._outputs: List[Tuple[Any, bool]] = []
        self._hijackers: Tuple[Hijacker, ...] = ()
        self._marshalers: Tuple[Marshaler, ...] = ()
        self._is_terminal = False
        self.set_output(*(outputs or (sys.stdout,)))

    # Outputs

    def set_output(self, *writers: Any) -> None:
        """Replace every output with the given writer(s)."""
        with self._lock:
            self._outputs = []
            self._add(writers)

    def add_output(self, *writers: Any) -> None:
        """
        Add one or more outputs.

        If any output is not a terminal, colors are turned off for all.
        """
        with self._lock:
            self._add(writers)

    def _add(self, writers) -> None:
        """Caller must hold lock."""
        for writer in writers:
            if writer is None:
                continue
            self._outputs.append((writer, _is_binary(writer)))
        self._is_terminal = bool(self._outputs) and all(
            _is_terminal(w) for w, _ in self._outputs
        )

    @property
    def outputs(self) -> List[Any]:
        with self._lock:
            return [w for w, _ in self._outputs]

    @property
    def is_terminal(self) -> bool:
        """True when every output is a terminal."""
        return self._is_terminal

    @property
    def use_color(self) -> bool:
        return self.colored and self._is_terminal

    # Interception

    def hijack(self, hijacker: Hijacker) -> "Printer":
        """
        Add a hijacker.

        Hijackers run in registration order for every printed value and
        can rewrite (store) or drop (skip) what gets written.
        """
        if not callable(hijacker):
            raise TypeError("hijacker must be callable")
        with self._lock:
            self._hijackers = self._hijackers + (hijacker,)
        return self

    def has_hijacker(self, hijacker: Hijacker) -> bool:
        return hijacker in self._hijackers

    def marshal_func(self, marshaler: Marshaler) -> "Printer":
        """
        Add a marshaler for values no hijacker stored a result for.

        A marshaler raises MarshalNotResponsible to pass the value on.
        """
        if not callable(marshaler):
            raise TypeError("marshaler must be callable")
        with self._lock:
            self._marshalers = self._marshalers + (marshaler,)
        return self

    # Writing

    def print(self, value: Any) -> int:
        """Write a value. Returns bytes written per output."""
        return self._emit(value, newline=False)

    def println(self, value: Any) -> int:
        """Write a value followed by a newline."""
        return self._emit(value, newline=True)

    def write(self, data: bytes) -> int:
        """Write raw bytes, bypassing hijackers and marshalers."""
        return self._write(bytes(data))

    def write_line(self, data: bytes) -> int:
        """Write raw bytes followed by a newline."""
        return self._write(bytes(data) + b"\n")

    def _emit(self, value: Any, newline: bool) -> int:
        data = self._render(value)
        if data is None:
            return 0
        if newline:
            data += b"\n"
        return self._write(data)

    def _render(self, value: Any) -> Optional[bytes]:
        """Run hijackers, then marshalers. None means skip."""
        hijackers = self._hijackers
        if hijackers:
            ctx = PrintContext(self, value)
            for hijacker in hijackers:
                ctx._continue = False
                try:
                    hijacker(ctx)
                except Exception as e:
                    print(f"Hijacker error: {e}", file=sys.stderr)
                    break
                if ctx.skipped:
                    with self._lock:
                        self.stats.record_skip()
                    return None
                if not ctx._continue:
                    break
            if ctx.result is not None:
                return ctx.result

        for marshaler in self._marshalers:
            try:
                return bytes(marshaler(value))
            except MarshalNotResponsible:
                continue
            except Exception as e:
                print(f"Marshaler error: {e}", file=sys.stderr)
        return text_marshal(value, self.encoding)

    def _write(self, data: bytes) -> int:
        """Write to every output, swallowing and counting failures."""
        written = 0
        with self._lock:
            for output, binary in self._outputs:
                try:
                    if binary:
                        output.write(data)
                    else:
                        output.write(data.decode(self.encoding, errors="replace"))
                    if hasattr(output, "flush"):
                        output.flush()
                    written = len(data)
                except Exception as e:
                    self.stats.record_failure(str(e))
                    print(f"Writer error: {e}", file=sys.stderr)
            if written:
                self.stats.record_write(written)
        return written

    def flush(self) -> None:
        """Flush every output."""
        with self._lock:
            for output, _ in self._outputs:
                if hasattr(output, "flush"):
                    try:
                        output.flush()
                    except Exception as e:
                        self.stats.record_failure(str(e))

    # Scanning

    def scan(
        self,
        stream: Any,
        newline: bool = True,
        wrap: Optional[Callable[[Any], Any]] = None,
    ) -> ScanHandle:
        """
        Print every line read from ``stream`` until EOF or cancel.

        Args:
            stream: Object with readline() (text or binary)
            newline: Terminate each printed line with a newline
            wrap: Applied to each line before it is printed, so
                  hijackers and marshalers can recognize scanned values

        Returns:
            ScanHandle; call it to cancel the scan
        """
        print_func = self.println if newline else self.print
        if wrap is not None:
            emit = print_func
            print_func = lambda line: emit(wrap(line))  # noqa: E731
        handle = ScanHandle(name=f"{self.name}-scan")
        return handle.start(stream, print_func)

    def get_stats(self) -> dict:
        """Get printer statistics."""
        with self._lock:
            return self.stats.to_dict()

    def __repr__(self) -> str:
        return f"Printer(outputs={len(self._outputs)}, terminal={self._is_terminal})"


def _is_binary(writer: Any) -> bool:
    return isinstance(writer, (io.RawIOBase, io.BufferedIOBase))


def _is_terminal(writer: Any) -> bool:
    isatty = getattr(writer, "isatty", None)
    if isatty is None:
        return False
    try:
        return bool(isatty())
    except (OSError, ValueError):
        return False
