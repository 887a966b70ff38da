"""
Stream scanning

Reads lines from a stream on a background thread and hands each one
to a print function until EOF or cancellation.
"""

from __future__ import annotations

import sys
import threading
from typing import Any, Callable, Optional


class ScanHandle:
    """
    Cancellation handle returned by a scan.

    Calling the handle (or ``cancel()``) stops the scan. Cancelling is
    idempotent, and once ``cancel()`` returns no further line is written
    by this scan: every write happens under the handle's lock and
    re-checks the cancelled flag first.

    Example:
        cancel = printer.scan(proc.stdout)
        ...
        cancel()
        cancel()  # no-op
    """

    def __init__(self, name: str = "dispatchlog-scan"):
        self.name = name
        self._cancelled = threading.Event()
        self._lock = threading.RLock()
        self._thread: Optional[threading.Thread] = None
        self._stream: Any = None

    def cancel(self) -> None:
        """
        Stop the scan. Safe to call more than once.

        The first call closes the stream, which wakes a read blocked on
        an idle source so the scan thread can exit.
        """
        with self._lock:
            if self._cancelled.is_set():
                return
            self._cancelled.set()
            stream = self._stream
        _close_stream(stream)

    __call__ = cancel

    @property
    def cancelled(self) -> bool:
        """Whether cancel() has been called."""
        return self._cancelled.is_set()

    @property
    def done(self) -> bool:
        """Whether the scan thread has finished."""
        return self._thread is not None and not self._thread.is_alive()

    def wait(self, timeout: Optional[float] = None) -> bool:
        """
        Wait for the scan thread to finish.

        Args:
            timeout: Seconds to wait, None waits forever

        Returns:
            True if the scan finished within the timeout
        """
        if self._thread is None:
            return True
        self._thread.join(timeout)
        return not self._thread.is_alive()

    def emit(self, print_func: Callable[[Any], Any], line: Any) -> bool:
        """
        Write one line unless the scan has been cancelled.

        Returns:
            False if the scan was cancelled and nothing was written
        """
        with self._lock:
            if self._cancelled.is_set():
                return False
            print_func(line)
            return True

    def start(self, stream: Any, print_func: Callable[[Any], Any]) -> "ScanHandle":
        """Start the background scan thread."""
        self._stream = stream
        self._thread = threading.Thread(
            target=self._run,
            args=(stream, print_func),
            name=self.name,
            daemon=True,
        )
        self._thread.start()
        return self

    def _run(self, stream: Any, print_func: Callable[[Any], Any]) -> None:
        """Scan loop (worker thread)."""
        try:
            while not self._cancelled.is_set():
                line = stream.readline()
                if not line:
                    break
                if not self.emit(print_func, _strip_line_ending(line)):
                    break
        except (OSError, ValueError) as e:
            # Stream closed under us; nothing left to scan
            if not self._cancelled.is_set():
                print(f"Scan error: {e}", file=sys.stderr)
        finally:
            _close_stream(stream)


def _close_stream(stream: Any) -> None:
    close = getattr(stream, "close", None)
    if close is not None:
        try:
            close()
        except (OSError, ValueError):
            pass


def _strip_line_ending(line: Any) -> Any:
    if isinstance(line, (bytes, bytearray)):
        return bytes(line).rstrip(b"\r\n")
    return line.rstrip("\r\n")
