"""Tests for stream scanning and cancellation"""

import io
import queue
import time

from dispatchlog import Logger, LoggerConfig
from dispatchlog.writers import Printer, ScanHandle


class BlockingStream:
    """readline() blocks until a line is fed; None means EOF."""

    def __init__(self):
        self._lines = queue.Queue()
        self.closed = False

    def feed(self, line):
        self._lines.put(line)

    def readline(self):
        line = self._lines.get()
        return "" if line is None else line

    def close(self):
        self.closed = True
        self._lines.put(None)


def wait_for(predicate, timeout=2.0):
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if predicate():
            return True
        time.sleep(0.01)
    return predicate()


class TestScanHandle:
    """Test ScanHandle functionality."""

    def test_cancel_idempotent(self):
        handle = ScanHandle()
        handle.cancel()
        handle.cancel()
        handle()
        assert handle.cancelled is True

    def test_emit_after_cancel_is_dropped(self):
        handle = ScanHandle()
        written = []
        assert handle.emit(written.append, "a") is True
        handle.cancel()
        assert handle.emit(written.append, "b") is False
        assert written == ["a"]

    def test_wait_without_thread(self):
        assert ScanHandle().wait(0) is True


class TestPrinterScan:
    """Test Printer.scan."""

    def test_scan_until_eof(self):
        out = io.StringIO()
        printer = Printer(out)
        stream = io.StringIO("first\nsecond\r\nthird")

        handle = printer.scan(stream)

        assert handle.wait(2.0)
        assert out.getvalue() == "first\nsecond\nthird\n"
        assert stream.closed

    def test_scan_binary_stream(self):
        out = io.BytesIO()
        printer = Printer(out)

        handle = printer.scan(io.BytesIO(b"one\ntwo\n"))

        assert handle.wait(2.0)
        assert out.getvalue() == b"one\ntwo\n"

    def test_scan_without_newline(self):
        out = io.StringIO()
        printer = Printer(out)
        handle = printer.scan(io.StringIO("a\nb\n"), newline=False)
        assert handle.wait(2.0)
        assert out.getvalue() == "ab"


class TestLoggerScan:
    """Test Logger.scan."""

    def test_scan_lines_are_level_less(self):
        out = io.StringIO()
        logger = Logger(LoggerConfig(time_format="", prefix="ignored: "), output=out)

        handle = logger.scan(io.StringIO("raw line\n"))

        assert handle.wait(2.0)
        assert out.getvalue() == "raw line\n"

    def test_scan_lines_are_time_stamped(self):
        out = io.StringIO()
        logger = Logger(LoggerConfig(time_format="%Y"), output=out)

        handle = logger.scan(io.StringIO("stamped\n"))

        assert handle.wait(2.0)
        year, _, rest = out.getvalue().partition(" ")
        assert year.isdigit() and len(year) == 4
        assert rest == "stamped\n"

    def test_marshaler_installed_once(self):
        logger = Logger(LoggerConfig(time_format=""), output=io.StringIO())
        for _ in range(3):
            logger.scan(io.StringIO("")).wait(2.0)
        assert len(logger.printer._marshalers) == 1

    def test_no_writes_after_cancel(self):
        out = io.StringIO()
        logger = Logger(LoggerConfig(time_format=""), output=out)
        stream = BlockingStream()

        cancel = logger.scan(stream)
        stream.feed("before\n")
        assert wait_for(lambda: out.getvalue() == "before\n")

        cancel()
        cancel()
        stream.feed("after\n")

        assert cancel.wait(2.0)
        assert out.getvalue() == "before\n"
        assert stream.closed

    def test_cancel_wakes_idle_stream(self):
        out = io.StringIO()
        logger = Logger(LoggerConfig(time_format=""), output=out)
        stream = BlockingStream()

        cancel = logger.scan(stream)
        stream.feed("only\n")
        assert wait_for(lambda: out.getvalue() == "only\n")

        cancel()
        cancel()

        assert cancel.wait(2.0)
        assert cancel.done
        assert stream.closed
        assert out.getvalue() == "only\n"

    def test_child_scan_uses_child_time_format(self):
        out = io.StringIO()
        parent = Logger(LoggerConfig(time_format="%Y"), output=out)
        child = parent.child("sub")
        child.set_time_format("")

        assert parent.scan(io.StringIO("from parent\n")).wait(2.0)
        assert child.scan(io.StringIO("from child\n")).wait(2.0)

        first, second = out.getvalue().splitlines()
        year, _, rest = first.partition(" ")
        assert year.isdigit() and rest == "from parent"
        assert second == "from child"

    def test_scan_does_not_stamp_other_prints(self):
        out = io.StringIO()
        logger = Logger(LoggerConfig(time_format="%Y"), output=out)
        assert logger.scan(io.StringIO("")).wait(2.0)

        logger.printer.println("plain")
        logger.printer.println(b"raw")

        assert out.getvalue() == "plain\nraw\n"

    def test_empty_scanned_line_prints_empty(self):
        out = io.StringIO()
        logger = Logger(LoggerConfig(time_format="%Y"), output=out)

        assert logger.scan(io.StringIO("\nafter\n")).wait(2.0)

        lines = out.getvalue().split("\n")
        assert lines[0] == ""
        assert lines[1].endswith(" after")
