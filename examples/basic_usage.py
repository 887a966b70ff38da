#!/usr/bin/env python3
"""Basic usage example"""

import logging
import subprocess
import sys

import dispatchlog
from dispatchlog import Level, LoggerBuilder


def main():
    # Package-level default logger
    dispatchlog.set_level("debug")
    dispatchlog.info("Application started")
    dispatchlog.debugf("pid=%d", 1234)

    # Logger built with the builder pattern
    logger = (LoggerBuilder()
        .with_level(Level.DEBUG)
        .with_prefix("example: ")
        .with_time_format("%H:%M:%S")
        .add_output(sys.stdout)
        .build())

    # Handler consuming errors before they are printed
    def errors_to_stderr(log):
        if log.level == Level.ERROR:
            sys.stderr.write(f"!! {log.message}\n")
            return True
        return False

    logger.handle(errors_to_stderr)

    logger.debug("This is debug")
    logger.warn("This is warning")
    logger.error("This is error")

    # Named children share the output but get their own prefix
    db = logger.child("db")
    db.info("connected")

    # Forward a child's records to the standard logging module
    logging.basicConfig(level=logging.DEBUG)
    audit = logger.child("audit")
    audit.install(logging.getLogger("audit"))
    audit.info("user logged in")

    # Print another process's output through the logger
    proc = subprocess.Popen(
        [sys.executable, "-c", "print('hello from child')"],
        stdout=subprocess.PIPE,
        text=True,
    )
    cancel = logger.scan(proc.stdout)
    proc.wait()
    cancel.wait(1.0)
    cancel()


if __name__ == "__main__":
    main()
