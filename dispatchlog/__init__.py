"""
Dispatch Logger - a leveled logger with an interception chain

Filters each print call by level, lets registered handlers consume the
record, and otherwise writes a ``<prefix><TAG> <time> <message>`` line.
"""

__version__ = "1.0.0"
__author__ = "kcenon"
__email__ = "kcenon@naver.com"

from dispatchlog.core.logger import Logger
from dispatchlog.core.logger_builder import LoggerBuilder
from dispatchlog.core.log_entry import Log
from dispatchlog.core.log_level import Level
from dispatchlog.core.logger_config import LoggerConfig
from dispatchlog.writers.printer import NopOutput, Printer

# Import submodules (not all classes by default)
from dispatchlog import formatters
from dispatchlog import handlers
from dispatchlog import writers

from dispatchlog.std import (
    default,
    set_prefix,
    set_time_format,
    set_level,
    set_output,
    add_output,
    handle,
    install,
    install_std,
    hijack,
    scan,
    child,
    println,
    log,
    logf,
    error,
    errorf,
    warn,
    warnf,
    info,
    infof,
    debug,
    debugf,
)
from dispatchlog.std import print  # noqa: A004

__all__ = [
    "Logger",
    "LoggerBuilder",
    "Log",
    "Level",
    "LoggerConfig",
    "NopOutput",
    "Printer",
    "formatters",
    "handlers",
    "writers",
    "default",
    "set_prefix",
    "set_time_format",
    "set_level",
    "set_output",
    "add_output",
    "handle",
    "install",
    "install_std",
    "hijack",
    "scan",
    "child",
    "print",
    "println",
    "log",
    "logf",
    "error",
    "errorf",
    "warn",
    "warnf",
    "info",
    "infof",
    "debug",
    "debugf",
]
