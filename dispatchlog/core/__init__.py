"""
Core module for logger system

This module contains the fundamental classes:
- Logger: Main logger class
- LoggerBuilder: Builder pattern for logger construction
- Log: Pooled log record
- LogPool: Per-logger record pool
- Level: Log level enumeration
- LoggerConfig: Configuration management
- ChildRegistry: Named child loggers
"""

from dispatchlog.core.logger import Logger
from dispatchlog.core.logger_builder import LoggerBuilder
from dispatchlog.core.log_entry import Log
from dispatchlog.core.log_pool import LogPool
from dispatchlog.core.log_level import Level
from dispatchlog.core.logger_config import LoggerConfig
from dispatchlog.core.child_registry import ChildRegistry

__all__ = [
    "Logger",
    "LoggerBuilder",
    "Log",
    "LogPool",
    "Level",
    "LoggerConfig",
    "ChildRegistry",
]
