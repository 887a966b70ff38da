"""
Logger configuration management
"""

import os
from dataclasses import dataclass
from typing import Optional, Union

from dispatchlog.core.log_level import Level

DEFAULT_TIME_FORMAT = "%Y/%m/%d %H:%M"


@dataclass
class LoggerConfig:
    """
    Logger configuration.

    Only used to build a Logger; changing a config after the logger was
    created has no effect on it.
    """

    # Basic settings
    level: Union[Level, str] = Level.INFO
    prefix: str = ""

    # Format settings
    time_format: str = DEFAULT_TIME_FORMAT

    # Console settings
    colored_output: bool = True

    # Performance settings
    pool_size: int = 64

    def __post_init__(self):
        """Validate configuration after initialization."""
        if isinstance(self.level, str):
            self.level = Level.from_string(self.level)
        else:
            self.level = Level(self.level)
        if self.pool_size < 0:
            raise ValueError("pool_size cannot be negative")
        if self.time_format is None:
            self.time_format = ""
        if self.prefix is None:
            self.prefix = ""

    @classmethod
    def default(cls) -> "LoggerConfig":
        """Create default configuration."""
        return cls()

    @classmethod
    def debug_config(cls) -> "LoggerConfig":
        """Create configuration for debugging."""
        return cls(
            level=Level.DEBUG,
            time_format="%H:%M:%S",
            colored_output=True,
        )

    @classmethod
    def production_config(cls) -> "LoggerConfig":
        """Create configuration for production."""
        return cls(
            level=Level.WARN,
            time_format="%Y-%m-%d %H:%M:%S",
            colored_output=False,
            pool_size=256,
        )

    @classmethod
    def from_env(cls, prefix: str = "DISPATCHLOG_") -> "LoggerConfig":
        """
        Create configuration from environment variables.

        Reads ``<prefix>LEVEL``, ``<prefix>PREFIX``, ``<prefix>TIME_FORMAT``
        and ``<prefix>COLOR``; unset variables keep their defaults.

        Args:
            prefix: Environment variable name prefix

        Returns:
            New LoggerConfig instance
        """
        config = cls()
        level: Optional[str] = os.environ.get(f"{prefix}LEVEL")
        if level is not None:
            config.level = Level.from_string(level)
        if f"{prefix}PREFIX" in os.environ:
            config.prefix = os.environ[f"{prefix}PREFIX"]
        if f"{prefix}TIME_FORMAT" in os.environ:
            config.time_format = os.environ[f"{prefix}TIME_FORMAT"]
        color = os.environ.get(f"{prefix}COLOR")
        if color is not None:
            config.colored_output = color.strip().lower() not in ("0", "false", "no", "off")
        return config
