"""
Log level enumeration

Ordered severity tiers and their name/tag mappings.
"""

from enum import IntEnum
from typing import Dict, Optional


class Level(IntEnum):
    """
    Log level enumeration.

    A logger prints a leveled message when ``threshold >= level``.
    DISABLE is the level-less tier used by ``print``/``println``: a
    DISABLE threshold suppresses every leveled call but still lets
    level-less calls through.
    """

    DISABLE = 0     # Level-less output, or "print nothing leveled"
    ERROR = 1       # Error messages
    WARN = 2        # Warning messages
    INFO = 3        # Informational messages
    DEBUG = 4       # Debug information

    def __str__(self) -> str:
        """String representation of log level."""
        return LEVEL_NAMES[self]

    @classmethod
    def from_string(cls, level_str: Optional[str]) -> "Level":
        """
        Convert string to Level.

        Args:
            level_str: Level name (case-insensitive)

        Returns:
            Level enum value. Unknown names resolve to INFO.
        """
        if not level_str:
            return cls.INFO
        return LEVEL_FROM_NAME.get(level_str.strip().lower(), cls.INFO)

    @property
    def color_code(self) -> str:
        """
        Get ANSI color code for this level.

        Returns:
            ANSI escape sequence
        """
        colors = {
            Level.ERROR: "\033[31m",    # Red
            Level.WARN: "\033[33m",     # Yellow
            Level.INFO: "\033[32m",     # Green
            Level.DEBUG: "\033[36m",    # Cyan
        }
        return colors.get(self, "")

    @property
    def reset_code(self) -> str:
        """ANSI reset code."""
        return "\033[0m"

    def text(self, colored: bool = False) -> str:
        """Short tag for this level, empty for DISABLE."""
        return text_for(self, colored)


# Mapping from log level to configuration names
LEVEL_NAMES: Dict[Level, str] = {
    Level.DISABLE: "disable",
    Level.ERROR: "error",
    Level.WARN: "warn",
    Level.INFO: "info",
    Level.DEBUG: "debug",
}

# Reverse mapping
LEVEL_FROM_NAME: Dict[str, Level] = {v: k for k, v in LEVEL_NAMES.items()}

# Tags printed in front of each line
LEVEL_TAGS: Dict[Level, str] = {
    Level.DISABLE: "",
    Level.ERROR: "ERRO",
    Level.WARN: "WARN",
    Level.INFO: "INFO",
    Level.DEBUG: "DBUG",
}


def text_for(level: Level, colored: bool = False) -> str:
    """
    Get the tag printed for a level.

    Args:
        level: Log level
        colored: Wrap the tag in the level's ANSI color

    Returns:
        Tag text, or an empty string for the level-less tier
    """
    tag = LEVEL_TAGS.get(level, "")
    if tag and colored:
        return f"{level.color_code}{tag}{level.reset_code}"
    return tag
