"""
Log formatters module

Provides the formatter used to render log lines.
"""

from dispatchlog.formatters.base_formatter import BaseFormatter
from dispatchlog.formatters.text_formatter import TextFormatter

__all__ = [
    "BaseFormatter",
    "TextFormatter",
]
