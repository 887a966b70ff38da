"""Writers module - the printer loggers write into"""

from dispatchlog.writers.printer import (
    MarshalNotResponsible,
    NopOutput,
    PrintContext,
    Printer,
    PrinterStats,
)
from dispatchlog.writers.scanner import ScanHandle

__all__ = [
    "MarshalNotResponsible",
    "NopOutput",
    "PrintContext",
    "Printer",
    "PrinterStats",
    "ScanHandle",
]
