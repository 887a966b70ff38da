"""
Log handlers module

Interceptors that can consume a record before the logger prints it,
plus adapters for third-party loggers.
"""

from dispatchlog.handlers.handler_chain import Handler, HandlerChain, dispatch
from dispatchlog.handlers.integrations import (
    ExternalLogger,
    StdLogger,
    integrate_external_logger,
    integrate_std_logger,
)

__all__ = [
    "Handler",
    "HandlerChain",
    "dispatch",
    "ExternalLogger",
    "StdLogger",
    "integrate_external_logger",
    "integrate_std_logger",
]
