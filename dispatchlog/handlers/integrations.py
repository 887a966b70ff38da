"""
Third-party logger integrations

Adapters that turn another logger into a handler, so every print call
on a dispatchlog Logger is forwarded to it instead.
"""

from typing import Protocol, runtime_checkable

from dispatchlog.core.log_entry import Log
from dispatchlog.core.log_level import Level
from dispatchlog.handlers.handler_chain import Handler


@runtime_checkable
class StdLogger(Protocol):
    """A single-method line writer, e.g. a text stream."""

    def write(self, text: str) -> object:
        ...


@runtime_checkable
class ExternalLogger(Protocol):
    """
    A leveled logger with one method per severity.

    ``logging.Logger`` has this shape.
    """

    def error(self, msg: str) -> object:
        ...

    def warning(self, msg: str) -> object:
        ...

    def info(self, msg: str) -> object:
        ...

    def debug(self, msg: str) -> object:
        ...


def integrate_std_logger(logger: StdLogger) -> Handler:
    """
    Build a handler forwarding the raw message to a line writer.

    Args:
        logger: Object with write(text)

    Returns:
        Handler that always reports the record as handled
    """

    def std_handler(log: Log) -> bool:
        if log.newline:
            logger.write(log.message + "\n")
        else:
            logger.write(log.message)
        return True

    return std_handler


def integrate_external_logger(logger: ExternalLogger) -> Handler:
    """
    Build a handler forwarding each record to the matching level method.

    Level-less records go to ``info``.

    Args:
        logger: Leveled logger, e.g. logging.getLogger("app")

    Returns:
        Handler that always reports the record as handled
    """
    methods = {
        Level.ERROR: logger.error,
        Level.WARN: logger.warning,
        Level.INFO: logger.info,
        Level.DEBUG: logger.debug,
    }

    def external_handler(log: Log) -> bool:
        methods.get(log.level, logger.info)(log.message)
        return True

    return external_handler
