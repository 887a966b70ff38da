"""
Handler chain

Ordered interceptors that may consume a log record before the logger
prints it.
"""

from __future__ import annotations

import sys
from typing import Callable, Iterable, Tuple

from dispatchlog.core.log_entry import Log

# A handler returns True when it fully handled the record, which stops
# the chain and suppresses the logger's own output.
Handler = Callable[[Log], bool]


class HandlerChain:
    """
    Append-only, ordered list of handlers.

    The chain is copy-on-write: register() swaps in a new tuple, so a
    dispatch in progress keeps iterating the snapshot it started with.
    Registration itself is serialized by the owning logger's lock.
    """

    __slots__ = ("_handlers",)

    def __init__(self, handlers: Iterable[Handler] = ()):
        self._handlers: Tuple[Handler, ...] = tuple(handlers)

    def register(self, handler: Handler) -> None:
        """
        Append a handler.

        Args:
            handler: Callable taking a Log and returning handled (bool)

        Raises:
            TypeError: If handler is not callable
        """
        if not callable(handler):
            raise TypeError("handler must be callable")
        self._handlers = self._handlers + (handler,)

    def snapshot(self) -> Tuple[Handler, ...]:
        """Current handlers, in registration order."""
        return self._handlers

    def copy(self) -> "HandlerChain":
        """Independent chain with the same handlers."""
        return HandlerChain(self._handlers)

    def dispatch(self, log: Log) -> bool:
        """Run the current handlers; see dispatch()."""
        return dispatch(self._handlers, log)

    def __len__(self) -> int:
        return len(self._handlers)

    def __iter__(self):
        return iter(self._handlers)

    def __repr__(self) -> str:
        return f"HandlerChain(handlers={len(self._handlers)})"


def dispatch(handlers: Tuple[Handler, ...], log: Log) -> bool:
    """
    Offer a record to each handler in order.

    A handler that raises is reported and treated as not having handled
    the record; the remaining handlers still run.

    Returns:
        True at the first handler reporting handled, False otherwise
    """
    for handler in handlers:
        try:
            if handler(log):
                return True
        except Exception as e:
            name = getattr(handler, "__name__", repr(handler))
            print(f"Handler error in {name}: {e}", file=sys.stderr)
    return False
